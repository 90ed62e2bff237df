"""Typed data model for Telegram Bot API objects: decoding updates and building reply markup."""

__version__ = "0.1.0"