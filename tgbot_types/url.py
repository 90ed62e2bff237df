"""Location of the Telegram Bot API."""

from __future__ import annotations

import os

TELEGRAM_API_URL_DEFAULT = "https://api.telegram.org/"
TELEGRAM_API_URL_ENV = "TELEGRAM_API_URL"


def telegram_api_url() -> str:
    """Return the Bot API base URL.

    The ``TELEGRAM_API_URL`` environment variable overrides the default,
    which allows pointing at a fake server for end-to-end testing.
    """
    return os.environ.get(TELEGRAM_API_URL_ENV, TELEGRAM_API_URL_DEFAULT)