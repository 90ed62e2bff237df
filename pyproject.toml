[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tgbot_types"
version = "0.1.0"
description = "Typed data model for Telegram Bot API objects: decoding updates and building reply markup"
requires-python = ">=3.10"
dependencies = []
keywords = ["telegram", "bot", "api", "types", "chat", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tgbot_types"]

[tool.pytest.ini_options]
addopts = "-ra"
