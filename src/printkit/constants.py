# topmark:header:start
#
#   project      : Printkit
#   file         : constants.py
#   file_relpath : src/printkit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Printkit Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final


def _resolve_version() -> str:
    try:
        return get_version("printkit")
    except PackageNotFoundError:
        # Running from a source checkout without an installed distribution
        return "unknown"


PRINTKIT_VERSION: str = _resolve_version()

# Environment variable consulted by `printkit.config.logging.resolve_env_log_level`
LOG_LEVEL_ENV_VAR: Final[str] = "PRINTKIT_LOG_LEVEL"

# JSON punctuation emitted by the JSON profile
JSON_ARRAY_OPEN: Final[str] = "["
JSON_ARRAY_CLOSE: Final[str] = "]"
JSON_OBJECT_OPEN: Final[str] = "{"
JSON_OBJECT_CLOSE: Final[str] = "}"
JSON_SEPARATOR: Final[str] = ","
JSON_KEY_SEPARATOR: Final[str] = ":"
JSON_QUOTE: Final[str] = '"'
