# topmark:header:start
#
#   project      : Printkit
#   file         : __init__.py
#   file_relpath : src/printkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for Printkit.

Printkit has no configuration files and no CLI. The only knobs are:

- ``logging``: library logging (TRACE level, colored output, and the
  ``PRINTKIT_LOG_LEVEL`` environment variable).
- ``model``: small frozen option objects passed to profiles
  (e.g. [`JsonProfileConfig`][printkit.config.model.JsonProfileConfig]).
"""

from __future__ import annotations

from printkit.config.model import HexCase, JsonProfileConfig

__all__ = [
    "HexCase",
    "JsonProfileConfig",
]
