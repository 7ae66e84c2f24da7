# topmark:header:start
#
#   project      : Printkit
#   file         : __init__.py
#   file_relpath : src/printkit/profiles/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Printing profiles: the ``Print`` algebra instantiated for a concrete sink capability.

- [`printkit.profiles.text`][printkit.profiles.text]: plain text, no escaping.
- [`printkit.profiles.json`][printkit.profiles.json]: JSON text, with escaping and
  array/object builders.
"""

from __future__ import annotations

from printkit.profiles.json import PrintJson, json_printer
from printkit.profiles.text import PrintText, text_printer

__all__ = [
    "PrintJson",
    "PrintText",
    "json_printer",
    "text_printer",
]
