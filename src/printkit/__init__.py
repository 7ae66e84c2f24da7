# topmark:header:start
#
#   project      : Printkit
#   file         : __init__.py
#   file_relpath : src/printkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Printkit package.

Printkit is a small printer-combinator library. A *printer* is an immutable,
replayable description of a sequence of string writes; it performs no I/O until
it is run against a *sink* (anything with a ``write(str)`` method).

Printers are built with a ``Print`` algebra bound to a sink capability:

- [`PrintText`][printkit.profiles.text.PrintText] emits plain text into a
  [`TextSink`][printkit.core.sinks.TextSink].
- [`PrintJson`][printkit.profiles.json.PrintJson] emits flat JSON into a
  [`JsonSink`][printkit.core.sinks.JsonSink] and adds escaping plus
  array/object builders.

Example:
    ```python
    from printkit import json_printer as pj

    doc = pj.object([("name", pj.text("ada")), ("tags", pj.array([pj.number(1)]))])
    pj.render(doc)  # '{"name":"ada","tags":[1]}'
    ```
"""

from __future__ import annotations

from printkit.config.model import HexCase, JsonProfileConfig
from printkit.constants import PRINTKIT_VERSION
from printkit.core.algebra import Print, generic_printer
from printkit.core.errors import PrinterConstructionError, PrintkitError, SinkCapabilityError
from printkit.core.escaping import json_escape
from printkit.core.printer import Printer
from printkit.core.sinks import AnonymousSink, JsonSink, Sink, StreamSink, TextSink, anonymous
from printkit.profiles.json import PrintJson, json_printer
from printkit.profiles.text import PrintText, text_printer

__version__: str = PRINTKIT_VERSION

__all__ = [
    "AnonymousSink",
    "HexCase",
    "JsonProfileConfig",
    "JsonSink",
    "Print",
    "PrintJson",
    "PrintText",
    "Printer",
    "PrinterConstructionError",
    "PrintkitError",
    "Sink",
    "SinkCapabilityError",
    "StreamSink",
    "TextSink",
    "anonymous",
    "generic_printer",
    "json_escape",
    "json_printer",
    "text_printer",
]
