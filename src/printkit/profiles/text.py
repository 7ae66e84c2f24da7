# topmark:header:start
#
#   project      : Printkit
#   file         : text.py
#   file_relpath : src/printkit/profiles/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plain-text printing profile."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from printkit.core.algebra import Print
from printkit.core.sinks import TextSink

if TYPE_CHECKING:
    from printkit.core.printer import Printer


class PrintText(Print[TextSink]):
    """The ``Print`` algebra over [`TextSink`][printkit.core.sinks.TextSink].

    Fragments reach the sink exactly as built; nothing is escaped.
    """

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(TextSink)

    def render(self, printer: Printer[TextSink]) -> str:
        """Run ``printer`` into an in-memory buffer and return the text."""
        buf = io.StringIO()
        printer.run(TextSink.create(buf))
        return buf.getvalue()


text_printer: PrintText = PrintText()
