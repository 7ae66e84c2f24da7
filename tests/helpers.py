# topmark:header:start
#
#   project      : Printkit
#   file         : helpers.py
#   file_relpath : tests/helpers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tiny test helpers for observing printer output fragment by fragment."""

# pyright: strict
from __future__ import annotations

from typing import TYPE_CHECKING

from printkit.core.sinks import JsonSink, TextSink

if TYPE_CHECKING:
    from printkit.core.printer import Printer


class RecordingStream:
    """Stream recording each ``write`` call separately."""

    def __init__(self) -> None:
        self.fragments: list[str] = []

    def write(self, fragment: str) -> None:
        self.fragments.append(fragment)

    @property
    def text(self) -> str:
        """Concatenation of everything written so far."""
        return "".join(self.fragments)


def run_text(printer: Printer[TextSink]) -> RecordingStream:
    """Run ``printer`` against a recording ``TextSink`` and return the recorder."""
    rec = RecordingStream()
    printer.run(TextSink.create(rec))
    return rec


def run_json(printer: Printer[JsonSink]) -> RecordingStream:
    """Run ``printer`` against a recording ``JsonSink`` and return the recorder."""
    rec = RecordingStream()
    printer.run(JsonSink.create(rec))
    return rec
