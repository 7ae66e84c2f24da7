# topmark:header:start
#
#   project      : Printkit
#   file         : errors.py
#   file_relpath : src/printkit/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for Printkit.

Usage:
    The combinators are total over their documented inputs, so these exceptions
    only signal misuse: mixing printers and sinks of unrelated capabilities, or
    bypassing the algebra to build a ``Printer`` by hand.

    Failures raised by a sink's ``write`` are a sink concern; Printkit lets them
    propagate unchanged and never wraps them in these types.
"""

from __future__ import annotations


class PrintkitError(Exception):
    """Base class for all Printkit errors."""


class SinkCapabilityError(PrintkitError, TypeError):
    """A printer was run against, or composed for, a sink of an unrelated capability.

    Example: running a text-profile printer against a ``JsonSink``, or passing a
    text-profile printer to a ``PrintJson`` combinator.
    """


class PrinterConstructionError(PrintkitError, TypeError):
    """A ``Printer`` was instantiated directly instead of through a ``Print`` algebra."""
