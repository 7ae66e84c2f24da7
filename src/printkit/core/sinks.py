# topmark:header:start
#
#   project      : Printkit
#   file         : sinks.py
#   file_relpath : src/printkit/core/sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sink capabilities: destinations that accept string fragments.

A sink has a single operation, ``write(fragment)``, which appends the fragment
to whatever the sink represents. Buffering and flushing are the sink's own
business; printers only ever call ``write``.

Capabilities:

- [`Sink`][printkit.core.sinks.Sink]: the generic capability. Any object with a
  ``write(str)`` method qualifies, including ``sys.stdout`` and ``io.StringIO``.
- [`TextSink`][printkit.core.sinks.TextSink]: raw text, fragments pass through.
- [`JsonSink`][printkit.core.sinks.JsonSink]: JSON text. Structurally identical to
  ``TextSink``; the separate nominal type keeps text-profile printers from being
  run against a JSON destination by mistake.
- [`AnonymousSink`][printkit.core.sinks.AnonymousSink]: wraps a plain function,
  used to intercept and transform fragments on their way to another sink.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable

    from typing_extensions import Self


@runtime_checkable
class Sink(Protocol):
    """Generic sink capability: accepts string fragments in order.

    The return value of ``write`` is ignored, so text streams (whose ``write``
    returns a character count) satisfy this protocol as-is.
    """

    def write(self, fragment: str, /) -> object:
        """Append ``fragment`` to the destination."""
        ...


class StreamSink:
    """Adapter forwarding fragments verbatim to a writable text stream.

    Concrete capabilities subclass this; build instances with
    [`create`][printkit.core.sinks.StreamSink.create].

    Attributes:
        stream (Sink): The wrapped stream (anything with ``write(str)``).
    """

    __slots__ = ("_stream",)

    def __init__(self, stream: Sink) -> None:
        self._stream: Sink = stream

    @classmethod
    def create(cls, stream: Sink) -> Self:
        """Wrap ``stream`` (e.g. ``sys.stdout`` or an ``io.StringIO``).

        Args:
            stream (Sink): Destination text stream.

        Returns:
            Self: A sink of this capability writing to ``stream``.
        """
        return cls(stream)

    @property
    def stream(self) -> Sink:
        """The wrapped stream."""
        return self._stream

    def write(self, fragment: str, /) -> None:
        """Forward ``fragment`` to the wrapped stream.

        Errors raised by the stream (e.g. writing to a closed file) propagate.
        """
        self._stream.write(fragment)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._stream!r})"


class TextSink(StreamSink):
    """Raw-text sink capability used by the text profile."""

    __slots__ = ()


class JsonSink(StreamSink):
    """JSON-text sink capability used by the JSON profile."""

    __slots__ = ()


class AnonymousSink:
    """A sink backed by a captured ``write`` function.

    Holds no state besides the function; the function owns any side effect.
    """

    __slots__ = ("_write",)

    def __init__(self, write: Callable[[str], object]) -> None:
        self._write: Callable[[str], object] = write

    def write(self, fragment: str, /) -> None:
        """Pass ``fragment`` to the captured function."""
        self._write(fragment)

    def __repr__(self) -> str:
        return f"AnonymousSink({self._write!r})"


def anonymous(write: Callable[[str], object]) -> AnonymousSink:
    """Wrap any fragment-accepting function as a sink.

    Args:
        write (Callable[[str], object]): Function called once per fragment.

    Returns:
        AnonymousSink: A sink forwarding every fragment to ``write``.
    """
    return AnonymousSink(write)
