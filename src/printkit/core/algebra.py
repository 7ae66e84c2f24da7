# topmark:header:start
#
#   project      : Printkit
#   file         : algebra.py
#   file_relpath : src/printkit/core/algebra.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``Print`` combinator algebra.

A [`Print`][printkit.core.algebra.Print] instance is a stateless factory bound
to one sink capability. Its combinators build new printers out of literals and
other printers; none of them performs I/O.

Laws (observational, i.e. on the concatenated output):

- ``sequence([])`` writes nothing and is the identity of sequencing.
- ``sequence([sequence([a, b]), c])`` == ``sequence([a, b, c])``.
- ``intersperse(sep, [])`` writes nothing; ``intersperse(sep, [x])`` == ``x``.
- ``bracket(b, e, p)`` == ``sequence([b, p, e])``.

Replay safety:
    Every iterable handed to a combinator is materialized into a tuple when the
    printer is built. Generators are therefore consumed exactly once, at
    construction, and re-running the printer reproduces the same writes.

Capability safety:
    A combinator only accepts child printers that can run on the algebra's
    capability: printers of the same capability, or of a more general one such
    as the generic [`Sink`][printkit.core.sinks.Sink]. Anything else raises
    [`SinkCapabilityError`][printkit.core.errors.SinkCapabilityError] at build time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from printkit.config.logging import PrintkitLogger, get_logger
from printkit.core.errors import SinkCapabilityError
from printkit.core.printer import Printer
from printkit.core.sinks import Sink

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger: PrintkitLogger = get_logger(__name__)

S = TypeVar("S", bound=Sink)


class Print(Generic[S]):
    """Combinators producing printers for sinks of capability ``S``.

    Args:
        capability (type[S]): The sink class every printer built here requires.
    """

    __slots__ = ("_capability",)

    def __init__(self, capability: type[S]) -> None:
        self._capability: type[S] = capability

    @property
    def capability(self) -> type[S]:
        """The sink class printers built by this algebra require."""
        return self._capability

    def _lift(self, action: Callable[[S], None]) -> Printer[S]:
        """Wrap a raw action as a printer of this algebra's capability.

        Reserved for combinators and profiles; the action must only call
        ``write`` on the sink it is given.
        """
        return Printer._build(self._capability, action)

    def _check(self, printer: object) -> Printer[S]:
        if not isinstance(printer, Printer):
            raise TypeError(f"Expected a Printer, got {type(printer).__name__}")
        if not printer.runs_on(self._capability):
            logger.debug(
                "Rejecting %r in a %s algebra", printer, self._capability.__name__
            )
            raise SinkCapabilityError(
                f"{printer!r} cannot be composed into printers for "
                f"{self._capability.__name__}"
            )
        return printer

    def _freeze(self, printers: Iterable[Printer[S]]) -> tuple[Printer[S], ...]:
        return tuple(self._check(p) for p in printers)

    def string(self, s: str) -> Printer[S]:
        """Write ``s`` in a single fragment.

        The empty string is a valid unit: it issues one ``write("")``.

        Args:
            s (str): The literal text.

        Returns:
            Printer[S]: A printer writing ``s``.

        Raises:
            TypeError: If ``s`` is not a ``str``.
        """
        if not isinstance(s, str):
            raise TypeError(f"string() expects a str, got {type(s).__name__}")

        def action(sink: S) -> None:
            sink.write(s)

        return self._lift(action)

    def number(self, n: int) -> Printer[S]:
        """Write the canonical base-10 form of ``n`` (``-`` sign, no separators).

        Args:
            n (int): The integer to print.

        Returns:
            Printer[S]: Same as ``string(str(n))``.

        Raises:
            TypeError: If ``n`` is not an ``int`` (``bool`` is rejected too).
            ValueError: If ``n`` has more digits than the interpreter's integer
                string conversion limit (``sys.get_int_max_str_digits()``).
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"number() expects an int, got {type(n).__name__}")
        # format(..., "d") keeps IntEnum and other int subclasses numeric
        return self.string(format(n, "d"))

    def sequence(self, printers: Iterable[Printer[S]]) -> Printer[S]:
        """Run ``printers`` in order against the same sink.

        Args:
            printers (Iterable[Printer[S]]): Finite iterable, materialized now.

        Returns:
            Printer[S]: The sequenced printer; a no-op when ``printers`` is empty.
        """
        frozen: tuple[Printer[S], ...] = self._freeze(printers)
        logger.trace("sequence of %d printer(s)", len(frozen))

        def action(sink: S) -> None:
            for p in frozen:
                p._emit(sink)

        return self._lift(action)

    def sequence_args(self, *printers: Printer[S]) -> Printer[S]:
        """Variadic form of [`sequence`][printkit.core.algebra.Print.sequence].

        Args:
            *printers (Printer[S]): Printers to run in argument order.

        Returns:
            Printer[S]: The sequenced printer; a no-op when called without arguments.
        """
        return self.sequence(printers)

    def intersperse(
        self,
        separator: Printer[S],
        printers: Iterable[Printer[S]],
    ) -> Printer[S]:
        """Run ``printers`` in order with ``separator`` before every element but the first.

        Args:
            separator (Printer[S]): Printed between consecutive elements.
            printers (Iterable[Printer[S]]): Finite iterable, materialized now.

        Returns:
            Printer[S]: Empty for no elements; the element alone for one element.
        """
        sep: Printer[S] = self._check(separator)
        interleaved: list[Printer[S]] = []
        for i, p in enumerate(self._freeze(printers)):
            if i:
                interleaved.append(sep)
            interleaved.append(p)
        return self.sequence(interleaved)

    def bracket(
        self,
        begin: Printer[S],
        end: Printer[S],
        body: Printer[S],
    ) -> Printer[S]:
        """Wrap ``body`` between ``begin`` and ``end``.

        Args:
            begin (Printer[S]): Printed first.
            end (Printer[S]): Printed last.
            body (Printer[S]): Printed between ``begin`` and ``end``.

        Returns:
            Printer[S]: Same as ``sequence_args(begin, body, end)``.
        """
        return self.sequence_args(begin, body, end)

    def __repr__(self) -> str:
        return f"{type(self).__name__}[{self._capability.__name__}]"


# Capability-polymorphic algebra: its printers run against any sink.
generic_printer: Print[Sink] = Print(Sink)
