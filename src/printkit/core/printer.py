# topmark:header:start
#
#   project      : Printkit
#   file         : printer.py
#   file_relpath : src/printkit/core/printer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``Printer`` value: a deferred, replayable sequence of sink writes.

A printer captures an action ``(sink) -> None`` together with the sink
capability the action requires. The only public operation is
[`Printer.run`][printkit.core.printer.Printer.run]; building a printer performs
no I/O, and running it never changes it, so the same printer can be run any
number of times (also concurrently, given independent sinks) with identical
output.

Printers are created exclusively by a [`Print`][printkit.core.algebra.Print]
algebra. Calling ``Printer(...)`` directly raises
[`PrinterConstructionError`][printkit.core.errors.PrinterConstructionError].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, Generic, NoReturn, TypeVar

from printkit.config.logging import PrintkitLogger, get_logger
from printkit.core.errors import PrinterConstructionError, SinkCapabilityError
from printkit.core.sinks import Sink

if TYPE_CHECKING:
    from collections.abc import Callable

logger: PrintkitLogger = get_logger(__name__)

# A printer consumes its sink, hence contravariance: a Printer[Sink] can stand
# in wherever a Printer[JsonSink] is expected.
S_contra = TypeVar("S_contra", bound=Sink, contravariant=True)

_BUILD_TOKEN: Final[object] = object()


class Printer(Generic[S_contra]):
    """Immutable, opaque printer requiring a sink of capability ``S_contra``."""

    __slots__ = ("_action", "_capability")

    _action: Callable[[S_contra], None]
    _capability: type[Sink]

    def __init__(
        self,
        capability: type[Sink],
        action: Callable[[S_contra], None],
        *,
        _token: object = None,
    ) -> None:
        if _token is not _BUILD_TOKEN:
            raise PrinterConstructionError(
                "Printer values are built through a Print algebra, "
                "e.g. PrintText().string('...')"
            )
        object.__setattr__(self, "_capability", capability)
        object.__setattr__(self, "_action", action)

    @classmethod
    def _build(
        cls,
        capability: type[Sink],
        action: Callable[[S_contra], None],
    ) -> Printer[S_contra]:
        """Algebra-only constructor."""
        return cls(capability, action, _token=_BUILD_TOKEN)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"Printer is immutable (cannot set {name!r})")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"Printer is immutable (cannot delete {name!r})")

    def __copy__(self) -> Printer[S_contra]:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> Printer[S_contra]:
        return self

    @property
    def capability(self) -> type[Sink]:
        """The sink class this printer must be run against."""
        return self._capability

    def runs_on(self, capability: type[Sink]) -> bool:
        """Return True if every sink of ``capability`` can run this printer.

        Args:
            capability (type[Sink]): Candidate sink class.

        Returns:
            bool: ``True`` when ``capability`` is this printer's capability or a
                subtype of it.
        """
        return issubclass(capability, self._capability)

    def run(self, sink: S_contra) -> None:
        """Perform the captured writes against ``sink``.

        Errors raised by ``sink.write`` propagate unchanged.

        Args:
            sink (S_contra): Destination; must be an instance of ``capability``.

        Raises:
            SinkCapabilityError: If ``sink`` does not provide this printer's capability.
        """
        if not isinstance(sink, self._capability):
            logger.debug("Refusing to run %r against %r", self, sink)
            raise SinkCapabilityError(
                f"{self!r} requires a {self._capability.__name__}, "
                f"got {type(sink).__name__}"
            )
        logger.trace("Running %r against %r", self, sink)
        self._action(sink)

    def _emit(self, sink: S_contra) -> None:
        """Run without the capability check (combinators and adapters only)."""
        self._action(sink)

    def __repr__(self) -> str:
        return f"Printer[{self._capability.__name__}]"
