# topmark:header:start
#
#   project      : Printkit
#   file         : json.py
#   file_relpath : src/printkit/profiles/json.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON printing profile.

[`PrintJson`][printkit.profiles.json.PrintJson] is the ``Print`` algebra over
[`JsonSink`][printkit.core.sinks.JsonSink] plus JSON-specific builders. Output is
flat: no whitespace is inserted between tokens.

Escaping happens once, at a boundary: [`escape`][printkit.profiles.json.PrintJson.escape]
runs any printer (generic, text-profile or JSON) against an adapter sink that
JSON-escapes each fragment before forwarding it. Leaf combinators never need to
know about escaping.

What is and is not escaped:

- ``unescaped``/``string``/``number`` and the structural punctuation are written
  verbatim; the caller vouches that they are valid JSON syntax.
- Values routed through ``escape``/``quoted``/``text`` are escaped.
- Object keys are quoted and, unless ``JsonProfileConfig.escape_keys`` is
  ``False``, escaped.

Duplicate object keys:
    When a key occurs more than once in one ``object(...)`` call only its first
    occurrence is kept, and surviving keys keep first-occurrence order.
"""

from __future__ import annotations

import io
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from printkit.config.logging import PrintkitLogger, get_logger
from printkit.config.model import JsonProfileConfig
from printkit.constants import (
    JSON_ARRAY_CLOSE,
    JSON_ARRAY_OPEN,
    JSON_KEY_SEPARATOR,
    JSON_OBJECT_CLOSE,
    JSON_OBJECT_OPEN,
    JSON_QUOTE,
    JSON_SEPARATOR,
)
from printkit.core.algebra import Print
from printkit.core.escaping import json_escape
from printkit.core.printer import Printer
from printkit.core.sinks import JsonSink, anonymous

if TYPE_CHECKING:
    from collections.abc import Iterable

logger: PrintkitLogger = get_logger(__name__)


class PrintJson(Print[JsonSink]):
    """The ``Print`` algebra over JSON sinks, with escaping and structure builders.

    Args:
        config (JsonProfileConfig | None): Profile options; defaults to
            ``JsonProfileConfig()`` (escaped keys, lowercase hex escapes).
    """

    __slots__ = ("_config",)

    def __init__(self, config: JsonProfileConfig | None = None) -> None:
        super().__init__(JsonSink)
        self._config: JsonProfileConfig = config if config is not None else JsonProfileConfig()

    @property
    def config(self) -> JsonProfileConfig:
        """The options captured by this profile."""
        return self._config

    def unescaped(self, s: str) -> Printer[JsonSink]:
        """Write ``s`` verbatim; the caller asserts it is already valid JSON text."""
        return self.string(s)

    def escape(self, printer: Printer[Any]) -> Printer[JsonSink]:
        """JSON-escape everything ``printer`` writes.

        ``printer`` may require any capability; it is run against an anonymous
        adapter that escapes each fragment and forwards it to the JSON sink.
        No quotes are added, see [`quoted`][printkit.profiles.json.PrintJson.quoted].

        Args:
            printer (Printer[Any]): The printer producing raw string content.

        Returns:
            Printer[JsonSink]: A printer writing the escaped content.

        Raises:
            TypeError: If ``printer`` is not a ``Printer``.
        """
        if not isinstance(printer, Printer):
            raise TypeError(f"escape() expects a Printer, got {type(printer).__name__}")
        hex_case = self._config.hex_case

        def action(sink: JsonSink) -> None:
            def forward(fragment: str) -> None:
                sink.write(json_escape(fragment, hex_case=hex_case))

            printer._emit(anonymous(forward))

        return self._lift(action)

    def quoted(self, printer: Printer[Any]) -> Printer[JsonSink]:
        """Build a JSON string literal: ``"`` + ``escape(printer)`` + ``"``."""
        quote: Printer[JsonSink] = self.unescaped(JSON_QUOTE)
        return self.bracket(quote, quote, self.escape(printer))

    def text(self, s: str) -> Printer[JsonSink]:
        """Build a JSON string literal holding ``s``."""
        return self.quoted(self.string(s))

    def boolean(self, value: bool) -> Printer[JsonSink]:
        """Write ``true`` or ``false``."""
        return self.unescaped("true" if value else "false")

    def null(self) -> Printer[JsonSink]:
        """Write ``null``."""
        return self.unescaped("null")

    def array(self, printers: Iterable[Printer[JsonSink]]) -> Printer[JsonSink]:
        """Build ``[v1,v2,...]`` from already-built JSON value printers.

        Args:
            printers (Iterable[Printer[JsonSink]]): Element printers, materialized now.

        Returns:
            Printer[JsonSink]: The array printer; ``[]`` when empty.
        """
        return self.bracket(
            self.unescaped(JSON_ARRAY_OPEN),
            self.unescaped(JSON_ARRAY_CLOSE),
            self.intersperse(self.unescaped(JSON_SEPARATOR), printers),
        )

    def object(
        self,
        pairs: Mapping[str, Printer[JsonSink]] | Iterable[tuple[str, Printer[JsonSink]]],
    ) -> Printer[JsonSink]:
        """Build ``{"k1":v1,"k2":v2,...}`` from key/value-printer pairs.

        Keys are deduplicated: the first occurrence of a key wins and the
        surviving members keep their first-occurrence order.

        Args:
            pairs (Mapping[str, Printer[JsonSink]] | Iterable[tuple[str, Printer[JsonSink]]]):
                Members as a mapping or as ``(key, printer)`` tuples, materialized now.

        Returns:
            Printer[JsonSink]: The object printer; ``{}`` when empty.

        Raises:
            TypeError: If a key is not a ``str`` or a value is not a ``Printer``.
        """
        items: Iterable[tuple[str, Printer[JsonSink]]] = (
            pairs.items() if isinstance(pairs, Mapping) else pairs
        )
        unique: dict[str, Printer[JsonSink]] = {}
        for key, value in items:
            if not isinstance(key, str):
                raise TypeError(f"object() keys must be str, got {type(key).__name__}")
            value = self._check(value)
            if key in unique:
                logger.debug("Dropping duplicate JSON object key %r (first occurrence wins)", key)
                continue
            unique[key] = value

        key_separator: Printer[JsonSink] = self.unescaped(JSON_KEY_SEPARATOR)
        members: list[Printer[JsonSink]] = [
            self.sequence_args(self._key(key), key_separator, value)
            for key, value in unique.items()
        ]
        return self.bracket(
            self.unescaped(JSON_OBJECT_OPEN),
            self.unescaped(JSON_OBJECT_CLOSE),
            self.intersperse(self.unescaped(JSON_SEPARATOR), members),
        )

    def _key(self, key: str) -> Printer[JsonSink]:
        body: str = (
            json_escape(key, hex_case=self._config.hex_case)
            if self._config.escape_keys
            else key
        )
        return self.unescaped(f"{JSON_QUOTE}{body}{JSON_QUOTE}")

    def render(self, printer: Printer[JsonSink]) -> str:
        """Run ``printer`` into an in-memory buffer and return the JSON text."""
        buf = io.StringIO()
        printer.run(JsonSink.create(buf))
        return buf.getvalue()


json_printer: PrintJson = PrintJson()
