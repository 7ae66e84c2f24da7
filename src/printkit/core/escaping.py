# topmark:header:start
#
#   project      : Printkit
#   file         : escaping.py
#   file_relpath : src/printkit/core/escaping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""JSON string-content escaping.

Rules (RFC 8259 string content, no surrounding quotes):

- ``\`` -> ``\\`` and ``"`` -> ``\"``
- ``\b \f \n \r \t`` -> their two-character escapes
- any other code point below 0x20 -> ``\u00XX``
- everything else passes through unchanged (non-ASCII and lone surrogates included)

Feeding ``'"' + json_escape(s) + '"'`` to a JSON parser yields ``s`` again.
"""

from __future__ import annotations

from typing import Final

from printkit.config.model import HexCase

_SHORT_ESCAPES: Final[dict[int, str]] = {
    ord("\\"): "\\\\",
    ord('"'): '\\"',
    ord("\b"): "\\b",
    ord("\f"): "\\f",
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
}


def _build_table(hex_case: HexCase) -> dict[int, str]:
    fmt: str = "\\u{:04x}" if hex_case is HexCase.LOWER else "\\u{:04X}"
    table: dict[int, str] = {code: fmt.format(code) for code in range(0x20)}
    table.update(_SHORT_ESCAPES)
    return table


_TABLES: Final[dict[HexCase, dict[int, str]]] = {
    case: _build_table(case) for case in HexCase
}


def json_escape(s: str, *, hex_case: HexCase = HexCase.LOWER) -> str:
    """Escape ``s`` for embedding inside a JSON string literal.

    Args:
        s (str): Raw text.
        hex_case (HexCase): Case of the hex digits in ``\\u00XX`` escapes.

    Returns:
        str: The escaped text, without surrounding quotes.
    """
    return s.translate(_TABLES[hex_case])
