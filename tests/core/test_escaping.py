# topmark:header:start
#
#   project      : Printkit
#   file         : test_escaping.py
#   file_relpath : tests/core/test_escaping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON string-content escaping rules and the parser round-trip."""

from __future__ import annotations

import json

from hypothesis import given

from printkit.config.model import HexCase
from printkit.core.escaping import json_escape
from tests.conftest import parametrize
from tests.strategies_printkit import s_raw_text


@parametrize(
    ("raw", "escaped"),
    [
        ('"', '\\"'),
        ("\\", "\\\\"),
        ("\b", "\\b"),
        ("\f", "\\f"),
        ("\n", "\\n"),
        ("\r", "\\r"),
        ("\t", "\\t"),
        ("\x00", "\\u0000"),
        ("\x01", "\\u0001"),
        ("\x1b", "\\u001b"),
        ("\x1f", "\\u001f"),
    ],
)
def test_escapes(raw: str, escaped: str) -> None:
    """Each special character maps to its standard JSON escape."""
    assert json_escape(raw) == escaped


def test_other_characters_pass_through() -> None:
    """Printable ASCII, DEL, `/`, and non-ASCII text are left alone."""
    s = "plain / text \x7f é ✓ 😀"
    assert json_escape(s) == s


def test_no_quotes_are_added() -> None:
    """Escaping produces string *content*, not a literal."""
    assert json_escape("") == ""
    assert json_escape("a") == "a"


def test_mixed_input() -> None:
    """Quote, backslash, newline, and 0x01 are escaped in place."""
    assert json_escape('a"b\\c\nd\x01e') == 'a\\"b\\\\c\\nd\\u0001e'


def test_upper_hex_case() -> None:
    """`HexCase.UPPER` only changes the hex digits of `\\u00XX` escapes."""
    assert json_escape("\x1b\x1f\n", hex_case=HexCase.UPPER) == "\\u001B\\u001F\\n"


@given(s=s_raw_text(80))
def test_round_trip_through_json_parser(s: str) -> None:
    """A JSON parser reads the escaped text back as the original string."""
    assert json.loads('"' + json_escape(s) + '"') == s
    assert json.loads('"' + json_escape(s, hex_case=HexCase.UPPER) + '"') == s
