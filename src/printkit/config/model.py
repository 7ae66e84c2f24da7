# topmark:header:start
#
#   project      : Printkit
#   file         : model.py
#   file_relpath : src/printkit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option objects for the printing profiles.

Options are immutable (``frozen=True``) snapshots captured by a profile at
construction time, so a profile and every printer it builds see the same
settings for their whole lifetime. Use `dataclasses.replace` to derive
variants.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HexCase(str, Enum):
    """Letter case for the hex digits of ``\\u00XX`` escapes.

    Attributes:
        LOWER: ``\\u001f`` (same as Python's `json` module).
        UPPER: ``\\u001F``.
    """

    LOWER = "lower"
    UPPER = "upper"


@dataclass(frozen=True)
class JsonProfileConfig:
    """Settings for [`PrintJson`][printkit.profiles.json.PrintJson].

    Attributes:
        escape_keys (bool): JSON-escape object keys before quoting them. When
            ``False`` keys are emitted verbatim between quotes and the caller
            guarantees they contain no characters that need escaping.
        hex_case (HexCase): Hex digit case used for ``\\u00XX`` escapes, both in
            escaped values and in escaped keys.
    """

    escape_keys: bool = True
    hex_case: HexCase = HexCase.LOWER
