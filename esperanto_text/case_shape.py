"""Case handling for conversions that change the number of letters.

Encoding a diacritic letter produces two ASCII letters, and decoding a
digraph produces one letter, so the case of the output has to be derived
from the case of the input and its neighbours:

- "Ĉ" at the start of a capitalized word becomes "Cx", but inside an
  all-caps run ("ĈIU") it becomes "CX".
- "Cx", "CX" and "cX" all decode to "Ĉ".
"""

from __future__ import annotations

from enum import Enum


class CaseShape(Enum):
    """Case applied to an encoded digraph."""

    LOWER = "lower"
    UPPER = "upper"
    CAPITALIZED = "capitalized"


def _is_upper(char: str | None) -> bool:
    return char is not None and char.isupper()


def digraph_case(
    letter_is_upper: bool, previous: str | None, following: str | None
) -> CaseShape:
    """Choose the case of the digraph that replaces one diacritic letter.

    Args:
        letter_is_upper: Whether the matched letter is a capital.
        previous: Character just before the match, or None at the start.
        following: Character just after the match, or None at the end.

    Returns:
        LOWER for a lowercase letter, UPPER when a neighbouring character
        is also uppercase (all-caps run), CAPITALIZED otherwise.
    """
    if not letter_is_upper:
        return CaseShape.LOWER
    if _is_upper(previous) or _is_upper(following):
        return CaseShape.UPPER
    return CaseShape.CAPITALIZED


def shape_digraph(base: str, suffix: str, shape: CaseShape) -> str:
    """Spell base letter plus suffix in the given case shape.

    An empty suffix (ŭ in the h-system) leaves only the base letter, which
    is uppercase for both UPPER and CAPITALIZED.
    """
    if shape is CaseShape.LOWER:
        return base.lower() + suffix.lower()
    if shape is CaseShape.UPPER:
        return base.upper() + suffix.upper()
    return base.upper() + suffix.lower()


def letter_case(matched: str, lower: str, upper: str) -> str:
    """Pick the decoded letter's case from the matched digraph.

    Any uppercase character in the digraph makes the letter uppercase.
    """
    if any(char.isupper() for char in matched):
        return upper
    return lower
