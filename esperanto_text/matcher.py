"""Multi-pattern search and replace.

All patterns of a table are compiled into one Aho-Corasick automaton with
leftmost-longest match semantics, so a single left-to-right scan finds the
leftmost match and, among the patterns starting there, the longest one.
This is what lets an exception fragment such as "senchav" beat the "ch" it
contains. Scan time depends on the text, not on the number of patterns.

Two matcher configurations exist side by side:

- exact matching, for tables keyed by UTF-8 letters;
- ASCII case-insensitive matching, for tables keyed by ASCII digraphs.
  Patterns are stored lowercase and the text is scanned through an
  A-Z -> a-z translation, which keeps string lengths (and so match
  offsets) unchanged and leaves "ſ" (long s) and the Kelvin sign alone.
"""

from __future__ import annotations

import logging
import string
from typing import TYPE_CHECKING

import ahocorasick_rs

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .tables import ConversionTable

_LOGGER = logging.getLogger(__name__)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(text: str) -> str:
    """Lowercase A-Z only; every other character is left as is."""
    return text.translate(_ASCII_LOWER)


class PatternMatcher:
    """Precompiled leftmost-longest matcher over a fixed set of patterns."""

    def __init__(self, patterns: Iterable[str], case_insensitive: bool = False) -> None:
        # Spellings that fold to the same key collapse onto the first one
        unique: dict[str, str] = {}
        for pattern in patterns:
            if not pattern:
                raise ValueError("PatternMatcher patterns must not be empty")
            key = ascii_lower(pattern) if case_insensitive else pattern
            unique.setdefault(key, pattern)
        if not unique:
            raise ValueError("PatternMatcher needs at least one pattern")

        self.patterns: tuple[str, ...] = tuple(unique.values())
        self.case_insensitive = case_insensitive
        self._automaton = ahocorasick_rs.AhoCorasick(
            list(unique),
            matchkind=ahocorasick_rs.MatchKind.LeftmostLongest,
        )
        _LOGGER.debug(
            "Built automaton with %d patterns (case_insensitive=%s)",
            len(unique),
            case_insensitive,
        )

    def find_spans(self, text: str) -> list[tuple[int, int]]:
        """Return (start, end) of non-overlapping matches, left to right."""
        haystack = ascii_lower(text) if self.case_insensitive else text
        return [
            (start, end)
            for _, start, end in self._automaton.find_matches_as_indexes(haystack)
        ]


def replace_all(text: str, table: ConversionTable) -> str:
    """Replace every table pattern found in text.

    Matched spans are replaced by the table's replacement, which may depend
    on the characters on either side of the match. Everything else is
    copied through unchanged.

    Args:
        text: Input text.
        table: Conversion table for one direction.

    Returns:
        A new string with all replacements applied.
    """
    if not text:
        return text

    result: list[str] = []
    position = 0
    for start, end in table.matcher.find_spans(text):
        result.append(text[position:start])
        previous = text[start - 1] if start > 0 else None
        following = text[end] if end < len(text) else None
        result.append(table.replacement_for(text[start:end], previous, following))
        position = end
    result.append(text[position:])
    return "".join(result)
