"""Conversion tables, one per base direction.

build_table() returns the cached, immutable table for a direction:

- UTF8_TO_X / UTF8_TO_H: the 12 diacritic codepoints, matched exactly.
  The stored replacement is the lowercase digraph; its final case is worked
  out per match from the neighbouring characters.
- X_TO_UTF8: the six x-system digraphs in their four case spellings,
  matched case-insensitively.
- H_TO_UTF8: the five h-system consonant digraphs and "au" in their four
  case spellings, plus every exception fragment as a pass-through entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
import logging

from ..case_shape import digraph_case, letter_case, shape_digraph
from ..const import H_SYSTEM_AU_TRIGGER
from ..matcher import PatternMatcher
from .exception_fragments import H_SYSTEM_EXCEPTIONS
from .letters import DIACRITIC_LETTERS, LETTERS_BY_CODEPOINT, case_variants

_LOGGER = logging.getLogger(__name__)


class Direction(Enum):
    """Base conversion directions backed by a table."""

    UTF8_TO_X = "utf8_to_x"
    X_TO_UTF8 = "x_to_utf8"
    UTF8_TO_H = "utf8_to_h"
    H_TO_UTF8 = "h_to_utf8"


@dataclass(frozen=True)
class TableEntry:
    """One pattern and what it is replaced with."""

    pattern: str
    replacement: str
    # Copy the matched text unchanged (h-system exception fragments)
    passthrough: bool = False


@dataclass(frozen=True)
class ConversionTable:
    """Immutable pattern table for one direction."""

    direction: Direction
    entries: tuple[TableEntry, ...]
    case_insensitive: bool = False
    # Replacement case depends on the match and its neighbours
    context_cased: bool = False
    matcher: PatternMatcher = field(init=False, repr=False, compare=False)
    _by_pattern: dict[str, TableEntry] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "matcher",
            PatternMatcher(
                [entry.pattern for entry in self.entries],
                case_insensitive=self.case_insensitive,
            ),
        )
        by_pattern: dict[str, TableEntry] = {}
        for entry in self.entries:
            key = entry.pattern.lower() if entry.passthrough else entry.pattern
            by_pattern.setdefault(key, entry)
        object.__setattr__(self, "_by_pattern", by_pattern)

    @property
    def patterns(self) -> list[str]:
        """Patterns in registration order."""
        return [entry.pattern for entry in self.entries]

    def replacement_for(
        self, matched: str, previous: str | None = None, following: str | None = None
    ) -> str:
        """Return the text that replaces one match.

        Args:
            matched: Text matched by the table's matcher.
            previous: Character before the match, if any.
            following: Character after the match, if any.

        Returns:
            Replacement text. Pass-through entries return matched as is.
        """
        entry = self._by_pattern.get(matched)
        if entry is None:
            entry = self._by_pattern.get(matched.lower())
        if entry is None:
            # Only reachable if the matcher and the entries disagree
            raise KeyError(f"No {self.direction.value} entry for {matched!r}")

        if entry.passthrough:
            return matched
        if self.context_cased:
            shape = digraph_case(matched.isupper(), previous, following)
            return shape_digraph(entry.replacement[0], entry.replacement[1:], shape)
        return entry.replacement


def _encoding_entries(use_h_system: bool) -> tuple[TableEntry, ...]:
    entries: list[TableEntry] = []
    for codepoint, letter in LETTERS_BY_CODEPOINT.items():
        digraph = letter.h_digraph if use_h_system else letter.x_digraph
        entries.append(TableEntry(codepoint, digraph))
    return tuple(entries)


def _decoding_entries(use_h_system: bool) -> tuple[TableEntry, ...]:
    entries: list[TableEntry] = []
    for letter in DIACRITIC_LETTERS:
        digraph = letter.h_digraph if use_h_system else letter.x_digraph
        if len(digraph) < 2:
            # bare "u" is handled through the "au" trigger
            continue
        for variant in case_variants(digraph):
            entries.append(
                TableEntry(variant, letter_case(variant, letter.lower, letter.upper))
            )
    return tuple(entries)


def _au_trigger_entries() -> tuple[TableEntry, ...]:
    breve_u = LETTERS_BY_CODEPOINT["\u016d"]
    entries: list[TableEntry] = []
    for variant in case_variants(H_SYSTEM_AU_TRIGGER):
        u_letter = letter_case(variant[1], breve_u.lower, breve_u.upper)
        entries.append(TableEntry(variant, variant[0] + u_letter))
    return tuple(entries)


def _exception_entries() -> tuple[TableEntry, ...]:
    return tuple(
        TableEntry(fragment, fragment, passthrough=True)
        for fragment in H_SYSTEM_EXCEPTIONS
    )


@lru_cache(maxsize=None)
def build_table(direction: Direction) -> ConversionTable:
    """Build the conversion table for a base direction (cached).

    Args:
        direction: One of the four table-backed directions.

    Returns:
        The shared, immutable ConversionTable for that direction.
    """
    if direction is Direction.UTF8_TO_X:
        table = ConversionTable(
            direction, _encoding_entries(use_h_system=False), context_cased=True
        )
    elif direction is Direction.UTF8_TO_H:
        table = ConversionTable(
            direction, _encoding_entries(use_h_system=True), context_cased=True
        )
    elif direction is Direction.X_TO_UTF8:
        table = ConversionTable(
            direction, _decoding_entries(use_h_system=False), case_insensitive=True
        )
    elif direction is Direction.H_TO_UTF8:
        table = ConversionTable(
            direction,
            _exception_entries()
            + _decoding_entries(use_h_system=True)
            + _au_trigger_entries(),
            case_insensitive=True,
        )
    else:
        raise ValueError(f"Unsupported direction: {direction!r}")

    _LOGGER.debug(
        "Built %s table with %d entries", direction.value, len(table.entries)
    )
    return table


def clear_table_cache() -> None:
    """Clear the table cache.

    Useful for testing.
    """
    build_table.cache_clear()
