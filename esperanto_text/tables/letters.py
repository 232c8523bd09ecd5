"""Esperanto diacritic letters and their ASCII transliterations.

This module provides DIACRITIC_LETTERS, one record per logical letter
(Ĉ, Ĝ, Ĥ, Ĵ, Ŝ, Ŭ), and lookup helpers keyed by codepoint and by digraph.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..const import H_SYSTEM_SUFFIX, X_SYSTEM_SUFFIX


@dataclass(frozen=True)
class DiacriticLetter:
    """One Esperanto letter with a circumflex or breve."""

    lower: str
    upper: str
    base: str
    h_suffix: str = H_SYSTEM_SUFFIX
    x_suffix: str = X_SYSTEM_SUFFIX

    @property
    def x_digraph(self) -> str:
        """Lowercase x-system spelling, e.g. "cx"."""
        return self.base + self.x_suffix

    @property
    def h_digraph(self) -> str:
        """Lowercase h-system spelling, e.g. "ch" (bare "u" for ŭ)."""
        return self.base + self.h_suffix


DIACRITIC_LETTERS: tuple[DiacriticLetter, ...] = (
    DiacriticLetter("\u0109", "\u0108", "c"),  # C WITH CIRCUMFLEX
    DiacriticLetter("\u011d", "\u011c", "g"),  # G WITH CIRCUMFLEX
    DiacriticLetter("\u0125", "\u0124", "h"),  # H WITH CIRCUMFLEX
    DiacriticLetter("\u0135", "\u0134", "j"),  # J WITH CIRCUMFLEX
    DiacriticLetter("\u015d", "\u015c", "s"),  # S WITH CIRCUMFLEX
    # ŭ is written as a plain "u" in the h-system
    DiacriticLetter("\u016d", "\u016c", "u", h_suffix=""),  # U WITH BREVE
)

# Codepoint (either case) -> letter
LETTERS_BY_CODEPOINT: dict[str, DiacriticLetter] = {
    codepoint: letter
    for letter in DIACRITIC_LETTERS
    for codepoint in (letter.lower, letter.upper)
}


def case_variants(digraph: str) -> list[str]:
    """Return the four case spellings of a two-letter digraph.

    Order is lower-lower, upper-upper, upper-lower, lower-upper.
    """
    first, second = digraph[0], digraph[1]
    return [
        first.lower() + second.lower(),
        first.upper() + second.upper(),
        first.upper() + second.lower(),
        first.lower() + second.upper(),
    ]
