"""Word fragments that must survive h-system decoding unchanged.

This module provides H_SYSTEM_EXCEPTIONS, real Esperanto word fragments in
which an "h" or an "au" is part of the word rather than an h-system marker.
They are matched case-insensitively and always win over the shorter digraph
they contain, so "senchava" keeps its "ch" and "Nauron" keeps its "au".

The list is fixed. Add fragments here, lowercase, whole-morpheme where
possible so that unrelated words are not caught.
"""

from __future__ import annotations

# "h" that belongs to the following morpheme, e.g. "sen|hav", "ses|hor"
H_FRAGMENTS: tuple[str, ...] = (
    "komenchor",
    "kuracherb",
    "potenchav",
    "prononchelp",
    "senchav",
    "pruchelp",  # not ŝ
    "drogherb",
    "flughaven",
    "longhar",
    "lesvigholstini",  # not ŝ
    "vanghar",
    "gajhumor",
    "amashisteri",
    "tobushaltej",  # not aŭ
    "bushaltej",
    "ashund",  # not ĉ
    "dishak",
    "disharmoni",
    "dishelig",
    "dishirtig",
    "fikshejm",
    "grashav",
    "grashepata",
    "invershav",
    "kashal",
    "misharmoni",
    "mishelp",
    "mishumor",
    "neinvershav",
    "plushor",
    "sekshontem",
    "seshektar",
    "seshor",
    "sukceshav",
)

# "au" that spans two syllables or morphemes, e.g. "na|ur", "unu|a|ul"
AU_FRAGMENTS: tuple[str, ...] = (
    "blankaurs",
    "doganauni",
    "ropauni",  # not eŭ
    "grandaursin",
    "imaginaraunu",
    "kakauj",
    "malgrandaursin",
    "matricaunu",
    "naur",
    "praul",
    "saudaarabuj",
    "tiaul",
    "traurb",
    "unuaul",
)

H_SYSTEM_EXCEPTIONS: tuple[str, ...] = H_FRAGMENTS + AU_FRAGMENTS
