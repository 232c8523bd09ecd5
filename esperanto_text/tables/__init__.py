"""Conversion tables for Esperanto transliteration.

This package holds the fixed data the converters are built from: the six
diacritic letters, the h-system exception fragments, and the per-direction
tables compiled from them.
"""

from __future__ import annotations

from .builder import (
    ConversionTable,
    Direction,
    TableEntry,
    build_table,
    clear_table_cache,
)
from .exception_fragments import AU_FRAGMENTS, H_FRAGMENTS, H_SYSTEM_EXCEPTIONS
from .letters import (
    DIACRITIC_LETTERS,
    LETTERS_BY_CODEPOINT,
    DiacriticLetter,
    case_variants,
)

__all__ = [
    "AU_FRAGMENTS",
    "DIACRITIC_LETTERS",
    "H_FRAGMENTS",
    "H_SYSTEM_EXCEPTIONS",
    "LETTERS_BY_CODEPOINT",
    "ConversionTable",
    "DiacriticLetter",
    "Direction",
    "TableEntry",
    "build_table",
    "case_variants",
    "clear_table_cache",
]
