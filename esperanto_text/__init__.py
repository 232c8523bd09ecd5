"""Convert Esperanto text between UTF-8, x-system and h-system spellings.

Correctly printed Esperanto uses six letters with diacritics (ĉ ĝ ĥ ĵ ŝ ŭ).
Writers limited to ASCII add a suffix instead:

- x-system: "cx", "gx", "hx", "jx", "sx", "ux". Unambiguous, so conversion
  to and from UTF-8 is exact.
- h-system: "ch", "gh", "hh", "jh", "sh" and a bare "u" for ŭ. Ambiguous,
  so decoding uses a fixed list of real word fragments ("senchava",
  "Nauro", ...) that must be left alone.

convert() takes the direction tokens used by the eotext command line:
"u" (UTF-8), "x" (x-system) and "h" (h-system).
"""

from __future__ import annotations

from .const import DIRECTION_H_SYSTEM, DIRECTION_UTF8, DIRECTION_X_SYSTEM, DIRECTIONS
from .dispatch import convert, get_converter
from .exceptions import EsperantoTextError, InvalidDirection
from .transliteration import (
    h_system_to_utf8,
    h_system_to_x_system,
    utf8_to_h_system,
    utf8_to_x_system,
    x_system_to_h_system,
    x_system_to_utf8,
)

__all__ = [
    "DIRECTIONS",
    "DIRECTION_H_SYSTEM",
    "DIRECTION_UTF8",
    "DIRECTION_X_SYSTEM",
    "EsperantoTextError",
    "InvalidDirection",
    "convert",
    "get_converter",
    "h_system_to_utf8",
    "h_system_to_x_system",
    "utf8_to_h_system",
    "utf8_to_x_system",
    "x_system_to_h_system",
    "x_system_to_utf8",
]
