"""Conversion functions between UTF-8, x-system and h-system text.

The x-system is unambiguous, so UTF-8 <-> x-system round-trips exactly.
The h-system is not: "h" and "au" also occur in ordinary words, so
h-system decoding skips a fixed list of known word fragments (see
tables.exception_fragments) and is otherwise a best effort.

Example:
    >>> utf8_to_x_system("eĥoŝanĝo ĉiuĵaŭde")
    'ehxosxangxo cxiujxauxde'
    >>> h_system_to_utf8("Chiuj estas senchavaj kaj taugaj ideoj.")
    'Ĉiuj estas senchavaj kaj taŭgaj ideoj.'
"""

from __future__ import annotations

from .matcher import replace_all
from .tables import Direction, build_table


def utf8_to_x_system(text: str) -> str:
    """Convert UTF-8 "ĵaŭdo" to x-system "jxauxdo"."""
    return replace_all(text, build_table(Direction.UTF8_TO_X))


def x_system_to_utf8(text: str) -> str:
    """Convert x-system "jxauxdo" to UTF-8 "ĵaŭdo"."""
    return replace_all(text, build_table(Direction.X_TO_UTF8))


def utf8_to_h_system(text: str) -> str:
    """Convert UTF-8 "ĵaŭdo" to h-system "jhaudo"."""
    return replace_all(text, build_table(Direction.UTF8_TO_H))


def h_system_to_utf8(text: str) -> str:
    """Convert h-system "jhaudo" to UTF-8 "ĵaŭdo"."""
    return replace_all(text, build_table(Direction.H_TO_UTF8))


def x_system_to_h_system(text: str) -> str:
    """Convert x-system "jxauxdo" to h-system "jhaudo" via UTF-8."""
    return utf8_to_h_system(x_system_to_utf8(text))


def h_system_to_x_system(text: str) -> str:
    """Convert h-system "jhaudo" to x-system "jxauxdo" via UTF-8."""
    return utf8_to_x_system(h_system_to_utf8(text))
