"""Exceptions raised by the transliteration core."""

from __future__ import annotations

from .const import DIRECTIONS


class EsperantoTextError(Exception):
    """Base class for errors raised by esperanto_text."""


class InvalidDirection(EsperantoTextError, ValueError):
    """Raised when a from/to direction pair is not one of u, x, h."""

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        valid = ", ".join(DIRECTIONS)
        super().__init__(
            f"Invalid direction '{source}' -> '{target}' (expected one of: {valid})"
        )
