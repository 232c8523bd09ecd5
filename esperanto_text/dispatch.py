"""Direction dispatch for the u/x/h direction tokens."""

from __future__ import annotations

from collections.abc import Callable
import logging

import voluptuous as vol

from .const import DIRECTION_H_SYSTEM, DIRECTION_UTF8, DIRECTION_X_SYSTEM, DIRECTIONS
from .exceptions import InvalidDirection
from .transliteration import (
    h_system_to_utf8,
    h_system_to_x_system,
    utf8_to_h_system,
    utf8_to_x_system,
    x_system_to_h_system,
    x_system_to_utf8,
)

_LOGGER = logging.getLogger(__name__)

Converter = Callable[[str], str]

DIRECTION_SCHEMA = vol.Schema(vol.All(str, vol.In(DIRECTIONS)))

CONVERTERS: dict[tuple[str, str], Converter] = {
    (DIRECTION_UTF8, DIRECTION_X_SYSTEM): utf8_to_x_system,
    (DIRECTION_X_SYSTEM, DIRECTION_UTF8): x_system_to_utf8,
    (DIRECTION_UTF8, DIRECTION_H_SYSTEM): utf8_to_h_system,
    (DIRECTION_H_SYSTEM, DIRECTION_UTF8): h_system_to_utf8,
    (DIRECTION_X_SYSTEM, DIRECTION_H_SYSTEM): x_system_to_h_system,
    (DIRECTION_H_SYSTEM, DIRECTION_X_SYSTEM): h_system_to_x_system,
}


def _identity(text: str) -> str:
    return text


def validate_direction(source: str, target: str) -> tuple[str, str]:
    """Validate a from/to pair of direction tokens.

    Raises:
        InvalidDirection: If either token is not one of u, x, h.
    """
    try:
        return DIRECTION_SCHEMA(source), DIRECTION_SCHEMA(target)
    except vol.Invalid as err:
        _LOGGER.debug("Rejected direction %r -> %r: %s", source, target, err)
        raise InvalidDirection(source, target) from err


def get_converter(source: str, target: str) -> Converter:
    """Return the conversion function for a direction pair.

    Identity pairs (u->u, x->x, h->h) return a function that hands the
    input back unchanged.

    Raises:
        InvalidDirection: If either token is not one of u, x, h.
    """
    source, target = validate_direction(source, target)
    if source == target:
        return _identity
    return CONVERTERS[(source, target)]


def convert(source: str, target: str, text: str) -> str:
    """Convert text from one representation to another.

    Args:
        source: Direction token of the input ("u", "x" or "h").
        target: Direction token of the output ("u", "x" or "h").
        text: Text to convert.

    Returns:
        Converted text.

    Raises:
        InvalidDirection: If either token is not one of u, x, h.
    """
    converter = get_converter(source, target)
    _LOGGER.debug(
        "Converting %d characters %s -> %s with %s",
        len(text),
        source,
        target,
        converter.__name__,
    )
    return converter(text)
