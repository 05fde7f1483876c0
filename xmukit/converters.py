"""String conversions for backing store, gravity, justification and long values."""

from __future__ import annotations

import re
from enum import IntEnum

__all__ = [
    "ConversionError",
    "BackingStore",
    "Justify",
    "FORGET_GRAVITY",
    "NORTH_WEST_GRAVITY",
    "NORTH_GRAVITY",
    "NORTH_EAST_GRAVITY",
    "WEST_GRAVITY",
    "CENTER_GRAVITY",
    "EAST_GRAVITY",
    "SOUTH_WEST_GRAVITY",
    "SOUTH_GRAVITY",
    "SOUTH_EAST_GRAVITY",
    "STATIC_GRAVITY",
    "UNMAP_GRAVITY",
    "string_to_backing_store",
    "backing_store_to_string",
    "string_to_gravity",
    "gravity_to_string",
    "string_to_justify",
    "justify_to_string",
    "string_to_long",
    "long_to_string",
]


class ConversionError(ValueError):
    """Raised when a value cannot be converted."""


class BackingStore(IntEnum):
    """Backing-store hint values."""

    NOT_USEFUL = 0
    WHEN_MAPPED = 1
    ALWAYS = 2
    DEFAULT = ALWAYS + WHEN_MAPPED + NOT_USEFUL


class Justify(IntEnum):
    """Horizontal text justification."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


FORGET_GRAVITY = 0
NORTH_WEST_GRAVITY = 1
NORTH_GRAVITY = 2
NORTH_EAST_GRAVITY = 3
WEST_GRAVITY = 4
CENTER_GRAVITY = 5
EAST_GRAVITY = 6
SOUTH_WEST_GRAVITY = 7
SOUTH_GRAVITY = 8
SOUTH_EAST_GRAVITY = 9
STATIC_GRAVITY = 10
UNMAP_GRAVITY = 0

# Order matters: the first entry with a given gravity names it on output.
_GRAVITY_NAMES: tuple[tuple[str, int], ...] = (
    ("forget", FORGET_GRAVITY),
    ("northwest", NORTH_WEST_GRAVITY),
    ("north", NORTH_GRAVITY),
    ("northeast", NORTH_EAST_GRAVITY),
    ("west", WEST_GRAVITY),
    ("center", CENTER_GRAVITY),
    ("east", EAST_GRAVITY),
    ("southwest", SOUTH_WEST_GRAVITY),
    ("south", SOUTH_GRAVITY),
    ("southeast", SOUTH_EAST_GRAVITY),
    ("static", STATIC_GRAVITY),
    ("unmap", UNMAP_GRAVITY),
    ("left", WEST_GRAVITY),
    ("top", NORTH_GRAVITY),
    ("right", EAST_GRAVITY),
    ("bottom", SOUTH_GRAVITY),
)

_BACKING_STORE_NAMES: dict[BackingStore, str] = {
    BackingStore.NOT_USEFUL: "notUseful",
    BackingStore.WHEN_MAPPED: "whenMapped",
    BackingStore.ALWAYS: "always",
    BackingStore.DEFAULT: "default",
}

_JUSTIFY_NAMES: dict[Justify, str] = {
    Justify.LEFT: "left",
    Justify.CENTER: "center",
    Justify.RIGHT: "right",
}

_LONG_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _latin1_lower(text: str) -> str:
    """Lower-case ASCII and ISO Latin-1 letters only."""
    chars = []
    for ch in text:
        code = ord(ch)
        if 0x41 <= code <= 0x5A or 0xC0 <= code <= 0xDE and code != 0xD7:
            ch = chr(code + 0x20)
        chars.append(ch)
    return "".join(chars)


def _lowered_prefix(value: str, size: int) -> str:
    """Lower-case at most ``size - 1`` leading characters of ``value``."""
    if value is None:
        raise ConversionError("cannot convert a missing string")
    return _latin1_lower(value[: size - 1])


def string_to_backing_store(value: str) -> BackingStore:
    """Convert a backing-store name, ignoring case, to its value."""
    name = _lowered_prefix(value, 11)
    for store, text in _BACKING_STORE_NAMES.items():
        if name == text.lower():
            return store
    raise ConversionError(f'Cannot convert string "{value}" to type BackingStore')


def backing_store_to_string(value: int) -> str:
    """Return the resource name of a backing-store value."""
    try:
        return _BACKING_STORE_NAMES[BackingStore(value)]
    except ValueError:
        raise ConversionError("Cannot convert BackingStore to String") from None


def string_to_gravity(value: str) -> int:
    """Convert a gravity name, ignoring case, to its gravity value."""
    name = _lowered_prefix(value, 10)
    for text, gravity in _GRAVITY_NAMES:
        if name == text:
            return gravity
    raise ConversionError(f'Cannot convert string "{value}" to type Gravity')


def gravity_to_string(gravity: int) -> str:
    """Return the first resource name registered for a gravity value."""
    for text, known in _GRAVITY_NAMES:
        if known == gravity:
            return text
    raise ConversionError("Cannot convert Gravity to String")


def string_to_justify(value: str) -> Justify:
    """Convert a justification name, ignoring case, to a Justify."""
    name = _lowered_prefix(value, 7)
    for justify, text in _JUSTIFY_NAMES.items():
        if name == text:
            return justify
    raise ConversionError(f'Cannot convert string "{value}" to type Justify')


def justify_to_string(value: int) -> str:
    """Return the resource name of a justification value."""
    try:
        return _JUSTIFY_NAMES[Justify(value)]
    except ValueError:
        raise ConversionError("Cannot convert Justify to String") from None


def string_to_long(value: str) -> int:
    """Parse a leading decimal integer, skipping leading white space."""
    if value is None:
        raise ConversionError("cannot convert a missing string")
    match = _LONG_PATTERN.match(value)
    if match is None:
        raise ConversionError(f'Cannot convert string "{value}" to type Long')
    return int(match.group(1))


def long_to_string(value: int) -> str:
    """Format an integer in decimal."""
    return "%d" % value