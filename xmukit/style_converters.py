"""String conversions for orientation and shape style values."""

from __future__ import annotations

from enum import IntEnum

from xmukit.converters import ConversionError, _latin1_lower, _lowered_prefix

__all__ = [
    "Orientation",
    "ShapeStyle",
    "string_to_orientation",
    "orientation_to_string",
    "string_to_shape_style",
    "shape_style_to_string",
]


class Orientation(IntEnum):
    """Layout orientation."""

    HORIZONTAL = 0
    VERTICAL = 1


class ShapeStyle(IntEnum):
    """Window shape styles."""

    RECTANGLE = 1
    OVAL = 2
    ELLIPSE = 3
    ROUNDED_RECTANGLE = 4


_ORIENTATION_NAMES: dict[Orientation, str] = {
    Orientation.HORIZONTAL: "horizontal",
    Orientation.VERTICAL: "vertical",
}

_SHAPE_STYLE_NAMES: dict[ShapeStyle, str] = {
    ShapeStyle.RECTANGLE: "Rectangle",
    ShapeStyle.OVAL: "Oval",
    ShapeStyle.ELLIPSE: "Ellipse",
    ShapeStyle.ROUNDED_RECTANGLE: "RoundedRectangle",
}


def string_to_orientation(value: str) -> Orientation:
    """Convert an orientation name, ignoring case, to an Orientation."""
    name = _lowered_prefix(value, 11)
    for orientation, text in _ORIENTATION_NAMES.items():
        if name == text:
            return orientation
    raise ConversionError(f'Cannot convert string "{value}" to type Orientation')


def orientation_to_string(value: int) -> str:
    """Return the resource name of an orientation value."""
    try:
        return _ORIENTATION_NAMES[Orientation(value)]
    except ValueError:
        raise ConversionError("Cannot convert Orientation to String") from None


def string_to_shape_style(value: str) -> ShapeStyle:
    """Convert a shape style name, compared without regard to case."""
    if value is None:
        raise ConversionError("cannot convert a missing string")
    name = _latin1_lower(value)
    for style, text in _SHAPE_STYLE_NAMES.items():
        if name == _latin1_lower(text):
            return style
    raise ConversionError(f'Cannot convert string "{value}" to type ShapeStyle')


def shape_style_to_string(value: int) -> str:
    """Return the resource name of a shape style value."""
    try:
        return _SHAPE_STYLE_NAMES[ShapeStyle(value)]
    except ValueError:
        raise ConversionError("Cannot convert ShapeStyle to String") from None