"""Validation and layout of standard colormap allocations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "VisualClass",
    "StandardMap",
    "VisualInfo",
    "StandardColormap",
    "valid_allocation",
    "colormap_multipliers",
    "standard_colormap",
]


class VisualClass(IntEnum):
    """Visual classes."""

    STATIC_GRAY = 0
    GRAY_SCALE = 1
    STATIC_COLOR = 2
    PSEUDO_COLOR = 3
    TRUE_COLOR = 4
    DIRECT_COLOR = 5


class StandardMap(IntEnum):
    """Standard colormap property atoms."""

    RGB_BEST_MAP = 25
    RGB_BLUE_MAP = 26
    RGB_DEFAULT_MAP = 27
    RGB_GRAY_MAP = 28
    RGB_GREEN_MAP = 29
    RGB_RED_MAP = 30


@dataclass(frozen=True)
class VisualInfo:
    """The parts of a visual that decide a colormap allocation."""

    visualid: int
    visual_class: VisualClass
    colormap_size: int
    depth: int = 8
    screen: int = 0
    red_mask: int = 0
    green_mask: int = 0
    blue_mask: int = 0


@dataclass(frozen=True)
class StandardColormap:
    """The layout of a standard colormap."""

    red_max: int
    red_mult: int
    green_max: int
    green_mult: int
    blue_max: int
    blue_mult: int
    base_pixel: int
    visualid: int


def _is_decomposed(vinfo: VisualInfo) -> bool:
    return vinfo.visual_class in (VisualClass.DIRECT_COLOR, VisualClass.TRUE_COLOR)


def _shifted(mask: int) -> int:
    """Shift ``mask`` right until its lowest bit is set."""
    if mask == 0:
        return 0
    return mask // (mask & -mask)


def valid_allocation(
    vinfo: VisualInfo, red_max: int, green_max: int, blue_max: int, prop: int
) -> bool:
    """Return True if the allocation fits the visual and suits the property."""
    if _is_decomposed(vinfo):
        for wanted, mask in (
            (red_max, vinfo.red_mask),
            (green_max, vinfo.green_mask),
            (blue_max, vinfo.blue_mask),
        ):
            if wanted > _shifted(mask):
                return False
    elif prop == StandardMap.RGB_GRAY_MAP:
        if red_max + green_max + blue_max + 1 > vinfo.colormap_size:
            return False
    elif (red_max + 1) * (green_max + 1) * (blue_max + 1) > vinfo.colormap_size:
        return False

    all_three = red_max and green_max and blue_max
    rules = {
        StandardMap.RGB_DEFAULT_MAP: all_three,
        StandardMap.RGB_RED_MAP: red_max,
        StandardMap.RGB_GREEN_MAP: green_max,
        StandardMap.RGB_BLUE_MAP: blue_max,
        StandardMap.RGB_BEST_MAP: all_three,
        StandardMap.RGB_GRAY_MAP: all_three,
    }
    return bool(rules.get(prop, False))


def colormap_multipliers(
    vinfo: VisualInfo, prop: int, red_max: int, green_max: int, blue_max: int
) -> tuple[int, int, int]:
    """Return the red, green and blue multipliers for an allocation."""
    if prop == StandardMap.RGB_GRAY_MAP:
        return (1, 1, 1)
    if _is_decomposed(vinfo):
        return tuple(m & -m for m in (vinfo.red_mask, vinfo.green_mask, vinfo.blue_mask))
    red_mult = (green_max + 1) * (blue_max + 1) if red_max > 0 else 0
    green_mult = blue_max + 1 if green_max > 0 else 0
    blue_mult = 1 if blue_max > 0 else 0
    return (red_mult, green_mult, blue_mult)


def standard_colormap(
    vinfo: VisualInfo, prop: int, red_max: int, green_max: int, blue_max: int
) -> StandardColormap:
    """Describe a standard colormap; raise ValueError for an invalid allocation."""
    if not valid_allocation(vinfo, red_max, green_max, blue_max, prop):
        raise ValueError(
            f"allocation {red_max}/{green_max}/{blue_max} is not valid "
            f"for property {prop} on visual {vinfo.visualid:#x}"
        )
    red_mult, green_mult, blue_mult = colormap_multipliers(
        vinfo, prop, red_max, green_max, blue_max
    )
    return StandardColormap(
        red_max=red_max,
        red_mult=red_mult,
        green_max=green_max,
        green_mult=green_mult,
        blue_max=blue_max,
        blue_mult=blue_mult,
        base_pixel=0,
        visualid=vinfo.visualid,
    )