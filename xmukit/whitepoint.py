"""Standard white point values in CIE u'v'Y."""

from __future__ import annotations

from typing import NamedTuple

__all__ = [
    "WhitePoint",
    "CIE_A",
    "CIE_B",
    "CIE_C",
    "CIE_D55",
    "CIE_D65",
    "CIE_D75",
    "ASTM_D50",
    "WP_9300K",
    "white_point",
]


class WhitePoint(NamedTuple):
    """A white point as chromaticity (u, v) and luminance y."""

    u: float
    v: float
    y: float


CIE_A = WhitePoint(0.2560, 0.5243, 1.0000)
CIE_B = WhitePoint(0.2137, 0.4852, 1.0000)
CIE_C = WhitePoint(0.2009, 0.4609, 1.0000)
CIE_D55 = WhitePoint(0.2044, 0.4808, 1.0000)
CIE_D65 = WhitePoint(0.1978, 0.4684, 1.0000)
CIE_D75 = WhitePoint(0.1935, 0.4586, 1.0000)
ASTM_D50 = WhitePoint(0.2092, 0.4881, 1.0000)
WP_9300K = WhitePoint(0.1884, 0.4463, 1.0000)

_BY_NAME: dict[str, WhitePoint] = {
    "CIE_A": CIE_A,
    "CIE_B": CIE_B,
    "CIE_C": CIE_C,
    "CIE_D55": CIE_D55,
    "CIE_D65": CIE_D65,
    "CIE_D75": CIE_D75,
    "ASTM_D50": ASTM_D50,
    "WP_9300K": WP_9300K,
}


def white_point(name: str) -> WhitePoint:
    """Return a standard white point by name, ignoring case."""
    try:
        return _BY_NAME[name.upper()]
    except KeyError:
        raise ValueError(f"unknown white point {name!r}") from None