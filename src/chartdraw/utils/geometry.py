"""Geometry helpers used by the placement and drawing layers.

Every function here is total: zero, NaN and infinite inputs produce a
well-defined value instead of an exception.
"""

import math

from ..models import Point, Size


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return max(lo, min(hi, value))


def deg2rad(degrees: float) -> float:
    return degrees * math.pi / 180.0


def rad2deg(radians: float) -> float:
    return radians * 180.0 / math.pi


def normalize_angle(degrees: float) -> float:
    """Map ``degrees`` into ``[0, 360)``.

    Uses a truncating remainder (sign follows the dividend) and shifts a
    negative remainder up by a full turn.
    """
    if not math.isfinite(degrees):
        return math.nan
    angle = math.fmod(degrees, 360.0)
    if angle < 0:
        angle += 360.0
        # fmod of a tiny negative value can round back up to a full turn
        if angle >= 360.0:
            angle = 0.0
    return angle + 0.0  # fold -0.0 into 0.0


def rotated_size(size: Size, angle_radians: float) -> Size:
    """Return the tight axis-aligned box around ``size`` rotated about its centre."""
    cos_t = math.cos(angle_radians)
    sin_t = math.sin(angle_radians)
    return Size(
        abs(size.width * cos_t) + abs(size.height * sin_t),
        abs(size.width * sin_t) + abs(size.height * cos_t),
    )


def rotated_size_degrees(size: Size, angle_degrees: float) -> Size:
    return rotated_size(size, deg2rad(angle_degrees))


def move_point(point: Point, distance: float, angle_degrees: float) -> Point:
    """Translate ``point`` by ``distance`` along ``angle_degrees`` (0 = +x)."""
    theta = deg2rad(angle_degrees)
    return Point(
        point.x + distance * math.cos(theta),
        point.y + distance * math.sin(theta),
    )


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def round_to_next_significant(value: float) -> float:
    """Round ``value`` to a single significant digit.

    ``1234`` becomes ``1000`` and ``0.0456`` becomes ``0.05``. Zero, NaN and
    infinities are returned unchanged.
    """
    if value == 0 or not math.isfinite(value):
        return value
    d = math.ceil(math.log10(abs(value)))
    scale = 10.0 ** (d - 1)
    if scale == 0:
        # deep subnormal input, the scale underflows
        return value
    return _round_half_away(value / scale) * scale


def decimal_places(value: float) -> int:
    """Estimate the decimal places needed to label ``value`` on an axis.

    ``ceil(-log10(r)) + 2`` where ``r`` is ``value`` rounded to one
    significant digit, floored at zero.
    """
    if value == 0 or not math.isfinite(value):
        return 0
    rounded = round_to_next_significant(value)
    if rounded == 0 or not math.isfinite(rounded):
        return 0
    return max(0, int(math.ceil(-math.log10(abs(rounded)))) + 2)


__all__ = [
    "clamp",
    "deg2rad",
    "rad2deg",
    "normalize_angle",
    "rotated_size",
    "rotated_size_degrees",
    "move_point",
    "round_to_next_significant",
    "decimal_places",
]
