"""Pure helpers shared across chartdraw."""

from .geometry import (
    clamp,
    decimal_places,
    deg2rad,
    move_point,
    normalize_angle,
    rad2deg,
    rotated_size,
    rotated_size_degrees,
    round_to_next_significant,
)

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
