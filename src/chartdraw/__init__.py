"""chartdraw: geometry helpers and anchored text/image drawing for charts."""

from __future__ import annotations

from ._version import get_version
from .drawing import (
    DrawingSurface,
    ImageResizeCache,
    Placement,
    draw_image,
    draw_multiline_text,
    draw_rotated_text,
    draw_text,
    place,
)
from .models import CENTER_ANCHOR, DrawingConfig, Point, Size, TextAlign
from .utils import (
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

__version__ = get_version()

__all__ = [
    "__version__",
    "get_version",
    "Point",
    "Size",
    "CENTER_ANCHOR",
    "TextAlign",
    "DrawingConfig",
    "DrawingSurface",
    "ImageResizeCache",
    "Placement",
    "place",
    "draw_text",
    "draw_rotated_text",
    "draw_multiline_text",
    "draw_image",
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
