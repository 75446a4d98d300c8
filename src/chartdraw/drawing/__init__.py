"""Anchored drawing of text and images onto a drawing surface."""

from .cache import ImageResizeCache
from .placement import (
    Placement,
    aligned_point,
    anchored_origin,
    image_rect,
    place,
    rotated_placement,
)
from .render import draw_image, draw_multiline_text, draw_rotated_text, draw_text
from .surface import DrawingSurface, saved_state

__all__ = [
    "DrawingSurface",
    "saved_state",
    "ImageResizeCache",
    "Placement",
    "anchored_origin",
    "rotated_placement",
    "place",
    "aligned_point",
    "image_rect",
    "draw_text",
    "draw_rotated_text",
    "draw_multiline_text",
    "draw_image",
]
