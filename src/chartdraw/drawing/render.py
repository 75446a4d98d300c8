"""Anchored text and image drawing on top of a :class:`DrawingSurface`."""

from __future__ import annotations

from typing import Any, Optional

import logging

from ..models import CENTER_ANCHOR, Point, Size, TextAlign
from .cache import ImageResizeCache
from .placement import Placement, aligned_point, image_rect, place
from .surface import DrawingSurface, saved_state

LOGGER = logging.getLogger(__name__)


def _apply_rotation(surface: DrawingSurface, translate: Point, angle: float) -> None:
    # translate first so the rotation pivots on the target point
    surface.translate(translate.x, translate.y)
    surface.rotate(angle)


def draw_rotated_text(
    surface: DrawingSurface,
    text: str,
    point: Point,
    anchor: Point = CENTER_ANCHOR,
    angle_radians: float = 0.0,
    attributes: Any = None,
) -> Placement:
    """Draw ``text`` so that ``anchor`` of its box lands on ``point``.

    A non-zero ``angle_radians`` rotates the text about ``point``; the anchor
    is then applied to the rotated bounding box.
    """
    size = surface.measure_text(text, attributes)
    placement = place(point, size, anchor, angle_radians)
    if placement.translate is None:
        surface.draw_text(text, placement.offset, attributes)
        return placement

    with saved_state(surface):
        _apply_rotation(surface, placement.translate, placement.angle)
        surface.draw_text(text, placement.offset, attributes)
    return placement


def draw_text(
    surface: DrawingSurface,
    text: str,
    point: Point,
    align: TextAlign = TextAlign.LEFT,
    anchor: Point = CENTER_ANCHOR,
    angle_radians: float = 0.0,
    attributes: Any = None,
) -> Point:
    """Draw a single line of ``text`` aligned horizontally around ``point``.

    Unrotated text is drawn with its top-left corner at the aligned point and
    ``anchor`` is ignored. Rotated text skips alignment and is handed to
    :func:`draw_rotated_text` unchanged. Returns the point the text was
    placed against.
    """
    if angle_radians != 0.0:
        draw_rotated_text(surface, text, point, anchor, angle_radians, attributes)
        return point

    width = surface.measure_text(text, attributes).width
    draw_point = aligned_point(point, width, align)
    surface.draw_text(text, draw_point, attributes)
    return draw_point


def draw_multiline_text(
    surface: DrawingSurface,
    text: str,
    point: Point,
    constrained_to: Size,
    anchor: Point = CENTER_ANCHOR,
    angle_radians: float = 0.0,
    attributes: Any = None,
    known_size: Optional[Size] = None,
) -> Placement:
    """Lay out ``text`` inside a wrapped box anchored on ``point``.

    ``known_size`` skips the measurement pass when the caller already has
    the laid-out box; otherwise the surface measures it against
    ``constrained_to``.
    """
    size = known_size
    if size is None:
        size = surface.bounding_rect(text, constrained_to, attributes)
    placement = place(point, size, anchor, angle_radians)
    if placement.translate is None:
        surface.draw_text_in_rect(text, placement.offset, size, attributes)
        return placement

    with saved_state(surface):
        _apply_rotation(surface, placement.translate, placement.angle)
        surface.draw_text_in_rect(text, placement.offset, size, attributes)
    return placement


def draw_image(
    surface: DrawingSurface,
    image: Any,
    center: Point,
    size: Size,
    anchor: Point = CENTER_ANCHOR,
    cache: Optional[ImageResizeCache] = None,
) -> Point:
    """Draw ``image`` at ``size`` with ``anchor`` of it on ``center``.

    When ``size`` differs from the native size a resampled copy is requested
    from the surface, through ``cache`` when one is given. Returns the
    top-left origin used.
    """
    origin, draw_size = image_rect(center, size, anchor)
    source = image
    if surface.image_size(image) != draw_size:
        if cache is not None:
            source = cache.get_or_create(image, draw_size, surface.resize_image)
        else:
            LOGGER.debug(
                "Resampling image to %sx%s without a cache",
                draw_size.width,
                draw_size.height,
            )
            source = surface.resize_image(image, draw_size)
    surface.draw_image(source, origin, draw_size)
    return origin


__all__ = [
    "draw_text",
    "draw_rotated_text",
    "draw_multiline_text",
    "draw_image",
]
