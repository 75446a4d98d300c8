"""Placement math for anchored and rotated content.

A placement turns "draw this box so that ``anchor`` of it sits on ``point``"
into what a drawing surface needs: an origin for unrotated content, or a
translation plus a local offset for rotated content. Rotated content is drawn
centred on the translation point after the surface has been translated and
rotated, so the rotation pivots around the target instead of the surface
origin.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..models import CENTER_ANCHOR, Point, Size, TextAlign
from ..utils import rotated_size


@dataclass(frozen=True)
class Placement:
    """Where and how to draw a box of ``size``.

    ``translate`` is ``None`` for unrotated content, in which case ``offset``
    is the absolute top-left origin. Otherwise the surface is translated to
    ``translate``, rotated by ``angle`` radians and the content is drawn at
    ``offset`` in the rotated frame.
    """

    offset: Point
    size: Size
    translate: Optional[Point] = None
    angle: float = 0.0

    @property
    def rotated(self) -> bool:
        return self.translate is not None


def anchored_origin(point: Point, size: Size, anchor: Point = CENTER_ANCHOR) -> Point:
    """Top-left origin putting ``anchor`` of a ``size`` box on ``point``."""
    return Point(point.x - size.width * anchor.x, point.y - size.height * anchor.y)


def rotated_placement(
    point: Point,
    size: Size,
    angle_radians: float,
    anchor: Point = CENTER_ANCHOR,
) -> Placement:
    offset = Point(-size.width * 0.5, -size.height * 0.5)
    translate = point
    if anchor != CENTER_ANCHOR:
        bounds = rotated_size(size, angle_radians)
        translate = Point(
            point.x - bounds.width * (anchor.x - 0.5),
            point.y - bounds.height * (anchor.y - 0.5),
        )
    return Placement(offset=offset, size=size, translate=translate, angle=angle_radians)


def place(
    point: Point,
    size: Size,
    anchor: Point = CENTER_ANCHOR,
    angle_radians: float = 0.0,
) -> Placement:
    """Pick the unrotated or rotated placement for ``angle_radians``."""
    if angle_radians == 0.0:
        return Placement(offset=anchored_origin(point, size, anchor), size=size)
    return rotated_placement(point, size, angle_radians, anchor)


def aligned_point(point: Point, width: float, align: TextAlign) -> Point:
    """Shift ``point`` left so a line of ``width`` is aligned around it."""
    if align is TextAlign.CENTER:
        return Point(point.x - width / 2, point.y)
    if align is TextAlign.RIGHT:
        return Point(point.x - width, point.y)
    return point


def image_rect(
    point: Point, size: Size, anchor: Point = CENTER_ANCHOR
) -> Tuple[Point, Size]:
    """Draw rectangle for an image of ``size`` anchored on ``point``."""
    return anchored_origin(point, size, anchor), size


__all__ = [
    "Placement",
    "anchored_origin",
    "rotated_placement",
    "place",
    "aligned_point",
    "image_rect",
]
