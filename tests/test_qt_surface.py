"""End-to-end drawing onto an offscreen QImage through QPainterSurface."""

from __future__ import annotations

import math
from typing import Any, Iterator, Optional

from _qt_pixels import ink_bounds, qimage_to_rgba
import numpy as np
from PySide6 import QtCore, QtGui
import pytest

from chartdraw.drawing import (
    ImageResizeCache,
    draw_image,
    draw_multiline_text,
    draw_rotated_text,
    draw_text,
)
from chartdraw.drawing.qt_surface import QPainterSurface, TextAttributes
from chartdraw.models import DrawingConfig, Point, Size

CANVAS = 200


class BoxTextSurface(QPainterSurface):
    """Renders every text run as a solid box so tests do not depend on fonts."""

    box = Size(20.0, 10.0)

    def measure_text(self, text: str, attributes: Any = None) -> Size:
        return self.box

    def draw_text(self, text: str, origin: Point, attributes: Any = None) -> None:
        rect = QtCore.QRectF(origin.x, origin.y, self.box.width, self.box.height)
        self.painter.fillRect(rect, QtGui.QColor(255, 0, 0))


def _canvas() -> "QtGui.QImage":
    image = QtGui.QImage(CANVAS, CANVAS, QtGui.QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(QtCore.Qt.GlobalColor.transparent)
    return image


def _solid(width: int, height: int) -> "QtGui.QImage":
    image = QtGui.QImage(width, height, QtGui.QImage.Format.Format_ARGB32)
    image.fill(QtGui.QColor(0, 0, 255))
    return image


@pytest.fixture
def canvas(qapp) -> Iterator["QtGui.QImage"]:
    yield _canvas()


def _paint(canvas, surface_cls=QPainterSurface, cfg: Optional[DrawingConfig] = None):
    painter = QtGui.QPainter(canvas)
    return painter, surface_cls(painter, cfg)


def _assert_bounds_close(bounds, expected, tol: int = 1) -> None:
    assert bounds is not None
    assert np.all(np.abs(np.asarray(bounds) - np.asarray(expected)) <= tol), bounds


def test_qimage_to_rgba_shape(canvas) -> None:
    arr = qimage_to_rgba(canvas)
    assert arr.shape == (CANVAS, CANVAS, 4)
    assert arr.dtype == np.uint8
    assert ink_bounds(canvas) is None


def test_draw_image_resampled_and_centred(canvas) -> None:
    painter, surface = _paint(canvas)
    cache = ImageResizeCache()
    source = _solid(10, 10)
    try:
        draw_image(surface, source, Point(50.0, 50.0), Size(20.0, 20.0), cache=cache)
    finally:
        painter.end()

    assert (source, Size(20.0, 20.0)) in cache
    assert ink_bounds(canvas, min_alpha=128) == (40, 40, 60, 60)
    assert tuple(qimage_to_rgba(canvas)[50, 50]) == (0, 0, 255, 255)


def test_draw_pixmap_native_size(canvas) -> None:
    painter, surface = _paint(canvas)
    pixmap = QtGui.QPixmap.fromImage(_solid(8, 6))
    try:
        origin = draw_image(
            surface, pixmap, Point(20.0, 20.0), Size(8.0, 6.0), Point(0.0, 0.0)
        )
    finally:
        painter.end()

    assert origin == Point(20.0, 20.0)
    assert ink_bounds(canvas, min_alpha=128) == (20, 20, 28, 26)


def test_rotated_text_pivots_on_target(canvas) -> None:
    painter, surface = _paint(canvas, BoxTextSurface)
    try:
        draw_rotated_text(
            surface,
            "label",
            Point(100.0, 100.0),
            anchor=Point(0.0, 0.0),
            angle_radians=math.pi / 2,
        )
        assert painter.worldTransform().isIdentity()
    finally:
        painter.end()

    # 20x10 box turned a quarter: 10 wide, 20 tall, top-left on the target
    _assert_bounds_close(ink_bounds(canvas, min_alpha=128), (100, 100, 110, 120))


def test_rotate_uses_radians(canvas) -> None:
    painter, surface = _paint(canvas)
    try:
        surface.save()
        surface.rotate(math.pi)
        m11 = painter.worldTransform().m11()
        surface.restore()
    finally:
        painter.end()

    assert m11 == pytest.approx(-1.0)


def test_render_hints_follow_config(canvas) -> None:
    cfg = DrawingConfig(antialiasing=False, smooth_image_scaling=False)
    painter, _ = _paint(canvas, cfg=cfg)
    try:
        hints = painter.renderHints()
    finally:
        painter.end()

    assert not hints & QtGui.QPainter.RenderHint.Antialiasing
    assert not hints & QtGui.QPainter.RenderHint.SmoothPixmapTransform


def test_resize_image_matches_requested_size(canvas) -> None:
    painter, surface = _paint(canvas)
    try:
        resized = surface.resize_image(_solid(10, 10), Size(33.4, 7.6))
    finally:
        painter.end()

    assert surface.image_size(resized) == Size(33.0, 8.0)


def test_text_metrics_are_non_negative(canvas) -> None:
    painter, surface = _paint(canvas)
    attributes = TextAttributes(font=QtGui.QFont(), color=QtGui.QColor("black"))
    try:
        size = surface.measure_text("Axis", attributes)
        empty = surface.measure_text("", attributes)
        paragraph = surface.bounding_rect(
            "one two three four", Size(40.0, 500.0), attributes
        )
        surface.draw_text("Axis", Point(10.0, 10.0), attributes)
        surface.draw_text_in_rect(
            "one two", Point(10.0, 40.0), paragraph, attributes
        )
    finally:
        painter.end()

    assert size.width >= 0.0 and size.height >= 0.0
    assert empty.width == 0.0
    assert paragraph.width >= 0.0 and paragraph.height >= 0.0


@pytest.fixture
def text_attributes(qapp) -> TextAttributes:
    families = QtGui.QFontDatabase.families()
    if not families:
        pytest.skip("no fonts installed for the offscreen platform")
    font = QtGui.QFontDatabase.systemFont(QtGui.QFontDatabase.SystemFont.GeneralFont)
    font.setPixelSize(16)
    return TextAttributes(font=font, color=QtGui.QColor(0, 0, 0))


def test_draw_text_origin_is_top_left(canvas, text_attributes) -> None:
    painter, surface = _paint(canvas)
    try:
        size = surface.measure_text("Axis", text_attributes)
        drawn_at = draw_text(
            surface, "Axis", Point(10.0, 40.0), attributes=text_attributes
        )
    finally:
        painter.end()

    assert drawn_at == Point(10.0, 40.0)
    bounds = ink_bounds(canvas)
    assert bounds is not None
    left, top, right, bottom = bounds
    # glyphs hang below the origin, never above it
    assert 39 <= top < 40 + size.height
    assert bottom <= math.ceil(40 + size.height) + 1
    assert 8 <= left and right <= math.ceil(10 + size.width) + 2


def test_multiline_text_wraps_inside_its_box(canvas, text_attributes) -> None:
    text = "one two three four five six"
    painter, surface = _paint(canvas)
    try:
        line = surface.measure_text("one", text_attributes)
        placement = draw_multiline_text(
            surface,
            text,
            Point(10.0, 40.0),
            Size(60.0, 500.0),
            anchor=Point(0.0, 0.0),
            attributes=text_attributes,
        )
    finally:
        painter.end()

    paragraph = placement.size
    assert placement.offset == Point(10.0, 40.0)
    assert paragraph.height > line.height  # wrapped onto several lines
    bounds = ink_bounds(canvas)
    assert bounds is not None
    left, top, right, bottom = bounds
    assert left >= 9 and top >= 39
    assert right <= math.ceil(10 + paragraph.width) + 1
    assert bottom <= math.ceil(40 + paragraph.height) + 1
