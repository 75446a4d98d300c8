"""Drawing surface backed by a PySide6 :class:`QtGui.QPainter`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

import logging
import math

from PySide6 import QtCore, QtGui

from ..models import DrawingConfig, Point, Size

LOGGER = logging.getLogger(__name__)

QtImage = Union[QtGui.QImage, QtGui.QPixmap]

# int flags: AlignmentFlag and TextFlag are distinct enums in PySide6
_WRAP_FLAGS = (
    QtCore.Qt.AlignmentFlag.AlignLeft.value
    | QtCore.Qt.AlignmentFlag.AlignTop.value
    | QtCore.Qt.TextFlag.TextWordWrap.value
)


@dataclass
class TextAttributes:
    """Font and colour used for a piece of text; ``None`` keeps the painter's."""

    font: Optional[QtGui.QFont] = None
    color: Optional[QtGui.QColor] = None


class QPainterSurface:
    """Adapter exposing a :class:`QtGui.QPainter` as a drawing surface.

    The painter must be active for the lifetime of the surface. Text origins
    are top-left corners; Qt's baseline convention is hidden here.
    """

    def __init__(
        self, painter: QtGui.QPainter, cfg: Optional[DrawingConfig] = None
    ) -> None:
        self._painter = painter
        self._cfg = cfg or DrawingConfig()
        painter.setRenderHint(
            QtGui.QPainter.RenderHint.Antialiasing, self._cfg.antialiasing
        )
        painter.setRenderHint(
            QtGui.QPainter.RenderHint.SmoothPixmapTransform,
            self._cfg.smooth_image_scaling,
        )

    @property
    def painter(self) -> QtGui.QPainter:
        return self._painter

    # ------------------------------- Text -------------------------------------

    def _font(self, attributes: Optional[TextAttributes]) -> QtGui.QFont:
        if attributes is not None and attributes.font is not None:
            return attributes.font
        return self._painter.font()

    def _apply(self, attributes: Optional[TextAttributes]) -> None:
        self._painter.setFont(self._font(attributes))
        if attributes is not None and attributes.color is not None:
            self._painter.setPen(QtGui.QPen(attributes.color))

    def measure_text(
        self, text: str, attributes: Optional[TextAttributes] = None
    ) -> Size:
        metrics = QtGui.QFontMetricsF(self._font(attributes))
        return Size(max(0.0, metrics.horizontalAdvance(text)), metrics.height())

    def bounding_rect(
        self,
        text: str,
        constrained_to: Size,
        attributes: Optional[TextAttributes] = None,
    ) -> Size:
        metrics = QtGui.QFontMetricsF(self._font(attributes))
        bounds = QtCore.QRectF(0, 0, constrained_to.width, constrained_to.height)
        rect = metrics.boundingRect(bounds, _WRAP_FLAGS, text)
        return Size(max(0.0, rect.width()), max(0.0, rect.height()))

    def draw_text(
        self, text: str, origin: Point, attributes: Optional[TextAttributes] = None
    ) -> None:
        self._painter.save()
        try:
            self._apply(attributes)
            ascent = QtGui.QFontMetricsF(self._painter.font()).ascent()
            self._painter.drawText(QtCore.QPointF(origin.x, origin.y + ascent), text)
        finally:
            self._painter.restore()

    def draw_text_in_rect(
        self,
        text: str,
        origin: Point,
        size: Size,
        attributes: Optional[TextAttributes] = None,
    ) -> None:
        self._painter.save()
        try:
            self._apply(attributes)
            rect = QtCore.QRectF(origin.x, origin.y, size.width, size.height)
            self._painter.drawText(rect, _WRAP_FLAGS, text)
        finally:
            self._painter.restore()

    # ------------------------------ Images ------------------------------------

    def image_size(self, image: QtImage) -> Size:
        return Size(float(image.width()), float(image.height()))

    def resize_image(self, image: QtImage, size: Size) -> QtImage:
        mode = (
            QtCore.Qt.TransformationMode.SmoothTransformation
            if self._cfg.smooth_image_scaling
            else QtCore.Qt.TransformationMode.FastTransformation
        )
        width = max(1, int(round(size.width)))
        height = max(1, int(round(size.height)))
        LOGGER.debug(
            "Resampling %dx%d image to %dx%d",
            image.width(),
            image.height(),
            width,
            height,
        )
        return image.scaled(
            width, height, QtCore.Qt.AspectRatioMode.IgnoreAspectRatio, mode
        )

    def draw_image(self, image: QtImage, origin: Point, size: Size) -> None:
        target = QtCore.QRectF(origin.x, origin.y, size.width, size.height)
        source = QtCore.QRectF(0, 0, image.width(), image.height())
        if isinstance(image, QtGui.QPixmap):
            self._painter.drawPixmap(target, image, source)
        else:
            self._painter.drawImage(target, image, source)

    # --------------------------- Graphics state -------------------------------

    def save(self) -> None:
        self._painter.save()

    def restore(self) -> None:
        self._painter.restore()

    def translate(self, dx: float, dy: float) -> None:
        self._painter.translate(dx, dy)

    def rotate(self, angle_radians: float) -> None:
        # QPainter rotates in degrees, clockwise on a y-down surface
        self._painter.rotate(math.degrees(angle_radians))


__all__ = ["QPainterSurface", "TextAttributes"]
