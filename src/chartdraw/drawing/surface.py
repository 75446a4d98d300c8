"""Contract between the placement code and a concrete 2D drawing backend."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Protocol

from ..models import Point, Size


class DrawingSurface(Protocol):
    """Minimal drawing primitives the coordinator relies on.

    ``attributes`` is opaque here; each backend defines what it accepts.
    Angles passed to :meth:`rotate` are in radians.
    """

    def measure_text(self, text: str, attributes: Any = None) -> Size:
        ...

    def bounding_rect(
        self, text: str, constrained_to: Size, attributes: Any = None
    ) -> Size:
        ...

    def draw_text(self, text: str, origin: Point, attributes: Any = None) -> None:
        ...

    def draw_text_in_rect(
        self, text: str, origin: Point, size: Size, attributes: Any = None
    ) -> None:
        ...

    def image_size(self, image: Any) -> Size:
        ...

    def resize_image(self, image: Any, size: Size) -> Any:
        ...

    def draw_image(self, image: Any, origin: Point, size: Size) -> None:
        ...

    def save(self) -> None:
        ...

    def restore(self) -> None:
        ...

    def translate(self, dx: float, dy: float) -> None:
        ...

    def rotate(self, angle_radians: float) -> None:
        ...


@contextmanager
def saved_state(surface: DrawingSurface) -> Iterator[DrawingSurface]:
    """Save the graphics state and restore it on exit, even on error."""
    surface.save()
    try:
        yield surface
    finally:
        surface.restore()


__all__ = ["DrawingSurface", "saved_state"]
