"""Value objects and configuration shared by the geometry and drawing layers."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Tuple

import json
import math


@dataclass(frozen=True)
class Point:
    """A location in surface coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y


@dataclass(frozen=True)
class Size:
    """Width and height of a box; negative extents are rejected."""

    width: float = 0.0
    height: float = 0.0

    def __post_init__(self) -> None:
        # NaN compares False, so degenerate measurements still pass through
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Size extents must be non-negative, got {self.width}x{self.height}"
            )

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.width) and math.isfinite(self.height)

    def as_tuple(self) -> Tuple[float, float]:
        return self.width, self.height


CENTER_ANCHOR = Point(0.5, 0.5)


class TextAlign(Enum):
    """Horizontal alignment of a single text line around its draw point."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass
class DrawingConfig:
    """Runtime preferences for drawing surfaces and the image cache."""

    image_cache_size: int = 64  # 0 disables resize caching
    antialiasing: bool = True
    smooth_image_scaling: bool = True

    def __post_init__(self) -> None:
        if self.image_cache_size < 0:
            raise ValueError("image_cache_size must be >= 0")

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_json(text: str) -> "DrawingConfig":
        data: Dict = json.loads(text)
        return DrawingConfig(
            image_cache_size=int(data.get("image_cache_size", 64)),
            antialiasing=bool(data.get("antialiasing", True)),
            smooth_image_scaling=bool(data.get("smooth_image_scaling", True)),
        )


__all__ = [
    "Point",
    "Size",
    "CENTER_ANCHOR",
    "TextAlign",
    "DrawingConfig",
]
