from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Orientation(str, Enum):
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"

    @classmethod
    def from_size(cls, width: float, height: float) -> Orientation:
        """Classify a source image; square images count as landscape."""
        return cls.PORTRAIT if width / height < 1 else cls.LANDSCAPE


class Corner(str, Enum):
    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"


class Side(str, Enum):
    LEFT = "left"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in canvas coordinates (origin top-left, y down)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def min_side(self) -> float:
        return min(self.width, self.height)

    def corner(self, corner: Corner) -> tuple[float, float]:
        return _corner_point(self.x, self.y, self.width, self.height, corner)

    def is_valid(self) -> bool:
        values = (self.x, self.y, self.width, self.height)
        return all(math.isfinite(v) for v in values) and self.width > 0 and self.height > 0


@dataclass(frozen=True)
class Square:
    x: float
    y: float
    size: float

    def corner(self, corner: Corner) -> tuple[float, float]:
        return _corner_point(self.x, self.y, self.size, self.size, corner)


@dataclass(frozen=True)
class Arc:
    """Quarter circle swept clockwise on screen from ``start_angle``.

    Angles are radians measured from +x and grow clockwise because the canvas
    y axis points down.  ``end_angle`` is normalised to ``[0, 2π)``.
    """

    cx: float
    cy: float
    radius: float
    start_angle: float
    end_angle: float

    @property
    def sweep(self) -> float:
        return math.pi / 2

    def point_at(self, angle: float) -> tuple[float, float]:
        return (
            self.cx + self.radius * math.cos(angle),
            self.cy + self.radius * math.sin(angle),
        )

    @property
    def start_point(self) -> tuple[float, float]:
        return self.point_at(self.start_angle)

    @property
    def end_point(self) -> tuple[float, float]:
        return self.point_at(self.end_angle)


@dataclass(frozen=True)
class DecompositionStep:
    index: int
    rect: Rect
    square: Square
    arc: Arc

    @property
    def phase(self) -> int:
        return self.index % 4


def _corner_point(
    x: float, y: float, width: float, height: float, corner: Corner
) -> tuple[float, float]:
    if corner is Corner.TOP_LEFT:
        return (x, y)
    if corner is Corner.TOP_RIGHT:
        return (x + width, y)
    if corner is Corner.BOTTOM_LEFT:
        return (x, y + height)
    return (x + width, y + height)


__all__ = [
    "Arc",
    "Corner",
    "DecompositionStep",
    "Orientation",
    "Rect",
    "Side",
    "Square",
]
