"""Plain 2D geometry and the drawable shapes the game puts on screen."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

RGBA = tuple[int, int, int, int]

WHITE: RGBA = (255, 255, 255, 255)
BLACK: RGBA = (0, 0, 0, 255)


@dataclass(frozen=True)
class Vec2:
    """An immutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """The vector scaled to unit length; the zero vector stays zero."""
        norm = self.length()
        if norm == 0.0:
            return self
        return self / norm


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_position_size(cls, position: Vec2, size: Vec2) -> Rect:
        return cls(position.x, position.y, size.x, size.y)

    def right(self) -> float:
        return self.left + self.width

    def bottom(self) -> float:
        return self.top + self.height

    def contains(self, point: Vec2) -> bool:
        """True when the point lies inside; the right and bottom edges are excluded."""
        min_x, max_x = sorted((self.left, self.right()))
        min_y, max_y = sorted((self.top, self.bottom()))
        return min_x <= point.x < max_x and min_y <= point.y < max_y

    def translated(self, offset: Vec2) -> Rect:
        """The same rectangle moved by ``offset``."""
        return Rect(self.left + offset.x, self.top + offset.y, self.width, self.height)


@dataclass
class RectangleShape:
    """A filled rectangle with an optional outline."""

    size: Vec2 = field(default_factory=Vec2)
    fill_color: RGBA = WHITE
    outline_color: RGBA = WHITE
    outline_thickness: float = 0.0

    def local_bounds(self) -> Rect:
        """Bounds in local coordinates, including an outward outline."""
        outline = max(self.outline_thickness, 0.0)
        return Rect(
            -outline,
            -outline,
            self.size.x + 2 * outline,
            self.size.y + 2 * outline,
        )


@dataclass
class CircleShape:
    """A filled circle; ``origin`` is the local point placed at the transform."""

    radius: float = 0.0
    fill_color: RGBA = WHITE
    origin: Vec2 = field(default_factory=Vec2)

    def local_bounds(self) -> Rect:
        return Rect(0.0, 0.0, 2 * self.radius, 2 * self.radius)


@dataclass
class TextShape:
    """A line of text; its bounds are estimated from the character size."""

    string: str = ""
    character_size: int = 30
    fill_color: RGBA = WHITE

    advance_ratio: float = 0.6

    def local_bounds(self) -> Rect:
        if not self.string:
            return Rect()
        width = self.character_size * self.advance_ratio * len(self.string)
        return Rect(0.0, 0.0, width, float(self.character_size))