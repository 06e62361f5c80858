"""Small 2D geometry helpers: vectors, rectangles and interpolation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vector2:
    """A mutable 2D point or vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def collides(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap."""
        return check_collision_recs(self, other)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b by factor t."""
    return a + (b - a) * t


def check_collision_recs(a: Rect, b: Rect) -> bool:
    """Return True if rectangles a and b overlap; touching edges do not count."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )