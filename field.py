"""Playfield geometry for Pong."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class Rectangle:
    """A rectangle defined by top-left corner and dimensions."""

    x: float
    y: float
    width: float
    height: float

    def overlaps(self, other: "Rectangle") -> bool:
        """
        Check if two rectangles intersect.

        Touching edges count as an overlap.
        """
        left, top, right, bottom = self.bounds
        other_left, other_top, other_right, other_bottom = other.bounds
        return (
            left <= other_right
            and other_left <= right
            and top <= other_bottom
            and other_top <= bottom
        )

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Get bounds as (left, top, right, bottom)."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)


@dataclass(frozen=True)
class Viewport:
    """
    The visible play area for one frame.

    The window may be resized between frames, so positions are always
    derived from the viewport of the current frame rather than cached.
    """

    width: float
    height: float

    @property
    def center(self) -> Tuple[float, float]:
        """Get the center of the viewport."""
        return (self.width / 2, self.height / 2)

    def clamp_y(self, y: float, half_extent: float = 0) -> float:
        """
        Clamp a vertical center so an object of the given half height
        stays fully inside the viewport.

        If the object is taller than the viewport the range would be
        inverted; the object is then placed at the vertical center.
        """
        low = half_extent
        high = self.height - half_extent
        if low > high:
            return self.height / 2
        return max(low, min(y, high))
