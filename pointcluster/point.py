"""Two-dimensional points with vector arithmetic."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """An immutable point in the plane."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def random(
        cls,
        x_min: float,
        x_max: float,
        y_min: float,
        y_max: float,
        rng: _random.Random | None = None,
    ) -> Point:
        """Return a point drawn uniformly from the given rectangle."""
        generator = rng if rng is not None else _random.Random()
        return cls(generator.uniform(x_min, x_max), generator.uniform(y_min, y_max))

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        if isinstance(factor, Point):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Point:
        if isinstance(divisor, Point):
            return NotImplemented
        if divisor == 0:
            raise ValueError("0 division")
        return Point(self.x / divisor, self.y / divisor)

    def distance(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"x: {self.x} y: {self.y}"