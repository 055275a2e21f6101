"""An ordered collection of points."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from .point import Point


class Data:
    """A mutable sequence of points with coordinate helpers."""

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self._points: list[Point] = list(points)

    @classmethod
    def filled(cls, length: int, value: Point) -> Data:
        """Return a collection holding ``length`` copies of ``value``."""
        return cls([value] * length)

    def mapped(self, func: Callable[[Point], Point]) -> Data:
        """Return a new collection with ``func`` applied to every point."""
        return Data(func(p) for p in self._points)

    def xs(self) -> list[float]:
        """All x coordinates, in order."""
        return [p.x for p in self._points]

    def ys(self) -> list[float]:
        """All y coordinates, in order."""
        return [p.y for p in self._points]

    def points(self) -> list[Point]:
        """A copy of the points as a list."""
        return list(self._points)

    def lower_corner(self) -> Point:
        """The point made of the smallest x and the smallest y."""
        if not self._points:
            raise ValueError("no points in data")
        return Point(min(self.xs()), min(self.ys()))

    def upper_corner(self) -> Point:
        """The point made of the largest x and the largest y."""
        if not self._points:
            raise ValueError("no points in data")
        return Point(max(self.xs()), max(self.ys()))

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __setitem__(self, index: int, point: Point) -> None:
        self._points[index] = point

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Data):
            return NotImplemented
        if len(other) != len(self):
            raise ValueError("size mismatch")
        return self._points == other._points

    __hash__ = None  # type: ignore[assignment]

    def append(self, point: Point) -> None:
        """Add a point at the end."""
        self._points.append(point)

    def extend(self, other: Iterable[Point]) -> None:
        """Add every point of ``other`` at the end."""
        self._points.extend(other)

    def pop(self) -> Point:
        """Remove and return the last point."""
        return self._points.pop()

    def __repr__(self) -> str:
        return f"Data({self._points!r})"

    def __str__(self) -> str:
        return "\n".join(str(p) for p in self._points)