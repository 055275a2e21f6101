"""Evenly spaced points along a segment."""

from __future__ import annotations

from itertools import accumulate, repeat

from .data import Data
from .point import Point


class Linspace(Data):
    """Points spaced evenly from ``first`` towards ``second``.

    ``points_between`` points lie strictly between the ends; ``second``
    itself is added only when ``include_last`` is true.
    """

    def __init__(
        self,
        first: Point,
        second: Point,
        points_between: int,
        include_last: bool = True,
    ) -> None:
        delta = (second - first) / (points_between + 1)
        super().__init__(
            accumulate(repeat(delta, points_between), initial=first)
        )
        self._include_last = include_last
        if include_last:
            self.append(second)

    @property
    def include_last(self) -> bool:
        """Whether the end point was included."""
        return self._include_last