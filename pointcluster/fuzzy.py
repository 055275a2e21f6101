"""Fuzzy c-means clustering."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable

from .data import Data
from .point import Point


def _ratio(numerator: float, denominator: float) -> float:
    # IEEE semantics: x/0 is infinite and 0/0 is not a number.
    if denominator == 0:
        return math.nan if numerator == 0 else math.inf
    return numerator / denominator


def _power(base: float, exponent: float) -> float:
    try:
        return base**exponent
    except OverflowError:
        return math.inf


class FuzzyClustering:
    """Fuzzy c-means clustering of a point set.

    Memberships start random and normalised per point; centres and
    memberships are then updated alternately until the cost changes by less
    than ``epsilon`` between two iterations or ``max_iterations`` is reached.
    """

    def __init__(
        self,
        data: Iterable[Point],
        cluster_count: int,
        fuzzy_factor: float = 2.0,
        max_iterations: int = 100,
        epsilon: float = 4.0,
        rng: random.Random | None = None,
    ) -> None:
        self._data = Data(data)
        if (
            len(self._data) == 0
            or cluster_count <= 0
            or cluster_count > len(self._data)
            or fuzzy_factor <= 1.0
        ):
            raise ValueError("wrong input")
        self._cluster_count = cluster_count
        self._fuzzy_factor = fuzzy_factor
        self._max_iterations = max_iterations
        self._epsilon = epsilon
        self._centers = [Point()] * cluster_count
        self._members = self._initial_members(rng if rng is not None else random.Random())
        self._cost_history: list[float] = []

        previous = 0.0
        for iteration in range(max_iterations):
            self._update_centers()
            self._update_members()
            cost = self._cost()
            self._cost_history.append(cost)
            if iteration > 0 and abs(cost - previous) < epsilon:
                break
            previous = cost

    def get(self) -> tuple[Data, list[list[float]], list[Point]]:
        """Return the data, the membership matrix (cluster by point) and the centres."""
        return (
            Data(self._data),
            [list(row) for row in self._members],
            list(self._centers),
        )

    @property
    def cost_history(self) -> list[float]:
        """The cost after each completed iteration."""
        return list(self._cost_history)

    def _initial_members(self, rng: random.Random) -> list[list[float]]:
        columns = []
        for _ in self._data:
            draws = [rng.random() for _ in range(self._cluster_count)]
            total = sum(draws)
            columns.append([draw / total for draw in draws])
        return [list(row) for row in zip(*columns)]

    def _update_centers(self) -> None:
        centers = []
        for row in self._members:
            weights = [_power(u, self._fuzzy_factor) for u in row]
            numerator = sum(
                (point * weight for point, weight in zip(self._data, weights)), Point()
            )
            centers.append(numerator / sum(weights))
        self._centers = centers

    def _update_members(self) -> None:
        exponent = 2 / (self._fuzzy_factor - 1)
        self._members = [
            [
                1.0
                / sum(
                    _power(_ratio(point.distance(own), point.distance(other)), exponent)
                    for other in self._centers
                )
                for point in self._data
            ]
            for own in self._centers
        ]

    def _cost(self) -> float:
        total = 0.0
        for row, center in zip(self._members, self._centers):
            for u, point in zip(row, self._data):
                distance = point.distance(center)
                total += _power(u, self._fuzzy_factor) * distance * distance
        return total