"""Hard (crisp) clustering of points into a fixed number of groups."""

from __future__ import annotations

from collections.abc import Iterable

from .data import Data
from .point import Point


class CrispClustering(Data):
    """Points split into ``number_of_clusters`` disjoint clusters.

    Points start out assigned to clusters in round-robin order. Each of the
    ``calculation_depth`` rounds computes every cluster's mean and moves each
    point to the cluster whose mean is nearest; ties go to the lower index.
    A cluster left without points makes its mean undefined and raises
    ``ValueError``.
    """

    def __init__(
        self,
        points: Iterable[Point],
        number_of_clusters: int,
        calculation_depth: int,
    ) -> None:
        super().__init__(points)
        if number_of_clusters < 1:
            raise ValueError("number_of_clusters must be positive")
        if calculation_depth < 0:
            raise ValueError("calculation_depth must not be negative")
        self._number_of_clusters = number_of_clusters
        self._calculation_depth = calculation_depth

        assignment = [index % number_of_clusters for index in range(len(self))]
        for _ in range(calculation_depth):
            prototypes = self._prototypes(assignment)
            assignment = [self._nearest(point, prototypes) for point in self]

        self._clusters = [
            Data(point for point, owner in zip(self, assignment) if owner == cluster)
            for cluster in range(number_of_clusters)
        ]

    @property
    def clusters(self) -> list[Data]:
        """The clusters, in index order."""
        return list(self._clusters)

    def _prototypes(self, assignment: list[int]) -> list[Point]:
        sums = [Point()] * self._number_of_clusters
        counts = [0] * self._number_of_clusters
        for point, owner in zip(self, assignment):
            sums[owner] += point
            counts[owner] += 1
        return [total / count for total, count in zip(sums, counts)]

    @staticmethod
    def _nearest(point: Point, prototypes: list[Point]) -> int:
        return min(
            range(len(prototypes)), key=lambda index: prototypes[index].distance(point)
        )