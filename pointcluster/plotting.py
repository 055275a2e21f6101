"""Scatter plots of clusters and fuzzy memberships."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from matplotlib.axes import Axes
from matplotlib.collections import PathCollection

from .data import Data
from .point import Point

_CLUSTER_COLORS = ("r", "b", "g")
_FUZZY_COLORS = ("r", "b", "black")
_POINT_SIZE = 4**2
_CENTER_SIZE = 8**2


def split_by_membership(
    points: Iterable[Point],
    weights: Sequence[Sequence[float]],
    cluster_count: int,
    threshold: float = 0.5,
) -> list[Data]:
    """Group points by cluster, keeping those whose weight exceeds ``threshold``."""
    points = list(points)
    return [
        Data(point for point, weight in zip(points, weights[cluster]) if weight > threshold)
        for cluster in range(cluster_count)
    ]


def _scatter_groups(
    ax: Axes, groups: Sequence[Data], colors: Sequence[str]
) -> list[PathCollection]:
    collections = []
    for index, group in enumerate(groups):
        color = "black" if len(groups) == 1 else colors[index % len(colors)]
        collections.append(
            ax.scatter(group.xs(), group.ys(), marker=".", s=_POINT_SIZE, color=color)
        )
    return collections


def plot_clusters(
    ax: Axes, clusters: Sequence[Data], title: str
) -> list[PathCollection]:
    """Draw each cluster in its own colour; a single set is drawn in black."""
    ax.set_title(title)
    return _scatter_groups(ax, clusters, _CLUSTER_COLORS)


def plot_fuzzy(
    ax: Axes,
    points: Iterable[Point],
    weights: Sequence[Sequence[float]],
    centers: Sequence[Point],
    title: str,
) -> list[PathCollection]:
    """Draw points by their dominant cluster and mark the centres with crosses."""
    ax.set_title(title)
    groups = split_by_membership(points, weights, len(centers))
    collections = _scatter_groups(ax, groups, _FUZZY_COLORS)
    centroids = Data(centers)
    collections.append(
        ax.scatter(
            centroids.xs(), centroids.ys(), marker="X", s=_CENTER_SIZE, color="black"
        )
    )
    return collections