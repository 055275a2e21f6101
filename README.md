# pointcluster

This package clusters two-dimensional point sets. It has two algorithms:

* **Crisp clustering** (hard c-means). Each point goes to exactly one cluster.
* **Fuzzy c-means clustering**. Each point gets a membership degree in every cluster.

It also has helpers that read point files and that plot the results with matplotlib. It also provides a command that runs both algorithms on two files.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Input files

A data file holds one point per line. Each line holds two whitespace-separated numbers. Blank lines are skipped.

```
0.97903473 6.89791050
0.96688149 7.55303680
```

```python
from pointcluster.files import parse_file

data = parse_file("points.txt")   # a Data object
print(len(data), data.lower_corner(), data.upper_corner())
```

`parse_file` raises `OSError` when the file cannot be opened. It raises `ValueError` when a non-blank line does not start with two numbers.

## Points and data sets

`pointcluster.point.Point` is an immutable point. It supports these operations:

* `+` and `-` with another point.
* `*` by a number.
* `/` by a number. Dividing by zero raises `ValueError`.
* `distance(other)`.
* `Point.random(x_min, x_max, y_min, y_max, rng=None)`, which draws a point uniformly from a rectangle.

```python
from pointcluster.point import Point
from pointcluster.data import Data

p = Point(3.0, 4.0)
print(p.distance(Point(0.0, 0.0)))   # 5.0
print((p + Point(1.0, 1.0)) / 2)     # x: 2.0 y: 2.5

data = Data([Point(1.0, 2.0), Point(3.0, 4.0)])
print(data.xs(), data.ys())          # [1.0, 3.0] [2.0, 4.0]
```

`pointcluster.data.Data` is a mutable sequence of points. It supports indexing, iteration and `len`, and it has these methods:

* `append`, `extend` and `pop`.
* `points()`, which returns a list copy of the points.
* `mapped(func)`, which returns a new `Data` with `func` applied to every point.
* `Data.filled(length, value)`.
* `lower_corner()` and `upper_corner()`. These return the smallest or largest x and y combined into one point. They raise `ValueError` on an empty set.

If you compare two `Data` sets of different lengths, the comparison raises `ValueError`.

`pointcluster.linspace.Linspace(first, second, points_between, include_last=True)` builds evenly spaced points. The spacing is `(second - first) / (points_between + 1)`, so `points_between` points lie between `first` and `second`. The end point `second` is added only when `include_last` is true.

`pointcluster.data_tools` has three functions:

* `convert_x(data, operation)` applies `operation` to each x coordinate and returns a new list.
* `convert_y(data, operation)` does the same for each y coordinate.
* `convert_axis(values, operation)` does the same for any sequence of values.

## Crisp clustering

```python
from pointcluster.crisp import CrispClustering

clustering = CrispClustering(data.points(), 2, 10)   # 2 clusters, 10 rounds
for cluster in clustering.clusters:
    print(len(cluster))
```

The algorithm works as follows:

1. Points start out assigned to clusters in round-robin order.
2. In each round, every cluster's mean is computed.
3. Every point then moves to the nearest mean. Ties go to the lower cluster index.

A `ValueError` is raised in these cases:

* a cluster is left empty during a round,
* the cluster count is less than 1,
* the depth is negative.

`clusters` is a property. It returns a list of `Data` in cluster order.

## Fuzzy clustering

```python
import random
from pointcluster.fuzzy import FuzzyClustering

fcm = FuzzyClustering(data, 2, rng=random.Random(0))
points, memberships, centers = fcm.get()
print(centers)
print(fcm.cost_history)
```

The constructor is `FuzzyClustering(data, cluster_count, fuzzy_factor=2.0, max_iterations=100, epsilon=4.0, rng=None)`.

The algorithm works as follows:

1. Memberships start random and are normalised per point.
2. Centres and memberships are then updated in turn.
3. Iteration stops after `max_iterations`, or once the cost changes by less than `epsilon` between two iterations.

In the result of `get()`, `memberships[i][j]` is the membership degree of point `j` in cluster `i`. The `cost_history` property lists the cost after each iteration. Pass a `random.Random` as `rng` to make runs reproducible.

The constructor raises `ValueError` in these cases:

* the data is empty,
* the cluster count is not between 1 and the number of points,
* the fuzzy factor is not greater than 1.

## Plotting

`pointcluster.plotting` draws on matplotlib axes:

* `plot_clusters(ax, clusters, title)` draws each cluster in its own colour. A single set is drawn in black.
* `plot_fuzzy(ax, points, weights, centers, title)` draws a fuzzy result. Each point takes the colour of a cluster in which its membership is above 0.5. The centres are drawn as black crosses.
* `split_by_membership(points, weights, cluster_count, threshold=0.5)` returns the per-cluster `Data` groups that `plot_fuzzy` draws.

Both plotting functions return the scatter collections they created.

## Command line

```
pointcluster [DC] [DCN] [-o OUTPUT] [--seed SEED]
```

The command reads two data files. If you omit the file arguments, it reads `../Data/DC-Data4.txt` and `../Data/DCN-Data4.txt`.

It then runs these clusterings:

* crisp clustering of DC (2 clusters, 2 rounds),
* crisp clustering of DCN (2 clusters, 5 rounds),
* five fuzzy clusterings with various cluster counts and fuzzy factors.

All results are drawn together with the raw data on a 3×3 grid. The figure is shown in a window, or written to `OUTPUT` when `-o` is given. `--seed` fixes the random start of the fuzzy runs.

If a file cannot be read or parsed, the command prints an error and exits with status 1. `pointcluster.cli.build_figure(dc, dcn, rng=None)` builds the same figure from `Data` objects.