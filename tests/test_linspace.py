import pytest

from pointcluster.linspace import Linspace
from pointcluster.point import Point


def test_lengths_with_and_without_last():
    first, second = Point(0.0, 0.0), Point(5.0, 5.0)
    assert len(Linspace(first, second, 4)) == 6
    assert len(Linspace(first, second, 4, include_last=False)) == 5


def test_endpoints():
    first, second = Point(-1.0, 2.0), Point(3.0, -6.0)
    line = Linspace(first, second, 7)
    assert line[0] == first
    assert line[len(line) - 1] == second


def test_without_last_excludes_second():
    first, second = Point(0.0, 0.0), Point(1.0, 1.0)
    line = Linspace(first, second, 3, include_last=False)
    assert second not in line.points()
    assert line.include_last is False


def test_include_last_flag_default():
    assert Linspace(Point(0.0, 0.0), Point(1.0, 0.0), 2).include_last is True


def test_even_spacing():
    line = Linspace(Point(0.0, 0.0), Point(3.0, 4.0), 9)
    points = line.points()
    gaps = [a.distance(b) for a, b in zip(points, points[1:])]
    for gap in gaps:
        assert gap == pytest.approx(gaps[0])
    assert sum(gaps) == pytest.approx(Point(0.0, 0.0).distance(Point(3.0, 4.0)))


def test_worked_example():
    line = Linspace(Point(0.0, 0.0), Point(4.0, 0.0), 3)
    assert line.xs() == pytest.approx([0.0, 1.0, 2.0, 3.0, 4.0])
    assert line.ys() == [0.0] * 5


def test_zero_points_between():
    first, second = Point(1.0, 1.0), Point(2.0, 2.0)
    assert Linspace(first, second, 0).points() == [first, second]