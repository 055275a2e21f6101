import math
import random

import pytest

from pointcluster.point import Point


def test_default_is_origin():
    p = Point()
    assert p.x == 0.0
    assert p.y == 0.0


def test_parametric():
    p = Point(3.5, -2.5)
    assert p.x == 3.5
    assert p.y == -2.5


def test_copy_equal():
    p1 = Point(1.0, 2.0)
    p2 = Point(p1.x, p1.y)
    assert p2 == p1
    assert (p2.x, p2.y) == (1.0, 2.0)


def test_multiplication_by_scalar():
    result = Point(2.0, -3.0) * 2.0
    assert result == Point(4.0, -6.0)


def test_addition():
    assert Point(1.0, 2.0) + Point(3.0, 4.0) == Point(4.0, 6.0)


def test_subtraction():
    assert Point(5.0, 7.0) - Point(2.0, 3.0) == Point(3.0, 4.0)


def test_addition_assignment():
    p1 = Point(2.0, 3.0)
    p1 += Point(1.0, 1.0)
    assert p1 == Point(3.0, 4.0)


@pytest.mark.parametrize(
    "point, divisor, expected",
    [
        (Point(10.0, 20.0), 1.0, Point(10.0, 20.0)),
        (Point(-10.0, -20.0), 1.0, Point(-10.0, -20.0)),
        (Point(10.0, 20.0), -1.0, Point(-10.0, -20.0)),
        (Point(-10.0, -20.0), -1.0, Point(10.0, 20.0)),
        (Point(10.0, 20.0), 0.5, Point(20.0, 40.0)),
        (Point(10.0, 20.0), 2.0, Point(5.0, 10.0)),
        (Point(-10.0, -20.0), 2.0, Point(-5.0, -10.0)),
        (Point(1000000.0, 2000000.0), 1000.0, Point(1000.0, 2000.0)),
        (Point(1e-6, 2e-6), 1e-3, Point(0.001, 0.002)),
        (Point(-1e6, -2e6), 1e3, Point(-1000.0, -2000.0)),
        (Point(123.456, 789.123), 3.0, Point(41.152, 263.041)),
        (Point(-987.654, -321.987), 7.0, Point(-141.093, -45.998)),
        (Point(5.0, 10.0), 2.5, Point(2.0, 4.0)),
        (Point(-5.0, -10.0), 2.5, Point(-2.0, -4.0)),
        (Point(0.0, 0.0), 1.0, Point(0.0, 0.0)),
        (Point(1.0, 1.0), 0.1, Point(10.0, 10.0)),
        (Point(-1.0, -1.0), 0.1, Point(-10.0, -10.0)),
        (Point(42.0, 84.0), 6.0, Point(7.0, 14.0)),
        (Point(-42.0, -84.0), 6.0, Point(-7.0, -14.0)),
        (Point(99.99, 88.88), 0.01, Point(9999.0, 8888.0)),
    ],
)
def test_division_by_scalar(point, divisor, expected):
    result = point / divisor
    assert result.x == pytest.approx(expected.x, abs=1e-3)
    assert result.y == pytest.approx(expected.y, abs=1e-3)


def test_division_by_zero_raises():
    with pytest.raises(ValueError):
        Point(1.0, 1.0) / 0


@pytest.mark.parametrize(
    "p1, p2, expected",
    [
        (Point(0.0, 0.0), Point(0.0, 0.0), 0.0),
        (Point(1.0, 1.0), Point(2.0, 2.0), math.sqrt(2.0)),
        (Point(-1.0, -1.0), Point(1.0, 1.0), math.sqrt(8.0)),
        (Point(3.0, 4.0), Point(0.0, 0.0), 5.0),
        (Point(-3.0, -4.0), Point(0.0, 0.0), 5.0),
        (Point(5.0, 5.0), Point(10.0, 10.0), math.sqrt(50.0)),
        (Point(2.5, 2.5), Point(5.0, 5.0), math.sqrt(12.5)),
        (Point(-2.5, -2.5), Point(5.0, 5.0), math.sqrt(112.5)),
        (Point(100.0, 200.0), Point(300.0, 400.0), math.sqrt(80000.0)),
        (Point(-100.0, -200.0), Point(300.0, 400.0), math.sqrt(520000.0)),
        (Point(6.0, 8.0), Point(0.0, 0.0), 10.0),
        (Point(7.0, 24.0), Point(0.0, 0.0), 25.0),
        (Point(1.5, 1.5), Point(3.0, 3.0), math.sqrt(4.5)),
        (Point(-1.5, -1.5), Point(3.0, 3.0), math.sqrt(40.5)),
        (Point(9.0, 12.0), Point(0.0, 0.0), 15.0),
        (Point(15.0, 20.0), Point(0.0, 0.0), 25.0),
        (Point(-10.0, -10.0), Point(10.0, 10.0), math.sqrt(800.0)),
        (Point(-20.0, -30.0), Point(40.0, 50.0), math.sqrt(10000.0)),
        (Point(50.0, 60.0), Point(0.0, 0.0), math.sqrt(6100.0)),
        (Point(-50.0, -60.0), Point(50.0, 60.0), math.sqrt(24400.0)),
    ],
)
def test_distance(p1, p2, expected):
    assert p1.distance(p2) == pytest.approx(expected, abs=1e-3)


def test_distance_is_symmetric():
    a, b = Point(-2.5, 7.0), Point(4.0, -1.0)
    assert a.distance(b) == b.distance(a)


def test_random_within_bounds():
    rng = random.Random(42)
    for _ in range(100):
        p = Point.random(-1.0, 2.0, 5.0, 6.0, rng)
        assert -1.0 <= p.x <= 2.0
        assert 5.0 <= p.y <= 6.0


def test_random_reproducible_with_seed():
    a = Point.random(0.0, 1.0, 0.0, 1.0, random.Random(7))
    b = Point.random(0.0, 1.0, 0.0, 1.0, random.Random(7))
    assert a == b


def test_str_contains_coordinates():
    text = str(Point(1.5, -2.0))
    assert "1.5" in text
    assert "-2.0" in text