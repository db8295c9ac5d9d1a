import math

import pytest

from splinekit import Point
from splinekit.geometry import floored


def test_point_equality_is_exact():
    assert Point(3, 4) == Point(3, 4)
    assert Point(3, 4) == Point(3.0, 4.0)
    assert Point(3, 4) != Point(3, 4.000001)


def test_point_distance_is_euclidean():
    assert Point(0, 0).dist(Point(3, 4)) == pytest.approx(5.0)
    assert Point(1.5, -2).dist(Point(1.5, -2)) == 0.0
    assert Point(-1, -1).dist(Point(2, 3)) == pytest.approx(math.hypot(3, 4))


def test_point_axis_access():
    point = Point(7, -2)
    assert point[0] == 7
    assert point[1] == -2
    assert point.as_tuple() == (7, -2)
    with pytest.raises(IndexError):
        point[2]


def test_floored_rounds_toward_negative_infinity():
    assert floored(3.9, -0.5) == Point(3, -1)
    assert isinstance(floored(1.2, 2.8).i, int)
