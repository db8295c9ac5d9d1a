import math

import numpy as np
from numpy.polynomial import polynomial as npoly
import pytest

from splinekit import (
    Curve,
    EmptyCurveError,
    LocatorOptions,
    Spline,
    SplineOptions,
    nearest_curve,
    segment_minimum,
    squared_distance_polynomial,
)


def _curve(points, const_velocity=False):
    options = SplineOptions(use_const_velocity=const_velocity)
    return Spline.from_points(points, options).curve


def test_squared_distance_polynomial_matches_direct_evaluation():
    curve = _curve([(0, 0), (40, 90), (120, 30), (160, 160)])
    query = (70.0, 20.0)
    for segment in curve:
        k = squared_distance_polynomial(segment, query)
        assert k.shape == (7,)
        for t in np.linspace(0.0, segment.t_max, 5):
            x, y = segment.evaluate(t)
            direct = (x - query[0]) ** 2 + (y - query[1]) ** 2
            assert npoly.polyval(t, k) == pytest.approx(direct, rel=1e-9, abs=1e-6)


def test_collinear_midpoint_query_hits_first_segment():
    curve = _curve([(0, 0), (10, 0), (20, 0)])
    result = nearest_curve(curve, (5.0, 0.0))

    assert result.kind == "segment"
    assert result.index == 0
    assert result.distance == pytest.approx(0.0, abs=1e-9)
    assert result.t == pytest.approx(0.5)


def test_linear_segment_uses_closed_form_minimum():
    segment = _curve([(0, 0), (10, 0)])[0]
    dist_sq, t = segment_minimum(segment, (3.0, 4.0))
    assert t == pytest.approx(0.3)
    assert dist_sq == pytest.approx(16.0)


@pytest.mark.parametrize("const_velocity", [False, True])
def test_point_on_curved_segment_is_found(const_velocity):
    curve = _curve([(0, 0), (100, 100), (200, 0), (260, 80)], const_velocity)
    segment = curve[1]
    t_target = 0.4 * segment.t_max
    query = segment.evaluate(t_target)

    result = nearest_curve(curve, query)

    assert result.kind == "segment"
    assert result.index == 1
    assert result.distance == pytest.approx(0.0, abs=1e-4)
    assert result.t == pytest.approx(t_target, rel=1e-4)


def test_curved_segment_minimum_beats_endpoints():
    curve = _curve([(0, 0), (100, 100), (200, 0)])
    apex = curve[0].evaluate(0.5)
    query = (apex[0], apex[1] + 10.0)
    dist_sq, t = segment_minimum(curve[0], query)
    assert 0.0 < t < 1.0
    assert math.sqrt(dist_sq) <= 10.0 + 1e-9


def test_query_before_first_knot_is_reported_off_the_front():
    curve = _curve([(0, 0), (10, 0), (20, 0)])
    result = nearest_curve(curve, (-5.0, 0.0))
    assert result.kind == "before-start"
    assert result.index is None
    assert result.distance == pytest.approx(5.0)


def test_query_after_last_knot_is_reported_off_the_back():
    curve = _curve([(0, 0), (10, 0), (20, 0)])
    result = nearest_curve(curve, (26.0, 1.0))
    assert result.kind == "after-end"
    assert result.distance == pytest.approx(math.hypot(6.0, 1.0))


def test_single_segment_checks_both_ends():
    curve = _curve([(0, 0), (50, 0)])
    assert nearest_curve(curve, (-3.0, 0.0)).kind == "before-start"
    assert nearest_curve(curve, (53.0, 0.0)).kind == "after-end"
    assert nearest_curve(curve, (25.0, 2.0)).kind == "segment"


def test_far_query_reports_no_match():
    curve = _curve([(0, 0), (10, 0), (20, 0)])
    result = nearest_curve(curve, (500.0, 500.0))
    assert result.kind == "none"
    assert result.index is None
    assert math.isinf(result.distance)


def test_max_distance_is_configurable():
    curve = _curve([(0, 0), (10, 0), (20, 0), (30, 0)])
    assert nearest_curve(curve, (15.0, 50.0), LocatorOptions(max_distance=40.0)).kind == "none"
    result = nearest_curve(curve, (15.0, 50.0), LocatorOptions(max_distance=60.0))
    assert result.kind == "segment"
    assert result.index == 1


def test_equal_distances_prefer_lower_segment_index():
    curve = _curve([(0, 0), (10, 0), (20, 0), (30, 0)])
    result = nearest_curve(curve, (10.0, 5.0))
    assert result.kind == "segment"
    assert result.index == 0
    assert result.distance == pytest.approx(5.0)


def test_empty_curve_is_rejected():
    with pytest.raises(EmptyCurveError):
        nearest_curve(Curve(), (0.0, 0.0))
