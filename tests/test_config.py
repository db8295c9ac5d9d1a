import pytest

from splinekit import LocatorOptions, Spline, SplineOptions, get_default_options, set_default_options


@pytest.fixture
def restore_defaults():
    saved = get_default_options()
    yield
    set_default_options(saved)


def test_defaults_match_documented_values():
    options = get_default_options()
    assert options.velocity == 0.01
    assert options.use_const_velocity is True
    assert options.locator.max_distance == 200.0
    assert options.locator.imag_tolerance == 0.05
    assert options.locator.roots.max_iterations == 500


def test_get_default_options_returns_a_copy():
    options = get_default_options()
    options.velocity = 5.0
    options.locator.max_distance = 1.0
    fresh = get_default_options()
    assert fresh.velocity == 0.01
    assert fresh.locator.max_distance == 200.0


def test_set_default_options_applies_to_new_splines(restore_defaults):
    set_default_options(SplineOptions(velocity=0.5, use_const_velocity=True))
    spline = Spline.from_points([(0, 0), (0, 10)])
    assert spline.options.velocity == 0.5
    assert spline.curve[0].t_max == pytest.approx(5.0)


def test_spline_options_are_copied_on_construction():
    options = SplineOptions(use_const_velocity=False, locator=LocatorOptions(max_distance=10.0))
    spline = Spline(options)
    spline.set_use_const_velocity(True)
    assert options.use_const_velocity is False
    assert spline.options.locator.max_distance == 10.0
