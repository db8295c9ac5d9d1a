from .geometry import Point
from .model import (
    Curve,
    EmptyCurveError,
    InvalidPolynomialError,
    LocatorOptions,
    MatchKind,
    NearestCurve,
    RootSolverOptions,
    Segment,
    Segment1D,
    SplineError,
    SplineOptions,
)
from .config import get_default_options, set_default_options
from .roots import find_roots
from .tridiagonal import solve_const_velocity, solve_uniform, step_sizes
from .locator import nearest_curve, segment_minimum, squared_distance_polynomial
from .spline import Spline

__all__ = [
    'Point',
    'Curve',
    'Segment',
    'Segment1D',
    'NearestCurve',
    'MatchKind',
    'SplineError',
    'InvalidPolynomialError',
    'EmptyCurveError',
    'RootSolverOptions',
    'LocatorOptions',
    'SplineOptions',
    'get_default_options',
    'set_default_options',
    'find_roots',
    'solve_uniform',
    'solve_const_velocity',
    'step_sizes',
    'squared_distance_polynomial',
    'segment_minimum',
    'nearest_curve',
    'Spline',
]
