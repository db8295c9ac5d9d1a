"""Natural cubic spline solvers for one coordinate axis.

Both solvers take the knot values ``a_0..a_n`` of a single axis and return ``n``
cubic pieces. The uniform solver uses unit spacing; the constant-velocity solver
uses one step size per segment, normally the knot distance times a velocity
constant, and solves its tridiagonal system with the Thomas algorithm.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from .geometry import Point
from .logging_utils import apply_debug_logging
from .model import Segment1D

logger = logging.getLogger(__name__)


def _package(a: np.ndarray, b: np.ndarray, c: np.ndarray, d: np.ndarray, spans: np.ndarray) -> List[Segment1D]:
    return [
        Segment1D(float(a[k]), float(b[k]), float(c[k]), float(d[k]), float(spans[k]))
        for k in range(len(spans))
    ]


def _as_values(values: Sequence[float]) -> np.ndarray:
    a = np.asarray(values, dtype=float)
    if a.ndim != 1 or a.size == 0:
        raise ValueError("spline solver needs a non-empty 1-D sequence of knot values")
    return a


def solve_uniform(values: Sequence[float]) -> List[Segment1D]:
    """Solve the natural cubic spline through ``values`` with unit spacing."""

    a = _as_values(values)
    n = a.size - 1
    if n == 0:
        return []

    r = np.zeros(n)
    r[0] = 3.0 * (a[1] - a[0])
    r[1:] = 3.0 * (a[2:] - a[1:-1]) - 3.0 * (a[1:-1] - a[:-2])

    l = np.ones(n + 1)
    m = np.zeros(n + 1)
    z = np.zeros(n + 1)
    for i in range(1, n):
        l[i] = 4.0 - m[i - 1]
        m[i] = 1.0 / l[i]
        z[i] = (r[i] - z[i - 1]) / l[i]

    c = np.zeros(n + 1)
    b = np.zeros(n)
    d = np.zeros(n)
    for j in range(n - 1, -1, -1):
        c[j] = z[j] - m[j] * c[j + 1]
        b[j] = (a[j + 1] - a[j]) - (c[j + 1] + 2.0 * c[j]) / 3.0
        d[j] = (c[j + 1] - c[j]) / 3.0

    return _package(a, b, c, d, np.ones(n))


def solve_const_velocity(values: Sequence[float], steps: Sequence[float]) -> List[Segment1D]:
    """Solve the natural cubic spline through ``values`` with per-segment ``steps``.

    Segment ``k`` spans ``t`` in ``[0, steps[k]]``. Interior rows of the system are
    ``h[i-1]*c[i-1] + 2*(h[i-1] + h[i])*c[i] + h[i]*c[i+1] = r[i]`` with
    ``c[0] = c[n] = 0``.
    """

    a = _as_values(values)
    n = a.size - 1
    h = np.asarray(steps, dtype=float)
    if h.shape != (n,):
        raise ValueError(f"expected {n} step sizes for {n + 1} knots, got {h.size}")
    if n == 0:
        return []
    if np.any(h <= 0.0):
        raise ValueError("step sizes must be positive")

    slopes = (a[1:] - a[:-1]) / h
    r = np.zeros(n)
    r[0] = 3.0 * slopes[0]
    r[1:] = 3.0 * slopes[1:] - 3.0 * slopes[:-1]

    # Thomas forward sweep; cp[0] = dp[0] = 0 pins the natural boundary
    cp = np.zeros(n + 1)
    dp = np.zeros(n + 1)
    for i in range(1, n):
        denom = 2.0 * (h[i - 1] + h[i]) - h[i - 1] * cp[i - 1]
        cp[i] = h[i] / denom
        dp[i] = (r[i] - h[i - 1] * dp[i - 1]) / denom

    c = np.zeros(n + 1)
    b = np.zeros(n)
    d = np.zeros(n)
    for j in range(n - 1, -1, -1):
        c[j] = dp[j] - cp[j] * c[j + 1]
        b[j] = slopes[j] - h[j] * (c[j + 1] + 2.0 * c[j]) / 3.0
        d[j] = (c[j + 1] - c[j]) / (3.0 * h[j])

    return _package(a, b, c, d, h)


def step_sizes(points: Sequence[Point], velocity: float, min_step: float) -> np.ndarray:
    """Return the parameter span of each segment between consecutive ``points``.

    Spans are the knot distances scaled by ``velocity``. Spans below ``min_step``
    (coincident knots) are raised to ``min_step``.
    """

    if velocity <= 0.0:
        raise ValueError("velocity must be positive")
    if min_step <= 0.0:
        raise ValueError("min_step must be positive")
    if len(points) < 2:
        return np.zeros(0)

    coords = np.array([p.as_tuple() for p in points], dtype=float)
    spans = np.hypot(*np.diff(coords, axis=0).T) * velocity
    short = spans < min_step
    if np.any(short):
        logger.warning(
            "Clamped %d degenerate segment span(s) to %g at indices %s",
            int(np.count_nonzero(short)),
            min_step,
            np.flatnonzero(short).tolist(),
        )
        spans[short] = min_step
    return spans


apply_debug_logging(globals(), logger=logger)
