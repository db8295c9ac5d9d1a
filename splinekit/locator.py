"""Closest-approach search between a query point and a solved curve."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

import numpy as np
from numpy.polynomial import polynomial as npoly

from .geometry import Point
from .logging_utils import apply_debug_logging
from .model import AXES, Curve, EmptyCurveError, LocatorOptions, NearestCurve, Pair, Segment
from .roots import find_roots

logger = logging.getLogger(__name__)


def squared_distance_polynomial(segment: Segment, query: Pair) -> np.ndarray:
    """Return ``k0..k6`` with ``|segment(t) - query|**2 == sum(k[n] * t**n)``."""

    k = np.zeros(7)
    for axis in AXES:
        piece = np.array(segment.axis(axis).coefficients, dtype=float)
        piece[0] -= query[axis]
        k += np.convolve(piece, piece)
    return k


def _trim_leading(coeffs: np.ndarray, epsilon: float) -> np.ndarray:
    scale = float(np.max(np.abs(coeffs))) if coeffs.size else 0.0
    end = coeffs.size
    while end > 0 and abs(coeffs[end - 1]) <= epsilon * scale:
        end -= 1
    return coeffs[:end]


def _critical_points(k: np.ndarray, t_max: float, options: LocatorOptions) -> List[float]:
    derivative = _trim_leading(npoly.polyder(k), options.leading_epsilon)
    if derivative.size <= 2:
        # linear segment: dist^2 is quadratic in t
        if derivative.size == 2:
            t = -k[1] / (2.0 * k[2])
            if 0.0 <= t <= t_max:
                return [float(t)]
        return []

    real, imag = find_roots(derivative, options.roots)
    keep = (np.abs(imag) < options.imag_tolerance) & (real >= 0.0) & (real <= t_max)
    return [float(t) for t in real[keep]]


def segment_minimum(
    segment: Segment, query: Pair, options: Optional[LocatorOptions] = None
) -> Tuple[float, float]:
    """Return ``(dist_sq, t)`` of the closest approach of ``segment`` to ``query``.

    Candidates are both ends of the segment and every real critical point of the
    squared distance inside ``[0, t_max]``. The first candidate wins ties.
    """

    options = options or LocatorOptions()
    k = squared_distance_polynomial(segment, query)
    candidates = [0.0, segment.t_max] + _critical_points(k, segment.t_max, options)

    best_sq = math.inf
    best_t = 0.0
    for t in candidates:
        dist_sq = float(npoly.polyval(t, k))
        if dist_sq < best_sq:
            best_sq = dist_sq
            best_t = t
    return max(best_sq, 0.0), best_t


def nearest_curve(curve: Curve, query: Pair, options: Optional[LocatorOptions] = None) -> NearestCurve:
    """Find the segment of ``curve`` closest to ``query``.

    A hit on the first (last) segment that lies within ``edge_margin`` of being as
    close to the first (last) knot is reported as ``before-start`` (``after-end``).
    Anything farther than ``max_distance`` is ``none``.
    """

    if len(curve) == 0:
        raise EmptyCurveError("nearest_curve needs a curve with at least one segment")
    options = options or LocatorOptions()

    min_sq = math.inf
    min_index = -1
    min_t = 0.0
    for index, segment in enumerate(curve):
        dist_sq, t = segment_minimum(segment, query, options)
        if dist_sq < min_sq:
            min_sq = dist_sq
            min_index = index
            min_t = t

    if not min_sq < options.max_distance ** 2:
        logger.debug("Query %s is %.3g away from the curve; no match", query, math.sqrt(min_sq))
        return NearestCurve.no_match()

    distance = math.sqrt(min_sq)
    target = Point(*query)
    last_index = len(curve) - 1
    if min_index == 0 and curve.knots[0].dist(target) <= options.edge_margin + distance:
        return NearestCurve.before_start(distance)
    if min_index == last_index and curve.knots[-1].dist(target) <= options.edge_margin + distance:
        return NearestCurve.after_end(distance)
    return NearestCurve.at_segment(min_index, distance, min_t)


apply_debug_logging(globals(), logger=logger)
