"""Editable spline: owns the control points and the cached solved curve."""

from __future__ import annotations

import copy
import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .config import get_default_options
from .geometry import Point, floored
from .locator import nearest_curve
from .model import AXES, Curve, NearestCurve, Segment, SplineOptions
from .tridiagonal import solve_const_velocity, solve_uniform, step_sizes

logger = logging.getLogger(__name__)


class Spline:
    """Ordered control points plus the interpolating cubic spline through them.

    Every structural mutation re-solves the curve before returning, so
    :attr:`curve` is always current. Coordinates are floored to integers when a
    point is added, inserted or moved. Instances are not thread-safe.
    """

    def __init__(self, options: Optional[SplineOptions] = None):
        self._options = copy.deepcopy(options) if options is not None else get_default_options()
        self._points: List[Point] = []
        self._curve = Curve()

    @classmethod
    def from_points(
        cls, points: Iterable[Tuple[float, float]], options: Optional[SplineOptions] = None
    ) -> "Spline":
        spline = cls(options)
        spline._points = [floored(i, j) for i, j in points]
        spline.recompute()
        return spline

    # ---- queries ---------------------------------------------------------

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(self._points)

    @property
    def curve(self) -> Curve:
        return self._curve

    @property
    def options(self) -> SplineOptions:
        return self._options

    @property
    def use_const_velocity(self) -> bool:
        return self._options.use_const_velocity

    def __len__(self) -> int:
        return len(self._points)

    def as_array(self) -> np.ndarray:
        return np.array([p.as_tuple() for p in self._points], dtype=float).reshape(-1, 2)

    def nearest_point_index(self, i: float, j: float, max_dist: float) -> Optional[int]:
        target = Point(i, j)
        best_index: Optional[int] = None
        best_dist = float("inf")
        for index, point in enumerate(self._points):
            dist = target.dist(point)
            if dist <= max_dist and dist < best_dist:
                best_index = index
                best_dist = dist
        return best_index

    def nearest_point(self, i: float, j: float, max_dist: float) -> Optional[Point]:
        """Return the closest point within ``max_dist`` of ``(i, j)``, or ``None``.

        On exact ties the earliest point in the sequence wins.
        """

        index = self.nearest_point_index(i, j, max_dist)
        return None if index is None else self._points[index]

    def nearest_curve(self, i: float, j: float) -> NearestCurve:
        return nearest_curve(self._curve, (i, j), self._options.locator)

    # ---- mutations -------------------------------------------------------

    def set_use_const_velocity(self, enabled: bool) -> None:
        """Select the solver for the next recompute; the cached curve is left alone."""

        self._options.use_const_velocity = bool(enabled)

    def add_point(self, i: float, j: float) -> None:
        self._points.append(floored(i, j))
        logger.debug("Appended point %s (count=%d)", self._points[-1], len(self._points))
        self.recompute()

    def remove_point_at(self, i: float, j: float) -> None:
        self.remove_point(Point(i, j))

    def remove_point(self, point: Point) -> None:
        """Remove the first point equal to ``point``; missing points are ignored."""

        try:
            index = self._points.index(point)
        except ValueError:
            logger.debug("No point equal to %s to remove", point)
        else:
            del self._points[index]
            logger.debug("Removed point %s at index %d", point, index)
        self.recompute()

    def remove_last_point(self) -> None:
        if self._points:
            self._points.pop()
        self.recompute()

    def clear(self) -> None:
        self._points.clear()
        self.recompute()

    def set_point_coordinates(self, index: int, i: float, j: float) -> None:
        """Move the point at ``index`` to ``(i, j)`` and re-solve."""

        self._points[index] = floored(i, j)
        self.recompute()

    def insert_point(self, i: float, j: float) -> int:
        """Insert ``(i, j)`` where it best fits the current curve.

        A point near the curve lands between the endpoints of the closest segment;
        one beyond the first knot is prepended; one beyond the last knot, or too far
        from the curve, is appended. Returns the index of the new point.
        """

        point = floored(i, j)
        if len(self._points) < 2:
            # no segment to measure against
            index = len(self._points)
        else:
            match = self.nearest_curve(i, j)
            if match.kind == "before-start":
                index = 0
            elif match.kind == "segment":
                assert match.index is not None
                index = match.index + 1
            else:
                index = len(self._points)
            logger.debug("Insert %s matched %s -> index %d", point, match.kind, index)

        self._points.insert(index, point)
        self.recompute()
        return index

    def recompute(self) -> Curve:
        """Re-solve both axes with the selected solver and cache the merged curve."""

        n_segments = max(len(self._points) - 1, 0)
        if n_segments == 0:
            self._curve = Curve(knots=tuple(self._points))
            return self._curve

        per_axis = []
        if self._options.use_const_velocity:
            steps = step_sizes(self._points, self._options.velocity, self._options.min_step)
            for axis in AXES:
                per_axis.append(solve_const_velocity([p[axis] for p in self._points], steps))
        else:
            for axis in AXES:
                per_axis.append(solve_uniform([p[axis] for p in self._points]))

        segments = tuple(Segment.merge(first, second) for first, second in zip(*per_axis))
        assert len(segments) == n_segments
        self._curve = Curve(segments=segments, knots=tuple(self._points))
        logger.debug(
            "Recomputed %d segment(s) (const_velocity=%s)", n_segments, self._options.use_const_velocity
        )
        return self._curve
