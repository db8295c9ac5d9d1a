"""Core data structures shared by the spline solvers and the locator."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Literal, Optional, Tuple

import numpy as np
from numpy.polynomial import polynomial as npoly

from .geometry import Point

Pair = Tuple[float, float]
MatchKind = Literal["none", "before-start", "after-end", "segment"]

AXES = (0, 1)
POWERS = (0, 1, 2, 3)


class SplineError(Exception):
    """Base class for errors raised by splinekit."""


class InvalidPolynomialError(SplineError, ValueError):
    """Raised when the root solver is handed a polynomial it cannot iterate on."""


class EmptyCurveError(SplineError, ValueError):
    """Raised when a curve query needs at least one segment and the curve has none."""


@dataclass
class RootSolverOptions:
    """Durand-Kerner iteration limits."""

    max_iterations: int = 500
    tolerance: float = 1e-12


@dataclass
class LocatorOptions:
    """Nearest-curve search options."""

    imag_tolerance: float = 0.05
    max_distance: float = 200.0
    edge_margin: float = 1.0
    leading_epsilon: float = 1e-12
    roots: RootSolverOptions = field(default_factory=RootSolverOptions)


@dataclass
class SplineOptions:
    """Options owned by a :class:`~splinekit.spline.Spline`.

    ``velocity`` converts knot distances (pixels) into parameter span when
    ``use_const_velocity`` is set. ``min_step`` is the smallest span a segment may
    have; coincident knots are clamped to it.
    """

    velocity: float = 0.01
    use_const_velocity: bool = True
    min_step: float = 1e-9
    locator: LocatorOptions = field(default_factory=LocatorOptions)


@dataclass(frozen=True)
class Segment1D:
    """One cubic piece ``a0 + a1*t + a2*t**2 + a3*t**3`` on ``[0, t_max]``."""

    a0: float
    a1: float
    a2: float
    a3: float
    t_max: float = 1.0

    @property
    def coefficients(self) -> Tuple[float, float, float, float]:
        return (self.a0, self.a1, self.a2, self.a3)

    def coefficient(self, power: int) -> float:
        return self.coefficients[power]

    def evaluate(self, t: float) -> float:
        return self.a0 + t * (self.a1 + t * (self.a2 + t * self.a3))


@dataclass(frozen=True)
class Segment:
    """Planar cubic piece; each coefficient holds one value per axis."""

    a0: Pair
    a1: Pair
    a2: Pair
    a3: Pair
    t_max: float = 1.0

    @classmethod
    def merge(cls, first: Segment1D, second: Segment1D) -> "Segment":
        assert first.t_max == second.t_max, "axes disagree on segment span"
        a0, a1, a2, a3 = (
            (first.coefficient(k), second.coefficient(k)) for k in POWERS
        )
        return cls(a0=a0, a1=a1, a2=a2, a3=a3, t_max=first.t_max)

    def coefficient(self, power: int) -> Pair:
        return (self.a0, self.a1, self.a2, self.a3)[power]

    def axis(self, axis: int) -> Segment1D:
        a0, a1, a2, a3 = (self.coefficient(k)[axis] for k in POWERS)
        return Segment1D(a0, a1, a2, a3, self.t_max)

    def evaluate(self, t: float) -> Pair:
        return (self.axis(0).evaluate(t), self.axis(1).evaluate(t))

    @property
    def start(self) -> Pair:
        return self.a0

    @property
    def end(self) -> Pair:
        return self.evaluate(self.t_max)


@dataclass(frozen=True)
class Curve:
    """Ordered segments of a solved spline together with the knots they join."""

    segments: Tuple[Segment, ...] = ()
    knots: Tuple[Point, ...] = ()

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __getitem__(self, index: int) -> Segment:
        return self.segments[index]

    def evaluate(self, index: int, t: float) -> Pair:
        return self.segments[index].evaluate(t)

    def sample(self, samples_per_segment: int = 32) -> np.ndarray:
        """Return an ``(N, 2)`` array of points walking the whole curve.

        Each segment contributes ``samples_per_segment`` points starting at its
        first knot; the final knot closes the polyline.
        """

        if samples_per_segment < 1:
            raise ValueError("samples_per_segment must be positive")
        if not self.segments:
            return np.array([k.as_tuple() for k in self.knots], dtype=float).reshape(-1, 2)

        chunks = []
        for segment in self.segments:
            t = np.linspace(0.0, segment.t_max, samples_per_segment, endpoint=False)
            columns = [npoly.polyval(t, segment.axis(d).coefficients) for d in AXES]
            chunks.append(np.column_stack(columns))
        chunks.append(np.array([self.segments[-1].end], dtype=float))
        return np.vstack(chunks)


@dataclass(frozen=True)
class NearestCurve:
    """Outcome of a nearest-curve query.

    ``index`` is only set for ``kind == "segment"``. ``t`` is the segment parameter
    of the closest approach when a segment matched.
    """

    kind: MatchKind
    distance: float
    index: Optional[int] = None
    t: Optional[float] = None

    @classmethod
    def no_match(cls) -> "NearestCurve":
        return cls(kind="none", distance=math.inf)

    @classmethod
    def before_start(cls, distance: float) -> "NearestCurve":
        return cls(kind="before-start", distance=distance)

    @classmethod
    def after_end(cls, distance: float) -> "NearestCurve":
        return cls(kind="after-end", distance=distance)

    @classmethod
    def at_segment(cls, index: int, distance: float, t: float) -> "NearestCurve":
        return cls(kind="segment", distance=distance, index=index, t=t)


__all__ = [
    "AXES",
    "POWERS",
    "Curve",
    "EmptyCurveError",
    "InvalidPolynomialError",
    "LocatorOptions",
    "MatchKind",
    "NearestCurve",
    "Pair",
    "RootSolverOptions",
    "Segment",
    "Segment1D",
    "SplineError",
    "SplineOptions",
]
