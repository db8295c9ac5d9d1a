"""Durand-Kerner (Weierstrass) root finder for real polynomials."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from .model import InvalidPolynomialError, RootSolverOptions

logger = logging.getLogger(__name__)

_SEED = 0.4 + 0.9j


def _initial_estimates(degree: int) -> np.ndarray:
    # powers of a non-real, non-unit seed keep the starting estimates distinct
    return _SEED ** np.arange(degree, dtype=float)


def find_roots(
    coefficients: Sequence[float],
    options: Optional[RootSolverOptions] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(real, imag)`` parts of every root of a polynomial.

    ``coefficients`` are ordered lowest degree first, so ``[c0, c1, c2]`` is
    ``c0 + c1*x + c2*x**2``. All estimates are refined together each iteration;
    iteration stops after ``options.max_iterations`` or once the largest update is
    below ``options.tolerance``. Unconverged estimates are returned as they are.
    """

    options = options or RootSolverOptions()
    coeffs = np.asarray(coefficients, dtype=float)
    degree = coeffs.size - 1
    if degree < 1:
        raise InvalidPolynomialError(f"polynomial must have degree >= 1, got {degree}")
    if coeffs[-1] == 0.0:
        raise InvalidPolynomialError("leading coefficient is zero")

    # np.polyval wants highest degree first
    monic = (coeffs / coeffs[-1])[::-1]
    roots = _initial_estimates(degree)

    converged = False
    iterations = 0
    for iterations in range(1, options.max_iterations + 1):
        diffs = roots[:, None] - roots[None, :]
        np.fill_diagonal(diffs, 1.0)
        with np.errstate(divide="ignore", invalid="ignore"):
            step = np.polyval(monic, roots) / np.prod(diffs, axis=1)
        if not np.all(np.isfinite(step)):
            logger.debug("Durand-Kerner produced a non-finite step at iteration %d", iterations)
            break
        roots = roots - step
        if float(np.max(np.abs(step))) < options.tolerance:
            converged = True
            break

    if not converged:
        logger.debug(
            "Durand-Kerner stopped without converging after %d iterations (degree=%d)",
            iterations,
            degree,
        )
    return roots.real.copy(), roots.imag.copy()


__all__ = ["find_roots"]
