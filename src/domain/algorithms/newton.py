from __future__ import annotations

import math
from typing import Callable

MAX_ITERATIONS = 15
STEP_SIZE = 0.01
CONVERGENCE_MARGIN = 0.001

# Smallest |f''| accepted as a Newton divisor.
_MIN_CURVATURE = 1e-12

ScalarFunction = Callable[[float], float]


def first_derivative(f: ScalarFunction, x: float, step: float) -> float:
    """Central difference ``(f(x+h) - f(x-h)) / 2h``, error O(h^2)."""

    return (f(x + step) - f(x - step)) / (2.0 * step)


def second_derivative(f: ScalarFunction, x: float, step: float) -> float:
    """Central difference of the first-derivative estimator at ``x +/- h/2``.

    With half steps on the inner estimator this collapses to the classic
    three-point stencil ``(f(x+h) - 2 f(x) + f(x-h)) / h^2`` whose local
    truncation error is ``h^2 / 12 * f''''(x)``.
    """

    half = step / 2.0
    return (
        first_derivative(f, x + half, half) - first_derivative(f, x - half, half)
    ) / step


def tunable_minimize(
    f: ScalarFunction,
    initial_guess: float,
    *,
    max_iterations: int = MAX_ITERATIONS,
    step_size: float = STEP_SIZE,
    convergence_margin: float = CONVERGENCE_MARGIN,
) -> float | None:
    """Refine ``initial_guess`` towards a critical point of ``f`` with Newton's method.

    Returns the first iterate that moves less than ``convergence_margin`` from
    its predecessor, or ``None`` when the iteration budget runs out, the second
    derivative vanishes, or ``f`` fails to evaluate. There is no global optimum
    guarantee; callers must keep a fallback for ``None``.
    """

    cur = float(initial_guess)
    for _ in range(max_iterations):
        try:
            slope = first_derivative(f, cur, step_size)
            curvature = second_derivative(f, cur, step_size)
            if abs(curvature) < _MIN_CURVATURE:
                return None
            nxt = cur - slope / curvature
        except (ArithmeticError, ValueError, RuntimeError):
            return None

        if not math.isfinite(nxt):
            return None
        if abs(nxt - cur) < convergence_margin:
            return nxt
        cur = nxt
    return None


def minimize(f: ScalarFunction, initial_guess: float) -> float | None:
    """Newton minimisation with the default tunables (15 / 0.01 / 0.001)."""

    return tunable_minimize(f, initial_guess)
