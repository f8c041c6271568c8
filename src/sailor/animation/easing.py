"""Easing curves shared by every tweened value in the scene."""

from __future__ import annotations

from typing import Callable

Easing = Callable[[float], float]

_NEWTON_ITERATIONS = 8
_BISECTION_ITERATIONS = 24
_EPSILON = 1e-6


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def lerp(start: float, end: float, fraction: float) -> float:
    return start + (end - start) * fraction


def linear(t: float) -> float:
    return clamp(t, 0.0, 1.0)


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Easing:
    """Return an easing for the CSS-style cubic Bézier ``(x1, y1, x2, y2)``.

    The curve runs from (0, 0) to (1, 1); the returned function solves
    ``x(s) = t`` for the curve parameter ``s`` and returns ``y(s)``.
    """

    def _axis(p1: float, p2: float, s: float) -> float:
        inv = 1.0 - s
        return 3.0 * inv * inv * s * p1 + 3.0 * inv * s * s * p2 + s * s * s

    def _axis_slope(p1: float, p2: float, s: float) -> float:
        inv = 1.0 - s
        return 3.0 * inv * inv * p1 + 6.0 * inv * s * (p2 - p1) + 3.0 * s * s * (1.0 - p2)

    def _solve(t: float) -> float:
        s = t
        for _ in range(_NEWTON_ITERATIONS):
            error = _axis(x1, x2, s) - t
            if abs(error) < _EPSILON:
                return s
            slope = _axis_slope(x1, x2, s)
            if abs(slope) < _EPSILON:
                break
            s -= error / slope

        low, high = 0.0, 1.0
        s = t
        for _ in range(_BISECTION_ITERATIONS):
            x = _axis(x1, x2, s)
            if abs(x - t) < _EPSILON:
                break
            if x < t:
                low = s
            else:
                high = s
            s = (low + high) / 2.0
        return s

    def easing(t: float) -> float:
        t = clamp(t, 0.0, 1.0)
        if t in (0.0, 1.0):
            return t
        return _axis(y1, y2, _solve(t))

    return easing


fast_out_slow_in: Easing = cubic_bezier(0.4, 0.0, 0.2, 1.0)
