"""Scalar interpolation helpers shared by the wave geometry and the tween."""

from __future__ import annotations


def constrain(amount: float, low: float, high: float) -> float:
    if amount < low:
        return low
    if amount > high:
        return high
    return amount


def saturate(value: float) -> float:
    """Clamp ``value`` to ``[0, 1]``."""
    return constrain(value, 0.0, 1.0)


def lerp(start: float, stop: float, amount: float) -> float:
    return start + (stop - start) * amount


def lerp_inv(a: float, b: float, value: float) -> float:
    """Return ``s`` such that ``lerp(a, b, s) == value``.

    A degenerate interval (``a == b``) yields ``0`` rather than dividing by
    zero.
    """
    if a == b:
        return 0.0
    return (value - a) / (b - a)


def lerp_inv_sat(a: float, b: float, value: float) -> float:
    return saturate(lerp_inv(a, b, value))
