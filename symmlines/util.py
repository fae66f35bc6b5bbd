"""Tolerance-based floating-point comparisons."""

from __future__ import annotations

import math

EPSILON = 1e-9
"""Absolute tolerance used by every comparison in the package."""


def float_cmp_tolerance(a: float, b: float) -> int | None:
    """Compare two floats with tolerance.

    Returns 0 when they are within ``EPSILON`` of each other, -1 when ``a`` is
    smaller, 1 when it is larger, and ``None`` if either value is not finite.
    """
    if not (math.isfinite(a) and math.isfinite(b)):
        return None
    if abs(a - b) < EPSILON:
        return 0
    return -1 if a < b else 1


def floats_equal_toler(a: float, b: float) -> bool:
    """Return True if ``a`` and ``b`` differ by less than ``EPSILON``."""
    return abs(a - b) < EPSILON


def floats_lt_toler(a: float, b: float) -> bool:
    """Return True if ``a`` is smaller than ``b`` by more than ``EPSILON``."""
    return b - a > EPSILON