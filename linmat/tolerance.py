"""
Fuzzy comparison policy for matrix elements.

The default policy is exact equality; tolerant modes are opt-in and used by
``Matrix.compare`` and the symmetry/singularity checks.
"""

from __future__ import annotations

import math


class ToleranceMode:
    """Modes for fuzzy comparison."""

    EXACT = "exact"  # a == b
    RELATIVE = "relative"  # |a - b| / max(|a|, |b|) <= tol
    ABSOLUTE = "absolute"  # |a - b| <= tol
    SIGFIGS = "sigfigs"  # Significant figures

    ALL = (EXACT, RELATIVE, ABSOLUTE, SIGFIGS)


def fuzzy_compare(a: float, b: float, tolerance: float, mode: str) -> bool:
    """
    Compare two floats with tolerance.

    Args:
        a: First value
        b: Second value
        tolerance: Tolerance value (ignored in exact mode)
        mode: Comparison mode (exact, relative, absolute, sigfigs)

    Returns:
        True if values are equal within tolerance. NaN is never equal.

    Raises:
        ValueError: If the mode is unknown
    """
    if mode not in ToleranceMode.ALL:
        raise ValueError(f"Unknown tolerance mode: {mode}")

    if a == b:
        return True

    if mode == ToleranceMode.EXACT or math.isnan(a) or math.isnan(b):
        return False

    if mode == ToleranceMode.ABSOLUTE:
        return bool(abs(a - b) <= tolerance)

    if mode == ToleranceMode.RELATIVE:
        max_abs = max(abs(a), abs(b))
        if math.isinf(max_abs):
            return False
        return bool(abs(a - b) / max_abs <= tolerance)

    # Significant figures mode
    diff = abs(a - b)
    avg = (abs(a) + abs(b)) / 2
    if math.isinf(avg):
        return False
    return bool(math.floor(math.log10(diff / avg)) < -tolerance)


def is_close(a: float, b: float, tolerance: float = 0.0) -> bool:
    """Absolute comparison, exact when ``tolerance`` is zero."""
    if tolerance == 0.0:
        return fuzzy_compare(a, b, 0.0, ToleranceMode.EXACT)
    return fuzzy_compare(a, b, tolerance, ToleranceMode.ABSOLUTE)
