from __future__ import annotations

from typing import Sequence


def clamp(n: float, lower: float, upper: float) -> float:
    """
    Constrain ``n`` to [lower, upper].

    Degenerate bounds (upper <= lower) always yield ``upper``; bounds are
    neither validated nor swapped.
    """
    if upper <= lower:
        return upper
    if n < lower:
        return lower
    if n > upper:
        return upper
    return n


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean accumulated in sequence order; 0.0 for an empty sequence."""
    count = len(values)
    if count == 0:
        return 0.0
    total = 0.0
    for v in values:
        total += float(v)
    return total / count


__all__ = ["clamp", "mean"]
