"""Gaussian sampling via the polar Box-Muller transform.

Invariants
- sd == 0 short-circuits to ``mean`` and consumes no draws.
- Each rejection attempt consumes exactly two draws from the source, u before v.
- One accepted disk point yields two independent normals; ``sample`` keeps
  the u-derived value, ``sample_xy`` returns both.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .source import UniformSource


@dataclass(frozen=True)
class SamplePair:
    """Two samples from one accepted point, packaged as a coordinate (z unused)."""
    x: float
    y: float
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


def _polar_point(source: UniformSource) -> Tuple[float, float, float]:
    """
    Draw (u, v) uniformly inside the open unit disk and return (u, v, t) with
    t = sqrt(-2 ln(r) / r), r = u^2 + v^2.

    The origin is rejected along with points on or outside the circle, so
    the log and the division are always defined. A loop that only rejected
    r >= 1 would accept r == 0 and fail on ln(0) / 0.
    """
    while True:
        u = source.uniform(2.0) - 1.0
        v = source.uniform(2.0) - 1.0
        r = u * u + v * v
        if 0.0 < r < 1.0:
            break
    t = math.sqrt(-2.0 * math.log(r) / r)
    return u, v, t


def sample(mean: float, sd: float, source: UniformSource) -> float:
    """Return one sample from Normal(mean, sd)."""
    if sd == 0:
        return mean
    u, _v, t = _polar_point(source)
    return mean + u * sd * t


def sample_xy(mean: float, sd: float, source: UniformSource) -> SamplePair:
    """Return two independent samples from Normal(mean, sd) drawn from one disk point."""
    if sd == 0:
        return SamplePair(mean, mean)
    u, v, t = _polar_point(source)
    return SamplePair(mean + u * sd * t, mean + v * sd * t)


def sample_n(mean: float, sd: float, n: int, source: UniformSource) -> List[float]:
    """Return ``n`` scalar samples in draw order."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("n must be an integer")
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    return [sample(mean, sd, source) for _ in range(n)]


__all__ = ["SamplePair", "sample", "sample_xy", "sample_n"]
