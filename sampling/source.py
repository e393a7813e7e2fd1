"""Uniform random sources for the Gaussian samplers.

A source exposes a single method, ``uniform(range) -> float``, returning a
value in ``[0, range)``. Samplers never touch a global RNG; determinism comes
from the generator handed to the source.
"""
from __future__ import annotations

import math
from typing import Optional, Protocol

import numpy as np


class UniformSource(Protocol):
    def uniform(self, range: float) -> float:
        ...


def _require_generator(rng: np.random.Generator) -> None:
    if not isinstance(rng, np.random.Generator):
        raise TypeError("rng must be a numpy.random.Generator instance")


class NumpyUniformSource:
    """
    Single-precision uniform source backed by a NumPy Generator.

    Each call consumes exactly one float32 draw from ``rng`` and scales it by
    ``range``. Two sources built from generators with the same seed produce
    identical sequences.
    """

    def __init__(self, rng: np.random.Generator) -> None:
        _require_generator(rng)
        self.rng = rng
        self.draws: int = 0

    def uniform(self, range: float) -> float:
        scale = float(range)
        if not math.isfinite(scale) or scale <= 0.0:
            raise ValueError(f"range must be a finite positive number, got {range}")
        x = self.rng.random(dtype=np.float32)
        self.draws += 1
        val = float(x) * scale
        # float32 rounding of x near 1.0 times scale must stay below range
        return val if val < scale else math.nextafter(scale, 0.0)


def make_source(seed: Optional[int] = None) -> NumpyUniformSource:
    """Build a NumpyUniformSource from an integer seed (None = OS entropy)."""
    return NumpyUniformSource(np.random.default_rng(seed))


__all__ = ["UniformSource", "NumpyUniformSource", "make_source"]
