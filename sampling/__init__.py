from __future__ import annotations

# Public sampling API: Gaussian samplers, clamp/mean helpers, uniform sources

from .source import UniformSource, NumpyUniformSource, make_source
from .gaussian import SamplePair, sample, sample_xy, sample_n
from .numeric import clamp, mean

__all__ = [
    "UniformSource",
    "NumpyUniformSource",
    "make_source",
    "SamplePair",
    "sample",
    "sample_xy",
    "sample_n",
    "clamp",
    "mean",
]
