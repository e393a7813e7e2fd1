"""
Demonstration touch handler for the sampling helpers.

On each trigger the handler draws ``n`` values as
``clamp(sample(mean, sd), lower, upper)``, notifies them joined by ", ",
then notifies their mean. Configuration is passed in explicitly as a
DemoConfig; nothing is read from module state.
"""

from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass, fields
from typing import Any, Callable, List, Optional, Sequence

from sampling import UniformSource, clamp, mean, sample
from utils.logging import log_summary


@dataclass(frozen=True)
class DemoConfig:
    mean: float = 0.3
    sd: float = 0.1
    n: int = 10
    lower: float = 0.0
    upper: float = 1.0
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("mean", "sd", "lower", "upper"):
            val = getattr(self, name)
            if isinstance(val, bool) or not isinstance(val, (int, float)):
                raise TypeError(f"{name} must be a real number")
            if not math.isfinite(float(val)):
                raise ValueError(f"{name} must be finite, got {val}")
        if isinstance(self.n, bool) or not isinstance(self.n, int):
            raise TypeError("n must be an integer")
        if self.n < 0:
            raise ValueError("n must be >= 0")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise TypeError("seed must be an integer or None")


@dataclass(frozen=True)
class DemoResult:
    values: List[float]
    mean: float


_CONFIG_KEYS = {f.name for f in fields(DemoConfig)}


def load_demo_config(path: str) -> DemoConfig:
    """
    Load a DemoConfig from a JSON object file.

    All keys are optional and default to the DemoConfig field defaults.

    Raises:
      ValueError for a missing or unreadable file, unparsable JSON, a non-object root or
      unknown keys; TypeError/ValueError from DemoConfig for bad values.
    """
    if not isinstance(path, str) or not path:
        raise ValueError("load_demo_config: path must be a non-empty string")
    if not os.path.isfile(path):
        raise ValueError(f"load_demo_config: not a file: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"load_demo_config: failed to parse JSON: {e}") from e
    except OSError as e:
        raise ValueError(f"load_demo_config: cannot read {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError("demo config root must be a JSON object")
    extra = sorted(k for k in raw.keys() if k not in _CONFIG_KEYS)
    if extra:
        raise ValueError(f"unknown keys in demo config: {extra}")
    return DemoConfig(**raw)


def format_samples(values: Sequence[float]) -> str:
    return ", ".join(str(v) for v in values)


def on_touch(
    config: DemoConfig,
    source: UniformSource,
    notify: Callable[[str], Any],
    logger: Optional[logging.Logger] = None,
) -> DemoResult:
    values: List[float] = []
    for _ in range(config.n):
        values.append(clamp(sample(config.mean, config.sd, source), config.lower, config.upper))

    avg = mean(values)
    notify(format_samples(values))
    notify(f"Mean: {avg}")

    log_summary(config.mean, config.sd, config.n, avg, logger=logger)
    return DemoResult(values=values, mean=avg)


__all__ = ["DemoConfig", "DemoResult", "load_demo_config", "format_samples", "on_touch"]
