"""Logging for touch summaries.

A touch summary is the fixed record (mean, sd, n, sample_mean) produced by
one run of the demo handler. It is written as a log line and, from the CLI,
as a CSV row with the same column order.

Invariants
- At most one marked StreamHandler per logger, however often get_logger runs.
- Summary fields are finite and always appear in SUMMARY_FIELDS order.
- A summary CSV only ever holds rows under the SUMMARY_FIELDS header.
"""
from __future__ import annotations

import logging
import math
import os
from typing import Callable, List, Optional

SUMMARY_FIELDS = ("mean", "sd", "n", "sample_mean")


def get_logger(name: str = "gaussutil", level: int = logging.INFO) -> logging.Logger:
    """Return ``name``'s logger with one tagged StreamHandler installed."""
    logger = logging.getLogger(name)
    logger.setLevel(int(level))
    logger.propagate = False

    if not any(getattr(h, "_gaussutil_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler._gaussutil_handler = True  # type: ignore[attr-defined]
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s", "%H:%M:%S"))
        logger.addHandler(handler)
    return logger


def _summary_values(mean: float, sd: float, n: int, sample_mean: float) -> List[str]:
    out: List[str] = []
    for name, val in zip(SUMMARY_FIELDS[:2], (mean, sd)):
        out.append(_real(val, name))
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ValueError(f"n must be a non-negative integer, got {n!r}")
    out.append(str(n))
    out.append(_real(sample_mean, "sample_mean"))
    return out


def _real(val: float, name: str) -> str:
    x = float(val)
    if not math.isfinite(x):
        raise ValueError(f"{name} must be finite, got {x}")
    return f"{x:.10g}"


def format_summary(mean: float, sd: float, n: int, sample_mean: float) -> str:
    """``mean=<m> sd=<s> n=<n> sample_mean=<a>``"""
    vals = _summary_values(mean, sd, n, sample_mean)
    return " ".join(f"{k}={v}" for k, v in zip(SUMMARY_FIELDS, vals))


def log_summary(
    mean: float,
    sd: float,
    n: int,
    sample_mean: float,
    logger: Optional[logging.Logger] = None,
) -> None:
    lg = logger if logger is not None else get_logger()
    lg.info("touch " + format_summary(mean, sd, n, sample_mean))


def summary_csv_writer(path: str) -> Callable[[float, float, int, float], None]:
    """
    Return ``write(mean, sd, n, sample_mean)`` appending one row to ``path``.

    The header is written when the file is missing or empty. An existing
    file with a different header is refused with ValueError rather than
    mixing column layouts.
    """
    if not isinstance(path, str) or not path:
        raise ValueError("path must be a non-empty string")
    abs_path = os.path.abspath(path)
    header = ",".join(SUMMARY_FIELDS)

    def _write(mean: float, sd: float, n: int, sample_mean: float) -> None:
        row = ",".join(_summary_values(mean, sd, n, sample_mean))
        fresh = not os.path.exists(abs_path) or os.path.getsize(abs_path) == 0
        if not fresh:
            with open(abs_path, "r", encoding="utf-8") as f:
                existing = f.readline().strip()
            if existing != header:
                raise ValueError(f"{path}: expected header {header!r}, found {existing!r}")
        with open(abs_path, "a", encoding="utf-8") as f:
            if fresh:
                f.write(header + "\n")
            f.write(row + "\n")

    return _write


__all__ = ["SUMMARY_FIELDS", "get_logger", "format_summary", "log_summary", "summary_csv_writer"]
