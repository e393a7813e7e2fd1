#!/usr/bin/env python3
"""
Command-line runner for the demonstration touch handler.

- Builds a DemoConfig from defaults, an optional JSON file and CLI overrides
  (flags win over the file, the file wins over defaults)
- Seeds a NumpyUniformSource and fires one touch, printing the notifications
- Optionally appends a touch summary row (mean, sd, n, sample_mean) to a CSV file
"""

from __future__ import annotations
import argparse
import dataclasses
import sys
import time
from typing import List, Optional

from sampling import make_source
from harness.demo import DemoConfig, DemoResult, load_demo_config, on_touch
from utils.logging import get_logger, summary_csv_writer


def build_config(args: argparse.Namespace) -> DemoConfig:
    cfg = load_demo_config(args.config) if args.config else DemoConfig()
    overrides = {}
    for name in ("mean", "sd", "n", "lower", "upper", "seed"):
        val = getattr(args, name)
        if val is not None:
            overrides[name] = val
    return dataclasses.replace(cfg, **overrides) if overrides else cfg


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Sample, clamp and average a batch of Gaussian values")
    ap.add_argument("--config", default=None, help="Path to demo config JSON")
    ap.add_argument("--seed", type=int, default=None, help="RNG seed (default from config, else OS entropy)")
    ap.add_argument("--mean", type=float, default=None, help="Distribution mean")
    ap.add_argument("--sd", type=float, default=None, help="Distribution standard deviation")
    ap.add_argument("--n", type=int, default=None, help="Number of samples per touch")
    ap.add_argument("--lower", type=float, default=None, help="Lower clamp bound")
    ap.add_argument("--upper", type=float, default=None, help="Upper clamp bound")
    ap.add_argument("--csv", default=None, help="Append a summary row to this CSV file")
    return ap


def main(argv: Optional[List[str]] = None) -> DemoResult:
    args = _parser().parse_args(argv)
    logger = get_logger()

    cfg = build_config(args)
    logger.info(
        f"demo config mean={cfg.mean} sd={cfg.sd} n={cfg.n} "
        f"bounds=[{cfg.lower}, {cfg.upper}] seed={cfg.seed}"
    )

    source = make_source(cfg.seed)
    start = time.perf_counter()
    result = on_touch(cfg, source, print, logger=logger)
    elapsed_ms = (time.perf_counter() - start) * 1e3
    logger.info(f"touch elapsed_ms={elapsed_ms:.3f}")

    if args.csv:
        write = summary_csv_writer(args.csv)
        write(cfg.mean, cfg.sd, cfg.n, result.mean)
    return result


if __name__ == "__main__":
    main(sys.argv[1:])
