#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import pathlib
import statistics
import sys
from collections import defaultdict
from typing import Dict, Iterable, List

import numpy as np
from tqdm import tqdm

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from DeliveryTSP import AlgorithmType, RouteOptimizer, random_points

TOUR_SOLVERS = (
    AlgorithmType.NEAREST_NEIGHBOR,
    AlgorithmType.TWO_OPT,
    AlgorithmType.CHRISTOFIDES,
)


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark tour solvers against the exact Held-Karp optimum.")
    parser.add_argument(
        "--sizes",
        nargs="+",
        type=int,
        default=[5, 8, 10, 12],
        help="Stop counts to benchmark (must not exceed the exact DP limit).",
    )
    parser.add_argument("--instances", type=int, default=20, help="Random instances per size.")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42).")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING).")
    return parser.parse_args(raw_args)


def main(raw_args: Iterable[str] | None = None) -> int:
    args = parse_args(raw_args)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    optimizer = RouteOptimizer()
    if max(args.sizes) > optimizer.config.exact_dp_limit:
        raise SystemExit(f"Sizes must be <= {optimizer.config.exact_dp_limit} to compute the optimum.")

    rng = np.random.default_rng(args.seed)
    ratios: Dict[tuple[int, str], List[float]] = defaultdict(list)
    times: Dict[tuple[int, str], List[float]] = defaultdict(list)

    jobs = [(n, k) for n in args.sizes for k in range(args.instances)]
    for n, _ in tqdm(jobs, desc="Benchmarking", unit="instance"):
        points = random_points(n, rng=rng)
        optimum = optimizer.solve(points, AlgorithmType.EXACT_DP)
        times[(n, AlgorithmType.EXACT_DP.value)].append(optimum.time_ms)
        for selector in TOUR_SOLVERS:
            result = optimizer.solve(points, selector)
            ratio = result.distance / optimum.distance if optimum.distance > 0 else 1.0
            ratios[(n, selector.value)].append(ratio)
            times[(n, selector.value)].append(result.time_ms)

    header = f"{'n':>4} | {'solver':>16} | {'mean ratio':>10} | {'worst':>7} | {'<=1.5x':>7} | {'mean ms':>9}"
    print(header)
    print("-" * len(header))
    for n in args.sizes:
        print(f"{n:4d} | {AlgorithmType.EXACT_DP.value:>16} | {1.0:10.4f} | {1.0:7.3f} | {'100%':>7} | "
              f"{statistics.mean(times[(n, AlgorithmType.EXACT_DP.value)]):9.2f}")
        for selector in TOUR_SOLVERS:
            values = ratios[(n, selector.value)]
            within = sum(1 for r in values if r <= 1.5 + 1e-9) / len(values)
            print(
                f"{n:4d} | {selector.value:>16} | {statistics.mean(values):10.4f} | {max(values):7.3f} | "
                f"{within:7.0%} | {statistics.mean(times[(n, selector.value)]):9.2f}"
            )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
