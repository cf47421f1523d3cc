#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import pathlib
import sys
from dataclasses import asdict
from typing import Iterable, List

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from DeliveryTSP import (
    AlgorithmType,
    EngineConfig,
    Point,
    RouteOptimizer,
    RouteResult,
    make_point,
    random_points,
    sample_points,
    summarize,
)


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Solve or compare delivery routes over a set of stops.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--points",
        type=pathlib.Path,
        help="JSON file holding a list of {id?, x, y, name?} stops.",
    )
    source.add_argument("--random", type=int, metavar="N", help="Generate N random stops instead.")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for --random (default: 42).")
    parser.add_argument(
        "--algorithm",
        choices=[a.value for a in AlgorithmType],
        help="Run a single algorithm (default: compare all).",
    )
    parser.add_argument(
        "--exact-dp-limit",
        type=int,
        default=EngineConfig.exact_dp_limit,
        help="Largest stop count solved exactly.",
    )
    parser.add_argument(
        "--results",
        type=pathlib.Path,
        help="Optional JSONL file to append result records to.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING).")
    return parser.parse_args(raw_args)


def load_points(path: pathlib.Path) -> List[Point]:
    with path.open("r", encoding="utf-8") as fh:
        rows = json.load(fh)
    points = []
    for index, row in enumerate(rows, start=1):
        points.append(make_point(row["x"], row["y"], name=row.get("name"), index=index, point_id=row.get("id")))
    return points


def serialize_result(result: RouteResult) -> dict:
    return asdict(result)


def main(raw_args: Iterable[str] | None = None) -> int:
    args = parse_args(raw_args)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.points is not None:
        if not args.points.exists():
            raise SystemExit(f"Points file not found: {args.points}")
        points = load_points(args.points)
    elif args.random is not None:
        points = random_points(args.random, seed=args.seed)
    else:
        points = sample_points()

    optimizer = RouteOptimizer(EngineConfig(exact_dp_limit=args.exact_dp_limit))
    if args.algorithm:
        results = [optimizer.solve(points, args.algorithm)]
    else:
        results = optimizer.compare_all(points)

    print(f"{len(points)} stops")
    print(summarize(results))
    for result in results:
        print(f"\n{result.algorithm}: " + " -> ".join(p.name or p.id for p in result.path))

    if args.results is not None:
        args.results.parent.mkdir(parents=True, exist_ok=True)
        with args.results.open("a", encoding="utf-8") as fh:
            for result in results:
                fh.write(json.dumps(serialize_result(result)))
                fh.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
