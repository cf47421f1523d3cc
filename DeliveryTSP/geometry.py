from __future__ import annotations

import math
import uuid
from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class Point:
    """A delivery stop on the plane."""

    id: str
    x: float
    y: float
    name: str = ""


def make_point(
    x: float,
    y: float,
    name: str | None = None,
    index: int | None = None,
    point_id: str | None = None,
) -> Point:
    """Create a point, generating a unique id when none is given; unnamed points become ``Stop <index>``."""
    if not name:
        name = f"Stop {index}" if index is not None else "Stop"
    if point_id is None:
        point_id = f"point-{uuid.uuid4().hex[:12]}"
    return Point(id=str(point_id), x=float(x), y=float(y), name=name)


def distance(p1: Point, p2: Point) -> float:
    return math.sqrt((p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2)


def route_length(path: Sequence[Point]) -> float:
    """Sum of consecutive distances along ``path`` (no implicit return leg)."""
    total = 0.0
    for i in range(len(path) - 1):
        total += distance(path[i], path[i + 1])
    return total


def distance_matrix(points: Sequence[Point]) -> np.ndarray:
    coords = np.asarray([(p.x, p.y) for p in points], dtype=float).reshape(-1, 2)
    diff = coords[:, None, :] - coords[None, :, :]
    return np.linalg.norm(diff, axis=-1)


__all__ = ["Point", "distance", "distance_matrix", "make_point", "route_length"]
