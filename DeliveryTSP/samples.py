from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from DeliveryTSP.config import ASTAR_GRID_SIZE
from DeliveryTSP.geometry import Point, make_point

# Borough landmarks on the 0-100 map grid.
BOROUGH_LANDMARKS: Tuple[Tuple[str, float, float], ...] = (
    ("Manhattan", 50.0, 35.0),
    ("Brooklyn", 65.0, 65.0),
    ("Queens", 80.0, 35.0),
    ("Bronx", 55.0, 15.0),
    ("Staten Island", 25.0, 75.0),
)

# Further stops inside the boroughs, after one stop per landmark.
_EXTRA_STOPS: Tuple[Tuple[str, float, float], ...] = (
    ("Brooklyn", 60.0, 50.0),
    ("Queens", 70.0, 25.0),
    ("Manhattan", 45.0, 45.0),
)


def sample_points() -> List[Point]:
    """The fixed eight-stop demo set: one stop on each borough landmark, then three more.

    The first landmark is the hub; the rest are named ``<borough> Stop <k>``.
    """
    points = []
    for k, (borough, x, y) in enumerate(BOROUGH_LANDMARKS + _EXTRA_STOPS):
        name = f"{borough} Hub" if k == 0 else f"{borough} Stop {k}"
        points.append(Point(id=f"sample-{k + 1}", x=x, y=y, name=name))
    return points


def random_points(
    count: int,
    seed: Optional[int] = None,
    scale: float = ASTAR_GRID_SIZE,
    rng: Optional[np.random.Generator] = None,
) -> List[Point]:
    """Uniform points in ``[0, scale)``, named ``Stop 1 .. Stop n``."""
    if rng is None:
        rng = np.random.default_rng(seed)
    coordinates = rng.random((count, 2)) * scale
    return [make_point(x, y, index=i) for i, (x, y) in enumerate(coordinates.tolist(), start=1)]


__all__ = ["BOROUGH_LANDMARKS", "random_points", "sample_points"]
