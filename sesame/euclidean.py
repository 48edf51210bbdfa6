"""The squared Euclidean cost of a set of centers."""

from __future__ import annotations

from typing import Sequence

from sesame.logger import get_logger
from sesame.utils import Point


def squared_distance(point: Point, center: Point, dimension: int) -> float:
    """Return the squared distance over the first ``dimension`` features."""
    return sum((point.features[i] - center.features[i]) ** 2 for i in range(dimension))


def euclidean_cost(
    number_of_points: int,
    number_of_centers: int,
    dimension: int,
    inputs: Sequence[Point],
    results: Sequence[Point],
) -> float:
    """Return the squared distance from the last of the first ``number_of_points``
    inputs to its nearest of the first ``number_of_centers`` results.

    Returns 0.0 when there are no points.
    """
    min_cost = 0.0
    for point in inputs[:number_of_points]:
        min_cost = min(
            [squared_distance(point, results[0], dimension)]
            + [squared_distance(point, c, dimension) for c in results[:number_of_centers]]
        )
    get_logger().debug("EuclideanCost:%s", min_cost)
    return min_cost