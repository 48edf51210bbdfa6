"""Purity of a clustering against ground-truth labels."""

from __future__ import annotations

from typing import Sequence

from sesame.logger import get_logger
from sesame.utils import Point, group_by_centers


def point_to_group(points: Sequence[Point], number: int) -> list[list[Point]]:
    """Return copies of the points grouped by label 1 to ``number``."""
    return [
        [p.copy() for p in points if p.clustering_center == label]
        for label in range(1, number + 1)
    ]


def belongs_between(group_a: Sequence[Point], group_b: Sequence[Point]) -> float:
    """Return the total weight of the points of ``group_a`` whose index is in ``group_b``."""
    indices = {p.index for p in group_b}
    return sum(p.weight for p in group_a if p.index in indices)


def max_belongs(sample: Sequence[Point], ground_truth: Sequence[Sequence[Point]]) -> float:
    """Return the largest overlap of ``sample`` with any ground-truth group."""
    return max((belongs_between(sample, group) for group in ground_truth), default=0.0)


def _decay_weight(index: int, size: int) -> float:
    if size - index <= 101:
        return 1.0
    if index < size // 100:
        return 0.0
    return (index - size // 100) / (size - 100 - size // 100)


def purity_cost(
    centers: Sequence[Point],
    results: Sequence[Point],
    dimension: int,
    gt_cluster_number: int,
    decay: bool,
) -> float:
    """Return the weighted purity of assigning ``results`` to their nearest centers.

    With ``decay``, older points (lower index) count less.
    """
    labelled = group_by_centers(results, centers, dimension)
    total = 0.0
    for point in labelled:
        point.weight = _decay_weight(point.index, len(labelled)) if decay else 1.0
        total += point.weight

    ground_truth = point_to_group(results, gt_cluster_number)
    samples = point_to_group(labelled, len(centers))
    overlap = sum(max_belongs(sample, ground_truth) for sample in samples)

    purity = overlap / total if results else 0.0
    get_logger().debug("Purity:%s", purity)
    return purity