"""Lloyd's k-means and k-means++ for offline clustering of coreset points."""

from __future__ import annotations

import math
from typing import Optional, Protocol, Sequence

from sesame.logger import get_logger
from sesame.utils import MersenneTwister, Point, genrand_int31, genrand_real3


class ResultSink(Protocol):
    def put(self, result: Point) -> None: ...


def euclidean_distance(point: Point, center: Point) -> float:
    """Return the Euclidean distance over the point's dimensions."""
    return math.sqrt(
        sum((point.features[i] - center.features[i]) ** 2 for i in range(point.dimension))
    )


def calculate_cluster_center(center: Point, group: Sequence[Point]) -> Point:
    """Move ``center`` to the mean of ``group``; an empty group leaves it unchanged."""
    if group:
        for i in range(center.dimension):
            center.features[i] = sum(p.features[i] for p in group) / len(group)
    return center


def groups_equal(old_groups: Sequence[Sequence[Point]], new_groups: Sequence[Sequence[Point]]) -> bool:
    """Return True when two groupings agree.

    Groups must have the same sizes; members are compared by index from the
    second member on.
    """
    equal = len(old_groups) == len(new_groups) and all(
        len(old) == len(new)
        and all(a.index == b.index for a, b in zip(old[1:], new[1:]))
        for old, new in zip(old_groups, new_groups)
    )
    if not equal:
        get_logger().info("Point cluster need to be adjust, start a new iteration!")
    return equal


class KMeans:
    """k-means clustering driven by a Mersenne Twister generator."""

    def __init__(self, rng: Optional[MersenneTwister] = None) -> None:
        self.rng = rng

    def _int31(self) -> int:
        return self.rng.genrand_int31() if self.rng is not None else genrand_int31()

    def _uniform(self) -> float:
        return self.rng.genrand_real3() if self.rng is not None else genrand_real3()

    def random_select_centers(
        self, number_of_centers: int, inputs: Sequence[Point], centers: list[Point]
    ) -> list[Point]:
        """Append copies of distinct randomly chosen inputs to ``centers``."""
        if not inputs:
            raise ValueError("cannot select centers from no points")
        if number_of_centers > len(inputs):
            raise ValueError(
                f"cannot select {number_of_centers} centers from {len(inputs)} points"
            )
        chosen: list[int] = []
        while len(chosen) < max(number_of_centers, 1):
            position = self._int31() % len(inputs)
            if position not in chosen:
                chosen.append(position)
                centers.append(inputs[position].copy())
        return centers

    def _pick(self, leftover: list[Point], weights: list[float]) -> Point:
        total = sum(weights)
        if total == 0:
            return leftover[0]
        r = self._uniform()
        left = 0.0
        for point, weight in zip(leftover, weights):
            right = left + weight / total
            if left < r <= right:
                return point
            left = right
        # Rounding can leave r just above the last cumulative bound.
        return next(p for p, w in zip(reversed(leftover), reversed(weights)) if w > 0)

    def select_centers_from_weight(
        self, number_of_centers: int, inputs: Sequence[Point], centers: list[Point]
    ) -> list[Point]:
        """Add ``number_of_centers`` centers chosen with probability proportional to D(x)**2."""
        chosen = {centers[0].index}
        for _ in range(number_of_centers):
            leftover = [p for p in inputs if p.index not in chosen]
            if not leftover:
                break
            weights = [min(euclidean_distance(p, c) for c in centers) ** 2 for p in leftover]
            picked = self._pick(leftover, weights)
            chosen.add(picked.index)
            centers.append(picked.copy())
        return centers

    def group_points_by_centers(
        self, number_of_centers: int, inputs: Sequence[Point], centers: Sequence[Point]
    ) -> list[list[Point]]:
        """Assign each input to its nearest center; ties go to the earlier center."""
        groups: list[list[Point]] = [[] for _ in range(number_of_centers)]
        for point in inputs:
            best = 0
            best_distance = euclidean_distance(point, centers[0])
            for number, center in enumerate(centers[1:number_of_centers], start=1):
                distance = euclidean_distance(point, center)
                if best_distance > distance:
                    best, best_distance = number, distance
            groups[best].append(point)
        return groups

    def adjust_clustering_centers(
        self, centers: Sequence[Point], groups: Sequence[Sequence[Point]]
    ) -> None:
        """Move every center to the mean of its group."""
        for center, group in zip(centers, groups):
            calculate_cluster_center(center, group)

    def store_result(self, groups: Sequence[Sequence[Point]]) -> list[Point]:
        """Label each point with its group number and return copies in group order."""
        output = []
        for number, group in enumerate(groups):
            for point in group:
                point.clustering_center = number
                output.append(point.copy())
        return output

    def produce_result(self, groups: Sequence[Sequence[Point]], sink: ResultSink) -> None:
        """Label each point with its group number and put copies into the sink."""
        for point in self.store_result(groups):
            sink.put(point)

    def run(
        self, number_of_centers: int, inputs: Sequence[Point], kmeans_pp: bool
    ) -> tuple[list[Point], list[list[Point]]]:
        """Cluster ``inputs``; return the final centers and groups."""
        logger = get_logger()
        if number_of_centers > len(inputs):
            raise ValueError(
                f"cannot form {number_of_centers} clusters from {len(inputs)} points"
            )
        centers: list[Point] = []
        if kmeans_pp:
            logger.info("KMeans++ start!!!")
            self.random_select_centers(1, inputs, centers)
            self.select_centers_from_weight(number_of_centers - 1, inputs, centers)
        else:
            logger.info("KMeans start!!!")
            self.random_select_centers(number_of_centers, inputs, centers)
        groups = self.group_points_by_centers(number_of_centers, inputs, centers)
        while True:
            self.adjust_clustering_centers(centers, groups)
            new_groups = self.group_points_by_centers(number_of_centers, inputs, centers)
            done = groups_equal(groups, new_groups)
            groups = new_groups
            if done:
                break
        logger.info("KMeans++ sourceEnd!!!" if kmeans_pp else "KMeans sourceEnd!!!")
        return centers, groups