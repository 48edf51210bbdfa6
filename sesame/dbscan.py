"""Density-based clustering (DBSCAN) over a list of points."""

from __future__ import annotations

from typing import Protocol

from sesame.kmeans import euclidean_distance
from sesame.utils import Point

UNCLASSIFIED = -1
NOISE = -2


class ResultSink(Protocol):
    def put(self, result: Point) -> None: ...


def _same_location(point: Point, other: Point) -> bool:
    return all(point.features[i] == other.features[i] for i in range(point.dimension))


class DBSCAN:
    """Labels points with cluster ids starting at 0, or NOISE."""

    def __init__(self, min_points: int, epsilon: float, point_size: int) -> None:
        self.min_points = min_points
        self.epsilon = epsilon
        self.point_size = point_size
        self.cluster_id = 0

    def run(self, inputs: list[Point]) -> list[Point]:
        """Label every unclassified point in place and return the inputs."""
        for point in inputs:
            if point.clustering_center == UNCLASSIFIED and self.expand_cluster(
                inputs, point, self.cluster_id
            ):
                self.cluster_id += 1
        return inputs

    def expand_cluster(self, inputs: list[Point], point: Point, cluster_id: int) -> bool:
        """Grow a cluster from ``point``; return False and mark it noise if it is not core."""
        seeds = self.region_query(inputs, point)
        if len(seeds) < self.min_points:
            point.clustering_center = NOISE
            return False
        core_position = 0
        for position, index in enumerate(seeds):
            inputs[index].clustering_center = cluster_id
            if _same_location(inputs[index], point):
                core_position = position
        del seeds[core_position]
        # Iterating while appending visits the newly added seeds as well.
        for seed in seeds:
            neighbours = self.region_query(inputs, inputs[seed])
            if len(neighbours) < self.min_points:
                continue
            for index in neighbours:
                label = inputs[index].clustering_center
                if label in (UNCLASSIFIED, NOISE):
                    if label == UNCLASSIFIED:
                        seeds.append(index)
                    inputs[index].clustering_center = cluster_id
        return True

    def region_query(self, inputs: list[Point], point: Point) -> list[int]:
        """Return the positions of inputs within ``epsilon`` of ``point``."""
        return [
            position
            for position, other in enumerate(inputs)
            if euclidean_distance(point, other) <= self.epsilon
        ]

    def produce_result(self, inputs: list[Point], sink: ResultSink) -> None:
        """Put copies of the labelled points into the sink."""
        for point in inputs:
            sink.put(point.copy())