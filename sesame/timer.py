"""Wall-clock meters for the phases of a streaming clustering run."""

from __future__ import annotations

import time
from collections import defaultdict
from typing import Callable

from sesame.logger import get_logger


def usec_between(start: int, end: int) -> int:
    """Return the microseconds from ``start`` to ``end``, both in nanoseconds.

    Each time point is truncated to whole microseconds before subtracting.
    """
    return end // 1000 - start // 1000


class TimeMeter:
    """Collects start/end marks and accumulated durations, in microseconds."""

    def __init__(self, interval: int = 100, clock: Callable[[], int] = time.time_ns) -> None:
        self.interval = interval
        self._clock = clock
        self._start = 0
        self._stop = 0
        self._marks: defaultdict[str, int] = defaultdict(int)

        self.overall_time = 0
        self.online_time = 0
        self.initial_time = 0
        self.refinement_time = 0
        self.data_insert_time = 0
        self.cluster_update_time = 0
        self.outlier_detection_time = 0
        self.prune_time = 0
        self.snapshot_time = 0
        self.final_cluster_time = 0
        self.other_time = 0

        self.overall_pre_time = 0
        self.interval_count = 0
        self.record_overall: list[int] = []
        self.prune_record: list[int] = []
        self.insert_judge = False
        self.prune_count = 0
        self.snapshot_count = 0
        self.final_cluster_count = 0

    def _mark(self, name: str) -> None:
        self._marks[name] = self._clock()

    def _span(self, start: str, end: str) -> int:
        return usec_between(self._marks[start], self._marks[end])

    # Whole-run measurement.
    def start_measure(self) -> None:
        """Record the start of the measured span."""
        self._start = self._clock()

    def end_measure(self) -> None:
        """Record the end of the measured span."""
        self._stop = self._clock()

    def elapsed_usec(self) -> int:
        """Return the microseconds between start_measure and end_measure."""
        return usec_between(self._start, self._stop)

    # Overall algorithm time.
    def overall_start_measure(self) -> None:
        self._mark("overall_start")

    def overall_end_measure(self) -> None:
        self._mark("overall_end")

    def meter_overall_usec(self) -> int:
        """Return and remember the overall algorithm time."""
        self.overall_time = self._span("overall_start", "overall_end")
        return self.overall_time

    # Initialisation.
    def initial_measure(self) -> None:
        self._mark("initial_start")

    def initial_end_measure(self) -> None:
        self._mark("initial_end")

    def meter_initial_usec(self) -> int:
        """Return and remember the initialisation time."""
        self.initial_time = self._span("initial_start", "initial_end")
        return self.initial_time

    # Online phase.
    def online_end_measure(self) -> None:
        self._mark("online_end")

    def meter_online_usec(self) -> int:
        """Return and remember the time from the overall start to the online end."""
        self.online_time = self._span("overall_start", "online_end")
        return self.online_time

    def online_acc_measure(self) -> None:
        self._mark("online_acc_start")

    def online_acc_end_measure(self) -> None:
        """Accumulate one online step; record the running total every ``interval`` steps."""
        self._mark("online_acc_end")
        self.interval_count += 1
        self.overall_pre_time += self._span("online_acc_start", "online_acc_end")
        if self.interval_count % self.interval == 0:
            self.record_overall.append(self.overall_pre_time)

    # Accumulated phases.
    def data_insert_acc_measure(self) -> None:
        self._mark("data_insert_start")

    def data_insert_end_measure(self) -> None:
        self._mark("data_insert_end")
        self.data_insert_time += self._span("data_insert_start", "data_insert_end")

    def cluster_update_acc_measure(self) -> None:
        self._mark("cluster_update_start")

    def cluster_update_end_measure(self) -> None:
        self._mark("cluster_update_end")
        self.cluster_update_time += self._span("cluster_update_start", "cluster_update_end")

    def outlier_detection_acc_measure(self) -> None:
        self._mark("outlier_detection_start")

    def outlier_detection_end_measure(self) -> None:
        self._mark("outlier_detection_end")
        self.outlier_detection_time += self._span(
            "outlier_detection_start", "outlier_detection_end"
        )

    def prune_acc_measure(self) -> None:
        self._mark("prune_start")

    def prune_end_measure(self) -> None:
        self._mark("prune_end")
        self.prune_time += self._span("prune_start", "prune_end")
        if self.insert_judge:
            self.prune_record.append(self.prune_time)
        self.prune_count += 1

    def snapshot_acc_measure(self) -> None:
        self._mark("snapshot_start")

    def snapshot_end_measure(self) -> None:
        self._mark("snapshot_end")
        self.snapshot_time += self._span("snapshot_start", "snapshot_end")
        self.snapshot_count += 1

    def final_cluster_acc_measure(self) -> None:
        self._mark("final_cluster_start")

    def final_cluster_end_measure(self) -> None:
        self._mark("final_cluster_end")
        self.final_cluster_time += self._span("final_cluster_start", "final_cluster_end")
        self.final_cluster_count += 1

    # Refinement (offline) phase.
    def refinement_start_measure(self) -> None:
        self._mark("refinement_start")

    def refinement_end_measure(self) -> None:
        self._mark("refinement_end")

    def meter_refinement_usec(self) -> int:
        """Return and remember the refinement time."""
        self.refinement_time = self._span("refinement_start", "refinement_end")
        return self.refinement_time

    # Reports.
    def print_time(self, initial: bool, snapshot: bool, outlier_buffer: bool, final_cluster: bool) -> None:
        """Print the accumulated phase times."""
        print(
            "Time (Count in ns) \n"
            f"data insertion: {self.data_insert_time}\n"
            f"cluster update: {self.cluster_update_time}"
        )
        if initial:
            self.meter_initial_usec()
            print(f"initial: {self.initial_time}")
        if snapshot:
            print(f"snapshot: {self.snapshot_time}, count {self.snapshot_count}")
        if outlier_buffer:
            print(f"outlier Detection: {self.outlier_detection_time}")
        if final_cluster:
            print(f"final cluster: {self.final_cluster_time}, count {self.final_cluster_count}")

    def print_cumulative(self) -> None:
        """Print the cumulative online time recorded every ``interval`` tuples."""
        print(f"Cumulative Overall Time every {self.interval} tuples (Count in ns)")
        for value in self.record_overall:
            print(value)
        if self.record_overall:
            refinement = self._span("refinement_start", "refinement_end")
            print(f"{self.record_overall[-1] + refinement}\n")

    def breakdown_global(self, initial: bool, snapshot: bool, outlier_buffer: bool, refine: bool) -> int:
        """Log the time spent per phase and return the unaccounted remainder."""
        logger = get_logger()
        self.meter_initial_usec()
        other = self.overall_time - (
            self.data_insert_time + self.cluster_update_time + self.outlier_detection_time
        )
        logger.debug("Overall time is %dms;", self.overall_time // 1000)
        if initial:
            other -= self.initial_time
            logger.debug("Initial time is %dms;", self.initial_time // 1000)
        if snapshot:
            other -= self.snapshot_time
            logger.debug("snapshot time is %dms;", self.snapshot_time // 1000)
        logger.debug("Data insertion time is %dms;", self.data_insert_time // 1000)
        logger.debug("online cluster update time is %dms;", self.cluster_update_time // 1000)
        logger.debug("Outlier Detection time is %dms;", self.outlier_detection_time // 1000)
        if outlier_buffer:
            other -= self.outlier_detection_time
            logger.debug("prune time is %dms;", self.prune_time // 1000)
        if refine:
            other -= self.refinement_time
            logger.debug("refinement time is %dms;", self.refinement_time // 1000)
        logger.debug("other time is %dms;", other // 1000)
        self.other_time = other
        return other