"""Shared data points, the Mersenne Twister generator and grouping helpers."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

DEFAULT_WEIGHT = 1
DEFAULT_COST = 0
DEFAULT_QUEUE_CAPACITY = 1000
KMEANS_TIMES = 5
CMM_KNN = 10
CMM_A = 0.998
CMM_LAMDA = 1
CMM_THRESHOLD = 542
# Determines when Lloyd terminates (between 0 and 1).
THRESHOLD = 1.000

_N = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF
_MASK32 = 0xFFFFFFFF
_DEFAULT_SEED = 5489


@dataclass
class Point:
    """A weighted point of a data stream."""

    index: int = 0
    weight: float = DEFAULT_WEIGHT
    dimension: int = 0
    cost: float = DEFAULT_COST
    timestamp: int = 0
    features: list[float] = field(default_factory=list)
    clustering_center: int = -1

    def __post_init__(self) -> None:
        if not self.features:
            self.features = [0.0] * self.dimension
        elif self.dimension == 0:
            self.dimension = len(self.features)
        elif len(self.features) != self.dimension:
            raise ValueError(
                f"point has {len(self.features)} features but dimension {self.dimension}"
            )

    def copy(self) -> "Point":
        """Return an independent copy of this point."""
        return Point(
            index=self.index,
            weight=self.weight,
            dimension=self.dimension,
            cost=self.cost,
            timestamp=self.timestamp,
            features=list(self.features),
            clustering_center=self.clustering_center,
        )


class MersenneTwister:
    """The MT19937 generator producing 32-bit words."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._mt = [0] * _N
        self._mti = _N + 1
        if seed is not None:
            self.seed(seed)

    def seed(self, s: int) -> None:
        """Initialise the state vector from a seed."""
        mt = self._mt
        mt[0] = s & _MASK32
        for i in range(1, _N):
            prev = mt[i - 1]
            mt[i] = (1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32
        self._mti = _N

    def _twist(self) -> None:
        mt = self._mt
        for kk in range(_N):
            y = (mt[kk] & _UPPER_MASK) | (mt[(kk + 1) % _N] & _LOWER_MASK)
            value = mt[(kk + _M) % _N] ^ (y >> 1)
            if y & 1:
                value ^= _MATRIX_A
            mt[kk] = value
        self._mti = 0

    def genrand_int32(self) -> int:
        """Return a random integer on [0, 2**32 - 1]."""
        if self._mti >= _N:
            if self._mti == _N + 1:
                self.seed(_DEFAULT_SEED)
            self._twist()
        y = self._mt[self._mti]
        self._mti += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32

    def genrand_int31(self) -> int:
        """Return a random integer on [0, 2**31 - 1]."""
        return self.genrand_int32() >> 1

    def genrand_real3(self) -> float:
        """Return a random float on the open interval (0, 1)."""
        return (self.genrand_int32() + 0.5) * (1.0 / 4294967296.0)


_shared_generator = MersenneTwister()


def init_genrand(s: int) -> None:
    """Seed the shared generator."""
    _shared_generator.seed(s)


def genrand_int32() -> int:
    """Draw a 32-bit integer from the shared generator."""
    return _shared_generator.genrand_int32()


def genrand_int31() -> int:
    """Draw a 31-bit integer from the shared generator."""
    return _shared_generator.genrand_int31()


def genrand_real3() -> float:
    """Draw a float in (0, 1) from the shared generator."""
    return _shared_generator.genrand_real3()


def create_barrier(count: int) -> threading.Barrier:
    """Create a barrier for ``count`` threads."""
    return threading.Barrier(count)


def group_by_centers(
    inputs: Iterable[Point], centers: Sequence[Point], dimension: int
) -> list[Point]:
    """Copy each input and label it with the 1-based index of its nearest center."""
    output = []
    for point in inputs:
        labelled = point.copy()
        best = float("inf")
        for number, center in enumerate(centers, start=1):
            distance = sum(
                (point.features[k] - center.features[k]) ** 2 for k in range(dimension)
            )
            if distance < best:
                labelled.clustering_center = number
                best = distance
        output.append(labelled)
    return output