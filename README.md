# sesame

Building blocks for benchmarking stream clustering algorithms. Pure Python,
no dependencies outside the standard library.

## Modules

- `sesame.utils`: the `Point` dataclass (index, weight, dimension, cost,
  timestamp, features, clustering_center), the `MersenneTwister` generator
  (MT19937) with a shared instance behind `init_genrand`, `genrand_int32`,
  `genrand_int31` and `genrand_real3`, `create_barrier(count)` and
  `group_by_centers(inputs, centers, dimension)`, which returns copies of the
  inputs labelled with the 1-based index of their nearest center.
- `sesame.spsc_queue`: `SPSCQueue`, a bounded FIFO queue; `push` waits while
  the queue is full, `try_push` returns `False` instead.
- `sesame.kmeans`: `KMeans` with `run(number_of_centers, inputs, kmeans_pp)`
  returning the final centers and groups; k-means++ seeding when `kmeans_pp`
  is true. Helpers `euclidean_distance`, `calculate_cluster_center` and
  `groups_equal`.
- `sesame.dbscan`: `DBSCAN(min_points, epsilon, point_size)`; `run(inputs)`
  labels points in place with cluster ids from 0, or `NOISE` (-2).
- `sesame.purity`: `purity_cost(centers, results, dimension,
  gt_cluster_number, decay)` scores centers against the ground-truth labels
  (1 to `gt_cluster_number`) held in `clustering_center`; with `decay`, points
  with lower indices weigh less.
- `sesame.euclidean`: `squared_distance` and `euclidean_cost`, which returns
  the squared distance from the last of the given points to its nearest center.
- `sesame.windows`: `DampedWindow(base, lambda_)` whose `decay` returns
  `base ** (-lambda_ * elapsed)` for numbers or datetimes (microseconds).
- `sesame.timer`: `TimeMeter`, wall-clock meters for initialisation, online,
  refinement and accumulated phases, with `print_time`, `print_cumulative` and
  `breakdown_global`; `usec_between(start, end)` for nanosecond time points.
- `sesame.logger`: the `SESAME` logger, `DebugLevel`, `parse_debug_level`,
  `setup_logging(log_file_name, level)`, `set_log_level` and `sesame_assert`,
  which raises `SesameRuntimeError`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from sesame.utils import MersenneTwister, Point
from sesame.kmeans import KMeans
from sesame.purity import purity_cost

points = [
    Point(index=0, features=[0.0, 0.0], clustering_center=1),
    Point(index=1, features=[0.1, 0.0], clustering_center=1),
    Point(index=2, features=[5.0, 5.0], clustering_center=2),
    Point(index=3, features=[5.1, 5.0], clustering_center=2),
]

centers, groups = KMeans(MersenneTwister(1)).run(2, points, kmeans_pp=True)
print(purity_cost(centers, points, 2, 2, False))
```

## What the package does not do

There is no command-line program, no dataset file loader, no threaded
source, sink or engine that replays a stream through an algorithm, and no
online stream clustering algorithm. The package offers the pieces listed
above; wiring them into a full benchmark run is left to the caller.