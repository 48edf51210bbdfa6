from sesame.dbscan import DBSCAN, NOISE, UNCLASSIFIED
from sesame.utils import Point


class _ListSink:
    def __init__(self):
        self.items = []

    def put(self, point):
        self.items.append(point)


def _data():
    a = [Point(index=i, features=[0.1 * i, 0.0]) for i in range(4)]
    b = [Point(index=4 + i, features=[20.0 + 0.1 * i, 20.0]) for i in range(4)]
    outlier = Point(index=8, features=[-50.0, 50.0])
    return a + b + [outlier]


def test_points_start_unclassified():
    assert all(p.clustering_center == UNCLASSIFIED for p in _data())


def test_run_finds_two_clusters_and_noise():
    pts = _data()
    DBSCAN(3, 1.0, len(pts)).run(pts)
    assert {p.clustering_center for p in pts[:4]} == {0}
    assert {p.clustering_center for p in pts[4:8]} == {1}
    assert pts[8].clustering_center == NOISE


def test_region_query_includes_point_itself():
    pts = _data()
    found = DBSCAN(3, 1.0, len(pts)).region_query(pts, pts[0])
    assert found == [0, 1, 2, 3]


def test_expand_cluster_marks_isolated_point_as_noise():
    pts = _data()
    algorithm = DBSCAN(3, 1.0, len(pts))
    assert algorithm.expand_cluster(pts, pts[8], 0) is False
    assert pts[8].clustering_center == NOISE


def test_noise_point_becomes_border_of_later_cluster():
    pts = [
        Point(index=0, features=[0.8]),
        Point(index=1, features=[1.5]),
        Point(index=2, features=[1.6]),
        Point(index=3, features=[1.7]),
    ]
    algorithm = DBSCAN(3, 1.0, len(pts))
    algorithm.run(pts)
    assert [p.clustering_center for p in pts] == [0, 0, 0, 0]
    assert algorithm.cluster_id == 1


def test_produce_result_puts_copies():
    pts = _data()
    algorithm = DBSCAN(3, 1.0, len(pts))
    algorithm.run(pts)
    sink = _ListSink()
    algorithm.produce_result(pts, sink)
    assert [p.index for p in sink.items] == [p.index for p in pts]
    assert [p.clustering_center for p in sink.items] == [p.clustering_center for p in pts]
    assert all(a is not b for a, b in zip(sink.items, pts))