import threading

import pytest

from sesame.utils import (
    MersenneTwister,
    Point,
    create_barrier,
    genrand_int31,
    genrand_int32,
    genrand_real3,
    group_by_centers,
    init_genrand,
)


def test_default_seed_matches_reference_sequence():
    generator = MersenneTwister()
    assert generator.genrand_int32() == 3499211612
    assert generator.genrand_int32() == 581869302


def test_explicit_default_seed_equals_unseeded():
    a = MersenneTwister()
    b = MersenneTwister(5489)
    assert [a.genrand_int32() for _ in range(700)] == [b.genrand_int32() for _ in range(700)]


def test_same_seed_reproduces_sequence():
    a = MersenneTwister(10)
    b = MersenneTwister(10)
    assert [a.genrand_int32() for _ in range(50)] == [b.genrand_int32() for _ in range(50)]


def test_different_seeds_differ():
    a = MersenneTwister(1)
    b = MersenneTwister(2)
    assert [a.genrand_int32() for _ in range(5)] != [b.genrand_int32() for _ in range(5)]


def test_reseeding_restarts_sequence():
    generator = MersenneTwister(7)
    first = [generator.genrand_int32() for _ in range(10)]
    generator.seed(7)
    assert [generator.genrand_int32() for _ in range(10)] == first


def test_int31_is_shifted_int32():
    a = MersenneTwister(3)
    b = MersenneTwister(3)
    for _ in range(20):
        assert a.genrand_int31() == b.genrand_int32() >> 1


def test_values_are_in_range():
    generator = MersenneTwister(11)
    for _ in range(1000):
        assert 0 <= generator.genrand_int32() < 2**32
        assert 0 <= generator.genrand_int31() < 2**31
        value = generator.genrand_real3()
        assert 0.0 < value < 1.0


def test_shared_generator_follows_seed():
    init_genrand(42)
    shared = [genrand_int32(), genrand_int31(), genrand_real3()]
    local = MersenneTwister(42)
    expected = [local.genrand_int32(), local.genrand_int31(), local.genrand_real3()]
    assert shared == expected


def test_create_barrier_parties():
    barrier = create_barrier(3)
    assert isinstance(barrier, threading.Barrier)
    assert barrier.parties == 3


def test_point_copy_is_independent():
    point = Point(index=4, features=[1.0, 2.0], clustering_center=2)
    clone = point.copy()
    assert clone == point
    clone.features[0] = 9.0
    assert point.features[0] == 1.0


def test_point_dimension_defaults():
    assert Point(dimension=3).features == [0.0, 0.0, 0.0]
    assert Point(features=[1.0, 2.0]).dimension == 2
    with pytest.raises(ValueError):
        Point(dimension=3, features=[1.0])


def test_group_by_centers_labels_nearest():
    inputs = [
        Point(index=0, features=[0.1, 0.0]),
        Point(index=1, features=[9.9, 10.0]),
        Point(index=2, features=[0.0, 0.3]),
    ]
    centers = [Point(features=[0.0, 0.0]), Point(features=[10.0, 10.0])]
    grouped = group_by_centers(inputs, centers, 2)
    assert [p.clustering_center for p in grouped] == [1, 2, 1]
    assert [p.index for p in grouped] == [0, 1, 2]
    assert all(p.clustering_center == -1 for p in inputs)


def test_group_by_centers_tie_picks_first():
    inputs = [Point(features=[5.0])]
    centers = [Point(features=[4.0]), Point(features=[6.0])]
    assert group_by_centers(inputs, centers, 1)[0].clustering_center == 1


def test_group_by_centers_without_centers_keeps_label():
    inputs = [Point(features=[1.0], clustering_center=7)]
    grouped = group_by_centers(inputs, [], 1)
    assert grouped[0].clustering_center == 7
    assert grouped[0] is not inputs[0]