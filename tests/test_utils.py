import random

import pytest

from cloverleaf.utils import (
    FeatureHasher,
    IllegalSample,
    Sample,
    SampleKind,
    count_runs,
    get_best_count,
    reservoir_sample,
    weighted_reservoir_sample,
)


def test_choose_best():
    assert get_best_count([0, 0, 1, 1, 1, 2], random.Random(1)) == 1


def test_choose_one():
    assert get_best_count([0, 0, 0], random.Random(1)) == 0


def test_choose_between():
    rng = random.Random(1231232132)
    results = {get_best_count([0, 1], rng) for _ in range(50)}
    assert results == {0, 1}


def test_choose_last():
    assert get_best_count([0, 1, 1], random.Random(1231232132)) == 1


def test_choose_only():
    assert get_best_count([0, 0, 0], random.Random(1231232132)) == 0


def test_choose_empty_raises():
    with pytest.raises(ValueError):
        get_best_count([], random.Random(1))


def test_counter():
    assert list(count_runs([0, 0, 0, 1, 2, 2, 3])) == [(0, 3), (1, 1), (2, 2), (3, 1)]
    assert list(count_runs([])) == []
    assert list(count_runs([0])) == [(0, 1)]


def test_feature_hasher_range_and_determinism():
    hasher = FeatureHasher(7)
    for feat in range(50):
        for hash_num in range(3):
            sign, idx = hasher.hash(feat, hash_num)
            assert sign in (-1, 1)
            assert 0 <= idx < 7
            assert hasher.hash(feat, hash_num) == (sign, idx)


def test_feature_hasher_spreads_indices():
    hasher = FeatureHasher(16)
    indices = {hasher.hash(f, 0)[1] for f in range(200)}
    assert len(indices) > 8


def test_feature_hasher_rejects_zero_dims():
    with pytest.raises(ValueError):
        FeatureHasher(0)


def test_reservoir_sample_short_stream_keeps_all():
    items = [(1, 0.5), (2, 0.25)]
    assert reservoir_sample(iter(items), 5, random.Random(3)) == items


def test_reservoir_sample_size_and_membership():
    items = [(i, float(i)) for i in range(100)]
    sample = reservoir_sample(iter(items), 10, random.Random(3))
    assert len(sample) == 10
    assert all(item in items for item in sample)


def test_weighted_reservoir_sample_size_and_membership():
    items = [(f"n{i}", float(i + 1)) for i in range(20)]
    sample = weighted_reservoir_sample(iter(items), 5, random.Random(9))
    assert len(sample) == 5
    assert len(set(sample)) == 5
    assert all(item in items for item in sample)


def test_weighted_reservoir_sample_short_stream():
    items = [("a", 1.0), ("b", 2.0)]
    sample = weighted_reservoir_sample(iter(items), 5, random.Random(9))
    assert sorted(sample) == items


def test_sample_from_value():
    assert Sample.from_value(0.3) == Sample(SampleKind.PROBABILITY, 0.3)
    assert Sample.from_value(5.0) == Sample(SampleKind.FIXED, 5)
    assert Sample.from_value(0.0) == Sample(SampleKind.FIXED, 0)
    assert Sample.all().kind is SampleKind.ALL


def test_sample_negative_raises():
    with pytest.raises(IllegalSample):
        Sample.from_value(-1.0)


def test_sample_fixed():
    rng = random.Random(0)
    count, scale = Sample.from_value(3).sample(10, False, rng)
    assert count == 3
    assert scale == pytest.approx(10 / 3)
    assert Sample.from_value(20).sample(10, False, rng) == (10, 1.0)


def test_sample_all():
    assert Sample.all().sample(7, True, random.Random(0)) == (7, 1.0)


def test_sample_probability_at_least_one_on_empty():
    assert Sample.from_value(0.5).sample(0, True, random.Random(0)) == (1, 0.0)
    assert Sample.from_value(0.5).sample(0, False, random.Random(0)) == (0, 2.0)


def test_sample_probability_bounds():
    rng = random.Random(42)
    for _ in range(20):
        count, scale = Sample.from_value(0.25).sample(40, False, rng)
        assert 0 <= count <= 40
        assert scale == 4.0