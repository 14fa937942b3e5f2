import pytest

from trip_capacity.heuristics.largest_fit.pool import WeightPool


def test_pool_is_sorted_and_keeps_duplicates():
    pool = WeightPool([3, 1, 2, 3])
    assert pool.remaining_weights() == [1, 2, 3, 3]
    assert len(pool) == 4


def test_take_largest_at_most_exact_match():
    pool = WeightPool([5, 1, 4])
    assert pool.take_largest_at_most(4) == (4, None)
    assert pool.remaining_weights() == [1, 5]


def test_take_largest_at_most_below_bound():
    pool = WeightPool([10, 2, 7])
    assert pool.take_largest_at_most(9) == (7, None)


def test_take_returns_none_when_everything_is_heavier():
    pool = WeightPool([5, 6])
    assert pool.take_largest_at_most(4) is None
    assert pool.remaining_weights() == [5, 6]


def test_empty_pool_is_falsy():
    pool = WeightPool([2])
    assert pool
    pool.take_largest_at_most(2)
    assert not pool
    assert pool.take_largest_at_most(100) is None


def test_labels_travel_with_weights():
    pool = WeightPool([2, 1, 2], labels=["a", "b", "c"])
    assert pool.take_largest_at_most(2) == (2, "c")
    assert pool.take_largest_at_most(2) == (2, "a")
    assert pool.take_largest_at_most(2) == (1, "b")


def test_label_count_must_match():
    with pytest.raises(ValueError):
        WeightPool([1, 2], labels=["a"])


def test_snapshot_is_a_copy():
    pool = WeightPool([1, 2])
    snap = pool.remaining_weights()
    snap.clear()
    assert len(pool) == 2
