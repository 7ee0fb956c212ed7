import random

import pytest

from dsbench.skiplist import SkipList


@pytest.fixture
def values():
    rng = random.Random(1234)
    data = list(range(1, 501))
    rng.shuffle(data)
    return data


def test_empty_list():
    sl = SkipList(seed=1)
    assert len(sl) == 0
    assert list(sl) == []
    assert sl.height() == 1
    assert sl.search(10) is None
    assert 10 not in sl


def test_iteration_is_sorted(values):
    sl = SkipList(seed=7)
    for v in values:
        sl.insert(v)
    assert list(sl) == sorted(values)
    assert len(sl) == len(values)
    assert sl.height() >= 1


def test_search_finds_every_value(values):
    sl = SkipList(seed=3)
    for v in values:
        sl.insert(v)
    for v in values:
        node = sl.search(v)
        assert node.data == v
        assert v in sl
    assert sl.search(max(values) + 1) is None
    assert 0 not in sl


def test_search_column_descends_to_bottom(values):
    sl = SkipList(seed=11)
    for v in values:
        sl.insert(v)
    for v in values[:50]:
        node = sl.search(v)
        depth = 1
        while node.down is not None:
            assert node.down.data == v
            assert node.down.up is node
            node = node.down
            depth += 1
        assert depth <= sl.height()


def test_same_seed_same_shape(values):
    a = SkipList(seed=99)
    b = SkipList(seed=99)
    for v in values:
        a.insert(v)
        b.insert(v)
    assert a.height() == b.height()


def test_remove_all_restores_empty(values):
    sl = SkipList(seed=5)
    for v in values:
        sl.insert(v)
    remaining = sorted(values)
    rng = random.Random(8)
    order = values[:]
    rng.shuffle(order)
    for v in order:
        sl.remove(v)
        remaining.remove(v)
        assert v not in sl
    assert list(sl) == remaining == []
    assert len(sl) == 0
    assert sl.height() == 1


def test_partial_remove_keeps_order(values):
    sl = SkipList(seed=21)
    for v in values:
        sl.insert(v)
    removed = set(values[::3])
    for v in removed:
        sl.remove(v)
    expected = sorted(set(values) - removed)
    assert list(sl) == expected
    assert len(sl) == len(expected)


def test_remove_missing_is_noop():
    sl = SkipList(seed=2)
    for v in (5, 1, 9):
        sl.insert(v)
    sl.remove(4)
    assert list(sl) == [1, 5, 9]
    assert len(sl) == 3


def test_duplicates_are_kept():
    sl = SkipList(seed=4)
    for v in (3, 3, 1):
        sl.insert(v)
    assert list(sl) == [1, 3, 3]
    sl.remove(3)
    assert list(sl) == [1, 3]
    assert 3 in sl