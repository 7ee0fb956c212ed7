from collections import Counter

import pytest

from dsbench.generator import OpType, generate_workload


def test_op_type_codes_match_workload_encoding():
    workload = generate_workload(3, 1, 1, seed=7)
    codes = {int(op) for op, _ in workload.ops}
    assert codes == {1, 2, 3}
    assert all(OpType(int(op)) is op for op, _ in workload.ops)


@pytest.mark.parametrize("counts", [(10, 4, 7), (50, 50, 20), (1, 0, 0), (5, 0, 12)])
def test_operation_counts(counts):
    insertions, deletions, searches = counts
    workload = generate_workload(insertions, deletions, searches, seed=3)
    tally = Counter(op for op, _ in workload.ops)
    assert tally[OpType.INSERT] == insertions
    assert tally[OpType.DELETE] == deletions
    assert tally[OpType.SEARCH] == searches
    assert len(workload) == sum(counts)
    assert len(workload.ops) == sum(counts)


def test_inserted_values_are_a_permutation():
    workload = generate_workload(30, 10, 10, seed=11)
    inserted = [v for op, v in workload.ops if op is OpType.INSERT]
    assert sorted(inserted) == list(range(1, 31))


def test_deletes_and_searches_target_live_values():
    workload = generate_workload(40, 30, 40, seed=5)
    live = set()
    for op, value in workload.ops:
        if op is OpType.INSERT:
            assert value not in live
            live.add(value)
        elif op is OpType.DELETE:
            assert value in live
            live.remove(value)
        else:
            assert value in live


def test_same_seed_same_workload():
    first = generate_workload(25, 10, 10, seed=42)
    second = generate_workload(25, 10, 10, seed=42)
    assert first.ops == second.ops


def test_empty_workload():
    workload = generate_workload(0, 0, 0, seed=1)
    assert workload.ops == []
    assert len(workload) == 0


def test_first_operation_is_insert():
    workload = generate_workload(5, 3, 3, seed=9)
    assert workload.ops[0][0] is OpType.INSERT


@pytest.mark.parametrize("counts", [(0, 1, 0), (0, 0, 1), (2, 3, 0)])
def test_impossible_workload_raises(counts):
    with pytest.raises(ValueError):
        generate_workload(*counts, seed=0)


def test_negative_count_raises():
    with pytest.raises(ValueError):
        generate_workload(-1, 0, 0)