"""Random workloads of insertions, deletions and searches."""

from __future__ import annotations

import random
from bisect import insort
from enum import IntEnum
from typing import Any

from dsbench.utils import Workload


class OpType(IntEnum):
    """Kinds of operation a workload holds."""

    INSERT = 1
    DELETE = 2
    SEARCH = 3


def generate_workload(
    insertions: int, deletions: int, searches: int, seed: Any = None
) -> Workload:
    """Build a random workload over the distinct values 1..insertions.

    Values are inserted in shuffled order. Deletions and searches always
    target a value that is present at that point; each step picks uniformly
    among the operation kinds still possible.

    Raises ValueError if a count is negative or if deletions and searches
    cannot all be served by the values inserted.
    """
    if min(insertions, deletions, searches) < 0:
        raise ValueError("operation counts must not be negative")

    rng = random.Random(seed)
    values = list(range(1, insertions + 1))
    rng.shuffle(values)

    live: list[int] = []
    remaining = {
        OpType.INSERT: insertions,
        OpType.DELETE: deletions,
        OpType.SEARCH: searches,
    }
    workload = Workload(num_ops=insertions + deletions + searches)

    while any(remaining.values()):
        choices = [
            op
            for op in OpType
            if remaining[op] and (op is OpType.INSERT or live)
        ]
        if not choices:
            raise ValueError("not enough inserted values for the remaining operations")
        op = rng.choice(choices)

        if op is OpType.INSERT:
            value = values.pop()
            insort(live, value)
        else:
            index = rng.randrange(len(live))
            value = live[index]
            if op is OpType.DELETE:
                del live[index]

        workload.ops.append((op, value))
        remaining[op] -= 1

    return workload