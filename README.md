# dsbench

dsbench times two ordered structures, a skip list and a red-black tree, on
the same random workload of insertions, deletions and searches. It then
prints how long each structure took.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

The `dsbench` command reads its input from standard input. The first number
gives how many tests to run. After it come three numbers for each test: the
count of insertions, the count of deletions and the count of searches.

```
printf '2\n100000 50000 50000\n1000000 0 1000000\n' | dsbench
```

Pass `--seed N` to make the generated workloads repeatable:

```
printf '1\n10000 5000 5000\n' | dsbench --seed 42
```

For each test the command prints a header with the operation counts. Counts
are shortened, so `1500` is shown as `1.5K` and `1000000` as `1M`. Below the
header it prints a table with one row per structure and the time in whole
milliseconds:

```
Test 1 || Total = 200K Insertions = 100K Deletions = 50K Searches = 50K

Algorithm                Time (ms)
---------------------------------------------
Skip List                ...
Red Black Tree           ...
```

The command stops with a usage error if the input is not all integers, if
fewer counts are given than the test count asks for, or if a test's
deletions and searches cannot be served by the values it inserts (for
example, more deletions than insertions).

## Library use

```python
from dsbench.skiplist import SkipList
from dsbench.redblacktree import RedBlackTree
from dsbench.generator import generate_workload
from dsbench.cli import time_workload
from dsbench.utils import format_number

workload = generate_workload(10_000, 2_000, 5_000, seed=42)
print(len(workload), "operations")

print("skip list:", time_workload(lambda: SkipList(seed=1), workload), "ms")
print("red-black tree:", time_workload(RedBlackTree, workload), "ms")

tree = RedBlackTree()
for value in (5, 3, 8):
    tree.insert(value)
print(list(tree), 3 in tree, tree.black_height())

print(format_number(2_500_000))  # 2.5M
```

`SkipList` and `RedBlackTree` both provide `insert`, `remove`, `search`,
membership tests, in-order iteration and `len()`. Both keep duplicate
values; `remove` takes out one occurrence, and removing a value that is not
present does nothing. `search` returns a node holding the value, or `None`.
`SkipList` takes an optional `seed` for its level promotion and reports its
number of levels with `height()`. `RedBlackTree.black_height()` returns the
black height and raises `ValueError` if the red-black properties do not hold.

`generate_workload(insertions, deletions, searches, seed=None)` returns a
`Workload` whose `ops` are `(OpType, value)` pairs over the distinct values
`1..insertions`. Deletions and searches only ever target values that are
currently stored. With a seed, it always produces the same workload.

`run_workload(structure, workload)` replays a workload on any object with
`insert`, `remove` and `search` methods; `time_workload(factory, workload)`
builds a structure from the factory, replays the workload and returns the
elapsed whole milliseconds.

## Limitations

Each structure is timed once per test; there are no repeated runs,
averages or warm-up, and no other output format than the printed table.