"""Command line benchmark comparing a skip list with a red-black tree."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Any, Callable, Optional, Sequence

from dsbench.generator import OpType, generate_workload
from dsbench.redblacktree import RedBlackTree
from dsbench.skiplist import SkipList
from dsbench.utils import Result, Workload, format_number

_NAME_WIDTH = 25
_TIME_WIDTH = 15

_ACTIONS = {
    OpType.INSERT: "insert",
    OpType.DELETE: "remove",
    OpType.SEARCH: "search",
}


def run_workload(structure: Any, workload: Workload) -> Any:
    """Replay every operation of the workload on the structure and return it."""
    for op, value in workload.ops:
        getattr(structure, _ACTIONS[OpType(op)])(value)
    return structure


def time_workload(factory: Callable[[], Any], workload: Workload) -> int:
    """Build a structure and replay the workload; return whole milliseconds taken."""
    start = time.perf_counter_ns()
    run_workload(factory(), workload)
    return (time.perf_counter_ns() - start) // 1_000_000


def render_header(index: int, insertions: int, deletions: int, searches: int) -> str:
    """Text printed before the timings of one test."""
    total = insertions + deletions + searches
    return (
        f"\nTest {index} || "
        f"Total = {format_number(total)} "
        f"Insertions = {format_number(insertions)} "
        f"Deletions = {format_number(deletions)} "
        f"Searches = {format_number(searches)}\n"
        "\n"
        f"{'Algorithm':<{_NAME_WIDTH}}{'Time (ms)':<{_TIME_WIDTH}}\n"
        f"{'-' * (_NAME_WIDTH + _TIME_WIDTH + 5)}\n"
    )


def render_row(name: str, duration_ms: int) -> str:
    """One line of the timing table."""
    return f"{name:<{_NAME_WIDTH}}{str(duration_ms):<{_TIME_WIDTH}}\n"


_STRUCTURES: tuple[tuple[str, Callable[[], Any]], ...] = (
    ("Skip List", SkipList),
    ("Red Black Tree", RedBlackTree),
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read test sizes from standard input and print timings for each."""
    parser = argparse.ArgumentParser(
        prog="dsbench",
        description=(
            "Read a test count followed by 'insertions deletions searches' "
            "for each test from standard input, and time both structures."
        ),
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for workload generation")
    args = parser.parse_args(argv)

    tokens = sys.stdin.read().split()
    try:
        numbers = [int(token) for token in tokens]
    except ValueError:
        parser.error("input must consist of integers")
    if not numbers:
        parser.error("missing test count")

    count, rest = numbers[0], numbers[1:]
    if len(rest) < 3 * count:
        parser.error(f"expected {count} lines of three counts")

    out = sys.stdout
    for index in range(1, count + 1):
        insertions, deletions, searches = rest[3 * (index - 1): 3 * index]
        try:
            workload = generate_workload(insertions, deletions, searches, args.seed)
        except ValueError as exc:
            parser.error(f"test {index}: {exc}")
        out.write(render_header(index, insertions, deletions, searches))
        for name, factory in _STRUCTURES:
            result = Result(name, time_workload(factory, workload))
            out.write(render_row(result.name, result.duration_ms))
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())