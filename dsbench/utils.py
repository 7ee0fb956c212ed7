"""Shared records and number formatting for the benchmark."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

_SCALES = (
    (1_000_000_000_000, "T"),
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
)


@dataclass
class Workload:
    """A sequence of (operation, value) pairs to replay against a structure."""

    num_ops: int = 0
    ops: list[tuple[Any, int]] = field(default_factory=list)

    def __len__(self) -> int:
        return self.num_ops


@dataclass(frozen=True)
class Result:
    """Timing outcome of one structure on one workload."""

    name: str
    duration_ms: int


def format_number(number: int) -> str:
    """Shorten a count with a K/M/B/T suffix and one decimal place.

    The first ".0" in the text is dropped, so 1000 becomes "1K".
    """
    for threshold, suffix in _SCALES:
        if number >= threshold:
            text = f"{number / threshold:.1f}{suffix}"
            break
    else:
        text = str(number)
    return text.replace(".0", "", 1)