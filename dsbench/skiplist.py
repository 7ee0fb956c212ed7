"""A linked skip list with randomised level promotion."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False, repr=False)
class SkipNode:
    """One node of a skip list level, linked in four directions."""

    data: Any
    left: Optional[SkipNode] = None
    right: Optional[SkipNode] = None
    up: Optional[SkipNode] = None
    down: Optional[SkipNode] = None

    def __repr__(self) -> str:
        return f"SkipNode({self.data!r})"


class SkipList:
    """Ordered multiset built from stacked linked lists.

    Each inserted value is promoted to the next level with probability 1/2,
    growing the list by at most one level per insertion.
    """

    def __init__(self, seed: Any = None) -> None:
        self._rng = random.Random(seed)
        self._heads: list[SkipNode] = [SkipNode(None)]
        self._size = 0

    def _promote(self) -> bool:
        return self._rng.getrandbits(1) == 0

    def insert(self, data: Any) -> None:
        """Insert a value; duplicates are kept."""
        path: list[SkipNode] = []
        curr: Optional[SkipNode] = self._heads[-1]
        while curr is not None:
            if curr.right is not None and curr.right.data < data:
                curr = curr.right
            else:
                path.append(curr)
                curr = curr.down

        below: Optional[SkipNode] = None
        promote = True
        level = 0
        while promote and level < len(self._heads):
            left = path.pop()
            node = SkipNode(data, left=left, right=left.right, down=below)
            if left.right is not None:
                left.right.left = node
            left.right = node
            if below is not None:
                below.up = node
            below = node
            promote = self._promote()
            level += 1

        if promote:
            head = SkipNode(None, down=self._heads[-1])
            self._heads[-1].up = head
            self._heads.append(head)
            node = SkipNode(data, left=head, down=below)
            head.right = node
            if below is not None:
                below.up = node

        self._size += 1

    def remove(self, data: Any) -> None:
        """Remove one occurrence of a value; a missing value is ignored."""
        node = self.search(data)
        if node is None:
            return
        while node is not None:
            if node.left is not None:
                node.left.right = node.right
            if node.right is not None:
                node.right.left = node.left
            below = node.down
            node.left = node.right = node.up = node.down = None
            node = below
        self._size -= 1

        while len(self._heads) > 1 and self._heads[-1].right is None:
            self._heads.pop()
            self._heads[-1].up = None

    def search(self, data: Any) -> Optional[SkipNode]:
        """Return the highest node holding the value, or None."""
        curr: Optional[SkipNode] = self._heads[-1]
        while curr is not None:
            nxt = curr.right
            if nxt is not None and nxt.data < data:
                curr = nxt
            elif nxt is not None and nxt.data == data:
                return nxt
            else:
                curr = curr.down
        return None

    def __contains__(self, data: Any) -> bool:
        return self.search(data) is not None

    def __iter__(self) -> Iterator[Any]:
        node = self._heads[0].right
        while node is not None:
            yield node.data
            node = node.right

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Number of levels, including the bottom one."""
        return len(self._heads)