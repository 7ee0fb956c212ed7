"""A red-black tree keyed on comparable values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterator, Optional


class Color(Enum):
    RED = auto()
    BLACK = auto()


@dataclass(eq=False, repr=False)
class Node:
    """A tree node; leaves point at the tree's shared black sentinel."""

    data: Any
    color: Color = Color.RED
    left: Optional[Node] = None
    right: Optional[Node] = None
    parent: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.data!r}, {self.color.name})"


class RedBlackTree:
    """Self-balancing binary search tree allowing duplicate values."""

    def __init__(self) -> None:
        self._nil = Node(None, Color.BLACK)
        self._root: Node = self._nil
        self._size = 0

    def _rotate_left(self, x: Node) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is None:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: Node) -> None:
        y = x.left
        x.left = y.right
        if y.right is not self._nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is None:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    def insert(self, data: Any) -> None:
        """Insert a value; equal values go to the right."""
        node = Node(data, Color.RED, self._nil, self._nil)
        parent: Optional[Node] = None
        current = self._root
        while current is not self._nil:
            parent = current
            current = current.left if data < current.data else current.right
        node.parent = parent
        if parent is None:
            self._root = node
        elif data < parent.data:
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        self._fix_insert(node)

    def _fix_insert(self, z: Node) -> None:
        while z is not self._root and z.parent is not None and z.parent.color is Color.RED:
            grand = z.parent.parent
            if z.parent is grand.left:
                uncle = grand.right
                if uncle is not None and uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotate_left(z)
                    if z.parent is not None:
                        z.parent.color = Color.BLACK
                        if z.parent.parent is not None:
                            z.parent.parent.color = Color.RED
                            self._rotate_right(z.parent.parent)
            else:
                uncle = grand.left
                if uncle is not None and uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotate_right(z)
                    if z.parent is not None:
                        z.parent.color = Color.BLACK
                        if z.parent.parent is not None:
                            z.parent.parent.color = Color.RED
                            self._rotate_left(z.parent.parent)
        self._root.color = Color.BLACK

    def _minimum(self, node: Node) -> Node:
        while node is not self._nil and node.left is not self._nil:
            node = node.left
        return node

    def _find(self, data: Any) -> Node:
        node = self._root
        while node is not self._nil and data != node.data:
            node = node.left if data < node.data else node.right
        return node

    def search(self, data: Any) -> Optional[Node]:
        """Return a node holding the value, or None."""
        node = self._find(data)
        return None if node is self._nil else node

    def _transplant(self, u: Node, v: Node) -> None:
        if u.parent is None:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def remove(self, data: Any) -> None:
        """Remove one occurrence of a value; a missing value is ignored."""
        z = self._find(data)
        if z is self._nil:
            return

        y = z
        original_color = y.color
        if z.left is self._nil:
            x = z.right
            self._transplant(z, z.right)
        elif z.right is self._nil:
            x = z.left
            self._transplant(z, z.left)
        else:
            y = self._minimum(z.right)
            original_color = y.color
            x = y.right
            if y.parent is z:
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color

        z.left = z.right = z.parent = None
        self._size -= 1

        if original_color is Color.BLACK:
            self._fix_delete(x)

    def _fix_delete(self, x: Node) -> None:
        nil = self._nil
        while x is not self._root and x.color is Color.BLACK:
            if x is x.parent.left:
                w = x.parent.right
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_left(x.parent)
                    w = x.parent.right
                if w.left.color is Color.BLACK and w.right.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.right.color is Color.BLACK:
                        if w.left is not nil:
                            w.left.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_right(w)
                        w = x.parent.right
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    if w.right is not nil:
                        w.right.color = Color.BLACK
                    self._rotate_left(x.parent)
                    x = self._root
            else:
                w = x.parent.left
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_right(x.parent)
                    w = x.parent.left
                if w.right.color is Color.BLACK and w.left.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.left.color is Color.BLACK:
                        if w.right is not nil:
                            w.right.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_left(w)
                        w = x.parent.left
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    if w.left is not nil:
                        w.left.color = Color.BLACK
                    self._rotate_right(x.parent)
                    x = self._root
        x.color = Color.BLACK

    def __contains__(self, data: Any) -> bool:
        return self._find(data) is not self._nil

    def __iter__(self) -> Iterator[Any]:
        stack: list[Node] = []
        node = self._root
        while stack or node is not self._nil:
            while node is not self._nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __len__(self) -> int:
        return self._size

    def black_height(self) -> int:
        """Count black nodes on any root-to-leaf path.

        Raises ValueError if the red-black properties do not hold.
        """
        nil = self._nil

        def check(node: Node) -> int:
            if node is nil:
                return 0
            if node.color is Color.RED and (
                node.left.color is Color.RED or node.right.color is Color.RED
            ):
                raise ValueError(f"red node {node.data!r} has a red child")
            left = check(node.left)
            right = check(node.right)
            if left != right:
                raise ValueError(f"unequal black heights below {node.data!r}")
            return left + (1 if node.color is Color.BLACK else 0)

        if self._root.color is not Color.BLACK:
            raise ValueError("root is not black")
        return check(self._root)