"""A map with keys ordered by a relation, stored as a binary search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from dsacollections.relations import Relation


@dataclass(eq=False)
class _Node:
    key: int
    value: int
    left: _Node | None = None
    right: _Node | None = None


class SortedMap:
    """Key/value pairs whose keys follow the order given by ``relation``.

    ``relation(a, b)`` is True when key ``a`` may stand before key ``b``.
    Lookups that miss return None.
    """

    def __init__(self, relation: Relation) -> None:
        self._relation = relation
        self._root: _Node | None = None
        self._length = 0

    @property
    def relation(self) -> Relation:
        return self._relation

    def _locate(self, key: int) -> tuple[_Node | None, _Node | None]:
        """Return ``(parent, node)``; ``node`` is None when the key is absent."""
        parent = None
        node = self._root
        while node is not None and node.key != key:
            parent = node
            node = node.left if self._relation(key, node.key) else node.right
        return parent, node

    def add(self, key: int, value: int) -> int | None:
        """Map ``key`` to ``value``; return the previous value or None."""
        parent, node = self._locate(key)
        if node is not None:
            old, node.value = node.value, value
            return old
        fresh = _Node(key, value)
        if parent is None:
            self._root = fresh
        elif self._relation(key, parent.key):
            parent.left = fresh
        else:
            parent.right = fresh
        self._length += 1
        return None

    def search(self, key: int) -> int | None:
        """Value mapped to ``key``, or None if the key is absent."""
        _, node = self._locate(key)
        return None if node is None else node.value

    def _replace_child(self, parent: _Node | None, old: _Node, new: _Node | None) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def remove(self, key: int) -> int | None:
        """Remove ``key``; return its value, or None if it was absent."""
        parent, node = self._locate(key)
        if node is None:
            return None
        removed = node.value
        if node.left is None or node.right is None:
            child = node.left if node.left is not None else node.right
            self._replace_child(parent, node, child)
        else:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.key, node.value = successor.key, successor.value
            self._replace_child(successor_parent, successor, successor.right)
        self._length -= 1
        return removed

    def size(self) -> int:
        """Number of pairs in the map."""
        return self._length

    def __len__(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        return self._root is None

    def iterator(self) -> SMIterator:
        return SMIterator(self)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Yield ``(key, value)`` pairs in the order of the relation."""
        cursor = SMIterator(self)
        while cursor.valid():
            yield cursor.current()
            cursor.next()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class SMIterator:
    """A cursor over a SortedMap visiting pairs in the order of its relation."""

    def __init__(self, sorted_map: SortedMap) -> None:
        self._map = sorted_map
        self._stack: list[_Node] = []
        self._current: _Node | None = None
        self.first()

    def _descend_left(self, node: _Node | None) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left
        self._current = self._stack.pop() if self._stack else None

    def _require_node(self) -> _Node:
        if self._current is None:
            raise IndexError("iterator is not valid")
        return self._current

    def first(self) -> None:
        self._stack = []
        self._descend_left(self._map._root)

    def next(self) -> None:
        """Advance to the next pair; raises IndexError when not valid."""
        self._descend_left(self._require_node().right)

    def valid(self) -> bool:
        return self._current is not None

    def current(self) -> tuple[int, int]:
        """Pair under the cursor; raises IndexError when not valid."""
        node = self._require_node()
        return node.key, node.value

    def remove_current(self) -> tuple[int, int]:
        """Remove the current pair from the map and return it.

        The cursor moves to the pair that followed the removed one.
        """
        pair = self.current()
        self.next()
        following = self._current.key if self._current is not None else None
        self._map.remove(pair[0])
        self.first()
        while self._current is not None and self._current.key != following:
            self.next()
        return pair