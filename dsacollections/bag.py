"""A multiset of integers stored in a hash table with separate chaining."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import repeat


@dataclass(eq=False)
class _Node:
    element: int
    frequency: int


class Bag:
    """A collection of integers in which each value may occur several times.

    Values are hashed by absolute value into chains; each distinct value is
    kept once with its number of occurrences. The table doubles when the load
    factor goes above 0.75.
    """

    _INITIAL_SLOTS = 10
    _LOAD_FACTOR = 0.75

    def __init__(self) -> None:
        self._table: list[list[_Node]] = [[] for _ in range(self._INITIAL_SLOTS)]
        self._count = 0

    def _slot(self, element: int) -> int:
        return abs(element) % len(self._table)

    def _find(self, element: int) -> _Node | None:
        chain = self._table[self._slot(element)]
        return next((node for node in chain if node.element == element), None)

    def _resize(self) -> None:
        old_table = self._table
        self._table = [[] for _ in range(2 * len(old_table))]
        for chain in old_table:
            for node in chain:
                self._table[self._slot(node.element)].insert(0, node)

    def add(self, element: int) -> None:
        """Add one occurrence of ``element``."""
        if self._count / len(self._table) > self._LOAD_FACTOR:
            self._resize()
        node = self._find(element)
        if node is not None:
            node.frequency += 1
        else:
            self._table[self._slot(element)].insert(0, _Node(element, 1))
        self._count += 1

    def remove(self, element: int) -> bool:
        """Remove one occurrence of ``element``; return False if it was absent."""
        node = self._find(element)
        if node is None:
            return False
        if node.frequency > 1:
            node.frequency -= 1
        else:
            self._table[self._slot(element)].remove(node)
        self._count -= 1
        return True

    def search(self, element: int) -> bool:
        return self._find(element) is not None

    def __contains__(self, element: object) -> bool:
        return isinstance(element, int) and self.search(element)

    def occurrences(self, element: int) -> int:
        """Number of times ``element`` occurs in the bag."""
        node = self._find(element)
        return node.frequency if node is not None else 0

    def size(self) -> int:
        """Total number of occurrences held."""
        return self._count

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def iterator(self) -> BagIterator:
        return BagIterator(self)

    def __iter__(self) -> Iterator[int]:
        for chain in self._table:
            for node in chain:
                yield from repeat(node.element, node.frequency)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class BagIterator:
    """A cursor that visits every occurrence in the bag once."""

    def __init__(self, bag: Bag) -> None:
        self._bag = bag
        self._slot = 0
        self._index = 0
        self._remaining = 0
        self.first()

    def _settle_from(self, slot: int) -> None:
        table = self._bag._table
        self._slot = next(
            (i for i in range(slot, len(table)) if table[i]), len(table)
        )
        if self._slot < len(table):
            self._index = 0
            self._remaining = table[self._slot][0].frequency

    def _node(self) -> _Node:
        if not self.valid():
            raise IndexError("iterator is not valid")
        return self._bag._table[self._slot][self._index]

    def first(self) -> None:
        self._settle_from(0)

    def next(self) -> None:
        """Advance to the next occurrence; raises IndexError when not valid."""
        self._node()
        if self._remaining > 1:
            self._remaining -= 1
            return
        chain = self._bag._table[self._slot]
        if self._index + 1 < len(chain):
            self._index += 1
            self._remaining = chain[self._index].frequency
        else:
            self._settle_from(self._slot + 1)

    def valid(self) -> bool:
        return self._slot < len(self._bag._table)

    def current(self) -> int:
        """Element under the cursor; raises IndexError when not valid."""
        return self._node().element

    def modify_current(self, new_value: int) -> None:
        """Replace one occurrence of the current element with ``new_value``.

        The cursor moves to ``new_value``.
        """
        current_node = self._node()
        bag = self._bag
        target = bag._find(new_value)
        target_chain = bag._table[bag._slot(new_value)]
        if target is None:
            target = _Node(new_value, 0)
            target_chain.insert(0, target)
        target.frequency += 1
        current_node.frequency -= 1
        if current_node.frequency == 0:
            bag._table[self._slot].remove(current_node)
        self._slot = bag._slot(new_value)
        self._index = target_chain.index(target)
        self._remaining = target.frequency