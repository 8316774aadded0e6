"""A list kept sorted by a caller-supplied relation, with positional access."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from dsacollections.relations import Relation

DEFAULT_CAPACITY = 10000


class SortedIndexedList:
    """Elements kept in the order given by ``relation``, addressed by position.

    ``relation(a, b)`` is True when ``a`` may stand before ``b``. A new element
    is placed after every element that may precede it, so equal elements keep
    the order in which they were added.
    """

    def __init__(self, relation: Relation, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._relation = relation
        self._capacity = capacity
        self._items: list[int] = []

    @property
    def relation(self) -> Relation:
        return self._relation

    @property
    def capacity(self) -> int:
        return self._capacity

    def _boundary(self, precedes: Callable[[int], bool]) -> int:
        """Index of the first item for which ``precedes`` is False."""
        low, high = 0, len(self._items)
        while low < high:
            middle = (low + high) // 2
            if precedes(self._items[middle]):
                low = middle + 1
            else:
                high = middle
        return low

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._items):
            raise IndexError(f"invalid position {index}")
        return index

    def size(self) -> int:
        """Number of elements in the list."""
        return len(self._items)

    def __len__(self) -> int:
        return self.size()

    def is_empty(self) -> bool:
        return not self._items

    def get_element(self, index: int) -> int:
        """Element at ``index``; raises IndexError outside ``0..size()-1``."""
        return self._items[self._check_index(index)]

    def add(self, element: int) -> None:
        """Insert ``element`` at its place in the order."""
        if len(self._items) >= self._capacity:
            raise OverflowError("no free space left in the list")
        position = self._boundary(lambda item: self._relation(item, element))
        self._items.insert(position, element)

    def remove(self, index: int) -> int:
        """Remove and return the element at ``index``."""
        return self._items.pop(self._check_index(index))

    def search(self, element: int) -> int:
        """Position of the first occurrence of ``element``, or -1 if absent."""
        position = self._boundary(lambda item: not self._relation(element, item))
        if position < len(self._items) and self._items[position] == element:
            return position
        return -1

    def diff(self, other: SortedIndexedList) -> None:
        """Drop every element that also occurs in ``other``."""
        excluded = set(other)
        self._items = [item for item in self._items if item not in excluded]

    def iterator(self) -> ListIterator:
        return ListIterator(self)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class ListIterator:
    """A cursor over a SortedIndexedList, starting at its first element."""

    def __init__(self, sorted_list: SortedIndexedList) -> None:
        self._list = sorted_list
        self._position = 0

    def _checked_position(self) -> int:
        if self._position >= len(self._list):
            raise IndexError("list cursor has run past the last element")
        return self._position

    def first(self) -> None:
        self._position = 0

    def next(self) -> None:
        """Advance to the next element; raises IndexError when not valid."""
        self._position = self._checked_position() + 1

    def valid(self) -> bool:
        return self._position < len(self._list)

    def current(self) -> int:
        """Element under the cursor; raises IndexError when not valid."""
        return self._list.get_element(self._checked_position())