"""A set of integers stored as a bit array over the span of its values."""

from __future__ import annotations

from collections.abc import Iterator


class BitSet:
    """A set of integers kept as flags over ``[minimum, maximum]``.

    One flag is kept for every integer between the smallest and the largest
    element. The span grows when a value outside it is added and shrinks
    when an end element is removed.
    """

    def __init__(self) -> None:
        self._left = 0
        self._bits = bytearray()
        self._count = 0

    @property
    def _right(self) -> int:
        return self._left + len(self._bits) - 1

    def add(self, element: int) -> bool:
        """Add ``element``; return False if it was already present."""
        if not self._count:
            self._left = element
            self._bits = bytearray(b"\x01")
            self._count = 1
            return True
        if self.search(element):
            return False
        if element < self._left:
            self._bits = bytearray(self._left - element) + self._bits
            self._left = element
        elif element > self._right:
            self._bits.extend(bytearray(element - self._right))
        self._bits[element - self._left] = 1
        self._count += 1
        return True

    def remove(self, element: int) -> bool:
        """Remove ``element``; return False if it was absent."""
        if not self.search(element):
            return False
        self._bits[element - self._left] = 0
        self._count -= 1
        if not self._count:
            self._left = 0
            self._bits = bytearray()
            return True
        start = self._bits.index(1)
        end = self._bits.rindex(1)
        if start or end != len(self._bits) - 1:
            self._bits = self._bits[start : end + 1]
            self._left += start
        return True

    def search(self, element: int) -> bool:
        """Whether ``element`` belongs to the set."""
        if not self._count or not self._left <= element <= self._right:
            return False
        return bool(self._bits[element - self._left])

    def __contains__(self, element: object) -> bool:
        return isinstance(element, int) and self.search(element)

    def size(self) -> int:
        """Number of elements in the set."""
        return self._count

    def __len__(self) -> int:
        return self.size()

    def is_empty(self) -> bool:
        return self._count == 0

    def iterator(self) -> SetIterator:
        return SetIterator(self)

    def __iter__(self) -> Iterator[int]:
        """Yield the elements in ascending order."""
        left = self._left
        return (left + offset for offset, bit in enumerate(self._bits) if bit)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class SetIterator:
    """A cursor over a BitSet visiting its elements in ascending order."""

    def __init__(self, bitset: BitSet) -> None:
        self._set = bitset
        self._offset = 0

    def _checked_offset(self) -> int:
        if self._offset >= len(self._set._bits):
            raise IndexError("set cursor has no current element")
        return self._offset

    def first(self) -> None:
        self._offset = 0

    def next(self) -> None:
        """Advance to the next element; raises IndexError when not valid."""
        bits = self._set._bits
        offset = self._checked_offset() + 1
        while offset < len(bits) and not bits[offset]:
            offset += 1
        self._offset = offset

    def valid(self) -> bool:
        return self._offset < len(self._set._bits)

    def current(self) -> int:
        """Element under the cursor; raises IndexError when not valid."""
        return self._set._left + self._checked_offset()