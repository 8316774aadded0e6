# dsacollections

Four container data structures for integers, each with an explicit
cursor-style iterator as well as ordinary Python iteration.

| Class | Module | How it stores its data |
|-------|--------|------------------------|
| `SortedIndexedList` | `dsacollections.sorted_indexed_list` | a Python list kept in order, searched by bisection, with a capacity limit |
| `Bag` | `dsacollections.bag` | hash table with separate chaining and a count per distinct value |
| `BitSet` | `dsacollections.bitset` | one flag per integer between the smallest and largest element |
| `SortedMap` | `dsacollections.sorted_map` | unbalanced binary search tree of linked nodes |

The sorted containers take a relation `r(a, b)` that returns `True` when `a`
may come before `b`. Two are provided in `dsacollections.relations`:
`ascending` (`a <= b`) and `descending` (`a >= b`).

## Installation

```
pip install .
```

## Sorted indexed list

```python
from dsacollections.relations import ascending
from dsacollections.sorted_indexed_list import SortedIndexedList

lst = SortedIndexedList(ascending)
for value in (5, 1, 3):
    lst.add(value)

list(lst)             # [1, 3, 5]
lst.search(3)         # 1   (position of the first occurrence, or -1 when absent)
lst.get_element(2)    # 5
lst.remove(0)         # 1   (returns the removed element)

other = SortedIndexedList(ascending)
other.add(5)
lst.diff(other)       # drop every element that also occurs in other
list(lst)             # [3]
```

Equal elements keep the order in which they were added. An invalid position
passed to `get_element` or `remove` raises `IndexError`. The list holds at
most `capacity` elements (10000 unless given as the second argument);
adding beyond that raises `OverflowError`.

## Bag

```python
from dsacollections.bag import Bag

bag = Bag()
for value in (5, 5, 7):
    bag.add(value)

len(bag)              # 3   (total number of occurrences)
bag.occurrences(5)    # 2
5 in bag              # True
bag.remove(5)         # True; False when the element is not in the bag

it = bag.iterator()
it.modify_current(7)  # replace the occurrence under the cursor with 7
```

Iterating a bag yields each value as many times as it occurs; the order
follows the hash table, not the values.

## BitSet

```python
from dsacollections.bitset import BitSet

s = BitSet()
s.add(10)             # True
s.add(10)             # False, already present
s.add(-3)
list(s)               # [-3, 10]  (always ascending)
s.remove(10)          # True; False when absent
```

Memory grows with the distance between the smallest and largest element,
not with the number of elements.

## Sorted map

```python
from dsacollections.relations import ascending
from dsacollections.sorted_map import SortedMap

m = SortedMap(ascending)
m.add(1, 2)           # None: the key was new
m.add(1, 3)           # 2: the previous value is returned
m.search(1)           # 3; None when the key is absent
list(m)               # [(1, 3)]
m.remove(1)           # 3; None when the key is absent
```

The tree is not rebalanced, so keys added in order make it a chain.

## Cursor iterators

Every container has an `iterator()` method returning a cursor
(`ListIterator`, `BagIterator`, `SetIterator`, `SMIterator`) with
`first()`, `next()`, `valid()` and `current()`. A new cursor stands on the
first element. Calling `next()` or `current()` when `valid()` is `False`
raises `IndexError`.

`SMIterator.remove_current()` removes the pair under the cursor from the map,
returns it as `(key, value)`, and moves the cursor to the pair that followed.
`BagIterator.modify_current(new_value)` is described above.

## What it does not do

This is a library only: it has no command-line program. The containers hold
data in memory and offer no saving or loading, and none of them is safe to
change from several threads at once.

## Running the tests

```
pip install ".[test]"
pytest
```