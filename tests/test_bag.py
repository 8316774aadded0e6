import pytest

from dsacollections.bag import Bag, BagIterator


def _bag_of(values):
    bag = Bag()
    for value in values:
        bag.add(value)
    return bag


def _drain(it):
    """Return the elements from the cursor's position to the end."""
    result = []
    while it.valid():
        result.append(it.current())
        it.next()
    return result


def _assert_exhausted(it):
    assert not it.valid()
    for step in (it.next, it.current):
        with pytest.raises(IndexError):
            step()


def _removals(bag, values):
    return [bag.remove(value) for value in values]


def test_short_scenario():
    b = _bag_of([5, 1, 10, 7, 1, 11, -3])
    assert b.size() == 7
    assert (b.search(10), b.search(16)) == (True, False)
    assert (b.occurrences(1), b.occurrences(7)) == (2, 1)
    assert _removals(b, [1, 6]) == [True, False]
    assert b.size() == 6
    assert b.occurrences(1) == 1
    assert sorted(b) == sorted([5, 10, 7, 1, 11, -3])


def test_new_bag_is_empty():
    b = Bag()
    assert (b.is_empty(), b.size()) == (True, 0)
    assert not any(b.search(i) for i in range(-5, 5))
    assert not any(_removals(b, range(-10, 10)))
    assert all(b.occurrences(i) == 0 for i in range(-10, 10))
    _assert_exhausted(b.iterator())


@pytest.mark.parametrize(
    ("values", "new_value", "expected"),
    [
        ([5, 5, 7], 7, {5: 1, 7: 2}),
        ([4], 14, {4: 0, 14: 1}),
        ([3, 3], 3, {3: 2}),
    ],
)
def test_modify_current(values, new_value, expected):
    bag = _bag_of(values)
    it = bag.iterator()
    it.first()
    assert it.current() == values[0]
    it.modify_current(new_value)
    assert {e: bag.occurrences(e) for e in expected} == expected
    assert bag.size() == len(values)
    assert it.current() == new_value
    assert len(_drain(bag.iterator())) == len(values)


def test_modify_current_on_invalid_iterator_raises():
    with pytest.raises(IndexError):
        Bag().iterator().modify_current(1)


def test_add():
    b = _bag_of(range(10))
    assert (b.is_empty(), b.size()) == (False, 10)
    for low, high, total in [(-10, 20, 40), (-100, 100, 240)]:
        for i in range(low, high):
            b.add(i)
        assert b.size() == total
    assert len(_drain(b.iterator())) == b.size()
    bounds = [(-100, 0), (-10, 1), (0, 2), (10, 3), (20, 2), (100, 1)]
    for i in range(-200, 200):
        expected = next((count for bound, count in bounds if i < bound), 0)
        assert b.occurrences(i) == expected
        assert b.search(i) == (i in b) == (expected > 0)
    for i in range(10000, -10000, -1):
        b.add(i)
    assert b.size() == 20240
    assert len(_drain(b.iterator())) == 20240


def test_remove():
    b = Bag()
    assert not any(_removals(b, range(-100, 100)))
    assert b.size() == 0
    for i in range(-100, 100, 2):
        b.add(i)
    assert _removals(b, range(-100, 100)) == [i % 2 == 0 for i in range(-100, 100)]
    assert _drain(b.iterator()) == []
    for i in range(-100, 101, 2):
        b.add(i)
    descending = range(100, -100, -1)
    assert _removals(b, descending) == [i % 2 == 0 for i in descending]
    assert _drain(b.iterator()) == [-100]
    assert b.size() == 1
    b.remove(-100)
    for i in range(-100, 100):
        for _ in range(5):
            b.add(i)
    assert b.size() == 1000
    assert all(b.occurrences(i) == 5 for i in range(-100, 100))
    assert all(_removals(b, range(-100, 100)))
    assert b.size() == 800
    assert all(b.occurrences(i) == 4 for i in range(-100, 100))
    for i in range(-200, 200):
        expected = [True] * 4 + [False] if -100 <= i < 100 else [False] * 5
        assert _removals(b, [i] * 5) == expected
    assert b.size() == 0
    assert all(b.occurrences(i) == 0 for i in range(-1000, 1000))
    low, high = -200, 200
    while low < high:
        b.add(low)
        b.add(high)
        low += 1
        high -= 1
    b.add(0)
    b.add(0)
    assert b.size() == 402
    assert len(_drain(b.iterator())) == 402
    for i in range(-30, 30):
        assert b.search(i)
        assert b.remove(i)
        assert b.search(i) == (i == 0)
    assert b.size() == 342


def test_iterator_over_repeated_element():
    it = _bag_of([33] * 100).iterator()
    for _ in range(2):
        assert it.valid()
        assert _drain(it) == [33] * 100
        _assert_exhausted(it)
        it.first()


def test_iterator_counts_and_restarts():
    it = _bag_of(i for i in range(-100, 100) for _ in range(3)).iterator()
    assert len(_drain(it)) == 600
    assert not it.valid()
    it.first()
    assert it.valid()


def test_iterator_yields_only_added_values():
    values = _drain(BagIterator(_bag_of(range(0, 200, 4))))
    assert len(values) == 50
    assert all(value % 4 == 0 for value in values)


def _mixed_bag():
    return _bag_of(
        value
        for i in range(100)
        for value in (i, i * -2, i * 2, i // 2, -(i // 2))
    )


@pytest.mark.parametrize("from_last", [True, False])
def test_iterator_elements_removed(from_last):
    b = _mixed_bag()
    elements = _drain(b.iterator())
    assert len(elements) == b.size()
    for element in reversed(elements) if from_last else elements:
        assert b.search(element)
        assert b.remove(element)
    assert b.is_empty()


def test_python_iteration_matches_iterator():
    b = _mixed_bag()
    assert list(b) == _drain(b.iterator())
    assert len(b) == b.size()


def test_quantity():
    b = _bag_of(j for step in range(10, 0, -1) for j in range(-30000, 30000, step))
    assert b.size() == 175739
    assert b.occurrences(-30000) == 10
    it = b.iterator()
    assert it.valid()
    elements = _drain(it)
    assert len(elements) == 175739
    assert not it.valid()
    assert all(b.search(e) and b.occurrences(e) > 0 for e in set(elements))
    for _ in range(10):
        _removals(b, range(40000, -40001, -1))
    assert b.size() == 0