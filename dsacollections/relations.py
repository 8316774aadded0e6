"""Order relations used by the sorted containers."""

from collections.abc import Callable

Relation = Callable[[int, int], bool]
"""A relation tells whether its first argument may precede its second."""


def ascending(a, b) -> bool:
    """Return True when ``a`` may come before ``b`` in ascending order."""
    return a <= b


def descending(a, b) -> bool:
    """Return True when ``a`` may come before ``b`` in descending order."""
    return a >= b