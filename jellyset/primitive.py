"""
Primitive set.

An unordered collection of distinct, hashable elements. Enumeration order is
unspecified and callers must never depend on it.
"""

from __future__ import annotations

from typing import Callable, Generic, Hashable, Iterator, List, Set, TypeVar

T = TypeVar("T", bound=Hashable)


class PrimitiveSet(Generic[T]):
    def __init__(self, *items: T) -> None:
        self._items: Set[T] = set(items)

    def add(self, *items: T) -> None:
        """Insert each item. No effect when called without items."""
        self._items.update(items)

    def remove(self, *items: T) -> None:
        """Delete each item that is present. Absent items are ignored."""
        for item in items:
            self._items.discard(item)

    def has(self, *items: T) -> bool:
        """
        True only if every given item is present.

        Returns False when called without items.
        """
        if not items:
            return False
        return all(item in self._items for item in items)

    def size(self) -> int:
        return len(self._items)

    def list(self) -> List[T]:
        return list(self._items)

    def copy(self) -> "PrimitiveSet[T]":
        clone: PrimitiveSet[T] = PrimitiveSet()
        clone._items = set(self._items)
        return clone

    def foreach(self, callback: Callable[[T], bool]) -> None:
        """Call `callback` per element until it returns a truthy value."""
        for item in list(self._items):
            if callback(item):
                break

    def merge(self, other: "PrimitiveSet[T]") -> None:
        self._items |= other._items

    def separate(self, other: "PrimitiveSet[T]") -> None:
        # Not the inverse of merge: shared elements that predate it go too.
        self._items -= other._items

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"PrimitiveSet({self._items!r})"


def union(*sets: PrimitiveSet[T]) -> PrimitiveSet[T]:
    """Elements present in any of `sets`."""
    result: PrimitiveSet[T] = PrimitiveSet()
    for s in sets:
        result.merge(s)
    return result


def difference(*sets: PrimitiveSet[T]) -> PrimitiveSet[T]:
    """Elements of the first set that appear in none of the others."""
    if not sets:
        return PrimitiveSet()
    result = sets[0].copy()
    for s in sets[1:]:
        result.separate(s)
    return result


def intersection(*sets: PrimitiveSet[T]) -> PrimitiveSet[T]:
    """
    Elements present in every one of `sets`.

    The smallest input is used as the scan base, so the cost is bounded by
    its size times the number of sets.
    """
    if not sets:
        return PrimitiveSet()
    base = min(sets, key=len)
    others = [s for s in sets if s is not base]
    result: PrimitiveSet[T] = PrimitiveSet()
    for item in base:
        if all(item in s for s in others):
            result.add(item)
    return result
