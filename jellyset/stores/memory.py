"""
In-memory keyed set store.
"""

from __future__ import annotations

import logging
from typing import Dict, Generic, Hashable, List, Optional, TypeVar

from ..primitive import PrimitiveSet, difference, intersection, union
from ..spi.set_store import SetStoreError

T = TypeVar("T", bound=Hashable)

logger = logging.getLogger(__name__)


class InMemorySetStore(Generic[T]):
    """
    Redis-style set commands over a dict of key -> PrimitiveSet.

    A key exists from its first write (sadd, smove into it, or a non-empty
    *store result) until sclear. Removing every member leaves an existing,
    empty set behind. Every list returned is a fresh snapshot.
    """

    def __init__(self, validate_keys: bool = False) -> None:
        self._records: Dict[str, PrimitiveSet[T]] = {}
        self._validate_keys = validate_keys

    def sadd(self, key: str, *members: T) -> int:
        """
        Add members to the set at `key`, creating it if needed.

        Called without members, an absent key is still created as an empty
        set. Returns the number of members that were not already present.
        """
        for member in members:
            self._require_hashable(member)
        target = self._get_or_create(key)
        added = 0
        for member in members:
            if member not in target:
                target.add(member)
                added += 1
        return added

    def srem(self, key: str, member: T) -> bool:
        self._require_hashable(member)
        target = self._get(key)
        if target is None or member not in target:
            return False
        target.remove(member)
        return True

    def spop(self, key: str, count: int) -> List[T]:
        """
        Remove and return up to `count` members.

        Selection follows set enumeration order; it is arbitrary but not a
        uniform random sample.
        """
        target = self._get(key)
        if target is None or count <= 0:
            return []
        popped = target.list()[:count]
        target.remove(*popped)
        return popped

    def srandmember(self, key: str, count: int) -> List[T]:
        # Any count below 1 yields nothing; there is no sampling with replacement.
        target = self._get(key)
        if target is None or count < 1:
            return []
        return target.list()[:count]

    def sismember(self, key: str, member: T) -> bool:
        self._require_hashable(member)
        target = self._get(key)
        if target is None:
            return False
        return target.has(member)

    def smove(self, src: str, dest: str, member: T) -> bool:
        """
        Move `member` from `src` to `dest`, creating `dest` if needed.

        Moving within the same key is a successful no-op.
        """
        self._require_hashable(member)
        source = self._get(src)
        if source is None or member not in source:
            return False
        destination = self._get_or_create(dest)
        source.remove(member)
        destination.add(member)
        return True

    def scard(self, key: str) -> int:
        target = self._get(key)
        if target is None:
            return 0
        return target.size()

    def smembers(self, key: str) -> List[T]:
        target = self._get(key)
        if target is None:
            return []
        return target.list()

    def sunion(self, *keys: str) -> List[T]:
        """Union of every listed key that exists; missing keys are skipped."""
        sets = [s for s in (self._get(key) for key in keys) if s is not None]
        return union(*sets).list()

    def sunionstore(self, dest: str, *keys: str) -> int:
        """
        Add the union of `keys` into `dest`.

        Returns the size of the union, even when `dest` already held some of
        those members.
        """
        return self._store(dest, self.sunion(*keys))

    def sdiff(self, *keys: str) -> List[T]:
        """
        Members of the first key absent from every other key.

        Any missing key after the first makes the result empty.
        """
        sets = self._require_all(keys[1:])
        first = self._get(keys[0]) if keys else None
        if first is None or sets is None:
            return []
        return difference(first, *sets).list()

    def sdiffstore(self, dest: str, *keys: str) -> int:
        return self._store(dest, self.sdiff(*keys))

    def sinter(self, *keys: str) -> List[T]:
        """Members common to every key. Any missing key makes it empty."""
        sets = self._require_all(keys)
        if not sets:
            return []
        return intersection(*sets).list()

    def sinterstore(self, dest: str, *keys: str) -> int:
        return self._store(dest, self.sinter(*keys))

    def skeyexists(self, key: str) -> bool:
        self._require_key(key)
        return key in self._records

    def sclear(self, key: str) -> None:
        self._require_key(key)
        if self._records.pop(key, None) is not None:
            logger.debug("cleared key %r", key)

    def _store(self, dest: str, members: List[T]) -> int:
        # An empty result never creates dest.
        self._require_key(dest)
        if not members:
            return 0
        self.sadd(dest, *members)
        return len(members)

    def _require_all(self, keys) -> Optional[List[PrimitiveSet[T]]]:
        sets: List[PrimitiveSet[T]] = []
        for key in keys:
            target = self._get(key)
            if target is None:
                return None
            sets.append(target)
        return sets

    def _get(self, key: str) -> Optional[PrimitiveSet[T]]:
        self._require_key(key)
        return self._records.get(key)

    def _get_or_create(self, key: str) -> PrimitiveSet[T]:
        target = self._get(key)
        if target is None:
            target = PrimitiveSet()
            self._records[key] = target
            logger.debug("created key %r", key)
        return target

    def _require_key(self, key: str) -> None:
        if self._validate_keys and not isinstance(key, str):
            raise SetStoreError(
                code="INVALID_KEY",
                message=f"Set keys must be str, got {type(key).__name__}.",
                details={"key": repr(key)},
            )

    def _require_hashable(self, member: T) -> None:
        try:
            hash(member)
        except TypeError as exc:
            raise SetStoreError(
                code="UNHASHABLE_MEMBER",
                message=f"Set members must be hashable, got {type(member).__name__}.",
                details={"member": repr(member)},
            ) from exc
