"""
SPI interface for keyed set stores.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, List, Optional, Protocol


class SetStoreError(Exception):
    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class SetStore(Protocol):
    """
    SPI for a mapping of string keys to independent sets.

    Absence is reported through return values (empty list, 0, False).
    Not safe for concurrent use; guard every call with one lock if shared.
    """

    # ---- single key ----
    def sadd(self, key: str, *members: Hashable) -> int:
        """Add members, creating the key if absent. Returns newly inserted count."""

    def srem(self, key: str, member: Hashable) -> bool: ...

    def spop(self, key: str, count: int) -> List[Hashable]:
        """Remove and return up to `count` arbitrary members."""

    def srandmember(self, key: str, count: int) -> List[Hashable]:
        """Return up to `count` arbitrary members without removing them."""

    def sismember(self, key: str, member: Hashable) -> bool: ...

    def smove(self, src: str, dest: str, member: Hashable) -> bool: ...

    def scard(self, key: str) -> int: ...

    def smembers(self, key: str) -> List[Hashable]: ...

    # ---- algebra ----
    def sunion(self, *keys: str) -> List[Hashable]: ...

    def sunionstore(self, dest: str, *keys: str) -> int: ...

    def sdiff(self, *keys: str) -> List[Hashable]: ...

    def sdiffstore(self, dest: str, *keys: str) -> int: ...

    def sinter(self, *keys: str) -> List[Hashable]: ...

    def sinterstore(self, dest: str, *keys: str) -> int: ...

    # ---- key lifecycle ----
    def skeyexists(self, key: str) -> bool:
        """True for any created key, including one whose set is empty."""

    def sclear(self, key: str) -> None: ...
