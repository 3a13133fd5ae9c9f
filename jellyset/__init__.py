"""
jellyset - Redis-style keyed sets, in process.

A store maps string keys to independent unordered sets and offers the
familiar set commands: membership, mutation, arbitrary sampling, and
union/difference/intersection across keys, optionally stored under a new key.

Design principles:
- Absence is a return value (empty list, 0, False), never an exception
- No ordering guarantees on any enumeration
- Single-threaded; callers add their own lock when sharing a store
"""

from .primitive import PrimitiveSet, union, difference, intersection
from .spi import SetStore, SetStoreError, discover_backends
from .stores import InMemorySetStore, new
from .kit import SetKit, load_kit, seed_store

__all__ = [
    "PrimitiveSet",
    "union",
    "difference",
    "intersection",
    "SetStore",
    "SetStoreError",
    "discover_backends",
    "InMemorySetStore",
    "new",
    "SetKit",
    "load_kit",
    "seed_store",
]
