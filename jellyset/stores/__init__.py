"""Store backends and the store constructor."""

from __future__ import annotations

from typing import Any

from ..spi.adapter import discover_backends
from ..spi.set_store import SetStore, SetStoreError
from .memory import InMemorySetStore

BUILTIN_BACKENDS = {
    "memory": InMemorySetStore,
}


def new(backend: str = "memory", **options: Any) -> SetStore:
    """
    Create an empty keyed set store.

    `backend` names a built-in store or one registered under the
    `jellyset.stores` entry-point group; `options` go to its constructor.
    """
    factory = BUILTIN_BACKENDS.get(backend)
    if factory is None:
        factory = discover_backends().get(backend)
    if factory is None:
        raise SetStoreError(
            code="UNKNOWN_BACKEND",
            message=f"No set store backend named '{backend}'.",
            details={"available": sorted(BUILTIN_BACKENDS)},
        )
    return factory(**options)


__all__ = ["InMemorySetStore", "new"]
