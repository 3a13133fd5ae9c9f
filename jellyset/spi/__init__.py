"""SPI surface for jellyset store backends."""

from .adapter import discover_backends
from .set_store import SetStore, SetStoreError

__all__ = [
    "SetStore",
    "SetStoreError",
    "discover_backends",
]
