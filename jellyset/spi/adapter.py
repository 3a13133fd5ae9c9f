"""
SPI discovery for set store backends.
"""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Dict

from .set_store import SetStore

ENTRY_POINT_GROUP = "jellyset.stores"


def discover_backends() -> Dict[str, Callable[..., SetStore]]:
    try:
        eps = metadata.entry_points()
    except Exception:
        return {}

    if hasattr(eps, "select"):
        group = eps.select(group=ENTRY_POINT_GROUP)
    else:
        group = eps.get(ENTRY_POINT_GROUP, [])

    return {ep.name: ep.load() for ep in group}
