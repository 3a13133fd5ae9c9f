"""
Seed kit loader.

A kit is a YAML document mapping set keys to member lists, used to populate a
store with fixture data.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from .spi.set_store import SetStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetKit:
    sets: Dict[str, List[Any]]


def load_kit(path: str) -> SetKit:
    data = _load_yaml(path) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Kit '{path}' must be a mapping, got {type(data).__name__}.")
    raw = data.get("sets") or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Kit '{path}': 'sets' must map keys to member lists.")
    sets: Dict[str, List[Any]] = {}
    for key, members in raw.items():
        if members is None:
            members = []
        if not isinstance(members, list):
            raise ValueError(f"Kit '{path}': members of '{key}' must be a list.")
        sets[str(key)] = list(members)
    return SetKit(sets=sets)


def seed_store(store: SetStore, kit: SetKit) -> int:
    """SAdd every kit entry into `store`. Returns the newly inserted count."""
    added = 0
    for key, members in kit.sets.items():
        added += store.sadd(key, *members)
    logger.debug("seeded %d keys (%d new members)", len(kit.sets), added)
    return added


def _load_yaml(path: str) -> Any:
    try:
        import yaml  # type: ignore
    except ImportError as exc:  # pragma: no cover - depends on installed deps
        raise RuntimeError(
            "pyyaml is required to load kit files. Install with `pip install pyyaml`."
        ) from exc
    return yaml.safe_load(Path(path).read_text())
