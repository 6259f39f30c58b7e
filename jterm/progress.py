#!/usr/bin/env python3
# jterm/progress.py
"""Per-prefecture experience levels owned by the running session."""

from __future__ import annotations

from typing import Dict, Iterator, Mapping, Optional, Tuple

__all__ = [
    "LEVEL_MIN",
    "LEVEL_MAX",
    "LEVELS",
    "InvalidLevel",
    "ProgressStore",
]

LEVEL_MIN = 0
LEVEL_MAX = 5
LEVELS = tuple(range(LEVEL_MIN, LEVEL_MAX + 1))


class InvalidLevel(ValueError):
    def __init__(self, level):
        self.level = level
        super().__init__(f"level must be an integer in [{LEVEL_MIN}, {LEVEL_MAX}], got {level!r}")


def _check_level(level) -> int:
    # bool is an int subclass; True is not a level
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidLevel(level)
    if not LEVEL_MIN <= level <= LEVEL_MAX:
        raise InvalidLevel(level)
    return level


class ProgressStore:
    """
    Mapping of region id -> level in [0, 5].

    Ids that were never set read as level 0. Any mutation that changes a
    value marks the store dirty until the persistence layer calls
    mark_clean().
    """

    def __init__(self, levels: Optional[Mapping[str, int]] = None):
        self._levels: Dict[str, int] = {}
        self._dirty = False
        for region_id, level in (levels or {}).items():
            self._levels[str(region_id)] = _check_level(level)

    # ------------- queries -------------

    def get_level(self, region_id: str) -> int:
        return self._levels.get(region_id, LEVEL_MIN)

    def all_entries(self) -> Iterator[Tuple[str, int]]:
        """Yield (id, level) pairs in insertion order; a new iterator per call."""
        for item in list(self._levels.items()):
            yield item

    def as_dict(self) -> Dict[str, int]:
        return dict(self._levels)

    @property
    def dirty(self) -> bool:
        return self._dirty

    def __len__(self) -> int:
        return len(self._levels)

    def __contains__(self, region_id: object) -> bool:
        return region_id in self._levels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProgressStore):
            return NotImplemented
        return self._levels == other._levels

    def __repr__(self) -> str:
        return f"ProgressStore({self._levels!r})"

    # ------------- mutation -------------

    def set_level(self, region_id: str, level: int) -> int:
        """Store ``level`` and return the previous one. Raises InvalidLevel."""
        level = _check_level(level)
        previous = self.get_level(region_id)
        if region_id not in self._levels or previous != level:
            self._levels[region_id] = level
            self._dirty = True
        return previous

    def adjust_level(self, region_id: str, delta: int) -> int:
        """Step the level by ``delta``, clamped to the scale; returns the new level."""
        level = max(LEVEL_MIN, min(LEVEL_MAX, self.get_level(region_id) + int(delta)))
        self.set_level(region_id, level)
        return level

    def mark_clean(self) -> None:
        self._dirty = False
