#!/usr/bin/env python3
# jterm/stats.py
"""Travel statistics aggregated over the prefecture table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from jterm.progress import LEVEL_MAX, LEVELS
from jterm.taxonomy import GROUP_ORDER, Region

__all__ = ["TravelStats", "calculate_stats"]


@dataclass
class TravelStats:
    total_regions: int
    total_score: int
    level_counts: List[int]
    # group name -> (visited, total), in GROUP_ORDER
    group_stats: Dict[str, Tuple[int, int]] = field(default_factory=dict)

    @property
    def visited_count(self) -> int:
        return self.total_regions - self.level_counts[0]

    @property
    def max_score(self) -> int:
        return self.total_regions * LEVEL_MAX

    @property
    def completion_percentage(self) -> int:
        if not self.total_regions:
            return 0
        return int(self.visited_count / self.total_regions * 100)

    @property
    def most_common_level(self) -> int:
        # ties resolve to the highest level
        return max(LEVELS, key=lambda lvl: (self.level_counts[lvl], lvl))

    def group_percentage(self, group: str) -> int:
        visited, total = self.group_stats.get(group, (0, 0))
        return int(visited / total * 100) if total else 0


def calculate_stats(regions: Sequence[Region], progress) -> TravelStats:
    level_counts = [0] * len(LEVELS)
    groups: Dict[str, List[int]] = {g.value: [0, 0] for g in GROUP_ORDER}
    total_score = 0

    for region in regions:
        level = progress.get_level(region.id)
        level_counts[level] += 1
        total_score += level
        counts = groups.setdefault(region.group.value, [0, 0])
        counts[1] += 1
        if level > 0:
            counts[0] += 1

    return TravelStats(
        total_regions=len(regions),
        total_score=total_score,
        level_counts=level_counts,
        group_stats={name: (v, t) for name, (v, t) in groups.items() if t},
    )
