#!/usr/bin/env python3
# jterm/export.py
"""
JSON and CSV exports of the travel record, written to the export directory
as jterm_export.json / jterm_export.csv.
"""

from __future__ import annotations

import csv
import io
import os
from datetime import datetime, timezone
from typing import Any, Dict, Sequence

from jterm.config import atomic_write_json
from jterm.glyphs import level_text
from jterm.stats import calculate_stats
from jterm.taxonomy import Region

__all__ = ["export_json", "export_csv", "export_document", "JSON_NAME", "CSV_NAME"]

JSON_NAME = "jterm_export.json"
CSV_NAME = "jterm_export.csv"

CSV_HEADER = ("Prefecture_EN", "Prefecture_JP", "Region", "Level", "Experience",
              "Capital", "Population", "Area_km2")


def export_document(regions: Sequence[Region], progress) -> Dict[str, Any]:
    stats = calculate_stats(regions, progress)
    counts = stats.level_counts
    return {
        "export_date": datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC"),
        "total_prefectures": stats.total_regions,
        "visited_count": stats.visited_count,
        "total_score": stats.total_score,
        "completion_percentage": stats.completion_percentage,
        "level_breakdown": {
            "never_been": counts[0],
            "passed": counts[1],
            "alighted": counts[2],
            "visited": counts[3],
            "stayed": counts[4],
            "lived": counts[5],
        },
        "regional_progress": {name: list(vt) for name, vt in stats.group_stats.items()},
        "prefecture_details": [
            {
                "name_en": r.name,
                "name_jp": r.name_jp,
                "region": r.group.value,
                "level": progress.get_level(r.id),
                "capital": r.capital,
                "population": r.population,
                "area_km2": r.area_km2,
            }
            for r in regions
        ],
    }


def export_json(directory: str, regions: Sequence[Region], progress) -> str:
    path = os.path.join(directory, JSON_NAME)
    atomic_write_json(path, export_document(regions, progress))
    return path


def export_csv(directory: str, regions: Sequence[Region], progress) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for r in regions:
        level = progress.get_level(r.id)
        writer.writerow((r.name, r.name_jp, r.group.value, level, level_text(level),
                         r.capital, r.population, r.area_km2))
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, CSV_NAME)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(buf.getvalue())
    return path
