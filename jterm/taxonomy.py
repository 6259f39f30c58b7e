#!/usr/bin/env python3
# jterm/taxonomy.py
"""
Static prefecture table for JTerm.

Each of the 47 prefectures carries its names, region group, a hand-placed
(row, col) cell on the 20x60 overview grid and an optional offset used to
move it off a neighbour's cell. The table is validated once at startup by
validate_regions(); nothing mutates it at runtime.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

log = logging.getLogger(__name__)

__all__ = [
    "GRID_ROWS",
    "GRID_COLS",
    "MAP_COLS",
    "REGION_COUNT",
    "RegionGroup",
    "GROUP_ORDER",
    "Region",
    "ConfigurationInvariantViolation",
    "all_regions",
    "region_by_id",
    "regions_in_group",
    "validate_regions",
]

# Overview grid geometry. Columns [0, MAP_COLS) hold geography; the legend
# decoration lives to the right of it.
GRID_ROWS = 20
GRID_COLS = 60
MAP_COLS = 48
REGION_COUNT = 47

Cell = Tuple[int, int]


class ConfigurationInvariantViolation(RuntimeError):
    """The static region table is inconsistent. Fatal at startup."""

    def __init__(self, problems: Sequence[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


class RegionGroup(str, Enum):
    HOKKAIDO = "Hokkaido"
    TOHOKU = "Tohoku"
    KANTO = "Kanto"
    CHUBU = "Chubu"
    KANSAI = "Kansai"
    CHUGOKU = "Chugoku"
    SHIKOKU = "Shikoku"
    KYUSHU = "Kyushu"
    OKINAWA = "Okinawa"


GROUP_ORDER: Tuple[RegionGroup, ...] = tuple(RegionGroup)


@dataclass(frozen=True)
class Region:
    id: str
    name: str
    name_jp: str
    group: RegionGroup
    coordinate: Cell
    map_char: str
    capital: str
    population: int
    area_km2: int
    offset: Optional[Cell] = None

    @property
    def placement(self) -> Cell:
        """Grid cell after applying the offset correction."""
        drow, dcol = self.offset or (0, 0)
        return self.coordinate[0] + drow, self.coordinate[1] + dcol

    @property
    def density(self) -> float:
        return self.population / self.area_km2 if self.area_km2 else 0.0


def _r(id_: str, jp: str, group: RegionGroup, cell: Cell, char: str,
       capital: str, population: int, area: int, offset: Optional[Cell] = None) -> Region:
    return Region(id_, id_, jp, group, cell, char, capital, population, area, offset)


_G = RegionGroup

# JIS order. Columns already include the 15-column shift that centres Japan
# in the geography area.
_REGIONS: Tuple[Region, ...] = (
    _r("Hokkaido", "北海道", _G.HOKKAIDO, (1, 45), "北", "Sapporo", 5224614, 83424),

    _r("Aomori", "青森県", _G.TOHOKU, (3, 43), "青", "Aomori", 1237984, 9646),
    _r("Iwate", "岩手県", _G.TOHOKU, (4, 47), "岩", "Morioka", 1210534, 15275),
    _r("Miyagi", "宮城県", _G.TOHOKU, (5, 43), "宮", "Sendai", 2301996, 7282),
    _r("Akita", "秋田県", _G.TOHOKU, (4, 39), "秋", "Akita", 959502, 11638),
    _r("Yamagata", "山形県", _G.TOHOKU, (5, 39), "形", "Yamagata", 1068027, 9323),
    _r("Fukushima", "福島県", _G.TOHOKU, (6, 43), "福", "Fukushima", 1833152, 13784),

    _r("Ibaraki", "茨城県", _G.KANTO, (7, 43), "茨", "Mito", 2867009, 6097),
    _r("Tochigi", "栃木県", _G.KANTO, (7, 39), "栃", "Utsunomiya", 1933146, 6408),
    _r("Gunma", "群馬県", _G.KANTO, (7, 35), "群", "Maebashi", 1939110, 6362),
    _r("Saitama", "埼玉県", _G.KANTO, (8, 37), "埼", "Saitama", 7344765, 3798),
    _r("Chiba", "千葉県", _G.KANTO, (8, 45), "千", "Chiba", 6284480, 5158),
    _r("Tokyo", "東京都", _G.KANTO, (8, 41), "東", "Shinjuku", 14047594, 2194),
    _r("Kanagawa", "神奈川県", _G.KANTO, (8, 41), "神", "Yokohama", 9237337, 2416, offset=(1, 0)),

    _r("Niigata", "新潟県", _G.CHUBU, (6, 33), "新", "Niigata", 2201272, 12584),
    _r("Toyama", "富山県", _G.CHUBU, (8, 29), "富", "Toyama", 1034814, 4248),
    _r("Ishikawa", "石川県", _G.CHUBU, (8, 25), "石", "Kanazawa", 1132526, 4186),
    _r("Fukui", "福井県", _G.CHUBU, (9, 25), "井", "Fukui", 766863, 4191),
    _r("Yamanashi", "山梨県", _G.CHUBU, (9, 37), "梨", "Kofu", 809974, 4465),
    _r("Nagano", "長野県", _G.CHUBU, (8, 33), "長", "Nagano", 2048011, 13562),
    _r("Gifu", "岐阜県", _G.CHUBU, (9, 29), "岐", "Gifu", 1978742, 10621),
    _r("Shizuoka", "静岡県", _G.CHUBU, (10, 37), "静", "Shizuoka", 3633202, 7777),
    _r("Aichi", "愛知県", _G.CHUBU, (10, 29), "愛", "Nagoya", 7542415, 5173),

    _r("Mie", "三重県", _G.KANSAI, (10, 25), "三", "Tsu", 1770254, 5774),
    _r("Shiga", "滋賀県", _G.KANSAI, (9, 23), "滋", "Otsu", 1413610, 4017),
    _r("Kyoto", "京都府", _G.KANSAI, (8, 21), "京", "Kyoto", 2578087, 4612),
    _r("Osaka", "大阪府", _G.KANSAI, (9, 19), "大", "Osaka", 8837685, 1905),
    _r("Hyogo", "兵庫県", _G.KANSAI, (9, 17), "兵", "Kobe", 5465002, 8401),
    _r("Nara", "奈良県", _G.KANSAI, (10, 21), "奈", "Nara", 1324473, 3691),
    _r("Wakayama", "和歌山県", _G.KANSAI, (9, 19), "和", "Wakayama", 922584, 4725, offset=(2, 0)),

    _r("Tottori", "鳥取県", _G.CHUGOKU, (8, 17), "鳥", "Tottori", 553407, 3507),
    _r("Shimane", "島根県", _G.CHUGOKU, (10, 15), "島", "Matsue", 671126, 6708),
    _r("Okayama", "岡山県", _G.CHUGOKU, (10, 17), "岡", "Okayama", 1888432, 7115),
    _r("Hiroshima", "広島県", _G.CHUGOKU, (10, 17), "広", "Hiroshima", 2799702, 8480, offset=(1, 0)),
    _r("Yamaguchi", "山口県", _G.CHUGOKU, (12, 15), "口", "Yamaguchi", 1342059, 6113),

    _r("Tokushima", "徳島県", _G.SHIKOKU, (12, 23), "徳", "Tokushima", 719559, 4147),
    _r("Kagawa", "香川県", _G.SHIKOKU, (12, 19), "香", "Takamatsu", 950244, 1877),
    _r("Ehime", "愛媛県", _G.SHIKOKU, (12, 17), "媛", "Matsuyama", 1334841, 5676),
    _r("Kochi", "高知県", _G.SHIKOKU, (12, 19), "高", "Kochi", 691527, 7104, offset=(1, 0)),

    _r("Fukuoka", "福岡県", _G.KYUSHU, (14, 15), "筑", "Fukuoka", 5135214, 4987),
    _r("Saga", "佐賀県", _G.KYUSHU, (14, 15), "佐", "Saga", 811442, 2441, offset=(1, 0)),
    _r("Nagasaki", "長崎県", _G.KYUSHU, (15, 15), "崎", "Nagasaki", 1312317, 4131, offset=(1, 0)),
    _r("Kumamoto", "熊本県", _G.KYUSHU, (15, 17), "熊", "Kumamoto", 1738301, 7409),
    _r("Oita", "大分県", _G.KYUSHU, (14, 19), "分", "Oita", 1123852, 6341),
    _r("Miyazaki", "宮崎県", _G.KYUSHU, (15, 17), "日", "Miyazaki", 1069576, 7735, offset=(1, 0)),
    _r("Kagoshima", "鹿児島県", _G.KYUSHU, (17, 15), "鹿", "Kagoshima", 1588256, 9187),

    _r("Okinawa", "沖縄県", _G.OKINAWA, (19, 15), "沖", "Naha", 1467480, 2282),
)

_BY_ID: Dict[str, Region] = {r.id: r for r in _REGIONS}


def all_regions() -> Tuple[Region, ...]:
    """Return the prefecture table in table (JIS) order."""
    return _REGIONS


def region_by_id(region_id: str) -> Optional[Region]:
    return _BY_ID.get(region_id)


def regions_in_group(group: RegionGroup, regions: Optional[Iterable[Region]] = None) -> List[Region]:
    return [r for r in (regions if regions is not None else _REGIONS) if r.group == group]


def _in_bounds(cell: Cell, rows: int, cols: int) -> bool:
    row, col = cell
    return 0 <= row < rows and 0 <= col < cols


def validate_regions(
    regions: Sequence[Region],
    expected_count: Optional[int] = REGION_COUNT,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
    map_cols: int = MAP_COLS,
) -> None:
    """
    Check the table invariants and raise ConfigurationInvariantViolation
    listing every problem found.

    Placement collisions are legal (the later region wins when drawing) and
    are only logged.
    """
    problems: List[str] = []

    if expected_count is not None and len(regions) != expected_count:
        problems.append(f"expected {expected_count} regions, found {len(regions)}")

    seen = set()
    for r in regions:
        if r.id in seen:
            problems.append(f"duplicate region id {r.id!r}")
        seen.add(r.id)

        if not _in_bounds(r.coordinate, rows, cols):
            problems.append(f"{r.id}: coordinate {r.coordinate} outside {rows}x{cols} grid")
        if not _in_bounds(r.placement, rows, min(cols, map_cols)):
            problems.append(f"{r.id}: placement {r.placement} outside map area {rows}x{map_cols}")

    if problems:
        raise ConfigurationInvariantViolation(problems)

    occupants: Dict[Cell, List[str]] = defaultdict(list)
    for r in regions:
        occupants[r.placement].append(r.id)
    for cell, ids in occupants.items():
        if len(ids) > 1:
            log.warning("Regions %s share cell %s; %s is drawn", ", ".join(ids), cell, ids[-1])
