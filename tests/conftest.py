import json

import pytest

from jterm.config import Config
from jterm.persistence import ProgressRepository
from jterm.progress import ProgressStore
from jterm.taxonomy import Region, RegionGroup, all_regions


def make_region(id_, cell, offset=None, group=RegionGroup.KANTO, char="x"):
    return Region(
        id=id_,
        name=id_,
        name_jp=id_,
        group=group,
        coordinate=cell,
        map_char=char,
        capital=id_,
        population=1000,
        area_km2=10,
        offset=offset,
    )


@pytest.fixture
def regions():
    return all_regions()


@pytest.fixture
def store():
    return ProgressStore()


@pytest.fixture
def cfg(tmp_path):
    path = tmp_path / "jterm.json"
    path.write_text(json.dumps({
        "app": {"autosave": True},
        "data": {"dir": str(tmp_path / "data"), "export_dir": str(tmp_path / "export")},
        "logging": {"file": str(tmp_path / "jterm.log")},
    }), encoding="utf-8")
    return Config.load(str(path))


@pytest.fixture
def session(cfg, regions, store):
    from jterm.ui.state import AppSession
    return AppSession(cfg, regions, store, ProgressRepository(cfg.progress_path))
