import json

import pytest

from jterm.persistence import (
    CorruptData,
    NotFound,
    ProgressRepository,
    WriteError,
    load_or_empty,
)
from jterm.progress import ProgressStore


def test_missing_file_raises_not_found(tmp_path):
    with pytest.raises(NotFound):
        ProgressRepository(str(tmp_path / "none.json")).load()


def test_round_trip_empty(tmp_path):
    repo = ProgressRepository(str(tmp_path / "progress.json"))
    repo.save(ProgressStore())
    assert repo.load() == ProgressStore()


def test_round_trip_all_lived(tmp_path, regions):
    store = ProgressStore({r.id: 5 for r in regions})
    repo = ProgressRepository(str(tmp_path / "sub" / "progress.json"))
    repo.save(store)
    loaded = repo.load()
    assert loaded == store
    assert len(loaded) == 47
    assert not store.dirty


def test_file_format(tmp_path):
    path = tmp_path / "progress.json"
    store = ProgressStore()
    store.set_level("Tokyo", 3)
    ProgressRepository(str(path)).save(store)
    doc = json.loads(path.read_text(encoding="utf-8"))
    assert doc["prefecture_levels"] == {"Tokyo": 3}
    assert "saved_at" in doc and "version" in doc
    assert not list(tmp_path.glob(".tmp_*"))


def test_metadata_is_optional(tmp_path):
    path = tmp_path / "progress.json"
    path.write_text('{"prefecture_levels": {"Osaka": 2}}', encoding="utf-8")
    assert ProgressRepository(str(path)).load().get_level("Osaka") == 2


@pytest.mark.parametrize("content", [
    "{not json",
    "[1, 2]",
    '{"levels": {}}',
    '{"prefecture_levels": {"Tokyo": 9}}',
    '{"prefecture_levels": {"Tokyo": "3"}}',
])
def test_corrupt_data(tmp_path, content):
    path = tmp_path / "progress.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(CorruptData):
        ProgressRepository(str(path)).load()


def test_load_or_empty_backs_up_corrupt_file(tmp_path):
    path = tmp_path / "progress.json"
    path.write_text("{broken", encoding="utf-8")
    store, error = load_or_empty(ProgressRepository(str(path)))
    assert len(store) == 0
    assert "unreadable" in error
    assert (tmp_path / "progress.json.corrupt.bak").read_text(encoding="utf-8") == "{broken"


def test_load_or_empty_missing_file(tmp_path):
    store, error = load_or_empty(ProgressRepository(str(tmp_path / "progress.json")))
    assert len(store) == 0
    assert error is None


def test_write_error(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    store = ProgressStore({"Tokyo": 1})
    store.set_level("Tokyo", 2)
    with pytest.raises(WriteError):
        ProgressRepository(str(blocker / "progress.json")).save(store)
    assert store.dirty
