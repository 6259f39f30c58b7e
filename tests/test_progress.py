import pytest

from jterm.progress import InvalidLevel, ProgressStore


def test_unset_region_reads_zero(store):
    assert store.get_level("Tokyo") == 0
    assert len(store) == 0
    assert not store.dirty


def test_set_level_returns_previous_and_marks_dirty(store):
    assert store.set_level("Tokyo", 3) == 0
    assert store.set_level("Tokyo", 4) == 3
    assert store.get_level("Tokyo") == 4
    assert store.dirty


@pytest.mark.parametrize("level", [-1, 6, 100, 2.0, "3", None, True])
def test_invalid_level_leaves_store_unchanged(store, level):
    store.set_level("Tokyo", 2)
    store.mark_clean()
    with pytest.raises(InvalidLevel):
        store.set_level("Tokyo", level)
    assert store.get_level("Tokyo") == 2
    assert not store.dirty


def test_same_level_is_not_a_change(store):
    store.set_level("Osaka", 1)
    store.mark_clean()
    store.set_level("Osaka", 1)
    assert not store.dirty


def test_explicit_zero_is_kept(store):
    store.set_level("Nara", 0)
    assert "Nara" in store
    assert store.as_dict() == {"Nara": 0}


def test_adjust_level_clamps(store):
    assert store.adjust_level("Gifu", -1) == 0
    assert store.adjust_level("Gifu", 2) == 2
    assert store.adjust_level("Gifu", 10) == 5


def test_all_entries_is_a_snapshot(store):
    store.set_level("A", 1)
    store.set_level("B", 2)
    entries = store.all_entries()
    assert next(entries) == ("A", 1)
    store.set_level("C", 3)
    assert list(entries) == [("B", 2)]
    assert list(store.all_entries()) == [("A", 1), ("B", 2), ("C", 3)]


def test_constructor_validates():
    with pytest.raises(InvalidLevel):
        ProgressStore({"Tokyo": 9})
    assert ProgressStore({"Tokyo": 1}) == ProgressStore({"Tokyo": 1})
