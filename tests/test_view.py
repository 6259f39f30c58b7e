from jterm.view import VIEW_TRIGGERS, ViewController, ViewMode


def test_starts_in_list():
    assert ViewController().mode is ViewMode.LIST


def test_trigger_transitions():
    vc = ViewController()
    assert vc.trigger("w") is True
    assert vc.mode is ViewMode.ENHANCED_MAP
    assert vc.trigger("l") is True
    assert vc.mode is ViewMode.LIST
    vc.trigger("w")
    assert vc.trigger("w") is False
    assert vc.mode is ViewMode.ENHANCED_MAP


def test_unknown_key_is_ignored():
    vc = ViewController(ViewMode.STATISTICS)
    assert vc.trigger("z") is None
    assert vc.mode is ViewMode.STATISTICS


def test_each_mode_has_one_trigger():
    assert sorted(VIEW_TRIGGERS.values(), key=lambda m: m.value) == sorted(ViewMode, key=lambda m: m.value)


def test_from_name():
    assert ViewMode.from_name("stats", ViewMode.LIST) is ViewMode.STATISTICS
    assert ViewMode.from_name("bogus", ViewMode.LIST) is ViewMode.LIST
