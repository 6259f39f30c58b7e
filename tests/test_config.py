import json

from jterm.config import DEFAULT_CONFIG, Config


def test_missing_file_is_created(tmp_path):
    path = tmp_path / "cfg" / "jterm.json"
    cfg = Config.load(str(path))
    assert path.exists()
    assert cfg["map"]["glyphs"] == "emoji"
    assert cfg.data_dir
    assert cfg["logging"]["file"].endswith("jterm.log")


def test_user_values_merge_and_coerce(tmp_path):
    path = tmp_path / "jterm.json"
    path.write_text(json.dumps({
        "app": {"autosave": "no"},
        "data": {"dir": str(tmp_path)},
        "map": {"glyphs": "hieroglyphs", "background_char": "ab", "legend": "off"},
        "ui": {"theme": "neon", "start_view": "stats"},
        "logging": {"level": "LOUD", "rotate_keep": "lots", "rotate_bytes": 1},
    }), encoding="utf-8")
    cfg = Config.load(str(path))
    assert cfg["app"]["autosave"] is False
    assert cfg["app"]["save_on_exit"] is True
    assert cfg["map"]["glyphs"] == "emoji"
    assert cfg["map"]["background_char"] == " "
    assert cfg["map"]["legend"] is False
    assert cfg["ui"]["theme"] == DEFAULT_CONFIG["ui"]["theme"]
    assert cfg["ui"]["start_view"] == "stats"
    assert cfg["logging"]["level"] == "INFO"
    assert cfg["logging"]["rotate_keep"] == 3
    assert cfg["logging"]["rotate_bytes"] == 64 * 1024
    assert cfg.progress_path == str(tmp_path / "progress.json")


def test_corrupt_file_backed_up(tmp_path):
    path = tmp_path / "jterm.json"
    path.write_text("{oops", encoding="utf-8")
    cfg = Config.load(str(path))
    assert cfg["ui"]["mouse"] is True
    assert (tmp_path / "jterm.json.corrupt.bak").read_text(encoding="utf-8") == "{oops"


def test_update_and_save(tmp_path):
    path = tmp_path / "jterm.json"
    cfg = Config.load(str(path))
    cfg.update({"ui": {"theme": "dark"}})
    cfg.save()
    assert json.loads(path.read_text(encoding="utf-8"))["ui"]["theme"] == "dark"
    assert DEFAULT_CONFIG["ui"]["theme"] == "light"
