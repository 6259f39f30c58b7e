#!/usr/bin/env python3
# jterm/config.py
"""
Config loader/saver and defaults for JTerm.

Goals:
- Single JSON file per user.
- Safe atomic writes (shared with the progress store).
- Deep-merge of user config over defaults.
- Basic validation with sane fallbacks.

Usage:
    from jterm.config import Config, DEFAULT_CONFIG
    cfg = Config.load()                 # ~/.config/jterm/jterm.json or OS-specific
    data_dir = cfg.data_dir
    cfg["ui"]["theme"] = "dark"
    cfg.save()
"""

from __future__ import annotations

import copy
import json
import os
import platform
import shutil
import tempfile
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

# ----------------------------
# Defaults
# ----------------------------

VIEW_NAMES = ("list", "regional", "stats", "enhanced")

DEFAULT_CONFIG: Dict[str, Any] = {
    "app": {
        "title": "JTerm",
        "autosave": True,                 # save after every level change
        "save_on_exit": True,
    },
    "data": {
        "dir": None,                      # auto if None: ~/.jterm
        "progress_file": "progress.json",
        "export_dir": None,               # auto if None: home directory
    },
    "map": {
        "glyphs": "emoji",                # emoji | text | kanji
        "background_char": " ",
        "legend": True,
        "reference_image": None,          # optional PNG drawn instead of the grid
        "image_palette": " .:-=+*#%@",
    },
    "ui": {
        "theme": "light",                 # auto | light | dark
        "mouse": True,
        "start_view": "list",             # list | regional | stats | enhanced
        "show_toolbar": True,
    },
    "logging": {
        "level": "INFO",
        "console": False,                 # stderr output fights the full-screen UI
        "file": None,                     # auto if None: <data.dir>/jterm.log
        "rotate_bytes": 1024 * 1024,
        "rotate_keep": 3,
    },
}

# ----------------------------
# Helpers
# ----------------------------

def _os_config_home() -> str:
    """Return per-OS config base directory."""
    if platform.system() == "Windows":
        base = os.environ.get("APPDATA") or os.path.expanduser("~\\AppData\\Roaming")
        return os.path.join(base, "JTerm")
    if platform.system() == "Darwin":
        return os.path.join(os.path.expanduser("~/Library/Application Support"), "JTerm")
    return os.path.join(os.path.expanduser("~/.config"), "jterm")

def _default_data_dir() -> str:
    return os.path.join(os.path.expanduser("~"), ".jterm")

def _default_config_path() -> str:
    """Resolve default config path, honoring JTERM_CONFIG env override."""
    env = os.environ.get("JTERM_CONFIG")
    if env:
        return os.path.expanduser(env)
    return os.path.join(_os_config_home(), "jterm.json")

def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """Return deep-merged copy of dicts: values in b override a."""
    out = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out

def atomic_write_json(path: str, data: Dict[str, Any]) -> None:
    """Write JSON next to ``path`` and move it into place."""
    directory = os.path.dirname(path) or "."
    os.makedirs(directory, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".tmp_", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True, ensure_ascii=False)
            f.write("\n")
        if platform.system() == "Windows":
            # On Windows replace is not atomic across devices; assume same dir
            if os.path.exists(path):
                os.remove(path)
        os.replace(tmp, path)
    except Exception:
        try:
            os.remove(tmp)
        except OSError:
            pass
        raise

_TRUE = frozenset(("1", "true", "yes", "on"))
_FALSE = frozenset(("0", "false", "no", "off"))

def _coerce_int(v: Any, default: int, minmax: Optional[Tuple[int, int]] = None) -> int:
    if isinstance(v, bool):
        return int(default)
    try:
        x = int(v)
    except (TypeError, ValueError):
        return int(default)
    if minmax:
        x = max(minmax[0], min(minmax[1], x))
    return x

def _coerce_bool(v: Any, default: bool) -> bool:
    if isinstance(v, bool):
        return v
    s = str(v).strip().lower() if isinstance(v, str) else None
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    return default

def _coerce_path(v: Any) -> Optional[str]:
    if not v:
        return None
    return os.path.expanduser(str(v))

# ----------------------------
# Validation
# ----------------------------

# (section, key) -> allowed values; anything else falls back to the default
_CHOICES: Dict[Tuple[str, str], Tuple[str, ...]] = {
    ("map", "glyphs"): ("emoji", "text", "kanji"),
    ("ui", "theme"): ("auto", "light", "dark"),
    ("ui", "start_view"): VIEW_NAMES,
    ("logging", "level"): ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"),
}

_BOOLS: Tuple[Tuple[str, str], ...] = (
    ("app", "autosave"),
    ("app", "save_on_exit"),
    ("map", "legend"),
    ("ui", "mouse"),
    ("ui", "show_toolbar"),
    ("logging", "console"),
)

_INTS: Dict[Tuple[str, str], Tuple[int, int]] = {
    ("logging", "rotate_bytes"): (64 * 1024, 50 * 1024 * 1024),
    ("logging", "rotate_keep"): (0, 50),
}


def _validate(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Return validated copy with fallbacks applied."""
    c = _deep_merge(copy.deepcopy(DEFAULT_CONFIG), cfg or {})
    for section, defaults in DEFAULT_CONFIG.items():
        if not isinstance(c.get(section), dict):
            c[section] = copy.deepcopy(defaults)

    for (section, key), allowed in _CHOICES.items():
        if c[section].get(key) not in allowed:
            c[section][key] = DEFAULT_CONFIG[section][key]
    for section, key in _BOOLS:
        c[section][key] = _coerce_bool(c[section].get(key), DEFAULT_CONFIG[section][key])
    for (section, key), bounds in _INTS.items():
        c[section][key] = _coerce_int(c[section].get(key), DEFAULT_CONFIG[section][key], bounds)

    c["app"]["title"] = str(c["app"].get("title") or DEFAULT_CONFIG["app"]["title"])

    # Paths: None means "derive from data.dir"
    d = c["data"]
    d["dir"] = _coerce_path(d.get("dir")) or _default_data_dir()
    d["progress_file"] = str(d.get("progress_file") or DEFAULT_CONFIG["data"]["progress_file"])
    d["export_dir"] = _coerce_path(d.get("export_dir")) or os.path.expanduser("~")
    lg = c["logging"]
    lg["file"] = _coerce_path(lg.get("file")) or os.path.join(d["dir"], "jterm.log")

    m = c["map"]
    bg = m.get("background_char")
    # One cell, one column: anything else would break the grid width
    m["background_char"] = bg if isinstance(bg, str) and len(bg) == 1 else " "
    m["reference_image"] = _coerce_path(m.get("reference_image"))
    pal = m.get("image_palette")
    m["image_palette"] = pal if isinstance(pal, str) and pal else DEFAULT_CONFIG["map"]["image_palette"]

    return c

def _read_user_config(path: str) -> Optional[Dict[str, Any]]:
    """Parse the user file; None when it is not a JSON object."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            user_cfg = json.load(f)
    except (OSError, ValueError):
        return None
    return user_cfg if isinstance(user_cfg, dict) else None

# ----------------------------
# Public API
# ----------------------------

@dataclass
class Config:
    """Thin wrapper around a nested dict with load/save/merge."""
    data: Dict[str, Any] = field(default_factory=lambda: _validate(DEFAULT_CONFIG))
    path: str = field(default_factory=_default_config_path)

    # --- Mapping-style access
    def __getitem__(self, k: str) -> Any:
        return self.data[k]

    def __setitem__(self, k: str, v: Any) -> None:
        self.data[k] = v

    def get(self, k: str, default: Any = None) -> Any:
        return self.data.get(k, default)

    # --- Ops
    @classmethod
    def load(cls, path: Optional[str] = None, create_if_missing: bool = True) -> "Config":
        cfg_path = os.path.expanduser(path) if path else _default_config_path()
        exists = os.path.exists(cfg_path)
        user_cfg = _read_user_config(cfg_path) if exists else {}

        if user_cfg is None:
            # Corrupt file: keep a copy and start over from defaults
            cfg = cls(_validate({}), cfg_path)
            try:
                shutil.copyfile(cfg_path, cfg_path + ".corrupt.bak")
                cfg.save()
            except OSError:
                pass  # unreadable and unwritable: run on defaults, leave the file alone
            return cfg

        cfg = cls(_validate(user_cfg), cfg_path)
        if not exists and create_if_missing:
            cfg.save()
        return cfg

    def save(self) -> None:
        """Persist to JSON atomically."""
        full = _validate(self.data)
        atomic_write_json(self.path, full)
        self.data = full  # sync in-memory with normalized values

    def update(self, partial: Dict[str, Any]) -> None:
        """Deep-merge a partial config then validate."""
        merged = _deep_merge(self.data, partial)
        self.data = _validate(merged)

    # Convenience getters
    @property
    def data_dir(self) -> str:
        return self.data["data"]["dir"]

    @property
    def progress_path(self) -> str:
        return os.path.join(self.data_dir, self.data["data"]["progress_file"])

    @property
    def export_dir(self) -> str:
        return self.data["data"]["export_dir"]


__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "VIEW_NAMES",
    "atomic_write_json",
    "_default_config_path",
]
