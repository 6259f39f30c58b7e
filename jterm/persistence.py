#!/usr/bin/env python3
# jterm/persistence.py
"""
Progress file I/O.

Format (JSON, UTF-8):
    {
      "prefecture_levels": {"Tokyo": 3, ...},
      "saved_at": "2026-10-19 08:00:00 UTC",    # optional on load
      "version": "1.2.0"                       # optional on load
    }

Writes go through a temp file and os.replace. A file that cannot be parsed
is never overwritten silently: load_or_empty() copies it aside first.
"""

from __future__ import annotations

import json
import logging
import os
import shutil
from datetime import datetime, timezone
from typing import Optional, Tuple

from jterm.config import atomic_write_json
from jterm.progress import InvalidLevel, ProgressStore
from jterm.version import __version__

log = logging.getLogger(__name__)

__all__ = [
    "PersistenceError",
    "NotFound",
    "CorruptData",
    "WriteError",
    "ProgressRepository",
    "load_or_empty",
]


class PersistenceError(Exception):
    pass


class NotFound(PersistenceError):
    pass


class CorruptData(PersistenceError):
    pass


class WriteError(PersistenceError):
    pass


class ProgressRepository:
    def __init__(self, path: str):
        self.path = os.path.expanduser(path)

    def __repr__(self) -> str:
        return f"ProgressRepository({self.path!r})"

    def load(self) -> ProgressStore:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError as exc:
            raise NotFound(self.path) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise CorruptData(f"{self.path}: {exc}") from exc

        try:
            doc = json.loads(raw)
        except ValueError as exc:
            raise CorruptData(f"{self.path}: {exc}") from exc
        if not isinstance(doc, dict) or not isinstance(doc.get("prefecture_levels"), dict):
            raise CorruptData(f"{self.path}: missing 'prefecture_levels' object")

        try:
            store = ProgressStore(doc["prefecture_levels"])
        except InvalidLevel as exc:
            raise CorruptData(f"{self.path}: {exc}") from exc
        log.info("Loaded %d levels from %s", len(store), self.path)
        return store

    def save(self, store: ProgressStore) -> None:
        doc = {
            "prefecture_levels": store.as_dict(),
            "saved_at": datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC"),
            "version": __version__,
        }
        try:
            atomic_write_json(self.path, doc)
        except OSError as exc:
            log.error("Saving progress to %s failed: %s", self.path, exc)
            raise WriteError(f"{self.path}: {exc}") from exc
        store.mark_clean()
        log.debug("Saved %d levels to %s", len(store), self.path)

    def backup_corrupt(self) -> Optional[str]:
        """Copy the current file aside; returns the backup path or None."""
        backup = self.path + ".corrupt.bak"
        try:
            shutil.copyfile(self.path, backup)
        except OSError as exc:
            log.error("Could not back up %s: %s", self.path, exc)
            return None
        return backup


def load_or_empty(repo: ProgressRepository) -> Tuple[ProgressStore, Optional[str]]:
    """
    Load progress for startup. Returns (store, error message). A missing
    file gives an empty store and no message; a corrupt one gives an empty
    store and a message for the user.
    """
    try:
        return repo.load(), None
    except NotFound:
        log.info("No progress file at %s; starting empty", repo.path)
        return ProgressStore(), None
    except CorruptData as exc:
        log.error("Progress file unreadable: %s", exc)
        backup = repo.backup_corrupt()
        where = f" (copy kept at {backup})" if backup else ""
        return ProgressStore(), f"Progress file unreadable, starting empty{where}"
