#!/usr/bin/env python3
# jterm/logging_conf.py
"""
Central logging setup for JTerm.
Writes to a rotating file; console output is opt-in because the
full-screen UI owns the terminal.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from jterm.config import Config

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(cfg: Config) -> None:
    level_name = cfg["logging"].get("level", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)

    if cfg["logging"].get("console"):
        logging.basicConfig(level=level, format=_FORMAT)

    log_file = cfg["logging"].get("file")
    if log_file:
        try:
            os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
            handler = RotatingFileHandler(
                log_file,
                maxBytes=int(cfg["logging"].get("rotate_bytes", 1024 * 1024)),
                backupCount=int(cfg["logging"].get("rotate_keep", 3)),
                encoding="utf-8",
            )
        except OSError as exc:
            # Keep running without a log file; the UI reports save errors itself.
            root.addHandler(logging.NullHandler())
            root.warning("Cannot open log file %s: %s", log_file, exc)
            return
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
