#!/usr/bin/env python3
# jterm/cli.py
"""
Entry point for JTerm.
Loads configuration, checks the prefecture table, restores progress and
runs JTermApp. Unsaved progress is written on the way out.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from jterm.config import Config
from jterm.logging_conf import setup_logging
from jterm.persistence import ProgressRepository, WriteError, load_or_empty
from jterm.taxonomy import ConfigurationInvariantViolation, all_regions, validate_regions
from jterm.version import version_info

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="jterm", description="Track your travels across Japan's 47 prefectures.")
    p.add_argument("--config", metavar="PATH", default=os.environ.get("JTERM_CONFIG"),
                   help="config file (default: ~/.config/jterm/jterm.json)")
    p.add_argument("--version", action="version", version=version_info())
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if os.name == "nt" and not sys.stdout.isatty():
        print("No Windows console detected. Run from cmd, PowerShell, or Windows Terminal.")
        return 1

    cfg = Config.load(args.config)
    setup_logging(cfg)
    log.info("%s starting, config %s", version_info(), cfg.path)

    regions = all_regions()
    try:
        validate_regions(regions)
    except ConfigurationInvariantViolation as exc:
        log.critical("Prefecture table rejected: %s", exc)
        print(f"jterm: {exc}", file=sys.stderr)
        return 2

    # Imported here so --version and table errors work without a terminal
    from jterm.ui.app import JTermApp
    from jterm.ui.state import AppSession

    repository = ProgressRepository(cfg.progress_path)
    store, error = load_or_empty(repository)
    session = AppSession(cfg, regions, store, repository)
    if error:
        session.state.set_error(error)

    JTermApp(session).run()

    if store.dirty and cfg["app"].get("save_on_exit", True):
        try:
            repository.save(store)
        except WriteError as exc:
            print(f"jterm: could not save progress: {exc}", file=sys.stderr)
            return 1
    log.info("Exiting")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
