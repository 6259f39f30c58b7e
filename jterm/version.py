#!/usr/bin/env python3
# jterm/version.py
"""
Version and build metadata for JTerm.
"""

__version__ = "1.2.0"
__build__ = "2026-10-19"
__author__ = "JTerm contributors"
__license__ = "MIT"

def version_info() -> str:
    """Return human-readable version string."""
    return f"JTerm v{__version__} (build {__build__})"
