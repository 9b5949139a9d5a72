"""Shared rich console for status output.

Writes to stderr and stays quiet unless YTT_VERBOSE is set, so library
callers see nothing by default. Settings are read on first use, not on
import.
"""

from __future__ import annotations

from functools import lru_cache

from rich.console import Console

from ytt.core.config import get_settings


@lru_cache(maxsize=1)
def get_console() -> Console:
    return Console(stderr=True, quiet=not get_settings().verbose)
