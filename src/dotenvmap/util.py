"""Shared utilities."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

DEFAULT_ENV_FILE = ".env"


def filenames_or_default(
    filenames: Sequence[str | Path],
    default: Sequence[str | Path] = (DEFAULT_ENV_FILE,),
) -> list[Path]:
    """Return *filenames* as paths, or *default* when none were given."""
    chosen = filenames if filenames else default
    return [Path(f) for f in chosen]


def split_path_list(value: str | None) -> list[str]:
    """Split an ``os.pathsep``-separated list (as in ``DOTENVMAP_FILES``), dropping blanks.

    >>> split_path_list(".env" + os.pathsep + ".env.local")
    ['.env', '.env.local']
    """
    if not value:
        return []
    return [part for part in value.split(os.pathsep) if part.strip()]


def mask(value: str) -> str:
    """Hide all but the ends of a value for display."""
    if len(value) <= 6:
        return "****"
    return value[:3] + "****" + value[-3:]
