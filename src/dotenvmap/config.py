""".dotenvmap.toml configuration loading.

Searches upward from cwd for ``.dotenvmap.toml`` and merges with CLI flags.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]

from dotenvmap.util import DEFAULT_ENV_FILE

CONFIG_FILENAME = ".dotenvmap.toml"


@dataclass
class DotenvmapConfig:
    """Resolved configuration for the current invocation."""

    files: list[str] = field(default_factory=lambda: [DEFAULT_ENV_FILE])
    expand: bool = True
    override: bool = False
    config_path: Path | None = None

    def resolve_files(self) -> list[Path]:
        """Return ``files`` as paths, relative ones anchored at the config file's directory."""
        base = self.config_path.parent if self.config_path is not None else None
        out: list[Path] = []
        for name in self.files:
            p = Path(name)
            if base is not None and not p.is_absolute():
                p = base / p
            out.append(p)
        return out


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.dotenvmap.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def load_config(path: Path | None = None) -> DotenvmapConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        path = find_config_file()
    if path is None:
        return DotenvmapConfig()

    raw: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    section = raw.get("dotenvmap", {})

    files = section.get("files", [DEFAULT_ENV_FILE])
    if isinstance(files, str):
        files = [files]
    if not isinstance(files, list) or not all(isinstance(f, str) for f in files):
        raise ValueError(f"{path}: dotenvmap.files must be a string or a list of strings")

    return DotenvmapConfig(
        files=files,
        expand=bool(section.get("expand", True)),
        override=bool(section.get("override", False)),
        config_path=path,
    )
