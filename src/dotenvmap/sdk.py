# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""File-level helpers: read, load into the environment, write, and exec (python-dotenv style)."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from dotenvmap.env_file import parse_stream
from dotenvmap.environ import Environ, default_environ
from dotenvmap.envmap import EnvMap
from dotenvmap.serializer import marshal
from dotenvmap.util import filenames_or_default

logger = logging.getLogger(__name__)


def read_file(
    path: str | Path,
    expand: bool = True,
    environ: Environ | None = None,
    escape_literals: bool = False,
) -> EnvMap:
    """Parse a single file. ``OSError`` from opening or reading propagates."""
    path = Path(path)
    logger.debug("Reading %s (expand=%s)", path, expand)
    with path.open(encoding="utf-8") as f:
        return parse_stream(f, expand, environ, escape_literals)


def read_for_edit(path: str | Path, environ: Environ | None = None) -> EnvMap:
    """Read *path* so that :func:`write` puts back values that parse the same.

    References stay unexpanded and ``$`` in single-quoted literals is
    escaped, since :func:`marshal` writes every value double-quoted.
    """
    return read_file(path, expand=False, environ=environ, escape_literals=True)


def read(*filenames: str | Path, expand: bool = True, environ: Environ | None = None) -> EnvMap:
    """Read one or more files (default ``.env``) into a single map.

    Files are parsed one after another and merged with :meth:`EnvMap.set`, so
    a key seen again keeps its first position and takes the later value. The
    first failing file aborts the read.
    """
    envmap = EnvMap()
    for path in filenames_or_default(filenames):
        read_file(path, expand, environ).iterate(envmap.set)
    return envmap


def read_no_expand(*filenames: str | Path, environ: Environ | None = None) -> EnvMap:
    """Like :func:`read` but leaves ``$NAME`` references untouched."""
    return read(*filenames, expand=False, environ=environ)


def merge(envmap: EnvMap, environ: Environ | None = None, override: bool = False) -> int:
    """Copy *envmap* into *environ* and return how many variables were set.

    With ``override=False`` (preserve) names already present in the
    environment are left alone.
    """
    env = default_environ(environ)
    count = 0
    for key, value in envmap:
        if not override and env.get(key) is not None:
            logger.debug("Keeping existing %s", key)
            continue
        env.set(key, value)
        count += 1
    return count


def _load_files(
    filenames: Sequence[str | Path],
    override: bool,
    expand: bool,
    environ: Environ | None,
) -> int:
    env = default_environ(environ)
    count = 0
    for path in filenames_or_default(filenames):
        envmap = read_file(path, expand, env)
        merged = merge(envmap, env, override=override)
        logger.debug("Loaded %d of %d variable(s) from %s", merged, len(envmap), path)
        count += merged
    return count


def load(*filenames: str | Path, expand: bool = True, environ: Environ | None = None) -> int:
    """Load files into the environment without overriding variables that are already set."""
    return _load_files(filenames, override=False, expand=expand, environ=environ)


def overload(*filenames: str | Path, expand: bool = True, environ: Environ | None = None) -> int:
    """Load files into the environment, overriding variables that are already set."""
    return _load_files(filenames, override=True, expand=expand, environ=environ)


def write(envmap: EnvMap, filename: str | Path) -> None:
    """Serialize *envmap* with :func:`marshal` and write it to *filename*."""
    path = Path(filename)
    path.write_text(marshal(envmap), encoding="utf-8")
    logger.debug("Wrote %d variable(s) to %s", len(envmap), path)


def exec_command(
    filenames: Sequence[str | Path],
    cmd: str,
    args: Sequence[str] = (),
    environ: Environ | None = None,
    override: bool = False,
    expand: bool = True,
) -> int:
    """Load *filenames* into *environ*, then run *cmd* with it and return the exit code.

    The child inherits this process's stdin, stdout and stderr.
    """
    env = default_environ(environ)
    _load_files(filenames, override=override, expand=expand, environ=env)
    logger.debug("Running %s %s", cmd, " ".join(args))
    completed = subprocess.run([cmd, *args], env=env.snapshot(), check=False)
    return completed.returncode


def load_dotenv(
    *filenames: str | Path,
    override: bool = False,
    expand: bool = True,
    environ: Environ | None = None,
) -> bool:
    """Load files into ``os.environ`` (python-dotenv compatible API).

    Parameters
    ----------
    *filenames : str or Path
        Files to load in order. Defaults to ``.env``.
    override : bool, default False
        If True, overwrite variables that are already set. If False, only
        set variables that are missing (matches python-dotenv semantics).
    expand : bool, default True
        Expand ``$NAME`` / ``${NAME}`` references.
    environ : Environ, optional
        Target environment. Defaults to the real process environment.

    Returns
    -------
    bool
        True if at least one variable was set, False otherwise.

    Examples
    --------
    >>> from dotenvmap import load_dotenv
    >>> load_dotenv()  # .env in the current directory
    True
    >>> load_dotenv(".env", ".env.local", override=True)
    True
    """
    return _load_files(filenames, override=override, expand=expand, environ=environ) > 0


def dotenv_values(
    *filenames: str | Path,
    expand: bool = True,
    environ: Environ | None = None,
) -> dict[str, str]:
    """Return the merged contents of *filenames* as an ordered dict, without touching the environment."""
    return read(*filenames, expand=expand, environ=environ).to_dict()
