# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""dotenvmap CLI -- inspect, edit, export and run with .env files.

The CLI is split into per-command modules under this package.  The ``cli``
click group and shared helpers (``console``, ``read_map``, etc.) live here so
every command module can import them.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from dotenvmap import __version__
from dotenvmap.config import load_config
from dotenvmap.envmap import EnvMap
from dotenvmap.errors import DotenvError
from dotenvmap.sdk import read, read_for_edit
from dotenvmap.util import mask, split_path_list

try:
    import yaml
    HAS_YAML = True
except ImportError:
    HAS_YAML = False

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _setup_logging(verbose: bool) -> None:
    pkg_logger = logging.getLogger("dotenvmap")
    for handler in [h for h in pkg_logger.handlers if isinstance(h, RichHandler)]:
        pkg_logger.removeHandler(handler)
    if verbose:
        pkg_logger.addHandler(RichHandler(console=console, show_path=False))
        pkg_logger.setLevel(logging.DEBUG)
    else:
        pkg_logger.setLevel(logging.NOTSET)


def read_map(ctx: click.Context, expand: bool | None = None) -> EnvMap:
    """Read every configured file into one map, turning parse/IO errors into click errors."""
    files: list[Path] = ctx.obj["files"]
    do_expand = ctx.obj["expand"] if expand is None else expand
    try:
        return read(*files, expand=do_expand)
    except (DotenvError, OSError) as e:
        raise click.ClickException(str(e))


def target_file(ctx: click.Context) -> Path:
    """The file edited by ``set`` and ``delete``: the first configured one."""
    return ctx.obj["files"][0]


def read_target(ctx: click.Context) -> EnvMap:
    """Read the target file so that references and literals survive a rewrite."""
    path = target_file(ctx)
    if not path.is_file():
        return EnvMap()
    try:
        return read_for_edit(path)
    except (DotenvError, OSError) as e:
        raise click.ClickException(f"{path}: {e}")


def _resolve_files(files: tuple[str, ...], cfg_files: list[Path]) -> list[Path]:
    if files:
        return [Path(f) for f in files]
    from_env = split_path_list(os.environ.get("DOTENVMAP_FILES"))
    if from_env:
        return [Path(f) for f in from_env]
    return cfg_files


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option(
    "--file", "-f", "files", multiple=True, type=click.Path(dir_okay=False),
    help="Env file to use; repeat for several (default: DOTENVMAP_FILES, config, else .env).",
)
@click.option("--no-expand", is_flag=True, default=False, help="Do not expand $NAME / ${NAME} references.")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    files: tuple[str, ...],
    no_expand: bool,
    verbose: bool,
) -> None:
    """Parse, edit and export .env files, keeping their order."""
    try:
        cfg = load_config()
    except ValueError as e:
        raise click.ClickException(f"Invalid config: {e}")
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["files"] = _resolve_files(files, cfg.resolve_files())
    ctx.obj["expand"] = cfg.expand and not no_expand
    ctx.obj["override"] = cfg.override
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from dotenvmap.cli import (  # noqa: E402, F401
    crud_cmd,
    export_cmd,
    run_cmd,
    show_cmd,
)

__all__ = ["HAS_YAML", "cli", "console", "mask", "read_map", "read_target", "target_file"]
