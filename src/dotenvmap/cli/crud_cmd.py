# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotenvmap get``, ``dotenvmap set``, ``dotenvmap delete`` commands."""

from __future__ import annotations

from pathlib import Path

import click

from dotenvmap.cli import cli, console, read_map, read_target, target_file
from dotenvmap.envmap import EnvMap
from dotenvmap.sdk import write


@cli.command()
@click.argument("key")
@click.pass_context
def get(ctx: click.Context, key: str) -> None:
    """Print a single value."""
    found = read_map(ctx).get(key)
    if found is None:
        raise click.ClickException(f"Key '{key}' not found.")
    click.echo(found.value)


@cli.command("set")
@click.argument("key")
@click.argument("value")
@click.option("--at", "position", type=int, default=None, help="Move the key to this position.")
@click.pass_context
def set_key(ctx: click.Context, key: str, value: str, position: int | None) -> None:
    """Set a single variable in the first env file."""
    path = target_file(ctx)
    envmap = read_target(ctx)
    if position is None:
        envmap.set(key, value)
    else:
        envmap.set_at(key, value, position)
    _save(envmap, path)
    console.print(f"[green]Set {key} in {path}[/green]")


@cli.command()
@click.argument("key")
@click.pass_context
def delete(ctx: click.Context, key: str) -> None:
    """Remove a single variable from the first env file."""
    path = target_file(ctx)
    envmap = read_target(ctx)
    if envmap.remove(key) is None:
        raise click.ClickException(f"Key '{key}' not found in {path}.")
    _save(envmap, path)
    console.print(f"[green]Removed {key}[/green]")


def _save(envmap: EnvMap, path: Path) -> None:
    try:
        write(envmap, path)
    except OSError as e:
        raise click.ClickException(f"Cannot write {path}: {e}")
