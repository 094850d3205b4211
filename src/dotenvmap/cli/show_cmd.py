# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotenvmap show`` and ``dotenvmap list`` commands."""

from __future__ import annotations

import sys

import click
from rich.table import Table

from dotenvmap.cli import cli, console, mask, read_map


@cli.command()
@click.option("--line-numbers", "-n", is_flag=True, help="Prefix each line with its position.")
@click.pass_context
def show(ctx: click.Context, line_numbers: bool) -> None:
    """Print the parsed variables as KEY="VALUE" lines, in file order."""
    envmap = read_map(ctx)
    envmap.emit(sys.stdout, line_numbers=line_numbers)


@cli.command("list")
@click.option("--reveal", is_flag=True, help="Show values instead of masking them.")
@click.pass_context
def list_keys(ctx: click.Context, reveal: bool) -> None:
    """List parsed variables with their positions."""
    envmap = read_map(ctx)
    files = ", ".join(str(f) for f in ctx.obj["files"])
    table = Table(title=f"Variables ({files})")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Key", style="white")
    table.add_column("Value" if reveal else "Value (masked)", style="dim")
    if not len(envmap):
        table.add_row("", "(empty)", "(empty)")
    for ix, (key, value) in enumerate(envmap):
        shown = value if reveal else (mask(value) if value else "(empty)")
        table.add_row(str(ix), key, shown)
    console.print(table)
