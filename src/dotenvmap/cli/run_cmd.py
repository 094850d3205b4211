# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotenvmap run`` -- run a command with the env files loaded."""

from __future__ import annotations

import click

from dotenvmap.cli import cli
from dotenvmap.errors import DotenvError
from dotenvmap.sdk import exec_command


@cli.command(
    "run",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.option("--override", is_flag=True, help="Replace variables already set in the environment.")
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
def run(ctx: click.Context, override: bool, command: tuple[str, ...]) -> None:
    """Run COMMAND with the variables from the env files added to its environment.

    Variables already present in the environment win unless --override is
    given (or ``override = true`` is configured).
    """
    do_override = override or ctx.obj["override"]
    try:
        code = exec_command(
            ctx.obj["files"], command[0], command[1:],
            override=do_override, expand=ctx.obj["expand"],
        )
    except (DotenvError, OSError) as e:
        raise click.ClickException(str(e))
    ctx.exit(code)
