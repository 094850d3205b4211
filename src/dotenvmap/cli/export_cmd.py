# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotenvmap export`` command."""

from __future__ import annotations

import json
from pathlib import Path

import click

from dotenvmap.cli import HAS_YAML, cli, console, read_map
from dotenvmap.envmap import EnvMap
from dotenvmap.serializer import marshal

if HAS_YAML:
    import yaml


@cli.command("export")
@click.option(
    "--format", "fmt",
    type=click.Choice(["dotenv", "json", "yaml", "unix"]),
    default="dotenv",
    help='Output format: dotenv (default, KEY="value"), json, yaml, unix (export KEY=value).',
)
@click.option(
    "--output", "-o",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Output file path (default: stdout).",
)
@click.pass_context
def export(ctx: click.Context, fmt: str, output: str | None) -> None:
    """Export the parsed variables to stdout or a file, in file order.

    The dotenv format escapes values so the output parses back to the same
    variables; "$" is left as-is so references are kept. Use --format unix
    for shell sourcing: eval "$(dotenvmap export --format unix)".
    """
    if fmt == "yaml" and not HAS_YAML:
        raise click.ClickException("PyYAML is not installed. Install with: pip install pyyaml")

    envmap = read_map(ctx)
    text = render(envmap, fmt)
    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Exported {len(envmap)} variable(s) to {output}[/green]")
    else:
        click.echo(text, nl=False)


def render(envmap: EnvMap, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(envmap.to_dict(), indent=2) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(envmap.to_dict(), default_flow_style=False, sort_keys=False)
    if fmt == "unix":
        return "".join(f"export {key}={_shell_escape(value)}\n" for key, value in envmap)
    return marshal(envmap)


def _shell_escape(value: str) -> str:
    """Escape for Unix sh: single-quote wrapped, internal ' -> '\\''."""
    if not value or any(c in value for c in " \t\n'\"\\$`!#&|;(){}<>*?"):
        return "'" + value.replace("'", "'\\''") + "'"
    return value
