# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Render an :class:`~dotenvmap.envmap.EnvMap` back to dotenv text."""

from __future__ import annotations

from dotenvmap.envmap import EnvMap

# "$" is left alone so variable references survive a re-parse.
_DOUBLE_QUOTE_ESCAPES: list[tuple[str, str]] = [
    ("\\", "\\\\"),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ('"', '\\"'),
    ("!", "\\!"),
    ("`", "\\`"),
]


def double_quote_escape(value: str) -> str:
    """Escape *value* for use inside a double-quoted dotenv value."""
    for char, escaped in _DOUBLE_QUOTE_ESCAPES:
        value = value.replace(char, escaped)
    return value


def format_line(key: str, value: str) -> str:
    return f'{key}="{double_quote_escape(value)}"'


def marshal(envmap: EnvMap) -> str:
    """Return *envmap* as ``KEY="VALUE"`` lines in map order, newline-terminated."""
    lines = [format_line(key, value) for key, value in envmap]
    return "\n".join(lines) + "\n"
