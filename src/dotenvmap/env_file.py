# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse .env text into an ordered :class:`~dotenvmap.envmap.EnvMap`.

Handles:
  - blank lines and ``#`` comments
  - ``export KEY=VALUE`` prefix
  - YAML-style ``KEY: VALUE`` lines
  - single-quoted values (verbatim, never expanded)
  - double-quoted values (``\\n``/``\\r`` and backslash escapes decoded)
  - inline comments after values, with ``#`` inside quotes preserved
  - ``$NAME`` / ``${NAME}`` expansion from earlier keys, then the environment
"""

from __future__ import annotations

import re
from typing import TextIO

from dotenvmap.environ import Environ, default_environ
from dotenvmap.envmap import EnvMap
from dotenvmap.errors import DotenvError, EmptyLineError, MalformedLineError

_EXPORT_PREFIX = "export"

# A quote is escaped only when an odd number of backslashes precedes it.
_UNESCAPED_SINGLE = re.compile(r"(?<!\\)(?:\\\\)*'")
_UNESCAPED_DOUBLE = re.compile(r'(?<!\\)(?:\\\\)*"')

_ESCAPE_RE = re.compile(r"\\.")
_UNESCAPE_RE = re.compile(r"\\([^$])")

_VARIABLE_RE = re.compile(
    r"""
    (\\)?               # escape marker
    (\$)
    (\()?               # command substitution marker
    \{?
    ([A-Z0-9_]+)?       # variable name
    \}?
    """,
    re.VERBOSE,
)


def is_ignored_line(line: str) -> bool:
    """Return True for blank lines and whole-line comments."""
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def _toggles_quote(segment: str) -> bool:
    return (
        len(_UNESCAPED_DOUBLE.findall(segment)) == 1
        or len(_UNESCAPED_SINGLE.findall(segment)) == 1
    )


def strip_comment(line: str) -> str:
    """Drop a trailing ``#`` comment, keeping ``#`` that sits inside quotes.

    The line is cut at every ``#``. A segment holding exactly one unescaped
    quote character opens or closes a quoted span; segments are kept while a
    span is open, and the first segment is always kept. Segments with zero or
    several quotes never toggle, so unusual quoting can be misread.
    """
    if "#" not in line:
        return line
    kept: list[str] = []
    quotes_open = False
    for segment in line.split("#"):
        if _toggles_quote(segment):
            if quotes_open:
                quotes_open = False
                kept.append(segment)
            else:
                quotes_open = True
        if not kept or quotes_open:
            kept.append(segment)
    return "#".join(kept)


def split_line(line: str) -> tuple[str, str]:
    """Split *line* into ``(key, raw_value)``.

    A ``:`` before the first ``=`` (or with no ``=`` at all) makes this a
    YAML-style line; otherwise the first ``=`` separates.
    """
    first_equals = line.find("=")
    first_colon = line.find(":")
    sep = "="
    if first_colon != -1 and (first_equals == -1 or first_colon < first_equals):
        sep = ":"
    parts = line.split(sep, 1)
    if len(parts) != 2:
        raise MalformedLineError(line)

    key = parts[0].lstrip()
    if key.startswith(_EXPORT_PREFIX):
        key = key[len(_EXPORT_PREFIX):]
    return key.strip(), parts[1]


def _decode_escape(match: re.Match[str]) -> str:
    c = match.group(0)[1]
    if c == "n":
        return "\n"
    if c == "r":
        return "\r"
    return match.group(0)


def expand_variables(value: str, envmap: EnvMap, environ: Environ | None = None) -> str:
    """Substitute ``$NAME`` and ``${NAME}`` references in *value*.

    Names resolve against *envmap* first, then *environ*, then to ``""``.
    ``\\$NAME`` and ``$(...)`` are left literal, minus their leading marker.
    """
    env = default_environ(environ)

    def _replace(match: re.Match[str]) -> str:
        escaped, _dollar, paren, name = match.groups()
        if escaped or paren:
            return match.group(0)[1:]
        if name:
            found = envmap.get(name)
            if found is not None:
                return found.value
            return env.get(name) or ""
        return match.group(0)

    return _VARIABLE_RE.sub(_replace, value)


def parse_value(
    raw: str,
    envmap: EnvMap,
    expand: bool = True,
    environ: Environ | None = None,
    escape_literals: bool = False,
) -> str:
    """Unquote, unescape and (optionally) expand a raw value.

    With *escape_literals*, ``$`` in a single-quoted value comes back as
    ``\\$``, so the value survives :func:`~dotenvmap.serializer.marshal`
    and a later expanding parse as the same literal text.
    """
    value = raw.strip(" ")
    single_quoted = False
    if len(value) > 1 and value[0] == value[-1] and value[0] in ("'", '"'):
        single_quoted = value[0] == "'"
        double_quoted = not single_quoted
        value = value[1:-1]
        if double_quoted:
            value = _ESCAPE_RE.sub(_decode_escape, value)
            value = _UNESCAPE_RE.sub(r"\1", value)

    if single_quoted:
        if escape_literals:
            value = value.replace("$", "\\$")
    elif expand:
        value = expand_variables(value, envmap, environ)
    return value


def parse_line(
    line: str,
    envmap: EnvMap,
    expand: bool = True,
    environ: Environ | None = None,
    escape_literals: bool = False,
) -> tuple[str, str]:
    """Decode one non-ignored line into ``(key, value)``.

    *envmap* is the map built so far; values may reference its keys.
    Errors carry *line* as written, before the comment is stripped.
    """
    if not line:
        raise EmptyLineError(line)
    try:
        key, raw_value = split_line(strip_comment(line))
    except MalformedLineError as e:
        e.line = line
        raise
    return key, parse_value(raw_value, envmap, expand, environ, escape_literals)


def _split_lines(text: str) -> list[str]:
    return [line.removesuffix("\r") for line in text.split("\n")]


def parse(
    text: str,
    expand: bool = True,
    environ: Environ | None = None,
    escape_literals: bool = False,
) -> EnvMap:
    """Parse dotenv *text* into an :class:`EnvMap`.

    A repeated key keeps its first position and takes the last value.
    Raises :class:`~dotenvmap.errors.DotenvError` (with ``lineno`` set) on the
    first bad line. *escape_literals* is passed to :func:`parse_value`.
    """
    env = default_environ(environ)
    envmap = EnvMap()
    for lineno, line in enumerate(_split_lines(text), start=1):
        if is_ignored_line(line):
            continue
        try:
            key, value = parse_line(line, envmap, expand, env, escape_literals)
        except DotenvError as e:
            e.lineno = lineno
            raise
        envmap.set(key, value)
    return envmap


def parse_stream(
    stream: TextIO,
    expand: bool = True,
    environ: Environ | None = None,
    escape_literals: bool = False,
) -> EnvMap:
    """Read *stream* to the end and parse it. Read errors propagate unchanged."""
    return parse(stream.read(), expand, environ, escape_literals)


def unmarshal(text: str) -> EnvMap:
    """Parse *text* with expansion enabled."""
    return parse(text, expand=True)
