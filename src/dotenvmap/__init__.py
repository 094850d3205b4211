# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""dotenvmap -- order-preserving .env parsing, expansion and serialization."""

from dotenvmap.env_file import parse, parse_stream, unmarshal
from dotenvmap.envmap import EnvMap, Pair
from dotenvmap.errors import DotenvError, EmptyLineError, MalformedLineError
from dotenvmap.sdk import dotenv_values, load, load_dotenv, overload, read, write
from dotenvmap.serializer import marshal

__all__ = [
    "__version__",
    "DotenvError",
    "EmptyLineError",
    "EnvMap",
    "MalformedLineError",
    "Pair",
    "dotenv_values",
    "load",
    "load_dotenv",
    "marshal",
    "overload",
    "parse",
    "parse_stream",
    "read",
    "unmarshal",
    "write",
]
__version__ = "0.1.0"
