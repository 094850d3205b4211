# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exceptions raised while decoding dotenv text.

I/O failures are not wrapped: ``OSError`` from opening or reading a source
reaches the caller unchanged.
"""

from __future__ import annotations


class DotenvError(ValueError):
    """Base class for dotenv decoding errors.

    Attributes:
        line: The offending line as it reached the decoder.
        lineno: 1-based line number, set when the error is raised from
            :func:`dotenvmap.env_file.parse`.
    """

    default_message = "invalid dotenv line"

    def __init__(self, line: str, message: str | None = None, lineno: int | None = None) -> None:
        self.line = line
        self.message = message or self.default_message
        self.lineno = lineno
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.lineno is not None:
            return f"line {self.lineno}: {self.message}: {self.line!r}"
        return f"{self.message}: {self.line!r}"


class MalformedLineError(DotenvError):
    """The line has no ``=`` or ``:`` separating key and value."""

    default_message = "Can't separate key from value"


class EmptyLineError(DotenvError):
    """A zero-length line was handed to the decoder."""

    default_message = "zero length string"
