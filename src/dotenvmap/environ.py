# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Accessors for the ambient process environment.

Variable expansion falls back to an :class:`Environ` and the load helpers
merge into one, so both can run against a plain dict in tests.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import MutableMapping


class Environ(ABC):
    """Read/write view of an environment table."""

    @abstractmethod
    def get(self, name: str) -> str | None:
        """Return the value of *name*, or ``None`` if it is not set."""

    @abstractmethod
    def set(self, name: str, value: str) -> None:
        """Create or overwrite *name*."""

    @abstractmethod
    def snapshot(self) -> dict[str, str]:
        """Return a copy suitable for passing as a subprocess ``env``."""


class OsEnviron(Environ):
    """The real ``os.environ`` of this process."""

    def get(self, name: str) -> str | None:
        return os.environ.get(name)

    def set(self, name: str, value: str) -> None:
        os.environ[name] = value

    def snapshot(self) -> dict[str, str]:
        return dict(os.environ)


class MappingEnviron(Environ):
    """An environment backed by a caller-supplied mapping (mutated in place)."""

    def __init__(self, data: MutableMapping[str, str] | None = None) -> None:
        self.data: MutableMapping[str, str] = data if data is not None else {}

    def get(self, name: str) -> str | None:
        return self.data.get(name)

    def set(self, name: str, value: str) -> None:
        self.data[name] = value

    def snapshot(self) -> dict[str, str]:
        return dict(self.data)


def default_environ(environ: Environ | None) -> Environ:
    return environ if environ is not None else OsEnviron()
