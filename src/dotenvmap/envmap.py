# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Insertion-ordered key/value map with positional addressing.

Every mutation keeps the key -> position index consistent with the entry
list, so callers can address entries either by key or by position.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import NamedTuple, TextIO


class Pair(NamedTuple):
    """A single (key, value) entry."""

    key: str
    value: str


class Previous(NamedTuple):
    """The entry a mutation replaced. ``position`` is ``None`` when not reported."""

    value: str
    position: int | None


class Located(NamedTuple):
    """A value together with its position in the map."""

    value: str
    position: int


class Step(NamedTuple):
    """Result of :meth:`EnvMap.get_at`; ``next`` is ``None`` after the last slot."""

    pair: Pair
    next: int | None


class EnvMap:
    """Ordered map of environment variables.

    Not safe for concurrent mutation; share across threads only behind a lock.
    """

    def __init__(self, pairs: dict[str, str] | None = None) -> None:
        self._entries: list[Pair] = []
        self._keys: dict[str, int] = {}
        if pairs:
            for key, value in pairs.items():
                self.set(key, value)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Pair]:
        return iter(list(self._entries))

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnvMap):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"EnvMap({self.to_dict()!r})"

    def len(self) -> int:
        return len(self._entries)

    def set(self, key: str, value: str) -> Previous | None:
        """Store *value* under *key*.

        An existing key keeps its position and ``Previous(old_value, None)``
        is returned. A new key is appended and ``None`` is returned.
        """
        at = self._keys.get(key)
        if at is not None:
            old = self._entries[at].value
            self._entries[at] = Pair(key, value)
            return Previous(old, None)
        self._entries.append(Pair(key, value))
        self._keys[key] = len(self._entries) - 1
        return None

    def set_at(self, key: str, value: str, at: int) -> Previous | None:
        """Store *value* under *key* at position *at*, moving an existing key.

        When the key already sits before *at*, *at* is taken relative to the
        list after its removal (i.e. decremented by one). The target is then
        clamped into ``[0, len]``.
        """
        previous: Previous | None = None
        ex = self._keys.get(key)
        if ex is not None:
            previous = Previous(self._entries[ex].value, ex)
            del self._entries[ex]
            if ex < at:
                at -= 1
        at = max(0, min(at, len(self._entries)))
        self._entries.insert(at, Pair(key, value))
        self._reindex()
        return previous

    def get(self, key: str) -> Located | None:
        at = self._keys.get(key)
        if at is None:
            return None
        return Located(self._entries[at].value, at)

    def get_at(self, at: int) -> Step | None:
        """Return the pair at *at* and the position of the one after it.

        Supports chained iteration::

            step = m.get_at(0)
            while step is not None:
                ...
                step = m.get_at(step.next) if step.next is not None else None
        """
        if at < 0 or at >= len(self._entries):
            return None
        nxt: int | None = at + 1
        if nxt >= len(self._entries):
            nxt = None
        return Step(self._entries[at], nxt)

    def remove(self, key: str) -> Located | None:
        at = self._keys.get(key)
        if at is None:
            return None
        pair = self._entries.pop(at)
        self._reindex()
        return Located(pair.value, at)

    def remove_at(self, at: int) -> Pair | None:
        if at < 0 or at >= len(self._entries):
            return None
        pair = self._entries.pop(at)
        self._reindex()
        return pair

    def iterate(self, visit: Callable[[str, str], object]) -> None:
        """Call ``visit(key, value)`` for each entry, in order."""
        for key, value in list(self._entries):
            visit(key, value)

    def keys(self) -> list[str]:
        return [p.key for p in self._entries]

    def items(self) -> list[tuple[str, str]]:
        return [(p.key, p.value) for p in self._entries]

    def to_dict(self) -> dict[str, str]:
        return dict(self.items())

    def export(self, dest: TextIO, write: Callable[[int, str, str], str]) -> None:
        """Write ``write(position, key, value)`` for every entry to *dest*."""
        dest.write("".join(write(ix, p.key, p.value) for ix, p in enumerate(self._entries)))

    def emit(self, dest: TextIO, line_numbers: bool = False) -> None:
        """Write ``KEY="VALUE"`` lines to *dest*, optionally prefixed with positions.

        Values are written raw; use :func:`dotenvmap.serializer.marshal` for
        escaped output.
        """
        # floor(log10(n)) + 1 digits
        width = len(str(len(self._entries)))

        def _line(ix: int, key: str, value: str) -> str:
            prefix = f"{ix:0{width}d} " if line_numbers else ""
            return f'{prefix}{key}="{value}"\n'

        self.export(dest, _line)

    def _reindex(self) -> None:
        self._keys = {pair.key: ix for ix, pair in enumerate(self._entries)}
