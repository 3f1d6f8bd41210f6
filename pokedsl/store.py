"""Interned identifiers, typed keys and per-kind storage."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class ResolveError(Exception):
    """Raised when raw data cannot be turned into resolved data."""


class NotFoundError(ResolveError):
    """An id was referenced before any entry with that id was added."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Entry with id '{name}' was referenced but not previously resolved"
        )
        self.name = name


@dataclass(frozen=True)
class Key(Generic[T]):
    """Handle to a stored entry, made from an interned id.

    Keys compare and hash by their symbol only; ``kind`` records which
    store the entry lives in.
    """

    symbol: int
    kind: Optional[type] = field(default=None, compare=False)

    def __repr__(self) -> str:
        return f"Key({self.symbol})"


class Interner:
    """Maps id strings to small integer symbols, in order of first use."""

    def __init__(self) -> None:
        self._symbols: dict[str, int] = {}

    def get_or_intern(self, name: str) -> int:
        """Return the symbol for ``name``, creating one if needed."""
        return self._symbols.setdefault(name, len(self._symbols))

    def get(self, name: str) -> Optional[int]:
        """Return the symbol for ``name`` or ``None`` if it was never interned."""
        return self._symbols.get(name)

    def __repr__(self) -> str:
        return f"Interner({self._symbols!r})"


class Store(Generic[T]):
    """Resolved entries of one kind, looked up by key."""

    def __init__(self) -> None:
        self._entries: dict[Key[T], T] = {}

    def insert(self, key: Key[T], value: T) -> None:
        """Store ``value`` under ``key``, replacing any earlier entry."""
        self._entries[key] = value

    def get(self, key: Key[T]) -> T:
        """Return the entry for ``key``; a key without an entry is an error."""
        try:
            return self._entries[key]
        except KeyError:
            raise KeyError(f"dangling key {key!r}") from None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries.values())

    def __repr__(self) -> str:
        return f"Store({self._entries!r})"