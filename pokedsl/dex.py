"""The dex: all resolved game data, looked up by interned id."""

from __future__ import annotations

from typing import Any, Iterable

from .records import (
    AbilityData,
    ItemData,
    MoveData,
    RawAbilityData,
    RawItemData,
    RawMoveData,
    RawSpeciesData,
    RawTypeChartData,
    RawTypeData,
    SpeciesData,
    TypeChartData,
    TypeData,
)
from .store import Interner, Key, NotFoundError, Store

_PHASES: dict[type, int] = {
    RawTypeData: 0,
    RawAbilityData: 0,
    RawItemData: 0,
    RawMoveData: 1,
    RawTypeChartData: 1,
    RawSpeciesData: 2,
}

_STORE_NAMES: dict[str, type] = {
    "abilities": AbilityData,
    "items": ItemData,
    "moves": MoveData,
    "species": SpeciesData,
    "types": TypeData,
    "type_charts": TypeChartData,
}


def phase(raw: Any) -> int:
    """Loading phase of a raw record; lower phases must be added first."""
    try:
        return _PHASES[type(raw)]
    except KeyError:
        raise TypeError(f"not a raw data record: {raw!r}") from None


class Dex:
    """All resolved abilities, items, moves, species, types and type charts."""

    def __init__(self) -> None:
        self._interner = Interner()
        self._stores: dict[type, Store] = {kind: Store() for kind in _STORE_NAMES.values()}

    def _store(self, kind: type) -> Store:
        try:
            return self._stores[kind]
        except KeyError:
            raise TypeError(f"no store for {kind!r}") from None

    def get(self, key: Key) -> Any:
        """Return the entry that ``key`` refers to."""
        return self._store(key.kind).get(key)

    def add(self, raw: Any) -> Key:
        """Resolve ``raw`` against this dex and store it under its id."""
        kind = type(raw).output
        store = self._store(kind)
        key = Key(self._interner.get_or_intern(raw.id), kind)
        store.insert(key, raw.resolve(key, self))
        return key

    def load_all(self, raw: Iterable[Any]) -> None:
        """Add every record, ordered by phase so references resolve."""
        for entry in sorted(raw, key=phase):
            self.add(entry)

    def resolve_id(self, name: str, kind: type) -> Key:
        """Key for ``name`` as an entry of ``kind``."""
        symbol = self._interner.get(name)
        if symbol is None:
            raise NotFoundError(name)
        return Key(symbol, kind)

    def resolve_ids(self, ids: Iterable[str], kind: type) -> list[Key]:
        return [self.resolve_id(name, kind) for name in ids]

    def resolve_ref(self, name: str, kind: type) -> Any:
        """The stored entry of ``kind`` with id ``name``."""
        return self.get(self.resolve_id(name, kind))

    def resolve_refs(self, names: Iterable[str], kind: type) -> list[Any]:
        return [self.resolve_ref(name, kind) for name in names]

    def __repr__(self) -> str:
        parts = ", ".join(
            f"{name}={self._stores[kind]!r}" for name, kind in _STORE_NAMES.items()
        )
        return f"Dex({parts})"