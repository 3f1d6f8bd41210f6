"""Stat identifiers and stat blocks."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import IntEnum

_U16_MAX = 0xFFFF


class Stat(IntEnum):
    """One of the six stats."""

    HP = 1
    ATK = 2
    DEF = 3
    SPA = 4
    SPD = 5
    SPE = 6

    def __str__(self) -> str:
        return _LABELS[self]


_LABELS = {
    Stat.HP: "Hp",
    Stat.ATK: "Atk",
    Stat.DEF: "Def",
    Stat.SPA: "SpA",
    Stat.SPD: "SpD",
    Stat.SPE: "Spe",
}

_FIELDS = {
    Stat.HP: "hp",
    Stat.ATK: "atk",
    Stat.DEF: "def_",
    Stat.SPA: "spa",
    Stat.SPD: "spd",
    Stat.SPE: "spe",
}


@dataclass(frozen=True)
class Stats:
    """A block of six unsigned 16-bit stat values.

    In generation 1 ``spa`` also stands for the single Special stat.
    """

    hp: int = 0
    atk: int = 0
    def_: int = 0
    spa: int = 0
    spd: int = 0
    spe: int = 0

    def __post_init__(self) -> None:
        for name in _FIELDS.values():
            value = getattr(self, name)
            if not 0 <= value <= _U16_MAX:
                raise ValueError(f"{name} must be between 0 and {_U16_MAX}, got {value}")

    def __getitem__(self, stat: Stat) -> int:
        return getattr(self, _FIELDS[Stat(stat)])

    def with_stat(self, stat: Stat, value: int) -> Stats:
        """Return a copy with ``stat`` set to ``value``."""
        return dataclasses.replace(self, **{_FIELDS[Stat(stat)]: value})


EV = Stats
IV = Stats