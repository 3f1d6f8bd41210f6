"""Natures and the stats they raise and lower."""

from __future__ import annotations

from enum import IntEnum

from .stats import Stat


class Nature(IntEnum):
    """A Pokémon nature."""

    HARDY = 1
    BOLD = 2
    MODEST = 3
    CALM = 4
    TIMID = 5
    LONELY = 6
    DOCILE = 7
    MILD = 8
    GENTLE = 9
    HASTY = 10
    ADAMANT = 11
    IMPISH = 12
    BASHFUL = 13
    CAREFUL = 14
    RASH = 15
    JOLLY = 16
    NAUGHTY = 17
    LAX = 18
    QUIRKY = 19
    NAIVE = 20
    BRAVE = 21
    RELAXED = 22
    QUIET = 23
    SASSY = 24
    SERIOUS = 25

    def __str__(self) -> str:
        return self.name.capitalize()

    def increased_stat(self) -> Stat:
        """The stat this nature raises."""
        return _INCREASED[self]

    def decreased_stat(self) -> Stat:
        """The stat this nature lowers."""
        return _DECREASED[self]

    def is_neutral(self) -> bool:
        """Whether the raised and lowered stat are the same."""
        return self.increased_stat() == self.decreased_stat()


def _table(groups: dict[Stat, tuple[Nature, ...]]) -> dict[Nature, Stat]:
    return {nature: stat for stat, natures in groups.items() for nature in natures}


N = Nature
_INCREASED = _table(
    {
        Stat.ATK: (N.LONELY, N.BRAVE, N.ADAMANT, N.NAUGHTY, N.HARDY),
        Stat.DEF: (N.BOLD, N.RELAXED, N.IMPISH, N.LAX, N.DOCILE),
        Stat.SPA: (N.MODEST, N.MILD, N.QUIET, N.RASH, N.BASHFUL),
        Stat.SPD: (N.CALM, N.GENTLE, N.CAREFUL, N.SASSY, N.QUIRKY),
        Stat.SPE: (N.TIMID, N.HASTY, N.JOLLY, N.NAIVE, N.SERIOUS),
    }
)
_DECREASED = _table(
    {
        Stat.ATK: (N.BOLD, N.MODEST, N.CALM, N.TIMID, N.HARDY),
        Stat.DEF: (N.LONELY, N.MILD, N.GENTLE, N.HASTY, N.DOCILE),
        Stat.SPA: (N.ADAMANT, N.IMPISH, N.CAREFUL, N.JOLLY, N.BASHFUL),
        Stat.SPD: (N.NAUGHTY, N.LAX, N.RASH, N.NAIVE, N.QUIRKY),
        Stat.SPE: (N.BRAVE, N.RELAXED, N.QUIET, N.SASSY, N.SERIOUS),
    }
)
del N