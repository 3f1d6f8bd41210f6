"""Stat formulas for the different generations."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .generation import Generation
from .nature import Nature
from .stats import Stat, Stats

if TYPE_CHECKING:
    from .config import Config
    from .pokemon import Pokemon

_U16 = 0xFFFF


def stat_formula(generation: Generation) -> StatFormula:
    """Return the stat formula used in ``generation``."""
    if generation.value <= 2:
        return Gen12StatFormula()
    return Gen3OnwardsStatFormula()


def nature_factor(stat: Stat, nature: Nature) -> float:
    """Multiplier a nature applies to a stat."""
    increase = nature.increased_stat() == stat
    decrease = nature.decreased_stat() == stat
    if increase and decrease:
        return 1.0
    if increase:
        return 1.1
    if decrease:
        return 0.9
    return 1.0


class StatFormula(ABC):
    """Computes a Pokémon's actual stats."""

    @abstractmethod
    def calc(self, config: Config, pokemon: Pokemon) -> Stats:
        """Return the stats of ``pokemon`` under ``config``."""


class Gen12StatFormula(StatFormula):
    """Formula of generations 1 and 2, with a shared Special stat."""

    @staticmethod
    def _inner(level: int, base: int, ev: int, iv: int) -> int:
        return (((base + iv) * 2 + math.isqrt(ev) // 4) * level // 100) & _U16

    @classmethod
    def _hp(cls, level: int, base: int, ev: int, iv: int) -> int:
        return cls._inner(level, base, ev, iv) + level + 10

    @classmethod
    def _stat(cls, level: int, base: int, ev: int, iv: int) -> int:
        return cls._inner(level, base, ev, iv) + 5

    def calc(self, config: Config, pokemon: Pokemon) -> Stats:
        base = pokemon.current_form().stats.get(config.generation)
        level, ev, iv = pokemon.level, pokemon.ev, pokemon.iv
        special = self._stat(level, base.spa, ev.spa, iv.spa)
        return Stats(
            hp=self._hp(level, base.hp, ev.hp, iv.hp),
            atk=self._stat(level, base.atk, ev.atk, iv.atk),
            def_=self._stat(level, base.def_, ev.def_, iv.def_),
            spa=special,
            spd=special,
            spe=self._stat(level, base.spe, ev.spe, iv.spe),
        )


class Gen3OnwardsStatFormula(StatFormula):
    """Formula of generation 3 onwards, with nature modifiers."""

    @staticmethod
    def _inner(level: int, base: int, ev: int, iv: int) -> int:
        return ((2 * base + iv + ev // 4) * level // 100) & _U16

    @classmethod
    def _hp(cls, level: int, base: int, ev: int, iv: int) -> int:
        return cls._inner(level, base, ev, iv) + level + 10

    @classmethod
    def _stat(cls, level: int, base: int, ev: int, iv: int, stat: Stat, nature: Nature) -> int:
        raw = (cls._inner(level, base, ev, iv) + 5) * nature_factor(stat, nature)
        return min(math.floor(raw), _U16)

    def calc(self, config: Config, pokemon: Pokemon) -> Stats:
        base = pokemon.current_form().stats.get(config.generation)
        level, ev, iv, nature = pokemon.level, pokemon.ev, pokemon.iv, pokemon.nature
        return Stats(
            hp=self._hp(level, base.hp, ev.hp, iv.hp),
            **{
                field: self._stat(level, base[stat], ev[stat], iv[stat], stat, nature)
                for field, stat in (
                    ("atk", Stat.ATK),
                    ("def_", Stat.DEF),
                    ("spa", Stat.SPA),
                    ("spd", Stat.SPD),
                    ("spe", Stat.SPE),
                )
            },
        )