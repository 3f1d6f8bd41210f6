"""Individual Pokémon, stored and in use."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .nature import Nature
from .stats import Stats

if TYPE_CHECKING:
    from .config import Config


@dataclass
class StoredPokemon:
    """A Pokémon as saved, referring to its species by id."""

    species_id: str
    level: int
    ev: Stats
    iv: Stats
    nature: Nature


@dataclass
class Pokemon:
    """A Pokémon with its species data resolved."""

    species: Any
    level: int
    ev: Stats
    iv: Stats
    nature: Nature
    current_form_index: int = 0

    def current_form(self) -> Any:
        """The form data the Pokémon is currently in."""
        return self.species.get_form(self.current_form_index)

    def calc_stats(self, config: Config) -> Stats:
        """Compute actual stats using the configured formula."""
        return config.stat_formula.calc(config, self)