"""Battle rule configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .formulas import StatFormula, stat_formula
from .generation import Generation


@dataclass
class Config:
    """Rules that depend on the generation being simulated."""

    generation: Generation
    stat_formula: StatFormula

    @classmethod
    def from_generation(cls, generation: Generation) -> Config:
        """Build the configuration matching ``generation``."""
        return cls(generation=generation, stat_formula=stat_formula(generation))