"""Generation-aware game data, stat formulas, a resolving dex with RON loading, and a battle engine core."""

__version__ = "0.1.0"