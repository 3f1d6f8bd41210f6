"""Battle state: factions, teams, fighters and the slots they fight from."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Sequence, TypeVar

from .config import Config
from .generation import Generation

T = TypeVar("T")


def _at(items: Sequence[T], index: int) -> Optional[T]:
    if 0 <= index < len(items):
        return items[index]
    return None


@dataclass(frozen=True)
class FactionId:
    """Position of a faction within a battle."""

    index: int


@dataclass(frozen=True)
class TeamId:
    """Position of a team within its faction."""

    index: int


@dataclass(frozen=True)
class FighterId:
    """Position of a fighter within its team."""

    index: int


@dataclass(frozen=True)
class SlotId:
    """Position of an active slot within its team."""

    index: int


@dataclass(frozen=True)
class TeamRef:
    faction: FactionId
    id: TeamId


@dataclass(frozen=True)
class FighterRef:
    team: TeamRef
    id: FighterId


@dataclass(frozen=True)
class SlotRef:
    team: TeamRef
    id: SlotId


@dataclass
class Slot:
    """A place on the field that holds at most one fighter."""

    occupant: Optional[FighterId] = None

    def replace_occupant(self, fighter: Optional[FighterId]) -> Optional[FighterId]:
        """Put ``fighter`` in the slot and return the previous occupant."""
        previous, self.occupant = self.occupant, fighter
        return previous


@dataclass
class Fighter:
    """A Pokémon taking part in a battle."""

    pokemon: Any


@dataclass(frozen=True)
class BattleFormat:
    """How many Pokémon each team has on the field at once."""

    active_pokemon_per_team: int

    SINGLES: ClassVar[BattleFormat]
    DOUBLES: ClassVar[BattleFormat]


BattleFormat.SINGLES = BattleFormat(active_pokemon_per_team=1)
BattleFormat.DOUBLES = BattleFormat(active_pokemon_per_team=2)


class Team:
    """A player's team participating in a battle."""

    def __init__(self) -> None:
        self._fighters: list[Fighter] = []
        self._slots: list[Slot] = []

    def add_fighter(self, fighter: Fighter) -> FighterId:
        self._fighters.append(fighter)
        return FighterId(len(self._fighters) - 1)

    def fighter(self, fighter_id: FighterId) -> Optional[Fighter]:
        return _at(self._fighters, fighter_id.index)

    def slot(self, slot_id: SlotId) -> Optional[Slot]:
        return _at(self._slots, slot_id.index)

    def slot_count(self) -> int:
        return len(self._slots)

    def start(self, format: BattleFormat) -> None:
        """Create the active slots, filled with the first fighters in order."""
        self._slots = [
            Slot(FighterId(i)) if i < len(self._fighters) else Slot()
            for i in range(format.active_pokemon_per_team)
        ]


class Faction:
    """One side of the battle, possibly made of several teams."""

    def __init__(self) -> None:
        self._teams: list[Team] = []

    def add_team(self, team: Team) -> TeamId:
        self._teams.append(team)
        return TeamId(len(self._teams) - 1)

    def team(self, team_id: TeamId) -> Optional[Team]:
        return _at(self._teams, team_id.index)

    def slot(self, ref: SlotRef) -> Optional[Slot]:
        team = self.team(ref.team.id)
        return None if team is None else team.slot(ref.id)

    def start(self, format: BattleFormat) -> None:
        for team in self._teams:
            team.start(format)


class Battle:
    """A battle between factions under one format and configuration."""

    def __init__(
        self,
        format: BattleFormat,
        config: Config,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.format = format
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self._factions: list[Faction] = []

    @classmethod
    def from_generation(cls, format: BattleFormat, generation: Generation) -> Battle:
        return cls(format, Config.from_generation(generation))

    def add_faction(self, faction: Faction) -> FactionId:
        self._factions.append(faction)
        return FactionId(len(self._factions) - 1)

    def faction(self, faction_id: FactionId) -> Optional[Faction]:
        return _at(self._factions, faction_id.index)

    def team(self, ref: TeamRef) -> Optional[Team]:
        faction = self.faction(ref.faction)
        return None if faction is None else faction.team(ref.id)

    def fighter(self, ref: FighterRef) -> Optional[Fighter]:
        team = self.team(ref.team)
        return None if team is None else team.fighter(ref.id)

    def start(self) -> None:
        """Set up every team's active slots."""
        for faction in self._factions:
            faction.start(self.format)

    def fire(self, trigger: Any) -> None:
        """Signal a battle event. No reactions are defined yet."""
        return None


@dataclass(frozen=True)
class SwitchIn:
    """Send ``fighter`` into ``slot``."""

    slot: SlotRef
    fighter: FighterId


TurnAction = SwitchIn


@dataclass
class Turn:
    """One turn being played out in a battle."""

    battle: Battle
    actions: list[TurnAction] = field(default_factory=list)