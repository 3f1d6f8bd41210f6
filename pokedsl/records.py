"""Raw and resolved records for abilities, items, moves, types, species and type charts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Optional

from .dsl import Attempt, Condition, Effect, Effectiveness, TriggerEffect
from .generation import GenSpecific
from .stats import Stats
from .store import Key

if TYPE_CHECKING:
    from .config import Config


@dataclass(frozen=True)
class AbilityData:
    key: Key
    triggers: tuple[TriggerEffect, ...] = ()


@dataclass(frozen=True)
class RawAbilityData:
    id: str
    triggers: tuple[TriggerEffect, ...] = ()

    output: ClassVar[type] = AbilityData

    def resolve(self, key: Key, dex: Any) -> AbilityData:
        return AbilityData(key=key, triggers=tuple(self.triggers))


@dataclass(frozen=True)
class ItemData:
    key: Key
    held: tuple[TriggerEffect, ...]
    active: Effect


@dataclass(frozen=True)
class RawItemData:
    id: str
    held: tuple[TriggerEffect, ...]
    active: Effect

    output: ClassVar[type] = ItemData

    def resolve(self, key: Key, dex: Any) -> ItemData:
        return ItemData(key=key, held=tuple(self.held), active=self.active)


@dataclass(frozen=True)
class TypeData:
    key: Key


@dataclass(frozen=True)
class RawTypeData:
    id: str

    output: ClassVar[type] = TypeData

    def resolve(self, key: Key, dex: Any) -> TypeData:
        return TypeData(key=key)


@dataclass(frozen=True)
class MoveData:
    key: Key
    types: tuple[TypeData, ...]
    condition: Condition
    attempt: Attempt


@dataclass(frozen=True)
class RawMoveData:
    id: str
    type_ids: tuple[str, ...]
    condition: Condition
    attempt: Attempt

    output: ClassVar[type] = MoveData

    def resolve(self, key: Key, dex: Any) -> MoveData:
        return MoveData(
            key=key,
            types=tuple(dex.resolve_refs(self.type_ids, TypeData)),
            condition=self.condition,
            attempt=self.attempt,
        )


@dataclass(frozen=True)
class FormData:
    name: str
    types: tuple[TypeData, ...]
    stats: GenSpecific[Stats]


@dataclass(frozen=True)
class RawFormData:
    name: str
    type_ids: tuple[str, ...]
    stats: GenSpecific[Stats]

    def resolve(self, dex: Any) -> FormData:
        return FormData(
            name=self.name,
            types=tuple(dex.resolve_refs(self.type_ids, TypeData)),
            stats=self.stats,
        )


@dataclass(frozen=True)
class SpeciesData:
    key: Key
    base: FormData
    forms: tuple[FormData, ...] = ()

    def get_form(self, index: int) -> FormData:
        """Form ``index``: 0 is the base form, unknown indices fall back to it."""
        if 1 <= index <= len(self.forms):
            return self.forms[index - 1]
        return self.base


@dataclass(frozen=True)
class RawSpeciesData:
    id: str
    base: RawFormData
    forms: tuple[RawFormData, ...] = ()

    output: ClassVar[type] = SpeciesData

    def resolve(self, key: Key, dex: Any) -> SpeciesData:
        return SpeciesData(
            key=key,
            base=self.base.resolve(dex),
            forms=tuple(form.resolve(dex) for form in self.forms),
        )


@dataclass(frozen=True)
class TypeChartData:
    key: Key
    default: Optional[Effectiveness]
    entries: dict[tuple[Key, Key], GenSpecific[Effectiveness]] = field(
        default_factory=dict
    )

    def effectiveness(self, config: Config, attacking: Key, defending: Key) -> Effectiveness:
        """Effectiveness of ``attacking`` against ``defending`` in the configured generation."""
        entry = self.entries.get((attacking, defending))
        if entry is None:
            return self.default if self.default is not None else Effectiveness.NORMAL
        return entry.get(config.generation)


@dataclass(frozen=True)
class RawTypeChartData:
    id: str
    default: Optional[Effectiveness] = None
    effectiveness: dict[tuple[str, str], GenSpecific[Effectiveness]] = field(
        default_factory=dict
    )

    output: ClassVar[type] = TypeChartData

    def resolve(self, key: Key, dex: Any) -> TypeChartData:
        entries = {
            (dex.resolve_id(atk, TypeData), dex.resolve_id(dfn, TypeData)): eff
            for (atk, dfn), eff in self.effectiveness.items()
        }
        return TypeChartData(key=key, default=self.default, entries=entries)