"""Building blocks for describing moves, abilities and items."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Protocol, Union


class Effectiveness(IntEnum):
    """How effective an attacking type is against a defending type."""

    NORMAL = 0
    NO_EFFECT = 1
    NOT_VERY_EFFECTIVE = 2
    SUPER_EFFECTIVE = 3


class Target(Enum):
    """Who an effect or check is aimed at. No targets are defined yet."""


class Probability(Enum):
    """A chance of something happening. No kinds are defined yet."""

    def roll(self, rng: Any) -> bool:
        """Roll for this probability."""
        return True


class Checkable(Protocol):
    def check(self, ctx: Any) -> bool: ...


class Condition(ABC):
    """A boolean expression over predicates evaluated against a context."""

    @abstractmethod
    def check(self, ctx: Any) -> bool:
        """Evaluate the condition in ``ctx``."""


@dataclass(frozen=True)
class AlwaysCondition(Condition):
    def check(self, ctx: Any) -> bool:
        return True


@dataclass(frozen=True)
class And(Condition):
    left: Condition
    right: Condition

    def check(self, ctx: Any) -> bool:
        return self.left.check(ctx) and self.right.check(ctx)


@dataclass(frozen=True)
class Or(Condition):
    left: Condition
    right: Condition

    def check(self, ctx: Any) -> bool:
        return self.left.check(ctx) or self.right.check(ctx)


@dataclass(frozen=True)
class Not(Condition):
    inner: Condition

    def check(self, ctx: Any) -> bool:
        return not self.inner.check(ctx)


@dataclass(frozen=True)
class Predicate(Condition):
    predicate: Checkable

    def check(self, ctx: Any) -> bool:
        return self.predicate.check(ctx)


@dataclass(frozen=True)
class Prob:
    """Battle predicate that holds when a probability roll succeeds."""

    probability: Probability

    def check(self, battle: Any) -> bool:
        return self.probability.roll(battle.rng)


@dataclass(frozen=True)
class TargetPredicate:
    """Battle predicate that checks a fighter condition on a target."""

    target: Target
    cond: Condition

    def check(self, battle: Any) -> bool:
        return True


class Effect(ABC):
    """Something that changes the state of a battle."""

    @abstractmethod
    def apply(self, battle: Any) -> None:
        """Apply the effect to ``battle``."""


@dataclass(frozen=True)
class NoEffect(Effect):
    def apply(self, battle: Any) -> None:
        return None


@dataclass(frozen=True)
class ConditionalEffect(Effect):
    cond: Condition
    success: Effect
    failure: Effect

    def apply(self, battle: Any) -> None:
        branch = self.success if self.cond.check(battle) else self.failure
        branch.apply(battle)


@dataclass(frozen=True)
class Sequence(Effect):
    effects: tuple[Effect, ...] = ()

    def apply(self, battle: Any) -> None:
        for effect in self.effects:
            effect.apply(battle)


@dataclass(frozen=True)
class Exact:
    """A fixed non-negative number."""

    n: int

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError(f"number must not be negative, got {self.n}")

    def evaluate(self, battle: Any) -> int:
        return self.n


Number = Exact


@dataclass(frozen=True)
class SimpleAttempt:
    condition: Condition
    success: Effect
    failure: Effect
    after: Effect


@dataclass(frozen=True)
class Cascade:
    attempts: tuple[Attempt, ...] = ()


@dataclass(frozen=True)
class Combo:
    condition: Condition
    hits: Exact
    effect: Effect


Attempt = Union[SimpleAttempt, Cascade, Combo]


class Trigger:
    """A battle event that abilities and items can react to."""


@dataclass(frozen=True)
class TurnStart(Trigger):
    pass


@dataclass(frozen=True)
class TurnEnd(Trigger):
    pass


@dataclass(frozen=True)
class DamageDealt(Trigger):
    target: Target


@dataclass(frozen=True)
class TriggerEffect:
    trigger: Trigger
    effect: Effect