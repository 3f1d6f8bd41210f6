"""Game generations and values that vary between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class Generation:
    """A main-series game generation, numbered from 1 to 255."""

    value: int

    def __post_init__(self) -> None:
        if not 1 <= self.value <= 255:
            raise ValueError(f"generation must be between 1 and 255, got {self.value}")

    def __int__(self) -> int:
        return self.value


class GenSpecific(ABC, Generic[T]):
    """A value that may differ depending on the generation."""

    @abstractmethod
    def get(self, generation: Generation) -> T:
        """Return the value that applies to ``generation``."""


@dataclass(frozen=True)
class Always(GenSpecific[T]):
    """The same value in every generation."""

    value: T

    def get(self, generation: Generation) -> T:
        return self.value


@dataclass(frozen=True)
class GenEqual(GenSpecific[T]):
    """``value`` in exactly generation ``equal``, otherwise the fallback."""

    equal: Generation
    value: T
    otherwise: GenSpecific[T]

    def get(self, generation: Generation) -> T:
        if generation.value == self.equal.value:
            return self.value
        return self.otherwise.get(generation)


@dataclass(frozen=True)
class GenFrom(GenSpecific[T]):
    """``value`` from generation ``start`` onwards, otherwise the fallback."""

    start: Generation
    value: T
    otherwise: GenSpecific[T]

    def get(self, generation: Generation) -> T:
        if generation.value >= self.start.value:
            return self.value
        return self.otherwise.get(generation)


@dataclass(frozen=True)
class GenUntil(GenSpecific[T]):
    """``value`` before generation ``until``, otherwise the fallback."""

    until: Generation
    value: T
    otherwise: GenSpecific[T]

    def get(self, generation: Generation) -> T:
        if generation.value < self.until.value:
            return self.value
        return self.otherwise.get(generation)