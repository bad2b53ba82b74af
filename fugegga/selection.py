"""Strategies that pick entities out of a population."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .genotype import PopEntity
from .randomness import RandomGenerator, get_generator

__all__ = [
    "EntitySelection",
    "Elitism",
    "ElitismWithRandom",
    "RankBasedSelection",
    "TournamentSelection",
]


def _by_fitness(entity: PopEntity) -> float:
    return entity.fitness


class EntitySelection(ABC):
    """Base class of the selection strategies."""

    def __init__(self, rng: RandomGenerator | None = None):
        self.rng = rng if rng is not None else get_generator()

    @abstractmethod
    def select(self, quantity: int, entities: Sequence[PopEntity]) -> list[PopEntity]:
        """Return ``quantity`` entities chosen from ``entities``."""


class Elitism(EntitySelection):
    """Select the fittest entities, best first."""

    def select(self, quantity, entities):
        if quantity < 0 or quantity > len(entities):
            raise ValueError(
                f"cannot select {quantity} entities out of {len(entities)}"
            )
        ordered = sorted(entities, key=_by_fitness)
        ordered.reverse()
        return ordered[:quantity]


class ElitismWithRandom(EntitySelection):
    """Select the ``quantity - 1`` fittest entities plus one at random."""

    def select(self, quantity, entities):
        if not entities:
            raise ValueError("cannot select from an empty population")
        if quantity < 0 or quantity > len(entities):
            raise ValueError(
                f"cannot select {quantity} entities out of {len(entities)}"
            )
        ordered = sorted(entities, key=_by_fitness)
        best = ordered[::-1][: max(quantity - 1, 0)]
        pos = self.rng.random(0, len(ordered) - 1)
        return best + [ordered[pos]]


class RankBasedSelection(EntitySelection):
    """Small random tournaments: each pick is the fittest of a random sample.

    A sample holds a tenth of the population (at least one entity), so the
    same entity may be picked more than once.
    """

    def select(self, quantity, entities):
        if not entities:
            raise ValueError("cannot select from an empty population")
        sample_size = max(len(entities) // 10, 1)
        selected = []
        for _ in range(quantity):
            chosen = None
            for _ in range(sample_size):
                candidate = entities[self.rng.random(0, len(entities) - 1)]
                if chosen is None or candidate.fitness > chosen.fitness:
                    chosen = candidate
            selected.append(chosen)
        return selected


class TournamentSelection(EntitySelection):
    """Tournament selection; it currently selects nothing."""

    def select(self, quantity, entities):
        return []