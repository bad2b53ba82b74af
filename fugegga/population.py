"""A named population of entities and its cooperating representatives."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from .genotype import PopEntity
from .randomness import RandomGenerator, get_generator
from .selection import EntitySelection

__all__ = ["Population"]


class Population:
    """A list of entities with a set of representatives shared with others."""

    def __init__(
        self,
        name: str,
        size: int,
        length: int,
        rng: RandomGenerator | None = None,
    ):
        self.name = name
        self.rng = rng if rng is not None else get_generator()
        self._lock = threading.Lock()
        self._entities: list[PopEntity] = [
            PopEntity.with_length(length) for _ in range(size)
        ]
        self._representatives: list[PopEntity] = []
        self.randomize()

    @classmethod
    def from_population(cls, other: "Population", name: str | None = None) -> "Population":
        """Return a population holding copies of ``other``'s entities."""
        population = cls(name or other.name, 0, 0, other.rng)
        population._entities = other.entities_copy()
        return population

    def __len__(self) -> int:
        return len(self._entities)

    def replace(
        self,
        new_entities: Iterable[PopEntity],
        base: Iterable[PopEntity] | None = None,
    ) -> None:
        """Replace the entities with ``new_entities`` followed by ``base``."""
        entities = list(new_entities)
        if base is not None:
            entities.extend(base)
        with self._lock:
            self._entities = entities

    def randomize(self) -> None:
        """Reset every fitness and give every bit a random value."""
        for entity in self._entities:
            entity.fitness = 0.0
            bits = entity.genotype.bits
            bits[:] = [bool(self.rng.random(0, 1)) for _ in bits]

    def set_representatives(self, representatives, quantity: int) -> None:
        """Keep copies of the first ``quantity`` entities as representatives."""
        representatives = list(representatives)
        if quantity < 0 or quantity > len(representatives):
            raise ValueError(
                f"cannot take {quantity} representatives out of {len(representatives)}"
            )
        copies = [entity.copy() for entity in representatives[:quantity]]
        with self._lock:
            self._representatives = copies

    def representatives(self) -> list[PopEntity]:
        """Return copies of the current representatives."""
        with self._lock:
            return [entity.copy() for entity in self._representatives]

    def entity_copy(self, pos: int) -> PopEntity:
        """Return a copy of the entity at ``pos``."""
        return self.entity_at(pos).copy()

    def entity_at(self, pos: int) -> PopEntity:
        """Return the entity at ``pos``."""
        if pos < 0:
            raise IndexError(pos)
        return self._entities[pos]

    def select_copies(self, selection: EntitySelection, count: int) -> list[PopEntity]:
        """Return copies of the entities chosen by ``selection``."""
        return [entity.copy() for entity in selection.select(count, self._entities)]

    def select(self, selection: EntitySelection, count: int) -> list[PopEntity]:
        """Return the entities chosen by ``selection``."""
        return selection.select(count, self._entities)

    def entities_copy(self) -> list[PopEntity]:
        """Return copies of all entities."""
        return [entity.copy() for entity in self._entities]

    def entities(self) -> list[PopEntity]:
        """Return all entities."""
        return list(self._entities)