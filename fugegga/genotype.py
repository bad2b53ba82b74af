"""Genotypes and the population members that carry them."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Genotype", "PopEntity", "Individual", "Representative"]


@dataclass
class Genotype:
    """A fixed-length sequence of bits."""

    bits: list[bool] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.bits = [bool(b) for b in self.bits]

    @classmethod
    def zeros(cls, length: int) -> "Genotype":
        """Return a genotype of ``length`` cleared bits."""
        return cls([False] * length)

    def copy(self) -> "Genotype":
        """Return an independent copy."""
        return Genotype(list(self.bits))

    def __len__(self) -> int:
        return len(self.bits)


@dataclass(eq=False)
class PopEntity:
    """A member of a population: a genotype and its fitness."""

    genotype: Genotype
    fitness: float = 0.0

    @classmethod
    def with_length(cls, length: int) -> "PopEntity":
        """Return an entity with a cleared genotype of ``length`` bits."""
        return cls(Genotype.zeros(length))

    def copy(self) -> "PopEntity":
        """Return a copy with its own genotype and the same fitness."""
        return type(self)(self.genotype.copy(), self.fitness)

    def __lt__(self, other: "PopEntity") -> bool:
        return self.fitness < other.fitness


class Individual(PopEntity):
    """A single element of a population."""


class Representative(PopEntity):
    """An entity chosen to cooperate with another population."""