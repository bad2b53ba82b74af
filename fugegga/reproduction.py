"""Crossover and mutation operators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .genotype import PopEntity
from .randomness import RandomGenerator, get_generator

__all__ = ["Crossover", "OnePoint", "Mutate", "Toggling"]


class Crossover(ABC):
    """Base class of the operators that recombine pairs of entities."""

    def __init__(self, rng: RandomGenerator | None = None):
        self.rng = rng if rng is not None else get_generator()

    @abstractmethod
    def reproduce_pairs(self, entities: Sequence[PopEntity], probability: float) -> None:
        """Recombine consecutive pairs of ``entities`` in place."""


class OnePoint(Crossover):
    """One-point crossover of consecutive pairs.

    Each pair is crossed with the given probability. The bits from the cut
    point up to, but not including, the last bit are exchanged.
    """

    def reproduce_pairs(self, entities, probability):
        for first, second in zip(entities[0::2], entities[1::2]):
            if self.rng.random_real(0, 1) >= probability:
                continue
            length = len(first.genotype)
            cut = self.rng.random(1, length - 2)
            end = length - 1
            a, b = first.genotype.bits, second.genotype.bits
            a[cut:end], b[cut:end] = b[cut:end], a[cut:end]


class Mutate(ABC):
    """Base class of the operators that alter a single entity."""

    def __init__(self, rng: RandomGenerator | None = None):
        self.rng = rng if rng is not None else get_generator()

    @abstractmethod
    def mutate_entity(self, entity: PopEntity, per_bit_probability: float) -> None:
        """Mutate ``entity`` in place."""


class Toggling(Mutate):
    """Bit-flip mutation.

    With a non-zero per-bit probability every bit is flipped with that
    probability; with zero, exactly one random bit is flipped.
    """

    def mutate_entity(self, entity, per_bit_probability):
        bits = entity.genotype.bits
        if per_bit_probability != 0:
            for pos, bit in enumerate(bits):
                if self.rng.random_real(0, 1) < per_bit_probability:
                    bits[pos] = not bit
        else:
            pos = self.rng.random(0, len(bits) - 1)
            bits[pos] = not bits[pos]