"""Fitness statistics gathered over a generation."""

from __future__ import annotations

import math

__all__ = [
    "StatisticEngine",
    "EvolutionaryMeasure",
    "PopulationDiversity",
    "Entropic",
    "AllPairPossibility",
]


class StatisticEngine:
    """Accumulates fitness values and derives min, max, mean and deviation."""

    def __init__(self):
        self.reset()

    def add_fitness(self, fitness: float) -> None:
        """Record one fitness value."""
        if fitness > self.max_fitness:
            self.max_fitness = fitness
        # A minimum of zero counts as unset.
        if fitness < self.min_fitness or self.min_fitness == 0.0:
            self.min_fitness = fitness
        self._fitnesses.append(fitness)

    def build_stats(self) -> None:
        """Compute the mean and population standard deviation."""
        if not self._fitnesses:
            raise ValueError("no fitness values recorded")
        count = len(self._fitnesses)
        self.mean_fitness = sum(self._fitnesses) / count
        variance = sum((f - self.mean_fitness) ** 2 for f in self._fitnesses) / count
        self.standard_deviation = math.sqrt(variance)

    def reset(self) -> None:
        """Forget all recorded values."""
        self._fitnesses: list[float] = []
        self.min_fitness = 0.0
        self.max_fitness = 0.0
        self.mean_fitness = 0.0
        self.standard_deviation = 0.0

    @property
    def fitnesses(self) -> list[float]:
        return list(self._fitnesses)


class EvolutionaryMeasure:
    """A measure computed over a list of individuals."""

    def __init__(self, individuals):
        self.individuals = individuals


class PopulationDiversity(EvolutionaryMeasure):
    """A measure of how varied a population is."""


class Entropic(PopulationDiversity):
    """Entropy-based population diversity."""


class AllPairPossibility(PopulationDiversity):
    """Pairwise population diversity."""