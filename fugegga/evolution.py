"""Generational evolution of one population cooperating with another."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .genotype import Genotype, PopEntity
from .population import Population
from .randomness import RandomGenerator, get_generator
from .reproduction import Crossover, Mutate, OnePoint, Toggling
from .selection import ElitismWithRandom, EntitySelection, RankBasedSelection
from .statistics import StatisticEngine

__all__ = ["EvolutionEngine"]


class EvolutionEngine(ABC):
    """Runs selection, crossover and mutation over a population.

    Subclasses decide how a population is evaluated. Two engines evolving
    cooperating populations can be joined with a shared barrier (any object
    with a ``wait()`` method, such as ``threading.Barrier(2)``).
    """

    def __init__(
        self,
        population: Population,
        generation_count: int,
        crossover_probability: float,
        mutation_probability: float,
        mutation_per_bit_probability: float,
        rng: RandomGenerator | None = None,
    ):
        self.population = population
        self.generation_count = generation_count
        self.crossover_probability = crossover_probability
        self.mutation_probability = mutation_probability
        self.mutation_per_bit_probability = mutation_per_bit_probability
        self.rng = rng if rng is not None else get_generator()
        self.statistics = StatisticEngine()

        self.elite_selection: EntitySelection | None = None
        self.elite_count = 0
        self.individuals_selection: EntitySelection | None = None
        self.individuals_count = 0
        self.mutate_method: Mutate | None = None
        self.crossover_method: Crossover | None = None

        self._selection_methods: list[EntitySelection] = [
            ElitismWithRandom(self.rng),
            RankBasedSelection(self.rng),
        ]
        self._crossover_methods: list[Crossover] = [OnePoint(self.rng)]
        self._mutation_methods: list[Mutate] = [Toggling(self.rng)]

        self._selected: list[PopEntity] = []
        self._evolving: list[PopEntity] = []

    @abstractmethod
    def evaluate_population(self, population: Population, generation: int) -> bool:
        """Assign fitnesses; return False to stop the evolution."""

    def start_evolution(
        self,
        generation_count: int,
        elite_selection: EntitySelection,
        elite_count: int,
        individuals_selection: EntitySelection,
        individuals_count: int,
        mutate_method: Mutate,
        crossover_method: Crossover,
        cooperators_count: int,
        barrier=None,
    ) -> None:
        """Evolve the population for up to ``generation_count`` generations."""
        self.set_entity_selector(
            elite_selection, elite_count, individuals_selection, individuals_count
        )
        self.mutate_method = mutate_method
        self.crossover_method = crossover_method

        self._select_elites()
        self.population.set_representatives(self._selected, cooperators_count)

        if barrier is not None:
            barrier.wait()

        if not self.evaluate_population(self.population, 0):
            return

        for generation in range(1, generation_count + 1):
            self._select_elites()
            self.population.set_representatives(self._selected, cooperators_count)
            self._select_individuals()
            self._crossover()
            self._mutate()
            self.population.replace(self._evolving, self._selected)
            if not self.evaluate_population(self.population, generation):
                break

        if barrier is not None:
            barrier.wait()

    def set_entity_selector(
        self,
        elite_selection: EntitySelection,
        elite_count: int,
        individuals_selection: EntitySelection,
        individuals_count: int,
    ) -> None:
        """Choose how elites and evolving individuals are selected."""
        self.elite_selection = elite_selection
        self.elite_count = elite_count
        self.individuals_selection = individuals_selection
        self.individuals_count = individuals_count

    def set_mutation_method(self, mutate_method: Mutate, mutation_probability: float) -> None:
        """Choose the mutation operator and the per-entity probability."""
        self.mutate_method = mutate_method
        self.mutation_probability = mutation_probability

    def set_crossover_method(self, crossover_method: Crossover) -> None:
        """Choose the crossover operator."""
        self.crossover_method = crossover_method

    def is_elite(self, genotype: Genotype) -> bool:
        """Tell whether the genotype's bits match one of the current elites."""
        return any(genotype.bits == elite.genotype.bits for elite in self._selected)

    def entity_selectors(self) -> list[EntitySelection]:
        """Return the available selection methods."""
        return list(self._selection_methods)

    def mutation_methods(self) -> list[Mutate]:
        """Return the available mutation methods."""
        return list(self._mutation_methods)

    def crossover_methods(self) -> list[Crossover]:
        """Return the available crossover methods."""
        return list(self._crossover_methods)

    @property
    def elites(self) -> list[PopEntity]:
        """The elites chosen in the latest generation."""
        return list(self._selected)

    def _initialize_population(self) -> None:
        self.population.randomize()

    def _select_elites(self) -> None:
        self._selected = self.population.select_copies(
            self.elite_selection, self.elite_count
        )

    def _select_individuals(self) -> None:
        self._evolving = self.population.select_copies(
            self.individuals_selection, self.individuals_count
        )

    def _crossover(self) -> None:
        self.crossover_method.reproduce_pairs(self._evolving, self.crossover_probability)

    def _mutate(self) -> None:
        for entity in self._evolving:
            if self.rng.random_real(0, 1) < self.mutation_probability:
                self.mutate_method.mutate_entity(
                    entity, self.mutation_per_bit_probability
                )