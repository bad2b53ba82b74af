"""Loggers that record the state of an evolution."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from enum import Enum

from .bits import bits_to_string
from .evolution import EvolutionEngine
from .genotype import PopEntity

__all__ = ["LoggerLevel", "Logger", "PopulationLogger"]


class LoggerLevel(Enum):
    """How much a logger records."""

    EVERYTHING = "everything"
    STATS_ONLY = "stats_only"
    STATS_AND_GENES = "stats_and_genes"
    GENES_ONLY = "genes_only"
    NONE = "none"


class Logger(ABC):
    """Base class of the loggers attached to an evolution engine."""

    def __init__(self, engine: EvolutionEngine, level: LoggerLevel = LoggerLevel.NONE):
        self.engine = engine
        self.level = level

    @abstractmethod
    def log(self) -> None:
        """Record the current state."""

    @abstractmethod
    def save_logs(self) -> None:
        """Write what was recorded."""

    @abstractmethod
    def clear_logs(self) -> None:
        """Forget what was recorded."""


class PopulationLogger(Logger):
    """Records a snapshot of the population at every call to ``log``.

    ``save_logs`` writes a CSV file with one row per logged entity: the
    genotype's unsigned value, its fitness and whether it is an elite.
    """

    def __init__(
        self,
        engine: EvolutionEngine,
        path: str | os.PathLike,
        level: LoggerLevel = LoggerLevel.NONE,
    ):
        super().__init__(engine, level)
        self.path = path
        self._generations: list[list[PopEntity]] = []

    @property
    def generations(self) -> list[list[PopEntity]]:
        return [list(generation) for generation in self._generations]

    def log(self) -> None:
        self._generations.append(self.engine.population.entities_copy())

    def save_logs(self) -> None:
        with open(self.path, "w", encoding="utf-8", newline="") as stream:
            stream.write("Genotype,Fitness,Elite\n")
            for generation in self._generations:
                for entity in generation:
                    gene = bits_to_string(entity.genotype.bits)
                    elite = "1" if self.engine.is_elite(entity.genotype) else "0"
                    stream.write(f"{gene},{entity.fitness:g},{elite}\n")

    def clear_logs(self) -> None:
        self._generations.clear()