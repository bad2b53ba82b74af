"""Cooperative-coevolution genetic algorithm toolkit with fuzzy-system run parameters."""

__version__ = "0.1.0"

__all__ = [
    "bits",
    "cli",
    "evolution",
    "genotype",
    "loggers",
    "parameters",
    "population",
    "randomness",
    "reproduction",
    "runsettings",
    "selection",
    "statistics",
]