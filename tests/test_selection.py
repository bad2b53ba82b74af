import pytest

from fugegga.genotype import Genotype, PopEntity
from fugegga.randomness import RandomGenerator
from fugegga.selection import (
    Elitism,
    ElitismWithRandom,
    RankBasedSelection,
    TournamentSelection,
)


class ScriptedRng:
    """Hands out preset integer draws."""

    def __init__(self, draws):
        self.draws = list(draws)

    def random(self, low, high):
        return self.draws.pop(0)


def make_entities(fitnesses):
    return [PopEntity(Genotype.zeros(4), f) for f in fitnesses]


def test_elitism_returns_best_first():
    entities = make_entities([0.3, 0.9, 0.1, 0.5])
    chosen = Elitism(RandomGenerator(1)).select(2, entities)
    assert chosen == [entities[1], entities[3]]


def test_elitism_selects_all():
    entities = make_entities([0.3, 0.9, 0.1])
    chosen = Elitism(RandomGenerator(1)).select(3, entities)
    assert [e.fitness for e in chosen] == sorted([0.3, 0.9, 0.1], reverse=True)


def test_elitism_rejects_too_many():
    with pytest.raises(ValueError):
        Elitism(RandomGenerator(1)).select(5, make_entities([0.1, 0.2]))


def test_elitism_does_not_reorder_input():
    entities = make_entities([0.3, 0.9, 0.1])
    original = list(entities)
    Elitism(RandomGenerator(1)).select(2, entities)
    assert entities == original


def test_elitism_with_random_appends_random_pick():
    entities = make_entities([0.3, 0.9, 0.1, 0.5])
    chosen = ElitismWithRandom(ScriptedRng([0])).select(3, entities)
    # Two best, then the entity at sorted position 0 (the weakest).
    assert chosen == [entities[1], entities[3], entities[2]]


def test_elitism_with_random_size_matches_quantity():
    entities = make_entities([0.1 * i for i in range(10)])
    chosen = ElitismWithRandom(RandomGenerator(7)).select(4, entities)
    assert len(chosen) == 4
    assert all(c in entities for c in chosen)


def test_elitism_with_random_rejects_empty():
    with pytest.raises(ValueError):
        ElitismWithRandom(RandomGenerator(1)).select(1, [])


def test_rank_based_picks_fittest_of_sample():
    entities = make_entities([0.1 * i for i in range(20)])
    # Population of 20 -> samples of two entities per pick.
    rng = ScriptedRng([3, 7, 12, 5])
    chosen = RankBasedSelection(rng).select(2, entities)
    assert chosen == [entities[7], entities[12]]


def test_rank_based_small_population_uses_one_sample():
    entities = make_entities([0.2, 0.4, 0.6])
    chosen = RankBasedSelection(ScriptedRng([2, 0])).select(2, entities)
    assert chosen == [entities[2], entities[0]]


def test_rank_based_returns_members():
    entities = make_entities([0.05 * i for i in range(30)])
    chosen = RankBasedSelection(RandomGenerator(3)).select(12, entities)
    assert len(chosen) == 12
    assert all(c in entities for c in chosen)


def test_tournament_selects_nothing():
    entities = make_entities([0.1, 0.2])
    assert TournamentSelection(RandomGenerator(1)).select(2, entities) == []