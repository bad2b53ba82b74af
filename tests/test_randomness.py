import pytest

from fugegga.randomness import RandomGenerator, get_generator


def test_same_seed_gives_same_sequence():
    a = RandomGenerator(42)
    b = RandomGenerator(42)
    assert [a.random(0, 100) for _ in range(20)] == [b.random(0, 100) for _ in range(20)]


def test_reset_seed_replays_sequence():
    gen = RandomGenerator(7)
    first = [gen.random_real(0, 1) for _ in range(10)]
    gen.reset_seed(7)
    assert [gen.random_real(0, 1) for _ in range(10)] == first


@pytest.mark.parametrize("low, high", [(0, 9), (9, 0), (3, 8), (5, 5)])
def test_random_is_offset_within_span(low, high):
    gen = RandomGenerator(1)
    span = abs(high - low)
    values = [gen.random(low, high) for _ in range(500)]
    assert all(0 <= v <= span for v in values)


def test_random_covers_whole_span():
    gen = RandomGenerator(3)
    values = {gen.random(0, 3) for _ in range(1000)}
    assert values == set(range(4))


def test_random_equal_bounds_is_zero():
    gen = RandomGenerator(11)
    assert {gen.random(4, 4) for _ in range(50)} == {0}


@pytest.mark.parametrize("low, high", [(0.0, 1.0), (2.0, 0.5)])
def test_random_real_within_span(low, high):
    gen = RandomGenerator(5)
    span = abs(high - low)
    values = [gen.random_real(low, high) for _ in range(500)]
    assert all(0.0 <= v < span for v in values)


@pytest.mark.parametrize("low, high", [(3, 8), (8, 3), (-2, 2)])
def test_random_no_rand_max_within_bounds(low, high):
    gen = RandomGenerator(9)
    values = {gen.random_no_rand_max(low, high) for _ in range(1000)}
    assert values == set(range(min(low, high), max(low, high) + 1))


def test_get_generator_is_singleton():
    gen = get_generator()
    assert get_generator() is gen
    values = {gen.random_no_rand_max(0, 3) for _ in range(500)}
    assert values == {0, 1, 2, 3}
    assert get_generator() is gen