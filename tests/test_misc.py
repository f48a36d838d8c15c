import random
from collections import Counter

import pytest

from algodrills.misc import (
    count_distinct_squares,
    integer_sqrt,
    rand7,
    rand10,
    unique_paths,
)


class _ScriptedRng:
    def __init__(self, values):
        self._values = iter(values)

    def randint(self, low, high):
        value = next(self._values)
        assert low <= value <= high
        return value


def test_count_distinct_squares_source_case():
    assert count_distinct_squares([-10, -10, 5, 0, 1, 5, 8, 10]) == 5


def test_count_distinct_squares_single_element():
    assert count_distinct_squares([3]) == 1


def test_count_distinct_squares_empty_raises():
    with pytest.raises(ValueError):
        count_distinct_squares([])


def test_rand7_range():
    rng = random.Random(1)
    values = {rand7(rng) for _ in range(2000)}
    assert values == set(range(1, 8))


def test_rand10_covers_range():
    rng = random.Random(0)
    values = {rand10(rng) for _ in range(20000)}
    assert values == set(range(1, 11))


def test_rand10_roughly_uniform():
    rng = random.Random(7)
    draws = 50000
    counts = Counter(rand10(rng) for _ in range(draws))
    assert sorted(counts) == list(range(1, 11))
    expected = draws / 10
    worst = max(abs(count - expected) for count in counts.values())
    assert worst < expected * 0.1


def test_rand10_maps_small_sum():
    assert rand10(_ScriptedRng([1, 3])) == 4


def test_rand10_rejects_large_sum():
    assert rand10(_ScriptedRng([7, 7, 2, 3])) == 1


@pytest.mark.parametrize(
    "m, n, expected",
    [(3, 2, 3), (3, 7, 28), (1, 1, 1), (1, 5, 1), (3, 3, 6)],
)
def test_unique_paths(m, n, expected):
    assert unique_paths(m, n) == expected


def test_unique_paths_rejects_empty_grid():
    with pytest.raises(ValueError):
        unique_paths(0, 3)


@pytest.mark.parametrize(
    "x, expected",
    [(5, 2), (0, 0), (1, 1), (8, 2), (16, 4), (-4, 0)],
)
def test_integer_sqrt(x, expected):
    assert integer_sqrt(x) == expected