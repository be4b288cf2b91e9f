"""Tests for wordtiles.core.shuffle – Fisher–Yates permutation."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from wordtiles.core.shuffle import shuffle_indices


class TestShuffleIsPermutation:
    @pytest.mark.parametrize("n", [0, 1, 2, 5, 17])
    def test_every_index_exactly_once(self, n: int, rng: random.Random):
        result = shuffle_indices(list(range(n)), rng)
        assert sorted(result) == list(range(n))
        assert len(result) == n

    def test_empty_returns_empty_list(self):
        assert shuffle_indices([]) == []

    def test_accepts_range(self, rng: random.Random):
        assert sorted(shuffle_indices(range(4), rng)) == [0, 1, 2, 3]

    def test_repeated_runs_stay_permutations(self):
        gen = random.Random(7)
        for _ in range(200):
            assert sorted(shuffle_indices(list(range(5)), gen)) == [0, 1, 2, 3, 4]


class TestShuffleInput:
    def test_does_not_mutate_input(self, rng: random.Random):
        items = [0, 1, 2, 3, 4]
        shuffle_indices(items, rng)
        assert items == [0, 1, 2, 3, 4]

    def test_returns_new_list(self, rng: random.Random):
        items = [0, 1, 2]
        assert shuffle_indices(items, rng) is not items

    def test_seeded_rng_is_reproducible(self):
        a = shuffle_indices(list(range(10)), random.Random(99))
        b = shuffle_indices(list(range(10)), random.Random(99))
        assert a == b


class TestShuffleDistribution:
    def test_all_orderings_of_three_appear(self):
        gen = random.Random(2024)
        seen = Counter(tuple(shuffle_indices([0, 1, 2], gen)) for _ in range(3000))
        assert len(seen) == 6
        # uniform would be 500 each; allow a wide margin
        assert all(300 < count < 700 for count in seen.values())
