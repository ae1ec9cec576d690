"""
Unit tests for the ordering strategies.
"""

import random
from itertools import permutations

import pytest

from slideshow_toolkit.builder import OrderingStrategy, SearchConfig, SearchError, order_slides
from slideshow_toolkit.builder.ordering import (
    order_exhaustive,
    order_greedy,
    order_local_search,
)
from slideshow_toolkit.builder.ordering.greedy import SEED_WINDOW
from slideshow_toolkit.core.models import Orientation, Photo, SingleSlide
from slideshow_toolkit.core.scoring import score_ordering


def single(index: int, *tags: str) -> SingleSlide:
    return SingleSlide(Photo(index, Orientation.HORIZONTAL, tags))


def random_pool(size: int, seed: int) -> list[SingleSlide]:
    """Pool of slides with random tags from a small vocabulary."""
    gen = random.Random(seed)
    vocab = [f"t{i}" for i in range(8)]
    return [
        single(i, *gen.sample(vocab, gen.randint(1, 4)))
        for i in range(size)
    ]


@pytest.fixture
def small_pool() -> list[SingleSlide]:
    return [
        single(0, "a", "b"),
        single(1, "c", "d"),
        single(2, "a", "b"),
        single(3, "c", "d", "e"),
    ]


class TestOrderExhaustive:
    """Tests for order_exhaustive."""

    def test_order_when_small_pool_then_finds_optimum(self):
        """Result should score as high as the best permutation."""
        # Arrange
        pool = random_pool(6, seed=3)
        best = max(score_ordering(p) for p in permutations(pool))

        # Act
        result = order_exhaustive(pool, max_slides=9)

        # Assert
        assert score_ordering(result) == best
        assert sorted(s.photo.index for s in result) == list(range(6))

    def test_order_when_all_scores_equal_then_keeps_first_permutation(self):
        """Ties keep the first permutation enumerated (the pool order)."""
        pool = [single(i, f"x{i}") for i in range(4)]
        assert order_exhaustive(pool, max_slides=9) == pool

    def test_order_when_pool_too_large_then_raises_error(self):
        with pytest.raises(SearchError, match="exceeds the limit"):
            order_exhaustive(random_pool(5, seed=1), max_slides=4)

    def test_order_when_empty_pool_then_returns_empty(self):
        assert order_exhaustive([], max_slides=9) == []


class TestOrderGreedy:
    """Tests for order_greedy."""

    def test_order_when_small_pool_then_chains_from_best_pair(self, small_pool):
        """Best pair (0, 2) scores 50; tail then picks 1 (tie -> first) and 3."""
        # Act
        result = order_greedy(small_pool)

        # Assert
        assert [s.photo.index for s in result] == [0, 2, 1, 3]
        assert score_ordering(result) == 50 + 0 + 40

    def test_order_when_best_pair_outside_seed_window_then_starts_in_window(self):
        """Only the first SEED_WINDOW slides are considered for the starting pair."""
        # Arrange
        pool = [single(i, f"x{i}") for i in range(SEED_WINDOW)]
        pool += [single(SEED_WINDOW, "a", "b"), single(SEED_WINDOW + 1, "a", "b")]

        # Act
        result = order_greedy(pool)

        # Assert
        assert result[0] is pool[0]
        assert result[1] is pool[1]
        assert sorted(s.photo.index for s in result) == list(range(SEED_WINDOW + 2))

    @pytest.mark.parametrize("size", [0, 1, 2])
    def test_order_when_tiny_pool_then_returns_copy(self, size):
        pool = random_pool(size, seed=2)
        result = order_greedy(pool)
        assert result == pool
        assert result is not pool

    def test_order_when_random_pool_then_returns_permutation(self):
        pool = random_pool(30, seed=8)
        result = order_greedy(pool)
        assert sorted(s.photo.index for s in result) == list(range(30))


class TestOrderLocalSearch:
    """Tests for order_local_search."""

    def test_order_when_random_pool_then_never_below_greedy(self):
        """Only improving moves are kept, so the greedy score is a floor."""
        for seed in range(5):
            pool = random_pool(25, seed=seed)
            greedy_score = score_ordering(order_greedy(pool))

            result = order_local_search(pool, random.Random(seed), steps=500)

            assert score_ordering(result) >= greedy_score
            assert sorted(s.photo.index for s in result) == list(range(25))

    def test_order_when_zero_steps_then_equals_greedy(self):
        pool = random_pool(12, seed=4)
        assert order_local_search(pool, random.Random(0), steps=0) == order_greedy(pool)

    def test_order_when_same_seed_then_same_result(self):
        pool = random_pool(20, seed=6)

        first = order_local_search(pool, random.Random(11), steps=300)
        second = order_local_search(pool, random.Random(11), steps=300)

        assert first == second

    def test_order_when_pool_input_then_not_modified(self):
        pool = random_pool(10, seed=9)
        before = list(pool)
        order_local_search(pool, random.Random(1), steps=100)
        assert pool == before


class TestOrderSlides:
    """Tests for the order_slides dispatcher."""

    @pytest.mark.parametrize("strategy", list(OrderingStrategy))
    def test_order_when_strategy_configured_then_returns_permutation(self, strategy):
        pool = random_pool(6, seed=12)
        config = SearchConfig(ordering_strategy=strategy, local_search_steps=50)

        result = order_slides(pool, config, random.Random(0))

        assert sorted(s.photo.index for s in result) == list(range(6))

    def test_order_when_exhaustive_over_limit_then_raises_error(self):
        config = SearchConfig(
            ordering_strategy=OrderingStrategy.EXHAUSTIVE,
            max_exhaustive_slides=3,
        )
        with pytest.raises(SearchError):
            order_slides(random_pool(4, seed=0), config, random.Random(0))
