"""
Module: builder.config

Purpose:
    Configuration dataclass and enums for the slideshow search.
    Immutable configuration with validation on construction.

Key Classes:
    - OrderingStrategy: How one slide pool is ordered
    - OddVerticalPolicy: What happens to an unpaired vertical photo
    - SearchConfig: Main configuration for the search

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - builder.search: Slideshow search
    - builder.slides: Slide building
    - builder.controller: Build controller
    - cli: Argument mapping
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OrderingStrategy(str, Enum):
    """
    Strategy used to order the slide pool of one iteration.

    Attributes:
        EXHAUSTIVE: Score every permutation of the pool and keep the first
            best one. Factorial cost; only usable for tiny pools.
        GREEDY: Nearest-neighbour chaining, seeded with the best-scoring
            slide pair.
        LOCAL_SEARCH: Greedy chain improved by random segment reversals.
    """

    EXHAUSTIVE = "exhaustive"
    GREEDY = "greedy"
    LOCAL_SEARCH = "localSearch"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> OrderingStrategy:
        """
        Look up a strategy by name.

        Accepts the enum values ("localSearch") and snake_case member names
        ("local_search"), case-insensitively.

        Raises:
            ValueError: If the name matches no strategy
        """
        key = name.strip().replace("-", "_").lower()
        for strategy in cls:
            if key in (strategy.value.lower(), strategy.name.lower()):
                return strategy
        choices = ", ".join(s.value for s in cls)
        raise ValueError(f"Unknown ordering strategy {name!r} (expected one of: {choices})")


class OddVerticalPolicy(str, Enum):
    """
    Handling of the leftover photo when the vertical count is odd.

    Attributes:
        DROP: Leave it out of the slide pool (and the output)
        KEEP: Show it alone on a SingleSlide
    """

    DROP = "drop"
    KEEP = "keep"


@dataclass(frozen=True)
class SearchConfig:
    """
    Configuration for the slideshow search (immutable).

    Attributes:
        iterations: Number of outer iterations (vertical re-pairings)
        ordering_strategy: How each iteration's slide pool is ordered
        seed: Seed for the search's random source when none is injected
        odd_vertical_policy: DROP or KEEP an unpaired vertical photo
        local_search_steps: Reversal attempts per iteration (LOCAL_SEARCH)
        max_exhaustive_slides: Largest pool EXHAUSTIVE will enumerate

    Invariants:
        - iterations > 0
        - local_search_steps >= 0
        - max_exhaustive_slides > 0

    Example:
        >>> config = SearchConfig(iterations=10, ordering_strategy=OrderingStrategy.GREEDY)
        >>> config.is_exhaustive
        False
    """

    iterations: int = 100
    ordering_strategy: OrderingStrategy = OrderingStrategy.LOCAL_SEARCH
    seed: int = 42
    odd_vertical_policy: OddVerticalPolicy = OddVerticalPolicy.DROP

    # Strategy tuning
    local_search_steps: int = 1000
    max_exhaustive_slides: int = 9

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.iterations <= 0:
            raise ValueError(f"iterations must be positive: {self.iterations}")
        if self.local_search_steps < 0:
            raise ValueError(
                f"local_search_steps must be non-negative: {self.local_search_steps}"
            )
        if self.max_exhaustive_slides <= 0:
            raise ValueError(
                f"max_exhaustive_slides must be positive: {self.max_exhaustive_slides}"
            )
        if not isinstance(self.ordering_strategy, OrderingStrategy):
            raise ValueError(f"Invalid ordering_strategy: {self.ordering_strategy!r}")
        if not isinstance(self.odd_vertical_policy, OddVerticalPolicy):
            raise ValueError(f"Invalid odd_vertical_policy: {self.odd_vertical_policy!r}")

    @property
    def is_exhaustive(self) -> bool:
        """True if pools are ordered by full permutation enumeration."""
        return self.ordering_strategy is OrderingStrategy.EXHAUSTIVE
