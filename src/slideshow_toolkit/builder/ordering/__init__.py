"""
Module: builder.ordering

Purpose:
    Strategies that order one slide pool to maximize its total interest
    score. Each strategy returns a new list holding every slide of the pool
    exactly once.

Key Functions:
    - order_slides(): Dispatch on SearchConfig.ordering_strategy
    - order_exhaustive(): Every permutation, first best wins
    - order_greedy(): Nearest-neighbour chaining
    - order_local_search(): Greedy chain + improving segment reversals

Used By:
    - builder.search: Once per iteration
"""

from __future__ import annotations

import random
from typing import List, Sequence

from slideshow_toolkit.core.models import Slide

from ..config import OrderingStrategy, SearchConfig
from .exhaustive import order_exhaustive
from .greedy import order_greedy
from .local_search import order_local_search


def order_slides(
    pool: Sequence[Slide],
    config: SearchConfig,
    rng: random.Random,
) -> List[Slide]:
    """
    Order a slide pool with the configured strategy.

    Args:
        pool: Slides to order
        config: Search configuration (strategy and its tuning)
        rng: Random source, used by LOCAL_SEARCH only

    Returns:
        New list containing each slide of ``pool`` exactly once

    Raises:
        SearchError: EXHAUSTIVE with a pool above max_exhaustive_slides
    """
    strategy = config.ordering_strategy
    if strategy is OrderingStrategy.EXHAUSTIVE:
        return order_exhaustive(pool, max_slides=config.max_exhaustive_slides)
    if strategy is OrderingStrategy.GREEDY:
        return order_greedy(pool)
    return order_local_search(pool, rng, steps=config.local_search_steps)


__all__ = [
    "order_slides",
    "order_exhaustive",
    "order_greedy",
    "order_local_search",
]
