"""
Module: builder.ordering.greedy

Purpose:
    Nearest-neighbour chaining. Starts from the best-scoring pair of slides
    and repeatedly appends the unused slide that scores highest against the
    current tail.

    Chaining is quadratic in the pool size. The starting pair is only
    searched among the first SEED_WINDOW slides of the pool, so seeding
    costs a fixed number of comparisons instead of a second quadratic pass.

Key Functions:
    - order_greedy(): Greedy chain over the pool
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from slideshow_toolkit.core.models import Slide
from slideshow_toolkit.core.scoring import score_slides

logger = logging.getLogger(__name__)

# Slides considered when choosing the starting pair
SEED_WINDOW = 64


def _best_pair(pool: Sequence[Slide]) -> Tuple[int, int]:
    """
    Positions of the highest-scoring pair within the first SEED_WINDOW
    slides; first pair in pool order on ties.
    """
    window = min(len(pool), SEED_WINDOW)
    best = (0, 1)
    best_score = -1
    for i in range(window):
        for j in range(i + 1, window):
            score = score_slides(pool[i], pool[j])
            if score > best_score:
                best, best_score = (i, j), score
    return best


def order_greedy(pool: Sequence[Slide]) -> List[Slide]:
    """
    Chain slides greedily, starting from the best-scoring pair among the
    first SEED_WINDOW slides.

    Ties between candidates go to the one earliest in the pool, so the
    result depends only on the pool order.

    Args:
        pool: Slides to order

    Returns:
        New list containing each slide of ``pool`` exactly once
    """
    if len(pool) <= 2:
        return list(pool)

    first, second = _best_pair(pool)
    chain = [pool[first], pool[second]]
    remaining = [i for i in range(len(pool)) if i not in (first, second)]

    while remaining:
        tail = chain[-1]
        pick = 0
        pick_score = -1
        for k, position in enumerate(remaining):
            score = score_slides(tail, pool[position])
            if score > pick_score:
                pick, pick_score = k, score
        chain.append(pool[remaining.pop(pick)])

    return chain
