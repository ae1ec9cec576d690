"""
Module: builder.ordering.local_search

Purpose:
    Improve a greedy chain with random 2-opt moves: reverse a random
    segment and keep the result only if the total score rises.

    Reversing order[i..j] only changes the edges (i-1, i) and (j, j+1);
    the edges inside the segment are the same pairs read backwards, and
    score_slides is symmetric. Each move is therefore scored in O(1).

Key Functions:
    - order_local_search(): Greedy start + improving reversals
"""

from __future__ import annotations

import logging
import random
from typing import List, Sequence

from slideshow_toolkit.core.models import Slide
from slideshow_toolkit.core.scoring import score_slides

from .greedy import order_greedy

logger = logging.getLogger(__name__)


def _reversal_gain(order: Sequence[Slide], i: int, j: int) -> int:
    """Score change from reversing order[i..j] (i < j)."""
    gain = 0
    if i > 0:
        gain += score_slides(order[i - 1], order[j]) - score_slides(order[i - 1], order[i])
    if j < len(order) - 1:
        gain += score_slides(order[i], order[j + 1]) - score_slides(order[j], order[j + 1])
    return gain


def order_local_search(
    pool: Sequence[Slide],
    rng: random.Random,
    *,
    steps: int,
) -> List[Slide]:
    """
    Order slides greedily, then apply improving segment reversals.

    Args:
        pool: Slides to order
        rng: Random source for choosing segments
        steps: Number of reversal attempts

    Returns:
        New list containing each slide of ``pool`` exactly once, scoring
        at least as much as order_greedy(pool)
    """
    order = order_greedy(pool)
    n = len(order)
    if n < 3:
        return order

    improved = 0
    for _ in range(steps):
        i, j = sorted(rng.sample(range(n), 2))
        if _reversal_gain(order, i, j) > 0:
            order[i:j + 1] = order[i:j + 1][::-1]
            improved += 1

    logger.debug(f"Local search kept {improved}/{steps} reversals on {n} slides")
    return order
