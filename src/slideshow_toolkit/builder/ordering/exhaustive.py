"""
Module: builder.ordering.exhaustive

Purpose:
    Exact ordering of a slide pool by scoring every permutation.
    Cost grows as n!, so pools above a configured size are refused.

Key Functions:
    - order_exhaustive(): Best permutation, first maximum in
      itertools.permutations order
"""

from __future__ import annotations

import logging
from itertools import permutations
from typing import List, Sequence

from slideshow_toolkit.core.models import Slide
from slideshow_toolkit.core.scoring import score_ordering

from ..errors import SearchError

logger = logging.getLogger(__name__)


def order_exhaustive(pool: Sequence[Slide], *, max_slides: int) -> List[Slide]:
    """
    Return the highest-scoring permutation of ``pool``.

    Ties keep the permutation enumerated first, so the result is fixed for
    a fixed pool order.

    Args:
        pool: Slides to order
        max_slides: Largest pool size accepted

    Raises:
        SearchError: If len(pool) > max_slides
    """
    if len(pool) > max_slides:
        raise SearchError(
            f"Exhaustive ordering of {len(pool)} slides exceeds the limit of "
            f"{max_slides}; use the greedy or localSearch strategy"
        )

    best: List[Slide] = list(pool)
    best_score = score_ordering(best)
    for candidate in permutations(pool):
        score = score_ordering(candidate)
        if score > best_score:
            best, best_score = list(candidate), score

    logger.debug(f"Exhaustive ordering of {len(pool)} slides scored {best_score}")
    return best
