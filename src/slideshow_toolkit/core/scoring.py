"""
Module: core.scoring

Purpose:
    Interest scoring between adjacent slides. The score rewards slides
    whose combined tags repeat each other: with T the combined tag
    multiset of both slides and U its distinct tags,

        score = 100 - floor(|U| / |T| * 100)

    computed in integer arithmetic as ``100 - (|U| * 100) // |T|``.
    Identical tag sets score 50, disjoint ones 0.

Key Functions:
    - score_slides(): Score one adjacent pair
    - score_ordering(): Sum of adjacent-pair scores for an ordering

Dependencies:
    - core.utils.tags: Distinct tag union

Used By:
    - core.models.slideshow.Slideshow.total_score
    - builder.ordering: All ordering strategies
    - builder.search: Iteration comparison
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .utils.tags import distinct_tags

if TYPE_CHECKING:
    from .models.slides import Slide


# Score for two slides with no tags at all (|T| == 0)
DEGENERATE_SCORE = 0


def score_slides(first: Slide, second: Slide) -> int:
    """
    Score two adjacent slides.

    Args:
        first: Slide shown first
        second: Slide shown next

    Returns:
        Integer in [0, 100]; DEGENERATE_SCORE when neither slide has tags.
        Symmetric in its arguments.

    Example:
        >>> score_slides(slide_ab, slide_bc)  # U={a,b,c}, |T|=4
        25
    """
    total = len(first.tags) + len(second.tags)
    if total == 0:
        return DEGENERATE_SCORE
    unique = len(distinct_tags(first.tag_set, second.tag_set))
    return 100 - (unique * 100) // total


def score_ordering(slides: Sequence[Slide]) -> int:
    """
    Total score of an ordering: the sum over adjacent pairs.

    Orderings of zero or one slide score 0.
    """
    return sum(
        score_slides(slides[i], slides[i + 1])
        for i in range(len(slides) - 1)
    )
