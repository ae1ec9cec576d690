"""
Module: builder.slides

Purpose:
    Build the slide pool for one search iteration. Horizontal photos each
    get their own slide; vertical photos are shuffled and paired off.

Key Functions:
    - build_slides(): Photos -> slide pool

Dependencies:
    - random (std)
    - core.models: Photo, SingleSlide, PairSlide

Used By:
    - builder.search: Once per iteration
"""

from __future__ import annotations

import logging
import random
from typing import List, Sequence

from slideshow_toolkit.core.models import Photo, Slide, SingleSlide, PairSlide

from .config import OddVerticalPolicy

logger = logging.getLogger(__name__)


def build_slides(
    photos: Sequence[Photo],
    rng: random.Random,
    *,
    odd_vertical_policy: OddVerticalPolicy = OddVerticalPolicy.DROP,
) -> List[Slide]:
    """
    Build a slide pool from photos.

    Horizontal photos become SingleSlides in input order. Vertical photos
    are shuffled with ``rng`` and grouped into consecutive pairs, which
    follow the horizontal slides.

    Args:
        photos: Photos to place (not modified)
        rng: Random source for the vertical shuffle
        odd_vertical_policy: What to do with a leftover vertical photo

    Returns:
        New list of slides. Each photo appears on at most one slide; with
        DROP and an odd vertical count exactly one vertical photo is missing.

    Example:
        >>> pool = build_slides(photos, random.Random(1))
        >>> len(pool) == horizontal_count + vertical_count // 2
        True
    """
    slides: List[Slide] = []
    verticals: List[Photo] = []
    for photo in photos:
        if photo.is_vertical:
            verticals.append(photo)
        else:
            slides.append(SingleSlide(photo))

    rng.shuffle(verticals)
    for i in range(0, len(verticals) - 1, 2):
        slides.append(PairSlide(verticals[i], verticals[i + 1]))

    if len(verticals) % 2 == 1:
        leftover = verticals[-1]
        if odd_vertical_policy is OddVerticalPolicy.KEEP:
            slides.append(SingleSlide(leftover))
        else:
            logger.debug(f"Dropped unpaired vertical photo #{leftover.index}")

    return slides
