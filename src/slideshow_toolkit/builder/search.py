"""
Module: builder.search

Purpose:
    Main slideshow search. Repeatedly re-pairs the vertical photos, orders
    the resulting slide pool and keeps the best-scoring slideshow seen.

Key Functions:
    - search_slideshow(): Main entry point for the search

Key Classes:
    - SlideshowSearch: Orchestrates the search iterations

Algorithm:
    For each of config.iterations iterations:
    1. Build a slide pool (fresh random vertical pairing)
    2. Order the pool with the configured strategy
    3. Score the ordering
    4. Replace the running best only on a strictly greater score

Dependencies:
    - random (std)
    - builder.slides: Slide pool building
    - builder.ordering: Ordering strategies
    - core.models: Photo, Slideshow

Used By:
    - builder.controller: Build controller
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from slideshow_toolkit.core.models import Photo, Slideshow

from .config import OddVerticalPolicy, SearchConfig
from .ordering import order_slides
from .slides import build_slides

logger = logging.getLogger(__name__)


def search_slideshow(
    photos: Sequence[Photo],
    config: Optional[SearchConfig] = None,
    rng: Optional[random.Random] = None,
) -> Optional[Slideshow]:
    """
    Find a high-scoring slideshow for the given photos.

    Args:
        photos: Parsed photos (not modified)
        config: Search configuration (defaults to SearchConfig())
        rng: Random source; defaults to random.Random(config.seed)

    Returns:
        Best slideshow found, or None when no iteration produced a
        non-empty slide pool (no photos, or a single dropped vertical)

    Raises:
        SearchError: If the configured strategy cannot order a pool

    Invariants:
        - Same photos, config and seed give the same slideshow

    Example:
        >>> show = search_slideshow(photos, SearchConfig(iterations=10, seed=7))
        >>> show.total_score >= 0
        True
    """
    search = SlideshowSearch(list(photos), config or SearchConfig(), rng)
    return search.run()


@dataclass
class SlideshowSearch:
    """
    Slideshow search orchestrator.

    Attributes:
        photos: Photos to place
        config: Search configuration
        rng: Injected random source (None = seeded from config.seed)
    """

    photos: List[Photo]
    config: SearchConfig
    rng: Optional[random.Random] = None

    # Internal state
    _best: Optional[Slideshow] = field(init=False, default=None)
    _best_iteration: int = field(init=False, default=-1)

    def __post_init__(self) -> None:
        """Initialize internal state."""
        if self.rng is None:
            self.rng = random.Random(self.config.seed)

    def run(self) -> Optional[Slideshow]:
        """
        Execute all search iterations.

        Returns:
            Best slideshow across iterations, or None
        """
        self._best = None
        self._best_iteration = -1

        if not self.photos:
            logger.info("No photos to arrange")
            return None

        self._log_unpaired_vertical()

        iterations = self.config.iterations
        for iteration in range(iterations):
            candidate = self._run_iteration()
            if candidate is None:
                logger.debug(f"Iteration {iteration + 1}/{iterations}: empty slide pool")
                continue

            logger.debug(
                f"Iteration {iteration + 1}/{iterations}: score {candidate.total_score}"
            )
            if self._best is None or candidate.total_score > self._best.total_score:
                self._best = candidate
                self._best_iteration = iteration

        if self._best is None:
            logger.info("No slides could be built from the photos")
        else:
            logger.info(
                f"Best slideshow: {len(self._best)} slides, score "
                f"{self._best.total_score} (iteration {self._best_iteration + 1}/"
                f"{iterations}, {self.config.ordering_strategy} ordering)"
            )
        return self._best

    def _run_iteration(self) -> Optional[Slideshow]:
        """Single iteration: build a pool, order it, wrap the ordering."""
        pool = build_slides(
            self.photos,
            self.rng,
            odd_vertical_policy=self.config.odd_vertical_policy,
        )
        if not pool:
            return None

        ordering = order_slides(pool, self.config, self.rng)
        return Slideshow(tuple(ordering))

    def _log_unpaired_vertical(self) -> None:
        """Warn once when an odd vertical photo will be left out."""
        vertical_count = sum(1 for photo in self.photos if photo.is_vertical)
        if vertical_count % 2 == 0:
            return
        if self.config.odd_vertical_policy is OddVerticalPolicy.DROP:
            logger.warning(
                f"Odd number of vertical photos ({vertical_count}); one vertical "
                "photo is left out of every slideshow"
            )
        else:
            logger.info(
                f"Odd number of vertical photos ({vertical_count}); one vertical "
                "photo is shown alone on each slideshow"
            )
