"""
Module: builder.controller

Purpose:
    Orchestrate the complete slideshow pipeline.
    Parse → Search → Write

Key Functions:
    - build_slideshow(): Main entry point for building a slideshow file

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - loading: Photo parsing
    - builder.search: Slideshow search
    - output: Slideshow writer

Used By:
    - cli: Command-line entry point
    - scripts/benchmark_search.py
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from slideshow_toolkit.core.models import Slideshow
from slideshow_toolkit.loading import ParseError, parse_photos_file
from slideshow_toolkit.output import write_slideshow

from .config import SearchConfig
from .errors import SearchError
from .search import search_slideshow

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        output_path: Path of the written slideshow
        slideshow: Best slideshow found (None if no slides could be built)
        photo_count: Number of photos parsed
        duration_s: Wall-clock time of the whole build in seconds

    Example:
        >>> result = build_slideshow(Path("photos.txt"), Path("out.txt"))
        >>> print(f"{result.slide_count} slides scoring {result.total_score}")
    """
    output_path: Path
    slideshow: Optional[Slideshow]
    photo_count: int
    duration_s: float

    @property
    def slide_count(self) -> int:
        """Number of slides written (0 when no slideshow)."""
        return len(self.slideshow) if self.slideshow else 0

    @property
    def total_score(self) -> int:
        """Total interest score of the written slideshow."""
        return self.slideshow.total_score if self.slideshow else 0


def build_slideshow(
    input_path: Path,
    output_path: Path,
    config: Optional[SearchConfig] = None,
    rng: Optional[random.Random] = None,
) -> BuildResult:
    """
    Build a slideshow file from a photo collection file.

    Pipeline:
    1. Parse photos from input_path
    2. Search for the best slideshow
    3. Write it to output_path (the empty output if none was found)

    Args:
        input_path: Photo collection file
        output_path: Destination for the slideshow
        config: Search configuration (defaults to SearchConfig())
        rng: Random source passed to the search

    Returns:
        BuildResult with the slideshow and run statistics

    Raises:
        BuildError: If parsing, searching or writing fails
    """
    config = config or SearchConfig()
    start_time = time.perf_counter()

    logger.info(
        f"Building slideshow from {input_path} "
        f"({config.iterations} iterations, {config.ordering_strategy} ordering)"
    )

    # 1. Parse
    try:
        photos = parse_photos_file(Path(input_path))
    except ParseError as e:
        raise BuildError(f"Failed to parse photos: {e}") from e

    # 2. Search
    try:
        slideshow = search_slideshow(photos, config, rng)
    except SearchError as e:
        raise BuildError(f"Search failed: {e}") from e

    # 3. Write
    try:
        written = write_slideshow(slideshow, Path(output_path))
    except OSError as e:
        raise BuildError(f"Failed to write {output_path}: {e}") from e

    duration = time.perf_counter() - start_time
    result = BuildResult(
        output_path=written,
        slideshow=slideshow,
        photo_count=len(photos),
        duration_s=duration,
    )
    logger.info(
        f"Build complete in {duration:.2f}s: {result.slide_count} slides, "
        f"score {result.total_score}"
    )
    return result
