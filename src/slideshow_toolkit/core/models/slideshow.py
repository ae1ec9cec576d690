"""
Module: slideshow

Purpose:
    Provides the Slideshow dataclass: an ordered, immutable sequence of
    slides with its total interest score calculated on demand.

Key Classes:
    - Slideshow: Ordered slides plus calculated total_score

Dependencies:
    - core.scoring: score_ordering

Used By:
    - builder.search: Best result tracking
    - builder.controller: BuildResult
    - output.writer: Rendering
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Iterator, Tuple

from ..scoring import score_ordering
from .slides import Slide


@dataclass(frozen=True)
class Slideshow:
    """
    Ordered slides (immutable).

    Attributes:
        slides: Slides in presentation order

    Invariants:
        - total_score == sum of score_slides over adjacent pairs
        - no photo index appears on two slides

    Example:
        >>> show = Slideshow((slide_ab, slide_bc))
        >>> show.total_score
        25
    """

    slides: Tuple[Slide, ...]

    def __post_init__(self) -> None:
        """Validate slideshow on construction."""
        if not isinstance(self.slides, tuple):
            raise ValueError(
                f"Slideshow slides must be a tuple, got {type(self.slides).__name__}"
            )
        indices = self.photo_indices
        if len(indices) != len(set(indices)):
            raise ValueError("Slideshow contains the same photo more than once")

    @cached_property
    def total_score(self) -> int:
        """Sum of interest scores between consecutive slides."""
        return score_ordering(self.slides)

    @property
    def photo_indices(self) -> Tuple[int, ...]:
        """Photo indices of all slides, in presentation order."""
        return tuple(i for slide in self.slides for i in slide.photo_indices)

    def __len__(self) -> int:
        return len(self.slides)

    def __iter__(self) -> Iterator[Slide]:
        return iter(self.slides)

    def __repr__(self) -> str:
        return f"Slideshow(slides={len(self.slides)}, score={self.total_score})"
