"""
Module: photos

Purpose:
    Provides the Photo dataclass and the Orientation enum. A Photo is the
    parsed form of one input record: its position in the input, whether it
    is horizontal or vertical, and its tags.

Key Classes:
    - Orientation: HORIZONTAL ("H") or VERTICAL ("V")
    - Photo: Immutable photo record

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.slides: Slide variants
    - builder.slides: Slide building
    - loading.parser: Photo parsing
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Orientation(str, Enum):
    """Photo orientation, valued by its input code."""
    HORIZONTAL = "H"
    VERTICAL = "V"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Photo:
    """
    Tagged photo record (immutable).

    Attributes:
        index: Zero-based position among the input photo records
        orientation: HORIZONTAL or VERTICAL
        tags: Tags in input order, duplicates kept

    Invariants:
        - index >= 0
        - tags is a tuple of strings

    Example:
        >>> photo = Photo(0, Orientation.HORIZONTAL, ("cat", "beach"))
        >>> photo.is_vertical
        False
    """

    index: int
    orientation: Orientation
    tags: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate photo on construction."""
        if self.index < 0:
            raise ValueError(f"Photo index must be non-negative: {self.index}")
        if not isinstance(self.orientation, Orientation):
            raise ValueError(f"Invalid orientation: {self.orientation!r}")
        if not isinstance(self.tags, tuple):
            raise ValueError(
                f"Photo tags must be a tuple, got {type(self.tags).__name__}"
            )

    @property
    def is_vertical(self) -> bool:
        """True if the photo must be paired with another vertical photo."""
        return self.orientation is Orientation.VERTICAL

    @property
    def tag_count(self) -> int:
        """Number of tags, repeats included."""
        return len(self.tags)
