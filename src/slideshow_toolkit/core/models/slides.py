"""
Module: slides

Purpose:
    Provides the Slide tagged union. A slide shows either one horizontal
    photo (SingleSlide) or two vertical photos side by side (PairSlide).
    The scorer only sees a slide's combined tags; the writer only sees its
    photo indices.

Key Classes:
    - Slide: Common read-only interface
    - SingleSlide: One photo
    - PairSlide: Two distinct vertical photos, pairing order preserved

Dependencies:
    - dataclasses (std)
    - functools (std)
    - .photos.Photo
    - core.utils.tags: Tag concatenation

Used By:
    - core.scoring: Interest scorer
    - core.models.slideshow.Slideshow
    - builder.slides: Slide building
    - output.writer: Slideshow rendering
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cached_property
from typing import FrozenSet, Tuple

from ..utils.tags import concat_tags
from .photos import Photo


class Slide(ABC):
    """
    Displayable unit of a slideshow.

    Subclasses supply ``photos``; the combined tag multiset and distinct tag
    set are derived from it and cached.
    """

    @property
    @abstractmethod
    def photos(self) -> Tuple[Photo, ...]:
        """Photos shown on this slide, in output order."""

    @property
    def photo_indices(self) -> Tuple[int, ...]:
        """Input indices of the photos on this slide."""
        return tuple(photo.index for photo in self.photos)

    @cached_property
    def tags(self) -> Tuple[str, ...]:
        """Combined tags of all photos, repeats kept."""
        photos = self.photos
        if len(photos) == 1:
            return photos[0].tags
        return concat_tags(photos[0].tags, photos[1].tags)

    @cached_property
    def tag_set(self) -> FrozenSet[str]:
        """Distinct tags across all photos."""
        return frozenset(self.tags)


@dataclass(frozen=True)
class SingleSlide(Slide):
    """
    Slide holding a single photo.

    Normally a horizontal photo. A vertical photo only ends up here when the
    builder is told to keep an unpaired leftover vertical photo.

    Example:
        >>> slide = SingleSlide(Photo(3, Orientation.HORIZONTAL, ("sun",)))
        >>> slide.photo_indices
        (3,)
    """

    photo: Photo

    @property
    def photos(self) -> Tuple[Photo, ...]:
        return (self.photo,)

    def __repr__(self) -> str:
        return f"SingleSlide({self.photo.index})"


@dataclass(frozen=True)
class PairSlide(Slide):
    """
    Slide holding two vertical photos.

    The order of ``first`` and ``second`` does not affect scoring but is
    kept as built, since the writer emits indices in that order.

    Invariants:
        - both photos are vertical
        - the photos have different indices
    """

    first: Photo
    second: Photo

    def __post_init__(self) -> None:
        """Validate pairing on construction."""
        if not (self.first.is_vertical and self.second.is_vertical):
            raise ValueError(
                f"PairSlide needs two vertical photos, got "
                f"{self.first.orientation.name} #{self.first.index} and "
                f"{self.second.orientation.name} #{self.second.index}"
            )
        if self.first.index == self.second.index:
            raise ValueError(f"PairSlide photos must differ: #{self.first.index} twice")

    @property
    def photos(self) -> Tuple[Photo, ...]:
        return (self.first, self.second)

    def __repr__(self) -> str:
        return f"PairSlide({self.first.index}, {self.second.index})"
