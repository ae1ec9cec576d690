"""
Core Models Package

Immutable data models for photos, slides and slideshows.

All models in this package are frozen dataclasses. Photos are created once
by the parser and never change; slides are rebuilt on every search
iteration and own their photos; a slideshow is an ordered tuple of slides
with a calculated (never stored) total score.
"""

from .photos import Orientation, Photo
from .slides import Slide, SingleSlide, PairSlide
from .slideshow import Slideshow

__all__ = [
    "Orientation",
    "Photo",
    "Slide",
    "SingleSlide",
    "PairSlide",
    "Slideshow",
]
