"""
Module: builder

Purpose:
    Slideshow building pipeline. Pairs vertical photos into slides, orders
    the slide pool to maximize the interest score between neighbours, and
    keeps the best slideshow across randomized iterations.

Key Functions:
    - build_slides(): Build one slide pool
    - search_slideshow(): Main search entry point
    - build_slideshow(): File-to-file pipeline

Key Classes:
    - SearchConfig: Configuration for the search
    - OrderingStrategy: exhaustive | greedy | localSearch
    - OddVerticalPolicy: drop | keep an unpaired vertical photo

Used By:
    - cli: Command-line entry point
"""

from .config import SearchConfig, OrderingStrategy, OddVerticalPolicy
from .errors import SearchError
from .slides import build_slides
from .ordering import order_slides
from .search import search_slideshow, SlideshowSearch
from .controller import build_slideshow, BuildResult, BuildError

__all__ = [
    # Config
    "SearchConfig",
    "OrderingStrategy",
    "OddVerticalPolicy",
    # Building
    "build_slides",
    "order_slides",
    # Search
    "search_slideshow",
    "SlideshowSearch",
    "SearchError",
    # Controller
    "build_slideshow",
    "BuildResult",
    "BuildError",
]
