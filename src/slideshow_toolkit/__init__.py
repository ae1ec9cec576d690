"""Top-level package for the Slideshow Toolkit.

Provides subpackages:
- slideshow_toolkit.core – photo/slide models, tag utilities, interest scoring
- slideshow_toolkit.builder – slide building, ordering strategies and search
- slideshow_toolkit.loading – photo collection parser
- slideshow_toolkit.output – slideshow writer
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("slideshow_toolkit")
except PackageNotFoundError:
    # Running from a source checkout without an install
    __version__ = "0.0.0"

__all__: list[str] = ["__version__"]
