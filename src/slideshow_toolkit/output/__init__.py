"""
Module: output

Purpose:
    Render slideshows to the line-based submission format.
"""

from .writer import render_slideshow, write_slideshow, EMPTY_OUTPUT

__all__ = [
    "render_slideshow",
    "write_slideshow",
    "EMPTY_OUTPUT",
]
