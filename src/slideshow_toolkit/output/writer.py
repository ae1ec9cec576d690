"""
Module: output.writer

Purpose:
    Render a slideshow as text: the slide count, then one line per slide
    with its photo indices separated by a space (pair slides keep their
    pairing order).

        3
        0
        1 2
        3

Key Functions:
    - render_slideshow(): Slideshow -> text
    - write_slideshow(): Render and write to a file

Used By:
    - builder.controller: Build controller
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from slideshow_toolkit.core.models import Slide, Slideshow

logger = logging.getLogger(__name__)

# Written when no slideshow could be built
EMPTY_OUTPUT = "0\n"


def _render_slide(slide: Slide) -> str:
    return " ".join(str(index) for index in slide.photo_indices)


def render_slideshow(slideshow: Optional[Slideshow]) -> str:
    """
    Render a slideshow to the output format.

    Args:
        slideshow: Slideshow to render, or None

    Returns:
        Rendered text; EMPTY_OUTPUT for None or an empty slideshow

    Example:
        >>> render_slideshow(Slideshow((SingleSlide(h0), PairSlide(v2, v1))))
        '2\\n0\\n2 1'
    """
    if slideshow is None or len(slideshow) == 0:
        return EMPTY_OUTPUT
    body = "\n".join(_render_slide(slide) for slide in slideshow)
    return f"{len(slideshow)}\n{body}"


def write_slideshow(slideshow: Optional[Slideshow], path: Path) -> Path:
    """
    Render and write a slideshow.

    Args:
        slideshow: Slideshow to write, or None for the empty output
        path: Destination file (parent directories are created)

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_slideshow(slideshow), encoding="utf-8")
    logger.info(f"Wrote {len(slideshow) if slideshow else 0} slides to {path}")
    return path
