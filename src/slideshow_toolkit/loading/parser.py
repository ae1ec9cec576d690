"""
Module: loading.parser

Purpose:
    Parse the line-based photo collection format:

        3
        H 3 cat beach sun
        V 2 selfie smile
        V 2 garden selfie

    The first line is the photo count. Each following non-blank line is
    one photo: orientation (H or V), tag count, then exactly that many
    tags. A photo's index is its zero-based position among those lines.

Key Functions:
    - parse_photos(): Parse file contents
    - parse_photos_file(): Read and parse a file
    - parse_photo_line(): Parse a single record

Key Classes:
    - ParseError: Exception for parse failures

Dependencies:
    - re (std)
    - pathlib (std)
    - core.models: Photo, Orientation

Used By:
    - builder.controller: Build controller
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List

from slideshow_toolkit.core.models import Orientation, Photo

logger = logging.getLogger(__name__)


_RECORD_RE = re.compile(r"^(H|V)\s+(\d+)((?:\s+\w+)*)$")


class ParseError(Exception):
    """Error parsing a photo collection."""
    pass


def parse_photo_line(line: str, index: int) -> Photo:
    """
    Parse one photo record.

    Args:
        line: Record text, surrounding whitespace ignored
        index: Index to give the photo

    Returns:
        Photo built from the record

    Raises:
        ParseError: If the record does not match the grammar or the tag
            count differs from the number of tags

    Example:
        >>> parse_photo_line("H 2 cat sun", 0).tags
        ('cat', 'sun')
    """
    match = _RECORD_RE.match(line.strip())
    if match is None:
        raise ParseError(f"Malformed photo record: {line!r}")

    orientation = Orientation(match.group(1))
    declared = int(match.group(2))
    tags = tuple(match.group(3).split())
    if declared != len(tags):
        raise ParseError(
            f"Wrong number of tags in {line!r}: declared {declared}, found {len(tags)}"
        )

    return Photo(index=index, orientation=orientation, tags=tags)


def parse_photos(text: str, *, source: str = "<input>") -> List[Photo]:
    """
    Parse a photo collection.

    Validates:
    - First line is an integer photo count
    - Every other non-blank line is a well-formed record

    Args:
        text: Full file contents
        source: Source identifier for error messages

    Returns:
        Photos in input order

    Raises:
        ParseError: On the first malformed line; nothing is returned
    """
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise ParseError(f"Missing photo count in {source}")

    try:
        declared = int(lines[0].strip())
    except ValueError:
        raise ParseError(f"Invalid photo count in {source}: {lines[0]!r}")
    if declared < 0:
        raise ParseError(f"Negative photo count in {source}: {declared}")

    photos: List[Photo] = []
    for line_number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        try:
            photos.append(parse_photo_line(line, len(photos)))
        except ParseError as e:
            raise ParseError(f"{source}, line {line_number}: {e}") from e

    if len(photos) != declared:
        logger.warning(
            f"{source} declares {declared} photos but contains {len(photos)}"
        )

    return photos


def parse_photos_file(path: Path) -> List[Photo]:
    """
    Read and parse a photo collection file.

    Args:
        path: Path to the input file

    Returns:
        Photos in input order

    Raises:
        ParseError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    if not path.exists():
        raise ParseError(f"Input file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Could not read {path}: {e}")

    photos = parse_photos(text, source=str(path))
    logger.info(f"Loaded {len(photos)} photos from {path.name}")
    return photos
