"""
Module: loading

Purpose:
    Parse photo collection files into Photo records.

Key Functions:
    - parse_photos(): Parse text
    - parse_photos_file(): Parse a file

Key Classes:
    - ParseError: Malformed input
"""

from .parser import ParseError, parse_photos, parse_photos_file, parse_photo_line

__all__ = [
    "ParseError",
    "parse_photos",
    "parse_photos_file",
    "parse_photo_line",
]
