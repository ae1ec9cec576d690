"""Exceptions shared by the search and its ordering strategies."""


class SearchError(Exception):
    """Error during slideshow search."""
    pass
