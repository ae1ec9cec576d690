"""Helper functions shared by the core models and the scorer."""

from .tags import concat_tags, distinct_tags

__all__ = ["concat_tags", "distinct_tags"]
