"""
Module: core.utils.tags

Purpose:
    Set algebra over small tag collections. Tags arrive as flat sequences
    where repeats are meaningful (the scorer counts them), so both the
    concatenated multiset and the distinct set are needed.

Key Functions:
    - concat_tags(): All tags from both sequences, repeats kept
    - distinct_tags(): Distinct tags across both sequences

Used By:
    - core.models.slides: Combined slide tags
    - core.scoring: Interest scorer
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Sequence, Tuple


def concat_tags(first: Sequence[str], second: Sequence[str]) -> Tuple[str, ...]:
    """
    Concatenate two tag sequences, keeping every repeat.

    Example:
        >>> concat_tags(("a", "b"), ("b", "c"))
        ('a', 'b', 'b', 'c')
    """
    return tuple(first) + tuple(second)


def distinct_tags(first: Iterable[str], second: Iterable[str]) -> FrozenSet[str]:
    """
    Distinct tags across both collections.

    Example:
        >>> sorted(distinct_tags(("a", "b"), ("b", "c")))
        ['a', 'b', 'c']
    """
    return frozenset(first).union(second)
