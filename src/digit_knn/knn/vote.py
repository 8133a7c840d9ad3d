"""Majority vote over the labels of the nearest neighbors."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def tally_votes(labels: Iterable[int]) -> dict[int, int]:
    """Occurrence count per label."""
    return dict(Counter(int(label) for label in labels))


def resolve_vote(labels: Iterable[int]) -> int:
    """Most frequent label; the lowest label value wins a tie.

    Raises:
        ValueError: ``labels`` is empty.
    """
    tally = tally_votes(labels)
    if not tally:
        raise ValueError("cannot resolve a vote over zero labels")
    top = max(tally.values())
    return min(label for label, count in tally.items() if count == top)
