"""Rank reference images by distance and pick the k nearest."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from digit_knn.config import K_NEIGHBORS
from digit_knn.knn.distance import squared_distances
from digit_knn.schemas.result import Neighbor
from digit_knn.types import ImageTensor

__all__ = ["rank_references", "select_neighbors"]


def rank_references(
    distances: Sequence[int] | np.ndarray, limit: int | None = None
) -> list[Neighbor]:
    """Sort ``(distance, reference_index)`` pairs ascending.

    Equal distances keep ascending reference index order, so the ranking
    is fully deterministic.  With ``limit`` only the first ``limit`` entries
    are built.
    """
    distances = np.asarray(distances, dtype=np.int64)
    order = np.argsort(distances, kind="stable")[:limit]
    return [Neighbor(distance=int(distances[i]), index=int(i)) for i in order]


def select_neighbors(
    reference: ImageTensor,
    query: ImageTensor,
    query_index: int,
    k: int = K_NEIGHBORS,
) -> list[Neighbor]:
    """The ``k`` reference images closest to ``query[query_index]``.

    Scans the whole reference set; when it holds fewer than ``k`` images,
    all of them are returned.

    Raises:
        ValueError: ``k`` is smaller than 1.
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    return rank_references(squared_distances(reference, query, query_index), limit=k)
