"""Brute-force k-nearest-neighbor core: distance, ranking and voting."""

from digit_knn.knn.distance import squared_distance, squared_distances
from digit_knn.knn.neighbors import rank_references, select_neighbors
from digit_knn.knn.vote import resolve_vote, tally_votes

__all__ = [
    "rank_references",
    "resolve_vote",
    "select_neighbors",
    "squared_distance",
    "squared_distances",
    "tally_votes",
]
