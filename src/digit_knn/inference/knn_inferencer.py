"""Brute-force k-nearest-neighbor inferencer."""

from __future__ import annotations

from loguru import logger

from digit_knn.config import K_NEIGHBORS
from digit_knn.inference.base import BaseClassificationInferencer
from digit_knn.knn.neighbors import select_neighbors
from digit_knn.knn.vote import resolve_vote
from digit_knn.schemas.result import Neighbor
from digit_knn.types import ImageTensor, LabelSet
from digit_knn.validation import check_consistency, check_item_shape


class KNNClassificationInferencer(BaseClassificationInferencer):
    """Classify by majority vote among the ``k`` closest reference images.

    There is no fitting step: the reference tensor and its labels are held
    as-is and scanned in full for every query.

    Args:
        reference: Labeled reference images.
        reference_labels: One label per reference image.
        k: Number of neighbors that vote.  Clamped to the reference count.

    Raises:
        ConsistencyError: The reference labels do not match the images one
            to one, or the reference items are not 28x28.
    """

    def __init__(
        self,
        reference: ImageTensor,
        reference_labels: LabelSet,
        k: int = K_NEIGHBORS,
    ) -> None:
        if k < 1:
            raise ValueError(f"k must be >= 1, got {k}")
        check_consistency(reference, reference_labels, "reference")
        check_item_shape(reference, "reference")
        self.reference = reference
        self.reference_labels = reference_labels
        self.k = k
        if k > reference.count:
            logger.warning(
                f"k={k} exceeds reference set size {reference.count}; "
                f"using all {reference.count} references"
            )

    def neighbors(self, images: ImageTensor, index: int) -> list[Neighbor]:
        check_item_shape(images, "query")
        return select_neighbors(self.reference, images, index, self.k)

    def predict(self, images: ImageTensor, index: int) -> tuple[int, list[Neighbor]]:
        nearest = self.neighbors(images, index)
        label = resolve_vote(self.reference_labels.label_at(n.index) for n in nearest)
        return label, nearest
