"""Cross-checks between paired datasets, run before any classification."""

from __future__ import annotations

from digit_knn.config import IMAGE_COLS, IMAGE_ROWS
from digit_knn.errors import ConsistencyError
from digit_knn.types import ImageTensor, LabelSet


def check_consistency(images: ImageTensor, labels: LabelSet, name: str) -> None:
    """Raise ConsistencyError unless there is exactly one label per image."""
    if labels.count != images.count:
        raise ConsistencyError(
            f"{name} set has {images.count} images but {labels.count} labels"
        )


def check_item_shape(images: ImageTensor, name: str) -> None:
    """Raise ConsistencyError unless every item is a 28x28 image."""
    if images.item_shape != (IMAGE_ROWS, IMAGE_COLS):
        raise ConsistencyError(
            f"{name} images have shape {images.item_shape}, "
            f"expected ({IMAGE_ROWS}, {IMAGE_COLS})"
        )
