"""Squared Euclidean pixel distance between fixed-size 28x28 images."""

from __future__ import annotations

import numpy as np

from digit_knn.config import IMAGE_SIZE
from digit_knn.types import ImageTensor

__all__ = ["squared_distance", "squared_distances"]

# Reference rows processed per vectorized step in squared_distances.
_CHUNK_ROWS = 4096


def _image_slice(images: ImageTensor, index: int) -> np.ndarray:
    offset = index * IMAGE_SIZE
    if index < 0 or offset + IMAGE_SIZE > images.data.size:
        raise IndexError(
            f"image index {index} out of range for {images.data.size // IMAGE_SIZE} images"
        )
    return images.data[offset : offset + IMAGE_SIZE]


def squared_distance(
    reference: ImageTensor,
    query: ImageTensor,
    reference_index: int,
    query_index: int,
) -> int:
    """Sum of squared per-pixel differences between two images.

    Images are addressed by index into each tensor's flat buffer at byte
    offset ``index * IMAGE_SIZE``.  The result lies in
    ``[0, IMAGE_SIZE * 255**2]``.
    """
    ref = _image_slice(reference, reference_index).astype(np.int64)
    qry = _image_slice(query, query_index).astype(np.int64)
    diff = ref - qry
    return int(np.dot(diff, diff))


def squared_distances(
    reference: ImageTensor, query: ImageTensor, query_index: int
) -> np.ndarray:
    """Distances from one query image to every reference image.

    Element ``i`` equals ``squared_distance(reference, query, i, query_index)``.
    Reference rows are processed in chunks so peak memory does not grow with
    the size of the reference set.

    Returns:
        ``int64`` array of length ``reference.data.size // IMAGE_SIZE``.
    """
    qry = _image_slice(query, query_index).astype(np.int32)
    rows = reference.data.size // IMAGE_SIZE
    ref_items = reference.data[: rows * IMAGE_SIZE].reshape(rows, IMAGE_SIZE)

    out = np.empty(rows, dtype=np.int64)
    for start in range(0, rows, _CHUNK_ROWS):
        # int32 holds IMAGE_SIZE * 255**2 without overflow
        diff = ref_items[start : start + _CHUNK_ROWS].astype(np.int32) - qry
        out[start : start + _CHUNK_ROWS] = np.einsum("ij,ij->i", diff, diff)
    return out
