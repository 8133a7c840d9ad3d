"""Shared pytest fixtures for digit_knn tests."""

import struct
from collections.abc import Callable, Sequence
from pathlib import Path

import numpy as np
import pytest

from digit_knn.types import ImageTensor, LabelSet

ImageWriter = Callable[[Path, np.ndarray], Path]
LabelWriter = Callable[[Path, Sequence[int]], Path]


@pytest.fixture()
def write_images() -> ImageWriter:
    """Write a uint8 array of any rank as an IDX image tensor file."""

    def _write(path: Path, array: np.ndarray) -> Path:
        array = np.asarray(array, dtype=np.uint8)
        header = bytes([0, 0, 0x08, array.ndim])
        dims = b"".join(struct.pack(">I", d) for d in array.shape)
        path.write_bytes(header + dims + array.tobytes())
        return path

    return _write


@pytest.fixture()
def write_labels() -> LabelWriter:
    """Write a sequence of ints as an IDX label file."""

    def _write(path: Path, labels: Sequence[int]) -> Path:
        body = bytes(labels)
        path.write_bytes(bytes([0, 0, 0x08, 0x01]) + struct.pack(">I", len(body)) + body)
        return path

    return _write


def make_tensor(images: Sequence[np.ndarray] | np.ndarray) -> ImageTensor:
    """Build an ImageTensor from an ``(N, 28, 28)`` array-like."""
    array = np.asarray(images, dtype=np.uint8)
    return ImageTensor(data=array.reshape(-1).copy(), dimensions=array.shape)


def make_labels(labels: Sequence[int]) -> LabelSet:
    return LabelSet(labels=np.asarray(labels, dtype=np.uint8))


@pytest.fixture()
def tmp_mnist_dir(
    tmp_path: Path, write_images: ImageWriter, write_labels: LabelWriter
) -> Path:
    """Tiny MNIST-style dataset written with the canonical file names.

    Reference: 4 images, two dark (label 0) and two bright (label 1).
    Query: 3 images, dark (0), bright (1) and a dark one labeled 1 so
    exactly 2 of 3 predictions are correct with k=3.
    """
    dark = np.full((28, 28), 10, dtype=np.uint8)
    darker = np.zeros((28, 28), dtype=np.uint8)
    bright = np.full((28, 28), 250, dtype=np.uint8)
    brighter = np.full((28, 28), 255, dtype=np.uint8)

    write_images(
        tmp_path / "train-images.idx3-ubyte", np.stack([dark, bright, darker, brighter])
    )
    write_labels(tmp_path / "train-labels.idx1-ubyte", [0, 1, 0, 1])
    write_images(
        tmp_path / "t10k-images.idx3-ubyte", np.stack([darker, brighter, dark])
    )
    write_labels(tmp_path / "t10k-labels.idx1-ubyte", [0, 1, 1])
    return tmp_path
