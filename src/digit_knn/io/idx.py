"""Readers for the big-endian IDX image tensor and label formats.

Image tensor layout::

    byte[4]    header   (byte 2 = data type, byte 3 = number of dimensions D)
    uint32[D]  dimensions, big-endian, first = item count
    uint8[*]   row-major data, product(dimensions) bytes

Label layout::

    byte[4]        header (unused)
    uint32         count, big-endian
    uint8[count]   labels
"""

from __future__ import annotations

import math
import struct
from pathlib import Path

import numpy as np
from loguru import logger

from digit_knn.errors import DatasetIOError, FormatError
from digit_knn.types import ImageTensor, LabelSet

__all__ = ["load_image_tensor", "load_label_set"]

_HEADER_SIZE = 4
_UINT32 = struct.Struct(">I")
_UNSIGNED_BYTE = 0x08


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise DatasetIOError(f"Could not open file {path}: {e.strerror or e}") from e


def load_image_tensor(path: str | Path) -> ImageTensor:
    """Parse an IDX image tensor file.

    Args:
        path: File to read.

    Returns:
        ImageTensor holding exactly ``product(dimensions)`` bytes.

    Raises:
        DatasetIOError: The file is missing or unreadable.
        FormatError: The header or dimension block is truncated, a dimension
            is zero, or fewer data bytes remain than the dimensions require.
    """
    path = Path(path)
    raw = _read_bytes(path)

    if len(raw) < _HEADER_SIZE:
        raise FormatError(
            f"{path}: truncated header ({len(raw)} of {_HEADER_SIZE} bytes)"
        )
    data_type = raw[2]
    num_dims = raw[3]
    if data_type != _UNSIGNED_BYTE:
        logger.debug(f"{path}: data type 0x{data_type:02x} read as unsigned bytes")
    if num_dims == 0:
        raise FormatError(f"{path}: header declares zero dimensions")

    offset = _HEADER_SIZE
    dims_end = offset + num_dims * _UINT32.size
    if len(raw) < dims_end:
        raise FormatError(
            f"{path}: truncated dimension block, expected {num_dims} dimensions"
        )
    dimensions = tuple(
        _UINT32.unpack_from(raw, offset + i * _UINT32.size)[0]
        for i in range(num_dims)
    )
    if any(d == 0 for d in dimensions):
        raise FormatError(f"{path}: zero-sized dimension in {dimensions}")

    expected = math.prod(dimensions)
    remaining = len(raw) - dims_end
    if remaining < expected:
        raise FormatError(
            f"{path}: expected {expected} data bytes for dimensions "
            f"{dimensions}, found {remaining}"
        )
    if remaining > expected:
        logger.warning(f"{path}: ignoring {remaining - expected} trailing byte(s)")

    data = np.frombuffer(raw, dtype=np.uint8, count=expected, offset=dims_end)
    logger.debug(f"Loaded image tensor {dimensions} from {path}")
    return ImageTensor(data=data, dimensions=dimensions)


def load_label_set(path: str | Path) -> LabelSet:
    """Parse an IDX label file.

    Raises:
        DatasetIOError: The file is missing or unreadable.
        FormatError: The header or count is truncated, or fewer than
            ``count`` label bytes follow it.
    """
    path = Path(path)
    raw = _read_bytes(path)

    body_start = _HEADER_SIZE + _UINT32.size
    if len(raw) < body_start:
        raise FormatError(
            f"{path}: truncated header ({len(raw)} of {body_start} bytes)"
        )
    (count,) = _UINT32.unpack_from(raw, _HEADER_SIZE)

    remaining = len(raw) - body_start
    if remaining < count:
        raise FormatError(f"{path}: expected {count} labels, found {remaining}")
    if remaining > count:
        logger.warning(f"{path}: ignoring {remaining - count} trailing byte(s)")

    labels = np.frombuffer(raw, dtype=np.uint8, count=count, offset=body_start)
    logger.debug(f"Loaded {count} labels from {path}")
    return LabelSet(labels=labels)
