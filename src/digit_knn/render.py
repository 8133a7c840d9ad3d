"""ASCII rendering of single images for inspection."""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

from digit_knn.config import IMAGE_COLS, IMAGE_ROWS, RENDER_THRESHOLD
from digit_knn.types import ImageTensor

FOREGROUND = "#"
BACKGROUND = "."


def render_image(images: ImageTensor, index: int) -> str:
    """Render ``images[index]`` as a 28x28 character grid.

    Raises:
        ValueError: ``images`` is not shaped ``(N, 28, 28)``.
        IndexError: ``index`` is outside ``[0, N)``.
    """
    if len(images.dimensions) != 3 or images.item_shape != (IMAGE_ROWS, IMAGE_COLS):
        dims = " ".join(str(d) for d in images.dimensions)
        raise ValueError(f"Unexpected dimensions: {dims}")
    if not 0 <= index < images.count:
        raise IndexError(f"Index out of bounds: {index} (have {images.count} images)")

    pixels = images.items()[index].reshape(IMAGE_ROWS, IMAGE_COLS)
    return "\n".join(
        "".join(FOREGROUND if p > RENDER_THRESHOLD else BACKGROUND for p in row)
        for row in pixels
    )


def print_image(images: ImageTensor, index: int, file: TextIO | None = None) -> bool:
    """Print ``images[index]``; report and return False if it cannot be rendered."""
    try:
        grid = render_image(images, index)
    except (IndexError, ValueError) as e:
        logger.error(str(e))
        return False
    print(grid, file=file if file is not None else sys.stdout)
    return True
