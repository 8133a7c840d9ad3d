"""Constants and pydantic frozen configuration for digit_knn."""

from pathlib import Path

from pydantic import BaseModel, model_validator

IMAGE_ROWS = 28
IMAGE_COLS = 28
IMAGE_SIZE = IMAGE_ROWS * IMAGE_COLS

# Number of nearest reference images that vote on each query.
K_NEIGHBORS = 5

# Pixels strictly above this value render as foreground.
RENDER_THRESHOLD = 128

DEFAULT_TRAIN_IMAGES = Path("train-images.idx3-ubyte")
DEFAULT_TEST_IMAGES = Path("t10k-images.idx3-ubyte")
DEFAULT_TRAIN_LABELS = Path("train-labels.idx1-ubyte")
DEFAULT_TEST_LABELS = Path("t10k-labels.idx1-ubyte")


class ClassifierConfig(BaseModel, frozen=True):
    """Configuration for a single classification run.

    All fields are validated at construction time. Frozen — no mutation after creation.
    """

    train_images: Path = DEFAULT_TRAIN_IMAGES
    test_images: Path = DEFAULT_TEST_IMAGES
    train_labels: Path = DEFAULT_TRAIN_LABELS
    test_labels: Path = DEFAULT_TEST_LABELS
    k: int = K_NEIGHBORS
    limit: int | None = None
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _check_ranges(self) -> "ClassifierConfig":
        if self.k < 1:
            raise ValueError(f"k must be >= 1, got {self.k}")
        if self.limit is not None and self.limit < 0:
            raise ValueError(f"limit must be >= 0, got {self.limit}")
        return self
