"""Dataset containers shared by the loaders, the k-NN core and the renderer."""

from __future__ import annotations

import math

import numpy as np
from pydantic import BaseModel, ConfigDict, model_validator


class ImageTensor(BaseModel):
    """A flat ``uint8`` buffer plus the dimensions that describe it.

    ``dimensions[0]`` is the item count and the remaining entries are the
    per-item shape, e.g. ``(60000, 28, 28)``.  ``data`` is a read-only view of
    the array passed in and its length always equals the product of the
    dimensions.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    data: np.ndarray
    dimensions: tuple[int, ...]

    @model_validator(mode="after")
    def _check_shape(self) -> ImageTensor:
        if not self.dimensions:
            raise ValueError("dimensions must not be empty")
        if any(d <= 0 for d in self.dimensions):
            raise ValueError(f"dimensions must be positive, got {self.dimensions}")
        if self.data.ndim != 1 or self.data.dtype != np.uint8:
            raise ValueError(
                f"data must be a flat uint8 array, got {self.data.dtype} "
                f"with shape {self.data.shape}"
            )
        expected = math.prod(self.dimensions)
        if self.data.size != expected:
            raise ValueError(
                f"data holds {self.data.size} bytes but dimensions "
                f"{self.dimensions} require {expected}"
            )
        # Use object.__setattr__ because model is frozen
        locked = self.data.view()
        locked.flags.writeable = False
        object.__setattr__(self, "data", locked)
        return self

    @property
    def count(self) -> int:
        return self.dimensions[0]

    @property
    def item_shape(self) -> tuple[int, ...]:
        return self.dimensions[1:]

    @property
    def item_size(self) -> int:
        return math.prod(self.item_shape)

    def items(self) -> np.ndarray:
        """Read-only ``(count, item_size)`` view over the flat buffer."""
        return self.data.reshape(self.count, self.item_size)


class LabelSet(BaseModel):
    """A flat ``uint8`` buffer holding one label per item."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    labels: np.ndarray

    @model_validator(mode="after")
    def _check_shape(self) -> LabelSet:
        if self.labels.ndim != 1 or self.labels.dtype != np.uint8:
            raise ValueError(
                f"labels must be a flat uint8 array, got {self.labels.dtype} "
                f"with shape {self.labels.shape}"
            )
        locked = self.labels.view()
        locked.flags.writeable = False
        object.__setattr__(self, "labels", locked)
        return self

    @property
    def count(self) -> int:
        return int(self.labels.size)

    def __len__(self) -> int:
        return self.count

    def label_at(self, index: int) -> int:
        return int(self.labels[index])
