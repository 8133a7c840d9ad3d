"""Abstract base class for classification inferencers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from digit_knn.schemas.result import Neighbor
from digit_knn.types import ImageTensor


class BaseClassificationInferencer(ABC):
    """Base class for classification inferencers.

    Queries are addressed by index into an :class:`ImageTensor`.
    ``predict`` returns the predicted label together with the neighbors
    (if any) that produced it.
    """

    @abstractmethod
    def predict(self, images: ImageTensor, index: int) -> tuple[int, list[Neighbor]]:
        """Classify ``images[index]``."""

    def predict_batch(
        self, images: ImageTensor, indices: Sequence[int]
    ) -> list[tuple[int, list[Neighbor]]]:
        """Classify several images, one result per index in order."""
        return [self.predict(images, i) for i in indices]
