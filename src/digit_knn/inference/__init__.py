"""Classification inference framework."""

from digit_knn.inference.base import BaseClassificationInferencer
from digit_knn.inference.knn_inferencer import KNNClassificationInferencer

__all__ = [
    "BaseClassificationInferencer",
    "KNNClassificationInferencer",
]
