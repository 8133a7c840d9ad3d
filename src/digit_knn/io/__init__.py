"""Dataset readers and report writers."""

from digit_knn.io.idx import load_image_tensor, load_label_set
from digit_knn.io.report import ClassificationReportWriter

__all__ = [
    "ClassificationReportWriter",
    "load_image_tensor",
    "load_label_set",
]
