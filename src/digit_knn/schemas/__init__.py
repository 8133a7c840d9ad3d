"""Classification result schemas."""

from digit_knn.schemas.result import (
    ClassAccuracy,
    ClassificationReport,
    ClassificationResult,
    Neighbor,
)

__all__ = [
    "ClassAccuracy",
    "ClassificationReport",
    "ClassificationResult",
    "Neighbor",
]
