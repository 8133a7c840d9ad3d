"""Per-query classification results and the run-level report."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Neighbor(BaseModel, frozen=True):
    """One reference image and its distance to a query."""

    distance: int
    index: int


class ClassificationResult(BaseModel, frozen=True):
    """Prediction for a single query image."""

    index: int
    predicted: int
    ground_truth: int
    neighbors: list[Neighbor] = Field(default_factory=list)

    @property
    def correct(self) -> bool:
        return self.predicted == self.ground_truth


class ClassAccuracy(BaseModel):
    """Correct/total counts for one ground-truth label."""

    correct: int = 0
    total: int = 0

    @property
    def accuracy(self) -> float:
        return self.correct / self.total if self.total > 0 else 0.0


class ClassificationReport(BaseModel):
    """Running tally over a query set.

    Built up one result at a time with :meth:`record`.  ``accuracy`` is a
    percentage and is ``0.0`` before anything has been recorded.
    """

    k: int
    correct: int = 0
    total: int = 0
    per_class: dict[int, ClassAccuracy] = Field(default_factory=dict)
    results: list[ClassificationResult] = Field(default_factory=list)

    def record(self, result: ClassificationResult) -> None:
        self.total += 1
        cls = self.per_class.setdefault(result.ground_truth, ClassAccuracy())
        cls.total += 1
        if result.correct:
            self.correct += 1
            cls.correct += 1
        self.results.append(result)

    @property
    def accuracy(self) -> float:
        return 100.0 * self.correct / self.total if self.total > 0 else 0.0
