"""Classify a query set against a reference set and tally accuracy."""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from digit_knn.config import K_NEIGHBORS
from digit_knn.inference.base import BaseClassificationInferencer
from digit_knn.inference.knn_inferencer import KNNClassificationInferencer
from digit_knn.schemas.result import ClassificationReport, ClassificationResult
from digit_knn.types import ImageTensor, LabelSet
from digit_knn.validation import check_consistency, check_item_shape

__all__ = [
    "check_consistency",
    "check_item_shape",
    "classify_dataset",
    "evaluate_inferencer",
    "format_accuracy_line",
    "format_result_line",
]


ResultCallback = Callable[[ClassificationResult], None]


def evaluate_inferencer(
    inferencer: BaseClassificationInferencer,
    queries: ImageTensor,
    query_labels: LabelSet,
    k: int = K_NEIGHBORS,
    limit: int | None = None,
    on_result: ResultCallback | None = None,
) -> ClassificationReport:
    """Run ``inferencer`` over every query and compare with ground truth.

    Args:
        inferencer: Produces one prediction per query index.
        queries: Query images.
        query_labels: Ground-truth label per query image.
        k: Neighborhood size, recorded on the report.
        limit: Only classify the first ``limit`` queries.
        on_result: Called with each result as soon as it is available.

    Returns:
        The finished ClassificationReport.
    """
    check_consistency(queries, query_labels, "query")

    total = queries.count if limit is None else min(limit, queries.count)
    report = ClassificationReport(k=k)
    for index in range(total):
        predicted, neighbors = inferencer.predict(queries, index)
        result = ClassificationResult(
            index=index,
            predicted=predicted,
            ground_truth=query_labels.label_at(index),
            neighbors=neighbors,
        )
        report.record(result)
        if on_result is not None:
            on_result(result)
    return report


def classify_dataset(
    reference: ImageTensor,
    reference_labels: LabelSet,
    queries: ImageTensor,
    query_labels: LabelSet,
    k: int = K_NEIGHBORS,
    limit: int | None = None,
    on_result: ResultCallback | None = None,
) -> ClassificationReport:
    """k-NN classify ``queries`` against the labeled ``reference`` set.

    Both datasets are validated before the first query is classified.

    Raises:
        ConsistencyError: A tensor and its labels disagree in count or an
            item is not 28x28.
    """
    check_consistency(reference, reference_labels, "reference")
    check_consistency(queries, query_labels, "query")
    check_item_shape(reference, "reference")
    check_item_shape(queries, "query")

    inferencer = KNNClassificationInferencer(reference, reference_labels, k=k)
    total = queries.count if limit is None else min(limit, queries.count)
    logger.info(
        f"Classifying {total} queries against {reference.count} references (k={k})"
    )
    report = evaluate_inferencer(
        inferencer, queries, query_labels, k=k, limit=limit, on_result=on_result
    )
    logger.info(f"Classified {report.total} queries, {report.correct} correct")
    return report


def format_result_line(result: ClassificationResult) -> str:
    return f"Test Image Index: {result.index} classified as: {result.predicted}"


def format_accuracy_line(report: ClassificationReport) -> str:
    return f"Classification Accuracy: {round(report.accuracy, 4)}%"
