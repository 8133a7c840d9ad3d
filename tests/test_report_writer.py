"""Tests for ClassificationReportWriter and the result schemas."""

import json
from pathlib import Path

import pytest

from digit_knn.io.report import ClassificationReportWriter
from digit_knn.schemas.result import (
    ClassificationReport,
    ClassificationResult,
    Neighbor,
)


def _make_report() -> ClassificationReport:
    report = ClassificationReport(k=3)
    report.record(
        ClassificationResult(
            index=0,
            predicted=4,
            ground_truth=4,
            neighbors=[Neighbor(distance=0, index=12), Neighbor(distance=9, index=3)],
        )
    )
    report.record(ClassificationResult(index=1, predicted=1, ground_truth=7))
    return report


class TestSchemas:
    def test_result_correct(self) -> None:
        assert ClassificationResult(index=0, predicted=3, ground_truth=3).correct
        assert not ClassificationResult(index=0, predicted=3, ground_truth=5).correct

    def test_neighbor_immutable(self) -> None:
        n = Neighbor(distance=1, index=2)
        with pytest.raises(Exception):  # noqa: B017
            n.index = 3  # type: ignore[misc]

    def test_record_updates_counts(self) -> None:
        report = _make_report()
        assert report.total == 2
        assert report.correct == 1
        assert report.accuracy == pytest.approx(50.0)
        assert report.per_class[4].correct == 1
        assert report.per_class[7].total == 1
        assert report.per_class[7].accuracy == 0.0


class TestClassificationReportWriter:
    def test_writes_json(self, tmp_path: Path) -> None:
        writer = ClassificationReportWriter(tmp_path / "out" / "summary.json")
        path = writer.write(_make_report())

        assert path == tmp_path / "out" / "summary.json"
        data = json.loads(path.read_text())
        assert data["k"] == 3
        assert data["correct"] == 1
        assert data["total"] == 2
        assert data["accuracy"] == pytest.approx(50.0)
        assert data["per_class"]["4"] == {"correct": 1, "total": 1, "accuracy": 1.0}
        assert data["per_class"]["7"]["accuracy"] == 0.0
        assert data["results"][0]["neighbors"][0] == {"distance": 0, "index": 12}

    def test_creates_parent_directory(self, tmp_path: Path) -> None:
        ClassificationReportWriter(tmp_path / "a" / "b" / "summary.json")
        assert (tmp_path / "a" / "b").is_dir()
