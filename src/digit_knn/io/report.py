"""Classification report writer using orjson."""

from __future__ import annotations

from pathlib import Path

import orjson

from digit_knn.schemas.result import ClassificationReport


class ClassificationReportWriter:
    """Write a ClassificationReport as a single JSON document.

    Parent directories of ``output_path`` are created on construction.
    """

    def __init__(self, output_path: Path) -> None:
        self.output_path = output_path
        self.output_path.parent.mkdir(parents=True, exist_ok=True)

    def write(self, report: ClassificationReport) -> Path:
        """Write the report to disk. Returns the output path."""
        dump = report.model_dump()
        dump["accuracy"] = report.accuracy
        # orjson requires str dict keys; per_class uses int keys
        dump["per_class"] = {
            str(label): {**counts, "accuracy": report.per_class[label].accuracy}
            for label, counts in dump["per_class"].items()
        }
        data = orjson.dumps(dump, option=orjson.OPT_INDENT_2)
        self.output_path.write_bytes(data)
        return self.output_path
