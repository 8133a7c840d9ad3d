"""Command-line entrypoint: k-NN classify an IDX query set.

Usage::

    # MNIST files in the working directory, k=5
    digit-knn

    # Explicit paths, first 100 test images, per-class table and JSON summary
    digit-knn \\
        --train-images data/train-images.idx3-ubyte \\
        --train-labels data/train-labels.idx1-ubyte \\
        --test-images data/t10k-images.idx3-ubyte \\
        --test-labels data/t10k-labels.idx1-ubyte \\
        --limit 100 --per-class --summary results/summary.json

    # Show test image 7 as ASCII art before classifying
    digit-knn --render 7
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from digit_knn.config import (
    DEFAULT_TEST_IMAGES,
    DEFAULT_TEST_LABELS,
    DEFAULT_TRAIN_IMAGES,
    DEFAULT_TRAIN_LABELS,
    K_NEIGHBORS,
    ClassifierConfig,
)
from digit_knn.errors import DatasetError
from digit_knn.evaluate import (
    classify_dataset,
    format_accuracy_line,
    format_result_line,
)
from digit_knn.io.idx import load_image_tensor, load_label_set
from digit_knn.io.report import ClassificationReportWriter
from digit_knn.render import print_image
from digit_knn.schemas.result import ClassificationReport, ClassificationResult


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="digit-knn",
        description="Classify IDX images by majority vote of their k nearest neighbors",
    )
    parser.add_argument(
        "--train-images",
        type=Path,
        default=DEFAULT_TRAIN_IMAGES,
        help=f"Reference image tensor (default: {DEFAULT_TRAIN_IMAGES})",
    )
    parser.add_argument(
        "--train-labels",
        type=Path,
        default=DEFAULT_TRAIN_LABELS,
        help=f"Reference labels (default: {DEFAULT_TRAIN_LABELS})",
    )
    parser.add_argument(
        "--test-images",
        type=Path,
        default=DEFAULT_TEST_IMAGES,
        help=f"Query image tensor (default: {DEFAULT_TEST_IMAGES})",
    )
    parser.add_argument(
        "--test-labels",
        type=Path,
        default=DEFAULT_TEST_LABELS,
        help=f"Query labels (default: {DEFAULT_TEST_LABELS})",
    )
    parser.add_argument(
        "--k",
        type=int,
        default=K_NEIGHBORS,
        help=f"Number of neighbors that vote (default: {K_NEIGHBORS})",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Classify only the first N query images",
    )
    parser.add_argument(
        "--render",
        type=int,
        default=None,
        metavar="INDEX",
        help="Print image INDEX as ASCII art before classifying",
    )
    parser.add_argument(
        "--render-set",
        choices=["test", "train"],
        default="test",
        help="Dataset --render reads from (default: test)",
    )
    parser.add_argument(
        "--per-class",
        action="store_true",
        help="Print a per-class accuracy table to stderr",
    )
    parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="Write the classification report as JSON to this path",
    )
    parser.add_argument(
        "--log-level",
        choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR"],
        default="INFO",
        help="Log level for stderr diagnostics (default: INFO)",
    )
    return parser


def print_per_class(report: ClassificationReport) -> None:
    """Print a Rich table of per-label accuracy to stderr."""
    console = Console(stderr=True)
    table = Table(title=f"Per-class Accuracy (k={report.k})")
    table.add_column("Label", style="cyan")
    table.add_column("Correct", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("Accuracy", justify="right", style="green")

    for label in sorted(report.per_class):
        info = report.per_class[label]
        table.add_row(
            str(label), str(info.correct), str(info.total), f"{info.accuracy:.1%}"
        )
    console.print(table)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level)

    try:
        cfg = ClassifierConfig(
            train_images=args.train_images,
            test_images=args.test_images,
            train_labels=args.train_labels,
            test_labels=args.test_labels,
            k=args.k,
            limit=args.limit,
            log_level=args.log_level,
        )
    except ValidationError as e:
        logger.error(f"Invalid configuration:\n{e}")
        return 2

    try:
        train_images = load_image_tensor(cfg.train_images)
        test_images = load_image_tensor(cfg.test_images)
        train_labels = load_label_set(cfg.train_labels)
        test_labels = load_label_set(cfg.test_labels)

        if args.render is not None:
            render_source = train_images if args.render_set == "train" else test_images
            print_image(render_source, args.render)

        def emit(result: ClassificationResult) -> None:
            print(format_result_line(result))

        report = classify_dataset(
            train_images,
            train_labels,
            test_images,
            test_labels,
            k=cfg.k,
            limit=cfg.limit,
            on_result=emit,
        )
    except DatasetError as e:
        logger.error(str(e))
        return 1

    print(format_accuracy_line(report))

    if args.per_class:
        print_per_class(report)
    if args.summary is not None:
        try:
            path = ClassificationReportWriter(args.summary).write(report)
        except OSError as e:
            logger.error(f"Could not write summary to {args.summary}: {e}")
            return 1
        logger.info(f"Summary saved to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
