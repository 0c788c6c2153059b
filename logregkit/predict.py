"""Command that classifies CSV rows with a saved model."""

from __future__ import annotations

import argparse
import contextlib
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import IO

from logregkit.csvparse import CsvError, parse_csv
from logregkit.dataset import Dataset
from logregkit.model import Model, ModelError, compute_hypothesis


@dataclass
class PredictOptions:
    """Settings of a prediction run."""

    in_file: str | None = None
    model_file: str | None = None
    separator: str = ";"
    skip_header: bool = False


def parse_args(argv: Sequence[str] | None = None) -> PredictOptions:
    """Parse command-line arguments into :class:`PredictOptions`."""
    parser = argparse.ArgumentParser(
        prog="predict", description="Logistic Regression example"
    )
    parser.add_argument("-m", "--model", dest="model_file", metavar="FILE",
                        help="Model file")
    parser.add_argument("--file", dest="file", metavar="FILE", help="Input file")
    parser.add_argument("-s", "--separator", default=";",
                        help="CSV separator (default ';')")
    parser.add_argument("--skip-header", action="store_true",
                        help="Skip CSV header (default false)")
    parser.add_argument("positional_file", nargs="?", metavar="FILE")
    ns = parser.parse_args(argv)
    return PredictOptions(
        in_file=ns.positional_file if ns.positional_file is not None else ns.file,
        model_file=ns.model_file,
        separator=ns.separator[:1] or ";",
        skip_header=ns.skip_header,
    )


def predict(dataset: Dataset, model: Model) -> list[tuple[int, float]]:
    """Normalise ``dataset`` in place and classify each row.

    Returns ``(label, probability)`` for every row.
    """
    if model.n != dataset.n:
        raise ModelError(
            f"Number of features in the dataset ({dataset.n}) does not match "
            f"the model ({model.n})"
        )
    dataset.normalize(model.means, model.stddevs)
    results = []
    for row in dataset.rows:
        probability = compute_hypothesis(model.theta, row)
        results.append((1 if probability >= 0.5 else 0, probability))
    return results


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def _open(stack: contextlib.ExitStack, path: str | None) -> IO[str]:
    if path:
        return stack.enter_context(open(path, encoding="utf-8"))
    return sys.stdin


def main(argv: Sequence[str] | None = None) -> int:
    """Classify rows from the command line; return the exit status."""
    options = parse_args(argv)
    with contextlib.ExitStack() as stack:
        try:
            in_stream = _open(stack, options.in_file)
        except OSError as exc:
            return _fail(f"input file open failed: {exc.strerror}")
        try:
            model_stream = _open(stack, options.model_file)
        except OSError as exc:
            return _fail(f"model file open failed: {exc.strerror}")

        try:
            dataset = parse_csv(in_stream, options.separator, options.skip_header)
        except CsvError as exc:
            print(exc, file=sys.stderr)
            return _fail("Failed to parse input CSV")
        if dataset.m == 0:
            return _fail("No data found")
        if dataset.n == 0:
            return _fail("No features found")

        try:
            model = Model.read(model_stream)
            results = predict(dataset, model)
        except ModelError as exc:
            return _fail(str(exc))

    for i, (label, probability) in enumerate(results):
        print(f"[{i:05d}] {label} ({probability:.5f})")
    return 0


if __name__ == "__main__":
    sys.exit(main())