"""Command that trains a logistic-regression model from a CSV file."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from logregkit.csvparse import CsvError, parse_csv
from logregkit.dataset import Dataset
from logregkit.model import Metrics, Model, cost, evaluate, gradient_step

Report = Callable[[int, float, float, Metrics], None]


@dataclass
class TrainOptions:
    """Settings of a training run."""

    learning_rate: float = 0.001
    iterations: int = 1000
    split: float = 0.8
    separator: str = ";"
    skip_header: bool = False
    seed: int = 0
    in_file: str | None = None
    out_file: str | None = None


def parse_args(argv: Sequence[str] | None = None) -> TrainOptions:
    """Parse command-line arguments into :class:`TrainOptions`."""
    parser = argparse.ArgumentParser(
        prog="logreg", description="Logistic Regression example"
    )
    parser.add_argument("-l", "--learning-rate", type=float, default=0.001,
                        help="The learning rate (default 0.001)")
    parser.add_argument("-i", "--iterations", type=int, default=1000,
                        help="Number of iterations (default 1000)")
    parser.add_argument("-s", "--split", type=float, default=0.8,
                        help="Train/validation dataset split (default 0.8)")
    parser.add_argument("--separator", default=";",
                        help="CSV separator (default ';')")
    parser.add_argument("--skip-header", action="store_true",
                        help="Skip CSV header (default false)")
    parser.add_argument("--seed", type=int, default=0,
                        help="RNG seed (default: current time)")
    parser.add_argument("--file", dest="file", metavar="FILE", help="Input file")
    parser.add_argument("-o", "--output", dest="out_file", metavar="OUTFILE",
                        help="Output model file")
    parser.add_argument("positional_file", nargs="?", metavar="FILE")
    ns = parser.parse_args(argv)
    return TrainOptions(
        learning_rate=ns.learning_rate,
        iterations=ns.iterations,
        split=ns.split,
        separator=ns.separator[:1] or ";",
        skip_header=ns.skip_header,
        seed=ns.seed,
        in_file=ns.positional_file if ns.positional_file is not None else ns.file,
        out_file=ns.out_file,
    )


def train(
    dataset: Dataset,
    learning_rate: float = 0.001,
    iterations: int = 1000,
    valid: Dataset | None = None,
    report: Report | None = None,
) -> list[float]:
    """Run batch gradient descent from zero weights and return the weights.

    After every iteration ``report`` receives the iteration number, the
    training and validation costs and the validation metrics.
    """
    if valid is None:
        valid = Dataset(dataset.n)
    theta = [0.0] * dataset.n
    for iteration in range(iterations):
        theta = gradient_step(theta, dataset, learning_rate)
        if report is not None:
            report(iteration, cost(theta, dataset), cost(theta, valid),
                   evaluate(theta, valid))
    return theta


def _print_report(
    iteration: int, train_cost: float, valid_cost: float, metrics: Metrics
) -> None:
    print(
        f"[{iteration:04d}] train: {train_cost:f}, valid: {valid_cost:f}, "
        f"accuracy: {metrics.accuracy:f}, precision: {metrics.precision:f}, "
        f"recall: {metrics.recall:f}, f1: {metrics.f1:f}"
    )


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Train a model from the command line; return the exit status."""
    options = parse_args(argv)
    if not options.in_file:
        return _fail("No input file specified")
    if options.split <= 0 or options.split > 1:
        return _fail(f"Invalid split value: {options.split:f}")
    seed = options.seed or int(time.time())

    try:
        with open(options.in_file, encoding="utf-8") as stream:
            dataset = parse_csv(stream, options.separator, options.skip_header)
    except OSError as exc:
        return _fail(f"input file open failed: {exc.strerror}")
    except CsvError as exc:
        print(exc, file=sys.stderr)
        return _fail("Failed to parse CSV")

    if dataset.m == 0:
        return _fail("No data found")
    if dataset.n < 2:
        return _fail("No features found")

    train_set, valid_set = dataset.split(options.split, seed)
    print(
        f"Dataset split: {train_set.m} train examples, "
        f"{valid_set.m} validation examples"
    )

    means, stddevs = train_set.means_stddevs()
    train_set.normalize(means, stddevs)
    valid_set.normalize(means, stddevs)

    theta = train(train_set, options.learning_rate, options.iterations,
                  valid_set, _print_report)

    print("Thetas:")
    print("[" + ", ".join(f"{t:.5e}" for t in theta) + "]")

    model = Model(means, stddevs, theta)
    if options.out_file:
        try:
            with open(options.out_file, "w", encoding="utf-8") as out:
                model.write(out)
        except OSError as exc:
            return _fail(f"output file open failed: {exc.strerror}")
    else:
        model.write(sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())