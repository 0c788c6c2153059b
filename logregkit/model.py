"""Logistic-regression hypothesis, cost, metrics and the saved model format."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import IO, AnyStr

from logregkit.csvparse import CsvError, parse_csv
from logregkit.dataset import Dataset

_DIGITS = 14


class ModelError(ValueError):
    """Raised when a model is malformed or does not fit the data."""


def compute_hypothesis(theta: Sequence[float], example: Sequence[float]) -> float:
    """Return the sigmoid of the bias plus the weighted features of ``example``.

    ``theta[0]`` is the bias; ``theta[k]`` weighs ``example[k - 1]``, so a
    trailing label column in ``example`` is ignored.
    """
    z = theta[0] + sum(t * x for t, x in zip(theta[1:], example))
    try:
        return 1 / (1 + math.exp(-z))
    except OverflowError:
        return 0.0


def _label(row: Sequence[float]) -> int:
    return int(row[-1])


def _neg_log(value: float) -> float:
    if value <= 0:
        return math.inf
    return -math.log(value)


def cost(theta: Sequence[float], dataset: Dataset) -> float:
    """Return the mean cross-entropy of ``theta`` over ``dataset``."""
    if dataset.m == 0:
        return math.nan
    total = 0.0
    for row in dataset.rows:
        h = compute_hypothesis(theta, row)
        total += _neg_log(h) if _label(row) == 1 else _neg_log(1 - h)
    return total / dataset.m


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.nan if numerator == 0 else math.copysign(math.inf, numerator)
    return numerator / denominator


@dataclass(frozen=True)
class Metrics:
    """Confusion-matrix counts of a binary classifier."""

    tp: int = 0
    tn: int = 0
    fp: int = 0
    fn: int = 0

    @property
    def accuracy(self) -> float:
        return _ratio(self.tp + self.tn, self.tp + self.tn + self.fp + self.fn)

    @property
    def precision(self) -> float:
        return _ratio(self.tp, self.tp + self.fp)

    @property
    def recall(self) -> float:
        return _ratio(self.tp, self.tp + self.fn)

    @property
    def f1(self) -> float:
        precision, recall = self.precision, self.recall
        return _ratio(2 * (precision * recall), precision + recall)


def evaluate(theta: Sequence[float], dataset: Dataset) -> Metrics:
    """Classify every row at the 0.5 threshold and count the outcomes."""
    counts = {"tp": 0, "tn": 0, "fp": 0, "fn": 0}
    for row in dataset.rows:
        predicted = 1 if compute_hypothesis(theta, row) >= 0.5 else 0
        actual = _label(row)
        if predicted == 1 and actual == 1:
            counts["tp"] += 1
        elif predicted == 0 and actual == 1:
            counts["fn"] += 1
        elif predicted == 1 and actual == 0:
            counts["fp"] += 1
        elif predicted == 0 and actual == 0:
            counts["tn"] += 1
    return Metrics(**counts)


def gradient_step(
    theta: Sequence[float], dataset: Dataset, alpha: float
) -> list[float]:
    """Return ``theta`` after one batch gradient-descent step of rate ``alpha``."""
    m = dataset.m
    residuals = [
        (compute_hypothesis(theta, row) - _label(row), row) for row in dataset.rows
    ]
    updated = []
    for j, weight in enumerate(theta):
        total = sum(r * (1 if j == 0 else row[j - 1]) for r, row in residuals)
        updated.append(weight - alpha * total / m if m else math.nan)
    return updated


@dataclass
class Model:
    """Feature scaling parameters and weights of a trained classifier."""

    means: list[float]
    stddevs: list[float]
    theta: list[float]

    @property
    def n(self) -> int:
        """Number of columns the model expects, label included."""
        return len(self.theta)

    def write(self, stream: IO[str]) -> None:
        """Write the model as three ``;``-separated lines."""
        for values in (self.means, self.stddevs):
            stream.write("".join(f"{v:.{_DIGITS}f};" for v in values) + "0\n")
        stream.write(";".join(f"{v:.{_DIGITS}f}" for v in self.theta) + "\n")

    @classmethod
    def read(cls, stream: IO[AnyStr]) -> Model:
        """Read a model written by :meth:`write`."""
        try:
            table = parse_csv(stream, ";", False)
        except CsvError as exc:
            raise ModelError(f"Failed to parse model: {exc}") from exc
        if table.m < 3 or table.n == 0:
            raise ModelError("Invalid model")
        return cls.from_rows(table.rows)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> Model:
        """Build a model from its means, deviations and weights rows."""
        table = [list(row) for row in rows]
        if len(table) < 3 or not table[0]:
            raise ModelError("Invalid model")
        width = len(table[0])
        if any(len(row) != width for row in table[:3]):
            raise ModelError("Invalid model")
        return cls(
            means=table[0][:-1], stddevs=table[1][:-1], theta=list(table[2])
        )