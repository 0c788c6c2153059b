"""In-memory numeric dataset: rows of features followed by a label column."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field

_UINT_MASK = 0xFFFFFFFF


def _rand_r(seed: int) -> Iterator[int]:
    """Yield the reentrant C-library pseudo-random sequence for ``seed``."""
    state = seed & _UINT_MASK

    def advance(value: int) -> int:
        return (value * 1103515245 + 12345) & _UINT_MASK

    while True:
        state = advance(state)
        result = (state // 65536) % 2048
        state = advance(state)
        result = (result << 10) ^ ((state // 65536) % 1024)
        state = advance(state)
        result = (result << 10) ^ ((state // 65536) % 1024)
        yield result


@dataclass
class Dataset:
    """A table of ``m`` rows by ``n`` columns; the last column is the label."""

    n: int
    rows: list[list[float]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if any(len(row) != self.n for row in self.rows):
            raise ValueError(f"every row must have {self.n} columns")

    @property
    def m(self) -> int:
        """Number of rows."""
        return len(self.rows)

    @property
    def feature_columns(self) -> int:
        """Number of feature columns (all but the label)."""
        return max(self.n - 1, 0)

    def means_stddevs(self) -> tuple[list[float], list[float]]:
        """Return per-feature means and population standard deviations."""
        columns = [
            [row[j] for row in self.rows] for j in range(self.feature_columns)
        ]
        means = [sum(col) / self.m if self.m else math.nan for col in columns]
        stddevs = [
            math.sqrt(sum((x - mean) ** 2 for x in col) / self.m)
            if self.m
            else math.nan
            for col, mean in zip(columns, means)
        ]
        return means, stddevs

    def normalize(self, means: list[float], stddevs: list[float]) -> None:
        """Standardise feature columns in place; zero-deviation columns are kept."""
        scales = list(zip(means[: self.feature_columns], stddevs))
        for row in self.rows:
            for j, (mean, stddev) in enumerate(scales):
                if stddev != 0:
                    row[j] = (row[j] - mean) / stddev

    def split(self, ratio: float, seed: int) -> tuple[Dataset, Dataset]:
        """Shuffle rows in place with ``seed`` and split into train/validation.

        The returned datasets share row objects with this one.
        """
        train_size = int(self.m * ratio)
        rng = _rand_r(seed)
        for i in range(self.m - 1, 0, -1):
            j = next(rng) % (i + 1)
            self.rows[i], self.rows[j] = self.rows[j], self.rows[i]
        return (
            Dataset(self.n, self.rows[:train_size]),
            Dataset(self.n, self.rows[train_size:]),
        )

    def format(self) -> str:
        """Render rows in scientific notation, one row per line."""
        return "".join(
            "".join(f"{value:.5e} " for value in row) + "\n" for row in self.rows
        )