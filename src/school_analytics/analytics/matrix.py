"""Growable dense mark matrix.

Rows are students, columns are assessments. Storage is a single row-major
numpy buffer whose capacity is tracked separately from the number of rows in
use, so appending rows only reallocates when capacity runs out.
"""

import numpy as np
from loguru import logger

from ..errors import InvalidConfigurationError, OutOfRangeError


class MarkMatrix:
    """Dense float matrix with a fixed column count and amortized row growth.

    Not thread-safe on its own; the owning analyzer serializes access.
    """

    def __init__(self, columns: int) -> None:
        """Initialize an empty matrix.

        Args:
            columns: Number of assessments per row.

        Raises:
            InvalidConfigurationError: If columns <= 0.
        """
        if columns <= 0:
            raise InvalidConfigurationError(f"Assessment count must be > 0, got {columns}")

        self.columns = columns
        self._rows = 0
        self._data = np.zeros((0, columns), dtype=np.float64)

    @property
    def rows(self) -> int:
        """Number of rows in use."""
        return self._rows

    @property
    def capacity(self) -> int:
        """Number of rows allocated."""
        return self._data.shape[0]

    def ensure_capacity(self, rows: int) -> None:
        """Grow storage to hold at least `rows` rows.

        New capacity is max(rows, 2 * capacity + 1). Existing values are
        copied; new cells are zero.

        Args:
            rows: Required row count.
        """
        current = self.capacity
        if current >= rows:
            return

        new_capacity = max(rows, current * 2 + 1)
        grown = np.zeros((new_capacity, self.columns), dtype=np.float64)
        grown[:current] = self._data
        self._data = grown

        logger.debug(f"Mark matrix grown from {current} to {new_capacity} rows")

    def append_row(self) -> int:
        """Reserve the next row and return its index."""
        index = self._rows
        self.ensure_capacity(index + 1)
        self._rows += 1
        return index

    def set(self, row: int, column: int, value: float) -> None:
        """Overwrite a single cell."""
        self._check_row(row)
        if not 0 <= column < self.columns:
            raise OutOfRangeError(
                f"Assessment index {column} outside [0, {self.columns})"
            )
        self._data[row, column] = value

    def row(self, row: int) -> np.ndarray:
        """Return a copy of one row."""
        self._check_row(row)
        return self._data[row].copy()

    def row_mean(self, row: int) -> float:
        """Mean of one row over all columns (unset cells count as zero)."""
        self._check_row(row)
        return float(self._data[row].sum() / self.columns)

    def row_means(self) -> np.ndarray:
        """Means of every row in use, indexed by row."""
        return self._data[: self._rows].sum(axis=1) / self.columns

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self._rows:
            raise OutOfRangeError(f"Row {row} outside [0, {self._rows})")
