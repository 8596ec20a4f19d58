"""
Matrix (Data Model)
===================
A rectangular, row-major collection of equal-length vectors.

Only construction is supported: a new matrix holds `rows` zero vectors of
length `cols`. Rows are owned by the matrix; accessors hand out copies.
"""
from __future__ import annotations

import logging
from typing import Iterator, Union

from lingebra.errors import InvalidMatrixDimensionsError
from lingebra.vector import Vector

logger = logging.getLogger(__name__)


class Matrix:
    """
    Grid of `rows` vectors, each with `cols` entries.
    """
    def __init__(self, rows: int, cols: int) -> None:
        """
        Initialize a zero matrix.

        Args:
            rows: Number of rows. Must be positive.
            cols: Number of columns. Must be positive.

        Raises:
            InvalidMatrixDimensionsError: If `rows` or `cols` is not positive.
        """
        if rows <= 0 or cols <= 0:
            raise InvalidMatrixDimensionsError(rows, cols)

        self._rows: list[Vector] = [Vector.new(cols) for _ in range(rows)]
        self._cols = cols
        logger.debug(f"Created {rows}x{cols} zero matrix.")

    @classmethod
    def new(cls, rows: int, cols: int) -> Matrix:
        return cls(rows, cols)

    @property
    def n_rows(self) -> int:
        return len(self._rows)

    @property
    def n_cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return self.n_rows, self.n_cols

    def row(self, index: int) -> Vector:
        """Copy of the row at `index`."""
        if isinstance(index, slice):
            raise TypeError("Matrix.row() takes an integer index; use m[start:stop] for several rows.")
        return self._rows[index].copy()

    def copy(self) -> Matrix:
        obj = self.__class__.__new__(self.__class__)
        obj._rows = [r.copy() for r in self._rows]
        obj._cols = self._cols
        return obj

    def to_list(self) -> list[list[float]]:
        return [r.to_vec() for r in self._rows]

    def __len__(self) -> int:
        return self.n_rows

    def __getitem__(self, index: Union[int, slice]) -> Union[Vector, list[Vector]]:
        if isinstance(index, slice):
            return [r.copy() for r in self._rows[index]]
        return self.row(index)

    def __iter__(self) -> Iterator[Vector]:
        return (r.copy() for r in self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and all(a == b for a, b in zip(self._rows, other._rows))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(r) for r in self._rows) + "]"
