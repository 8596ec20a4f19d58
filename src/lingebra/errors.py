"""
Error Types
===========
Every failure raised by the library derives from `LinalgError`.

Classes:
    LinalgError: Common base class.
    DimensionMismatchError: Two vectors of unequal dimension met in an
        operation that needs conformable operands.
    InvalidMatrixDimensionsError: A matrix was requested with a zero row or
        column count.
"""
from __future__ import annotations


class LinalgError(Exception):
    """Base class for all lingebra errors."""

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class DimensionMismatchError(LinalgError, ValueError):
    """
    Raised when the dimension of the right-hand vector differs from the
    dimension of the vector the operation was called on.

    Attributes:
        expected: Dimension of the left-hand vector.
        got: Dimension of the right-hand vector.
    """
    def __init__(self, expected: int, got: int) -> None:
        super().__init__(expected, got)
        self.expected = expected
        self.got = got

    def __str__(self) -> str:
        return f"Uneven vector lengths: expected {self.expected}, got {self.got}."


class InvalidMatrixDimensionsError(LinalgError, ValueError):
    """Raised when a matrix would have no rows or no columns."""

    def __init__(self, rows: int, cols: int) -> None:
        super().__init__(rows, cols)
        self.rows = rows
        self.cols = cols

    def __str__(self) -> str:
        return (f"Invalid initial matrix dimensions: {self.rows}x{self.cols}. "
                f"Both 'rows' and 'cols' must be positive.")
