"""
lingebra
========
Single-precision vectors with dimension-checked arithmetic, and a minimal
zero-matrix constructor.

Note: This package is pure Python/NumPy.
"""
from lingebra.errors import DimensionMismatchError, InvalidMatrixDimensionsError, LinalgError
from lingebra.logging_config import setup_logging
from lingebra.matrix import Matrix
from lingebra.vector import Vector

__all__ = [
    "Vector",
    "Matrix",
    "LinalgError",
    "DimensionMismatchError",
    "InvalidMatrixDimensionsError",
    "setup_logging",
]
