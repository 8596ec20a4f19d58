"""
Vector (Data Model)
===================
A fixed-precision vector of arbitrary dimension.

Entries are stored as `float32` in a 1-D NumPy array owned exclusively by the
vector. Every operation combining two vectors validates their dimensions
before any computation or mutation starts, so a failed in-place operation
leaves the target untouched.

Operators:
    u + v, u - v      -> Vector (dimension-checked)
    u * v             -> float (dot product, dimension-checked)
    u += v, u -= v    -> in place (dimension-checked)
    u *= v            -> in place elementwise product (dimension-checked)
    u + c, u - c, u * c and their in-place forms broadcast the scalar `c`.

Classes:
    Vector: The vector value type.
"""
from __future__ import annotations

import numbers
from typing import Any, Callable, Iterable, Iterator, Optional, Union, TYPE_CHECKING

import numpy as np

from lingebra.config import DTYPE
from lingebra.errors import DimensionMismatchError

if TYPE_CHECKING:
    import numpy.typing as npt

Scalar = Union[int, float, np.floating, np.integer]
Operand = Union["Vector", Scalar]


class Vector:
    """
    Ordered, fixed-length sequence of single-precision floats.
    """
    __slots__ = ("_data",)

    # Mutable through in-place operators
    __hash__ = None  # type: ignore[assignment]

    # NumPy scalars on the left must defer to the reflected operators below
    __array_ufunc__ = None

    def __init__(self, values: Iterable[float] = ()) -> None:
        """
        Initialize the vector from an iterable of numbers.

        Args:
            values: Finite iterable of real numbers, consumed in order.

        Raises:
            TypeError: If `values` is a string or holds a non-real entry.
        """
        if isinstance(values, (str, bytes)):
            raise TypeError(f"Vector entries must be real numbers, got {type(values).__name__}.")

        items = list(values)
        for item in items:
            if not _is_scalar(item):
                raise TypeError(f"Vector entries must be real numbers, got {type(item).__name__}.")

        with np.errstate(over="ignore"):
            self._data: npt.NDArray[np.float32] = np.fromiter(
                (_cast(item) for item in items), dtype=DTYPE, count=len(items)
            )

    @classmethod
    def new(cls, length: int) -> Vector:
        """Zero vector with `length` entries."""
        if length < 0:
            raise ValueError(f"Vector length must be non-negative, got {length}.")
        return cls._from_array(np.zeros(length, dtype=DTYPE))

    @classmethod
    def from_iter(cls, values: Iterable[float]) -> Vector:
        return cls(values)

    @classmethod
    def _from_array(cls, data: npt.NDArray[np.float32]) -> Vector:
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    def to_vec(self) -> list[float]:
        """Entries as a plain list, in order."""
        return [float(x) for x in self._data]

    def to_array(self) -> npt.NDArray[np.float32]:
        """Entries as a new `float32` array."""
        return self._data.copy()

    def copy(self) -> Vector:
        return self._from_array(self._data.copy())

    def __copy__(self) -> Vector:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Vector:
        return self.copy()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def dim(self) -> int:
        """Dimension of the vector (number of entries)."""
        return self._data.shape[0]

    def dim_eq(self, other: Vector) -> bool:
        return self.dim() == other.dim()

    def length(self) -> float:
        """
        Euclidean norm of the vector.

        This is the length in terms of linear algebra, not the number of
        entries. The sum of squares is accumulated in `float32`.
        """
        with np.errstate(over="ignore", invalid="ignore"):
            sum_sq = np.sum(np.square(self._data), dtype=DTYPE)
            return float(np.sqrt(sum_sq))

    def __len__(self) -> int:
        return self.dim()

    def __iter__(self) -> Iterator[float]:
        return (float(x) for x in self._data)

    def __getitem__(self, index: Union[int, slice]) -> Union[float, Vector]:
        if isinstance(index, slice):
            return self._from_array(self._data[index].copy())
        return float(self._data[index])

    # ------------------------------------------------------------------
    # Dimension validation
    # ------------------------------------------------------------------

    def validate_dimensions(self, other: Vector) -> None:
        """
        Check that `other` is conformable with this vector.

        Raises:
            DimensionMismatchError: If the dimensions differ. `expected` is the
                dimension of this vector, `got` the dimension of `other`.
        """
        self_dim = self.dim()
        other_dim = other.dim()
        if self_dim != other_dim:
            raise DimensionMismatchError(expected=self_dim, got=other_dim)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _apply(
        self,
        other: Operand,
        ufunc: Callable[..., Any],
        out: Optional[npt.NDArray[np.float32]] = None,
    ) -> npt.NDArray[np.float32]:
        """
        Apply `ufunc` elementwise to this vector and `other`.

        A vector operand is validated first; a scalar operand is cast to
        `float32` and broadcast to every entry. When `out` is given the result
        is written into it.
        """
        if isinstance(other, Vector):
            self.validate_dimensions(other)
            rhs = other._data
        elif not _is_scalar(other):
            raise TypeError(f"Unsupported operand type: {type(other).__name__}.")

        with np.errstate(over="ignore", invalid="ignore"):
            if not isinstance(other, Vector):
                rhs = _cast(other)
            return ufunc(self._data, rhs, out=out)

    def add(self, other: Vector) -> Vector:
        return self._from_array(self._apply(other, np.add))

    def sub(self, other: Vector) -> Vector:
        return self._from_array(self._apply(other, np.subtract))

    def add_scalar(self, scalar: Scalar) -> Vector:
        return self._from_array(self._apply(scalar, np.add))

    def sub_scalar(self, scalar: Scalar) -> Vector:
        return self._from_array(self._apply(scalar, np.subtract))

    def mul_scalar(self, scalar: Scalar) -> Vector:
        return self._from_array(self._apply(scalar, np.multiply))

    def add_assign(self, other: Operand) -> Vector:
        """Add a vector or a scalar in place. Returns `self`."""
        self._apply(other, np.add, out=self._data)
        return self

    def sub_assign(self, other: Operand) -> Vector:
        """Subtract a vector or a scalar in place. Returns `self`."""
        self._apply(other, np.subtract, out=self._data)
        return self

    def mul_assign(self, other: Operand) -> Vector:
        """
        Multiply in place, elementwise for a vector operand or by broadcasting
        a scalar operand. Returns `self`.
        """
        self._apply(other, np.multiply, out=self._data)
        return self

    def dot(self, other: Vector) -> float:
        """
        Dot product of two conformable vectors.

        Raises:
            DimensionMismatchError: If the dimensions differ.
        """
        self.validate_dimensions(other)
        with np.errstate(over="ignore", invalid="ignore"):
            return float(np.dot(self._data, other._data))

    def distance(self, other: Vector) -> float:
        """Euclidean distance between the two vectors."""
        return self.sub(other).length()

    def is_orthogonal_with(self, other: Vector) -> bool:
        """True if the dot product is exactly zero."""
        return self.dot(other) == 0.0

    def __add__(self, other: object) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        return self._from_array(self._apply(other, np.add))

    def __radd__(self, other: object) -> Vector:
        if not _is_scalar(other):
            return NotImplemented
        return self.add_scalar(other)

    def __sub__(self, other: object) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        return self._from_array(self._apply(other, np.subtract))

    def __mul__(self, other: object) -> Union[Vector, float]:
        if isinstance(other, Vector):
            return self.dot(other)
        if not _is_scalar(other):
            return NotImplemented
        return self.mul_scalar(other)

    def __rmul__(self, other: object) -> Vector:
        if not _is_scalar(other):
            return NotImplemented
        return self.mul_scalar(other)

    def __iadd__(self, other: object) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        return self.add_assign(other)

    def __isub__(self, other: object) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        return self.sub_assign(other)

    def __imul__(self, other: object) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        return self.mul_assign(other)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dim_eq(other) and bool(np.array_equal(self._data, other._data))

    def _partial_cmp(self, other: Vector) -> Optional[int]:
        """
        Lexicographic comparison.

        Returns -1, 0 or 1, or None as soon as an unordered (NaN) pair of
        entries is reached. A strict prefix orders first.
        """
        for x, y in zip(self._data, other._data):
            if x < y:
                return -1
            if x > y:
                return 1
            if x != y:
                return None
        return (self.dim() > other.dim()) - (self.dim() < other.dim())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        cmp = self._partial_cmp(other)
        return cmp is not None and cmp < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        cmp = self._partial_cmp(other)
        return cmp is not None and cmp <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        cmp = self._partial_cmp(other)
        return cmp is not None and cmp > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        cmp = self._partial_cmp(other)
        return cmp is not None and cmp >= 0

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        """Entries in source order, e.g. `[-1.0, 2.0]`."""
        return "[" + ", ".join(str(x) for x in self._data) + "]"

    __str__ = __repr__


def _is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real)


def _is_operand(value: object) -> bool:
    return isinstance(value, Vector) or _is_scalar(value)


def _cast(value: Scalar) -> np.float32:
    """
    Convert a real number to `float32`.

    Values outside the `float32` range saturate to infinity, including
    integers too large for a Python float.
    """
    try:
        return DTYPE(value)
    except OverflowError:
        return DTYPE(np.inf) if value > 0 else DTYPE(-np.inf)
