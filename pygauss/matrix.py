"""
Dense real-valued matrix.

Matrix is a fixed-shape 2D container over a numpy floating dtype. The
dtype plays the role of the numeric type: float32 matrices compute in
single precision end to end, float64 matrices in double precision.

An augmented system [A | b] is just a Matrix with one more column than
rows; get_rhs() and calculate_right() read it that way, and
gaussian_elimination() solves it.

Example:
    >>> from pygauss import Matrix
    >>> m = Matrix.from_rows([
    ...     [2.0, 1.0, 5.0],
    ...     [1.0, 3.0, 5.0],
    ... ])
    >>> solved = m.gaussian_elimination()
    >>> print(solved.result)
    [2.0]
    [1.0]
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pygauss.core.exceptions import DimensionError
from pygauss.core.validation import (
    check_array,
    check_float_dtype,
    check_rectangular,
    check_2d,
)

if TYPE_CHECKING:
    from pygauss.elimination.solution import EliminationResult


class Matrix:
    """
    Dense matrix with a fixed shape.

    Rows are indexed with m[i] (a writable view, so m[i][j] = v writes
    through) and single elements with m[i, j]. Out-of-range indices raise
    IndexError.

    Two matrices are equal when they have the same shape and exactly equal
    elements. copy() is always deep.
    """

    __hash__ = None  # mutable

    def __init__(self, rows: int, cols: int, dtype: DTypeLike = np.float64):
        """
        Allocate a zero-filled matrix.

        Args:
            rows: Number of rows
            cols: Number of columns
            dtype: Real floating dtype of the elements

        Raises:
            DimensionError: If rows or cols is negative
            ValidationError: If dtype is not a real floating type
        """
        if rows < 0 or cols < 0:
            raise DimensionError(
                f"Matrix: shape must be non-negative, got {rows} x {cols}"
            )
        self._data = np.zeros((rows, cols), dtype=check_float_dtype(dtype, 'dtype'))

    @classmethod
    def new_column_matrix(cls, size: int, dtype: DTypeLike = np.float64) -> Matrix:
        """Zero-filled size x 1 matrix."""
        return cls(size, 1, dtype=dtype)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[float]],
        dtype: DTypeLike | None = None,
    ) -> Matrix:
        """
        Build a matrix from row-major literal values.

        The shape is inferred from the literal. An empty literal gives a
        0 x 0 matrix.

        Args:
            rows: Sequence of rows, all of the same length
            dtype: Element dtype. Defaults to the literal's floating dtype,
                   or float64 for integer literals.

        Raises:
            DimensionError: If rows is not a sequence of rows, or rows
                            have different lengths
            ValidationError: If values are not real numbers
        """
        try:
            rows = [list(row) for row in rows]
        except TypeError:
            raise DimensionError("rows: expected a sequence of rows") from None
        width = check_rectangular(rows, 'rows')
        if not rows:
            return cls(0, 0, dtype=np.float64 if dtype is None else dtype)
        values = check_array(rows, 'rows')
        return cls._wrap(values.reshape(len(rows), width), dtype)

    @classmethod
    def from_array(cls, array: ArrayLike, dtype: DTypeLike | None = None) -> Matrix:
        """
        Copy a 2D array-like into a new matrix.

        Raises:
            DimensionError: If the input is not 2D
            ValidationError: If values are not real numbers
        """
        values = check_array(array, 'array')
        check_2d(values, 'array')
        return cls._wrap(values, dtype)

    @classmethod
    def _wrap(cls, values: NDArray[np.floating[Any]], dtype: DTypeLike | None) -> Matrix:
        """Internal constructor taking ownership of a copy of values."""
        target = values.dtype if dtype is None else dtype
        matrix = cls.__new__(cls)
        matrix._data = np.array(values, dtype=check_float_dtype(target, 'dtype'))
        return matrix

    # === Shape ===

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    # === Element access ===

    def __getitem__(self, index):
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        self._data[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def copy(self) -> Matrix:
        """Deep copy with the same shape, dtype and values."""
        return Matrix._wrap(self._data, None)

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Copy of the backing array."""
        return self._data.copy()

    # === Arithmetic ===

    def __isub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise DimensionError(
                f"Cannot subtract a {other.rows} x {other.cols} matrix "
                f"from a {self.rows} x {self.cols} matrix"
            )
        self._data -= other._data.astype(self.dtype, copy=False)
        return self

    def map_each(self, func: Callable[[Any], Any]) -> Matrix:
        """
        Apply func to every element in place.

        Returns:
            self, to allow chaining
        """
        for row in range(self.rows):
            for col in range(self.cols):
                self._data[row, col] = func(self._data[row, col])
        return self

    # === Augmented system helpers ===

    def get_rhs(self) -> Matrix:
        """
        Right-hand side b of an augmented matrix [A | b].

        Returns:
            The last column as a rows x 1 matrix
        """
        return Matrix._wrap(self._data[:, -1:], None)

    def calculate_right(self, roots: Matrix) -> Matrix:
        """
        Reproduce the right-hand side from a column of roots.

        Computes out[i] = sum_k roots[k] * self[i, k] over the first
        roots.rows columns of self, so columns beyond the roots (the
        augmented b) are ignored.

        Args:
            roots: Column matrix (k x 1) with k <= self.cols

        Returns:
            rows x 1 matrix in this matrix's dtype

        Raises:
            DimensionError: If roots is not a column matrix or is too long
        """
        if roots.cols != 1:
            raise DimensionError(
                f"roots: expected a column matrix, got {roots.rows} x {roots.cols}"
            )
        k = roots.rows
        if k > self.cols:
            raise DimensionError(
                f"roots: {k} values for a matrix with {self.cols} columns"
            )
        values = roots._data[:, 0].astype(self.dtype, copy=False)
        # Terms are added left to right; a BLAS product sums in its own order
        total = np.zeros(self.rows, dtype=self.dtype)
        for col in range(k):
            total += values[col] * self._data[:, col]
        return Matrix._wrap(total.reshape(self.rows, 1), self.dtype)

    def gaussian_elimination(self) -> EliminationResult:
        """
        Solve the augmented system held in this matrix.

        The matrix itself is never modified.

        Returns:
            EliminationResult with the roots and the residual |b - A·x|

        Raises:
            IncorrectSizeError: If the shape is not n x (n+1)
            UnableToCalculateError: If a zero pivot is met
        """
        from pygauss.elimination.backends.cpu import CPUGaussBackend
        from pygauss.elimination.design import AugmentedDesign

        design = AugmentedDesign.build(self)
        return CPUGaussBackend().solve(design).params

    # === Display ===

    def __str__(self) -> str:
        return "\n".join(
            "[" + " ".join(str(value) for value in row) + "]"
            for row in self._data
        )

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, dtype={self.dtype})"
