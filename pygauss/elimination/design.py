"""
Augmented system design.

AugmentedDesign holds a validated n x (n+1) matrix [A | b]. It is the only
thing elimination backends accept, so the shape check happens once, before
any arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pygauss.core.exceptions import IncorrectSizeError
from pygauss.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_2d,
    check_consistent_length,
)
from pygauss.matrix import Matrix


@dataclass(frozen=True)
class AugmentedDesign:
    """
    Validated augmented system specification.

    Immutable after construction. The wrapped Matrix belongs to the caller
    and is treated as read-only; backends work on their own copy.

    Construction:
        AugmentedDesign.build(matrix)                 # [A | b] as a Matrix
        AugmentedDesign.from_arrays(A, b)            # coefficients and rhs
        AugmentedDesign.from_arrays(augmented)       # [A | b] as an array
    """
    _matrix: Matrix
    _n: int

    @classmethod
    def build(cls, matrix: Matrix) -> AugmentedDesign:
        """
        Wrap an augmented matrix after checking its shape.

        Raises:
            IncorrectSizeError: If the matrix is not n x (n+1) with n >= 1
        """
        rows, cols = matrix.shape
        if cols != rows + 1:
            raise IncorrectSizeError(
                f"Incorrect matrix size: got {rows} rows and {cols} columns, "
                f"expected {rows} rows and {rows + 1} columns",
                rows=rows,
                cols=cols,
            )
        if rows == 0:
            raise IncorrectSizeError(
                "Incorrect matrix size: the system has no equations",
                rows=rows,
                cols=cols,
            )
        return cls(_matrix=matrix, _n=rows)

    @classmethod
    def from_arrays(
        cls,
        augmented: ArrayLike,
        rhs: ArrayLike | None = None,
        *,
        dtype: DTypeLike | None = None,
    ) -> AugmentedDesign:
        """
        Build a design from arrays.

        Args:
            augmented: The n x (n+1) augmented matrix, or the n x n
                       coefficient matrix when rhs is given
            rhs: Right-hand side (n,) or (n, 1), appended as the last column
            dtype: Working dtype. Defaults to the input's floating dtype.

        Raises:
            ValidationError: If inputs are non-numeric or non-finite
            DimensionError: If inputs have the wrong dimensionality
            IncorrectSizeError: If the combined shape is not n x (n+1)
        """
        values = check_array(augmented, 'augmented')
        check_2d(values, 'augmented')
        check_finite(values, 'augmented')

        if rhs is not None:
            b = check_array(rhs, 'rhs')
            if b.ndim == 2 and b.shape[1] == 1:
                b = b.ravel()
            check_1d(b, 'rhs')
            check_finite(b, 'rhs')
            check_consistent_length(values, b, names=('augmented', 'rhs'))
            values = _append_column(values, b)

        return cls.build(Matrix.from_array(values, dtype=dtype))

    # === Properties ===

    @property
    def matrix(self) -> Matrix:
        """The augmented matrix [A | b] (n x (n+1))."""
        return self._matrix

    @property
    def n(self) -> int:
        """Number of equations (and unknowns)."""
        return self._n

    @property
    def dtype(self) -> np.dtype:
        """Working dtype of the system."""
        return self._matrix.dtype

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Copy of the coefficient block A (n x n)."""
        return self._matrix.to_numpy()[:, :self._n]

    @property
    def rhs(self) -> NDArray[np.floating[Any]]:
        """Copy of the right-hand side b (n,)."""
        return self._matrix.to_numpy()[:, self._n]


def _append_column(
    values: NDArray[np.floating[Any]],
    column: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Append column as the last column of values, keeping the wider dtype."""
    dtype = np.result_type(values.dtype, column.dtype)
    return np.hstack([values.astype(dtype), column.astype(dtype).reshape(-1, 1)])
