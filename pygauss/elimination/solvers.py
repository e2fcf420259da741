"""
Solver dispatch for Gaussian elimination.

This module provides the solve() function (public API) and backend selection.
"""

from typing import Literal
from numpy.typing import ArrayLike, DTypeLike

from pygauss.matrix import Matrix
from pygauss.elimination.design import AugmentedDesign
from pygauss.elimination.solution import EliminationSolution
from pygauss.elimination.backends.cpu import CPUGaussBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu']


def solve(
    augmented: Matrix | ArrayLike,
    rhs: ArrayLike | None = None,
    *,
    dtype: DTypeLike | None = None,
    backend: BackendChoice = 'auto',
) -> EliminationSolution:
    """
    Solve a square linear system by Gaussian elimination.

    Solves A·x = b given either the augmented matrix [A | b] or A and b
    separately, then reports the residual |b - A·x| computed against the
    unmodified input.

    Args:
        augmented: The n x (n+1) augmented matrix as a Matrix or any
                   array-like; the n x n coefficient matrix if rhs is given.
        rhs: Right-hand side (n,) or (n, 1). Only valid with array-likes.
        dtype: Working precision (e.g. np.float32). Defaults to the input's
               dtype, with integer inputs promoted to float64.
        backend: Computational backend to use:
            - 'auto': Select best available (currently the CPU backend)
            - 'cpu': Naive Gaussian elimination on the CPU

    Returns:
        EliminationSolution with the roots, residuals and solve metadata

    Raises:
        ValidationError: If inputs are non-numeric or non-finite
        DimensionError: If inputs have the wrong dimensionality
        IncorrectSizeError: If the system is not n x (n+1)
        UnableToCalculateError: If a zero pivot is met

    Example:
        >>> from pygauss import solve
        >>> result = solve([[2.0, 1.0], [1.0, 3.0]], [5.0, 5.0])
        >>> print(result.solution)
        >>> print(result.summary())
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    if isinstance(augmented, Matrix):
        if rhs is not None:
            raise ValueError("rhs must not be given together with an augmented Matrix")
        matrix = augmented if dtype is None else Matrix.from_array(
            augmented.to_numpy(), dtype=dtype
        )
        design = AugmentedDesign.build(matrix)
    else:
        design = AugmentedDesign.from_arrays(augmented, rhs, dtype=dtype)

    # === Select Backend ===
    backend_impl = _get_backend(backend)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return EliminationSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPUGaussBackend()
    else:
        raise ValueError(f"Unknown backend: {choice!r}")
