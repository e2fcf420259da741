"""
CPU reference backend for Gaussian elimination.

Naive elimination without pivoting: forward elimination to row-echelon
form, backward elimination to diagonal form, then the roots are read off
the diagonal. All arithmetic stays in the design's dtype, so a float32
system is solved entirely in single precision.
"""

import warnings
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pygauss.core.exceptions import UnableToCalculateError
from pygauss.core.result import Result
from pygauss.core.compute.timing import Timer
from pygauss.core.compute.tolerances import select_tolerance, residual_bound
from pygauss.elimination.design import AugmentedDesign
from pygauss.elimination.solution import EliminationResult
from pygauss.matrix import Matrix


class CPUGaussBackend:
    """
    CPU backend using naive Gaussian elimination.

    Implements the Backend protocol for AugmentedDesign -> EliminationResult.

    A zero on the diagonal stops the solve with UnableToCalculateError;
    rows are never swapped.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss'

    def solve(self, design: AugmentedDesign) -> Result[EliminationResult]:
        """
        Solve [A | b] by Gaussian elimination.

        Algorithm:
            1. Forward elimination on a private copy (row-echelon form)
            2. Backward elimination (diagonal form)
            3. x[i] = b'[i] / a'[i, i]
            4. epsilon = |b - A·x| against the original matrix

        Args:
            design: Validated augmented design

        Returns:
            Result containing EliminationResult

        Raises:
            UnableToCalculateError: If a zero pivot is met
        """
        timer = Timer()
        timer.start()

        original = design.matrix
        work = original.to_numpy()

        with timer.section('forward_elimination'):
            _forward_eliminate(work)

        with timer.section('backward_elimination'):
            _backward_eliminate(work)

        with timer.section('extraction'):
            roots = _extract_roots(work)
            result = Matrix.from_array(roots.reshape(-1, 1), dtype=original.dtype)

        with timer.section('residual'):
            epsilon = original.get_rhs()
            epsilon -= original.calculate_right(result)
            epsilon.map_each(abs)

        timer.stop()

        max_residual = float(np.max(epsilon.to_numpy()))
        tier = select_tolerance(original.dtype)
        bound = residual_bound(tier, original.to_numpy(), roots)

        issues: list[str] = []
        if not np.isfinite(max_residual) or max_residual > bound:
            message = (
                f"Residual {max_residual:.3e} exceeds the {tier.name} bound "
                f"{bound:.3e}; the system may be ill-conditioned"
            )
            warnings.warn(message, RuntimeWarning, stacklevel=2)
            issues.append(message)

        info: dict[str, Any] = {
            'method': 'gauss',
            'n': design.n,
            'dtype': str(original.dtype),
            'max_residual': max_residual,
            'tolerance_tier': tier.name,
        }

        return Result(
            params=EliminationResult(result=result, epsilon=epsilon),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(issues),
        )


def _forward_eliminate(work: NDArray[np.floating[Any]]) -> None:
    """Zero the entries below the diagonal, in place."""
    n = work.shape[0]
    for i in range(n - 1):
        for j in range(i, n - 1):
            pivot = work[i, i]
            if pivot == 0:
                raise UnableToCalculateError(
                    f"Unable to calculate: zero pivot at row {i} "
                    f"during forward elimination",
                    pivot_index=i,
                    phase='forward',
                )
            factor = work[j + 1, i] / pivot
            work[j + 1, i:] -= factor * work[i, i:]


def _backward_eliminate(work: NDArray[np.floating[Any]]) -> None:
    """Zero the entries above the diagonal, bottom row first, in place."""
    n = work.shape[0]
    for i in range(n - 1, 0, -1):
        pivot = work[i, i]
        if pivot == 0:
            raise UnableToCalculateError(
                f"Unable to calculate: zero pivot at row {i} "
                f"during backward elimination",
                pivot_index=i,
                phase='backward',
            )
        for j in range(i, 0, -1):
            factor = work[j - 1, i] / pivot
            work[j - 1, :] -= factor * work[i, :]


def _extract_roots(work: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Divide the reduced right-hand side by the diagonal."""
    n = work.shape[0]
    diagonal = np.diag(work)
    zero = np.flatnonzero(diagonal == 0)
    # n == 1 skips both elimination phases, so its pivot is checked here
    if zero.size:
        raise UnableToCalculateError(
            f"Unable to calculate: zero pivot at row {int(zero[0])}",
            pivot_index=int(zero[0]),
            phase='extraction',
        )
    return work[:, n] / diagonal
