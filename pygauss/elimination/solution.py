"""
Elimination solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pygauss.core.result import Result
from pygauss.matrix import Matrix

if TYPE_CHECKING:
    from pygauss.elimination.design import AugmentedDesign


@dataclass(frozen=True)
class EliminationResult:
    """
    Parameter payload for Gaussian elimination.

    Attributes:
        result: Roots of the system (n x 1)
        epsilon: Elementwise residual |b - A·x| (n x 1)
    """
    result: Matrix
    epsilon: Matrix


@dataclass
class EliminationSolution:
    """
    User-facing elimination results.

    Wraps the backend Result and provides convenient accessors for the
    roots, the residual and the solve metadata.
    """
    _result: Result[EliminationResult]
    _design: 'AugmentedDesign'

    @property
    def result(self) -> Matrix:
        return self._result.params.result

    @property
    def epsilon(self) -> Matrix:
        return self._result.params.epsilon

    @property
    def solution(self) -> NDArray[np.floating[Any]]:
        """Roots as a 1D array (n,)."""
        return self.result.to_numpy()[:, 0]

    @property
    def residual(self) -> NDArray[np.floating[Any]]:
        """Residual |b - A·x| as a 1D array (n,)."""
        return self.epsilon.to_numpy()[:, 0]

    @property
    def max_residual(self) -> float:
        return float(np.max(self.residual))

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def dtype(self) -> np.dtype:
        return self._design.dtype

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text report of the roots and residuals."""
        lines = [
            "Gaussian Elimination Results",
            "=" * 50,
            f"Equations: {self.n}",
            f"Precision: {self.dtype}",
            f"Max residual: {self.max_residual:.6e}",
            "",
            f"{'Index':<8} {'Root':>18} {'Residual':>18}",
            "-" * 50,
        ]

        for i, (root, eps) in enumerate(zip(self.solution, self.residual)):
            lines.append(f"  x[{i}]: {root:18.8g} {eps:18.6e}")

        lines.append("-" * 50)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")
        for warning in self.warnings:
            lines.append(f"Warning: {warning}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EliminationSolution(n={self.n}, dtype={self.dtype}, "
            f"max_residual={self.max_residual:.3e})"
        )
