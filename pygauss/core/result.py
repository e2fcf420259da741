"""
Generic result container for pygauss computations.

The Result class is the envelope every backend returns. It keeps the
domain payload separate from the metadata common to all solves (timing,
backend identity, warnings) so the user-facing solution wrappers can stay
thin.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, size, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for linear solves.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (solution vector, residual, ...)
        info: Structured metadata (method, size, max residual)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=EliminationResult(result=x, epsilon=eps),
        ...     info={'method': 'gauss', 'n': 3},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_gauss'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
