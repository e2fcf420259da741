"""
Gaussian elimination for square linear systems.

Public API:
    solve(augmented, rhs=None, ...) -> EliminationSolution

The solve() function is the main entry point. It handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from pygauss.elimination import solve
    >>> result = solve(augmented)
    >>> print(result.solution)
    >>> print(result.summary())
"""

from pygauss.elimination.design import AugmentedDesign
from pygauss.elimination.solution import EliminationResult, EliminationSolution
from pygauss.elimination.solvers import solve

__all__ = [
    "solve",
    "AugmentedDesign",
    "EliminationResult",
    "EliminationSolution",
]
