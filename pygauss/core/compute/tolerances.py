"""
Tolerance tiers for residual checks.

Defines how large a residual |b - A·x| may grow before a solve is flagged:
- CPU FP64: double precision, tight bound
- CPU FP32: relaxed for single-precision arithmetic

Used by the elimination backend's residual check and by the test suite.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import DTypeLike, NDArray


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision',
)

CPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='cpu_fp32',
    description='CPU single precision',
)


def select_tolerance(dtype: DTypeLike) -> ToleranceTier:
    """Select the tolerance tier for a working dtype."""
    if np.finfo(dtype).bits <= 32:
        return CPU_FP32
    return CPU_FP64


def residual_bound(
    tier: ToleranceTier,
    augmented: NDArray[np.floating[Any]],
    roots: NDArray[np.floating[Any]],
) -> float:
    """
    Largest acceptable residual for a solved system.

    The bound scales with the magnitude of the coefficients, of the roots
    and with the number of equations, since each reproduced right-hand
    side is a sum of n products.

    Args:
        tier: Tolerance tier for the working precision
        augmented: The original n x (n+1) matrix
        roots: The computed solution vector

    Returns:
        atol + rtol * n * max|A| * max(1, max|x|)
    """
    n = augmented.shape[0]
    if n == 0:
        return tier.atol
    coef_scale = float(np.max(np.abs(augmented[:, :n])))
    root_scale = max(1.0, float(np.max(np.abs(roots))))
    return tier.atol + tier.rtol * n * coef_scale * root_scale
