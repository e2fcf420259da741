"""
Shared compute infrastructure for pygauss.

This module provides timing utilities and precision-dependent tolerances
shared by all elimination backends.

Submodules:
    timing: Execution timing utilities
    tolerances: Residual tolerance tiers per precision
"""

from pygauss.core.compute.timing import Timer
from pygauss.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP32,
    CPU_FP64,
    select_tolerance,
    residual_bound,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "CPU_FP32",
    "CPU_FP64",
    "select_tolerance",
    "residual_bound",
]
