"""
Elimination backends.

Available backends:
    CPUGaussBackend: CPU reference implementation, naive Gaussian elimination
"""

from pygauss.elimination.backends.cpu import CPUGaussBackend

__all__ = [
    "CPUGaussBackend",
]
