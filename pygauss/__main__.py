"""
Command-line demo: solve an augmented system and print roots and residual.

Usage:
    python -m pygauss                       # built-in 3 x 4 system
    python -m pygauss system.txt            # whitespace-delimited [A | b]
    python -m pygauss system.txt --dtype float32
"""

import argparse
import sys

import numpy as np

from pygauss.core.exceptions import CalculationError, ValidationError
from pygauss.matrix import Matrix

DEMO_SYSTEM = [
    [0.43, 1.24, -0.58, 2.71],
    [0.74, 0.83, 1.17, 1.26],
    [1.43, -1.58, 0.83, 1.03],
]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog='pygauss',
        description='Solve A·x = b by Gaussian elimination without pivoting'
    )
    parser.add_argument(
        'path',
        nargs='?',
        help='Text file holding the n x (n+1) augmented matrix, one row per line'
    )
    parser.add_argument(
        '--dtype',
        choices=('float32', 'float64'),
        default='float64',
        help='Working precision (default: float64)'
    )
    args = parser.parse_args(argv)

    try:
        if args.path is None:
            matrix = Matrix.from_rows(DEMO_SYSTEM, dtype=args.dtype)
        else:
            values = np.loadtxt(args.path, ndmin=2)
            matrix = Matrix.from_array(values, dtype=args.dtype)
        solved = matrix.gaussian_elimination()
    except (CalculationError, ValidationError, OSError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    print("Roots:")
    print(solved.result)
    print("Residual:")
    print(solved.epsilon)
    return 0


if __name__ == '__main__':
    sys.exit(main())
