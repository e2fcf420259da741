"""
Tests for Matrix.gaussian_elimination() and the CPU backend.

Covers the four phases end to end: correct roots, residuals against the
original matrix, the shape precondition, zero pivots in every phase, and
that the caller's matrix is never modified.
"""

import numpy as np
import pytest
from scipy import linalg

from pygauss.core.exceptions import (
    CalculationError,
    ErrorReason,
    IncorrectSizeError,
    UnableToCalculateError,
)
from pygauss.core.protocols import Backend
from pygauss.elimination.backends.cpu import CPUGaussBackend
from pygauss.elimination.design import AugmentedDesign
from pygauss.elimination.solution import EliminationResult
from pygauss.matrix import Matrix


# ═══════════════════════════════════════════════════════════════════════
# Successful solves
# ═══════════════════════════════════════════════════════════════════════


class TestSolves:
    """Roots and residuals of well-posed systems."""

    def test_reference_system_fp32(self, reference_system, reference_roots_fp32):
        solved = reference_system.gaussian_elimination()
        assert isinstance(solved, EliminationResult)
        assert solved.result.shape == (6, 1)
        assert solved.result.dtype == np.float32
        # Row operations in a fixed order reproduce these roots bit for bit
        expected = Matrix.from_rows([[v] for v in reference_roots_fp32], dtype=np.float32)
        assert solved.result == expected

    def test_reference_system_fp64_matches_scipy(self, reference_rows):
        matrix = Matrix.from_rows(reference_rows)
        solved = matrix.gaussian_elimination()
        A = np.array(reference_rows)[:, :6]
        b = np.array(reference_rows)[:, 6]
        np.testing.assert_allclose(
            solved.result.to_numpy()[:, 0], linalg.solve(A, b), rtol=1e-6
        )

    def test_integer_roots(self, integer_system):
        solved = integer_system.gaussian_elimination()
        np.testing.assert_allclose(
            solved.result.to_numpy()[:, 0], [1.0, -2.0, 3.0], atol=1e-12
        )

    def test_random_system_matches_truth(self, random_system):
        A, b, x_true = random_system
        matrix = Matrix.from_array(np.column_stack([A, b]))
        solved = matrix.gaussian_elimination()
        np.testing.assert_allclose(solved.result.to_numpy()[:, 0], x_true, rtol=1e-10, atol=1e-12)
        np.testing.assert_allclose(
            solved.result.to_numpy()[:, 0], linalg.solve(A, b), rtol=1e-10, atol=1e-12
        )

    def test_single_equation(self):
        solved = Matrix.from_rows([[4.0, 2.0]]).gaussian_elimination()
        assert solved.result == Matrix.from_rows([[0.5]])
        assert solved.epsilon == Matrix.from_rows([[0.0]])

    def test_diagonal_system_is_exact(self):
        matrix = Matrix.from_rows([
            [2.0, 0.0, 0.0, 4.0],
            [0.0, 4.0, 0.0, 2.0],
            [0.0, 0.0, 8.0, -8.0],
        ])
        solved = matrix.gaussian_elimination()
        assert solved.result == Matrix.from_rows([[2.0], [0.5], [-1.0]])


class TestResidual:
    """epsilon = |b - A·x| measured against the original matrix."""

    def test_residual_shape_and_sign(self, reference_system):
        solved = reference_system.gaussian_elimination()
        eps = solved.epsilon.to_numpy()
        assert solved.epsilon.shape == (6, 1)
        assert solved.epsilon.dtype == np.float32
        assert np.all(eps >= 0)

    def test_residual_matches_definition(self, integer_system):
        solved = integer_system.gaussian_elimination()
        expected = integer_system.get_rhs()
        expected -= integer_system.calculate_right(solved.result)
        expected.map_each(abs)
        assert solved.epsilon == expected

    def test_reference_residual_single_precision(self, reference_system):
        solved = reference_system.gaussian_elimination()
        for i in range(6):
            acc = np.float32(0.0)
            for k in range(6):
                acc += solved.result[k, 0] * reference_system[i, k]
            assert solved.epsilon[i, 0] == abs(reference_system[i, 6] - acc)

    def test_residual_small_for_well_conditioned(self, random_system):
        A, b, _ = random_system
        solved = Matrix.from_array(np.column_stack([A, b])).gaussian_elimination()
        scale = np.max(np.abs(A)) * np.max(np.abs(solved.result.to_numpy()))
        bound = 100 * np.finfo(np.float64).eps * scale * A.shape[0]
        assert np.max(solved.epsilon.to_numpy()) <= bound

    def test_large_residual_warns(self, integer_system, monkeypatch):
        monkeypatch.setattr(
            'pygauss.elimination.backends.cpu.residual_bound',
            lambda tier, augmented, roots: -1.0,
        )
        design = AugmentedDesign.build(integer_system)
        with pytest.warns(RuntimeWarning, match="exceeds the cpu_fp64 bound"):
            result = CPUGaussBackend().solve(design)
        assert result.has_warning("ill-conditioned")


# ═══════════════════════════════════════════════════════════════════════
# Shape precondition
# ═══════════════════════════════════════════════════════════════════════


class TestIncorrectSize:
    """Anything but n x (n+1) is rejected before elimination."""

    @pytest.mark.parametrize("rows,cols", [(2, 2), (2, 4), (3, 3), (3, 1), (0, 0)])
    def test_wrong_shape(self, rows, cols):
        with pytest.raises(IncorrectSizeError) as exc_info:
            Matrix(rows, cols).gaussian_elimination()
        assert exc_info.value.rows == rows
        assert exc_info.value.cols == cols
        assert exc_info.value.reason is ErrorReason.INCORRECT_SIZE

    def test_empty_system(self):
        with pytest.raises(IncorrectSizeError, match="no equations"):
            Matrix(0, 1).gaussian_elimination()

    def test_input_untouched(self):
        matrix = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        before = matrix.copy()
        with pytest.raises(CalculationError):
            matrix.gaussian_elimination()
        assert matrix == before


# ═══════════════════════════════════════════════════════════════════════
# Zero pivots
# ═══════════════════════════════════════════════════════════════════════


class TestZeroPivot:
    """A zero on the diagonal stops the solve; rows are never swapped."""

    def test_first_pivot_zero(self):
        matrix = Matrix.from_rows([
            [0.0, 1.0, 1.0],
            [1.0, 1.0, 2.0],
        ])
        with pytest.raises(UnableToCalculateError) as exc_info:
            matrix.gaussian_elimination()
        assert exc_info.value.phase == 'forward'
        assert exc_info.value.pivot_index == 0
        assert exc_info.value.reason is ErrorReason.UNABLE_TO_CALCULATE

    def test_zero_pivot_after_elimination(self):
        """Solvable with row swaps, but the naive algorithm must stop."""
        matrix = Matrix.from_rows([
            [1.0, 2.0, 3.0, 1.0],
            [2.0, 4.0, 1.0, 1.0],
            [1.0, 1.0, 1.0, 1.0],
        ])
        with pytest.raises(UnableToCalculateError) as exc_info:
            matrix.gaussian_elimination()
        assert exc_info.value.phase == 'forward'
        assert exc_info.value.pivot_index == 1

    def test_singular_fails_in_backward_phase(self):
        matrix = Matrix.from_rows([
            [1.0, 1.0, 2.0],
            [1.0, 1.0, 3.0],
        ])
        with pytest.raises(UnableToCalculateError) as exc_info:
            matrix.gaussian_elimination()
        assert exc_info.value.phase == 'backward'
        assert exc_info.value.pivot_index == 1

    def test_single_zero_equation(self):
        with pytest.raises(UnableToCalculateError) as exc_info:
            Matrix.from_rows([[0.0, 5.0]]).gaussian_elimination()
        assert exc_info.value.phase == 'extraction'

    def test_input_untouched(self):
        matrix = Matrix.from_rows([
            [1.0, 2.0, 3.0, 1.0],
            [2.0, 4.0, 1.0, 1.0],
            [1.0, 1.0, 1.0, 1.0],
        ])
        before = matrix.copy()
        with pytest.raises(UnableToCalculateError):
            matrix.gaussian_elimination()
        assert matrix == before


# ═══════════════════════════════════════════════════════════════════════
# Backend contract
# ═══════════════════════════════════════════════════════════════════════


class TestCPUGaussBackend:
    """The backend satisfies the Backend protocol and reports metadata."""

    def test_implements_protocol(self):
        assert isinstance(CPUGaussBackend(), Backend)

    def test_name(self):
        assert CPUGaussBackend().name == 'cpu_gauss'

    def test_result_metadata(self, integer_system):
        result = CPUGaussBackend().solve(AugmentedDesign.build(integer_system))
        assert result.backend_name == 'cpu_gauss'
        assert result.info['method'] == 'gauss'
        assert result.info['n'] == 3
        assert result.info['dtype'] == 'float64'
        assert result.info['tolerance_tier'] == 'cpu_fp64'
        assert result.warnings == ()

    def test_timing_sections(self, integer_system):
        result = CPUGaussBackend().solve(AugmentedDesign.build(integer_system))
        assert set(result.timing) == {
            'total_seconds',
            'forward_elimination',
            'backward_elimination',
            'extraction',
            'residual',
        }

    def test_success_leaves_input_untouched(self, reference_system):
        before = reference_system.copy()
        reference_system.gaussian_elimination()
        assert reference_system == before
