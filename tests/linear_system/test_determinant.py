import math

import numpy as np
import pytest
from CramerLab.linear_system.determinant import (
    DETERMINANTS, cofactor_determinant, get_determinant, lu_determinant
)


@pytest.mark.parametrize("n", range(1, 7))
@pytest.mark.parametrize("method", sorted(DETERMINANTS))
def test_identity(n, method):
    determinant = get_determinant(method)
    assert math.isclose(determinant(np.eye(n)), 1.0)


def test_closed_forms():
    assert cofactor_determinant(np.array([[7.0]])) == 7.0
    assert cofactor_determinant(np.array([[1.0, 2.0], [3.0, 4.0]])) == -2.0


def test_laplace_expansion():
    matrix = np.array([
        [2.0, 0.0, 1.0],
        [1.0, 3.0, 2.0],
        [1.0, 1.0, 1.0],
    ])
    # 2*(3 - 2) - 0*(1 - 2) + 1*(1 - 3)
    assert cofactor_determinant(matrix) == 0.0

    matrix[0, 1] = 1.0
    # the middle cofactor enters with a minus sign: 0 - 1*(1 - 2) = 1
    assert cofactor_determinant(matrix) == 1.0


def test_identical_rows():
    rng = np.random.default_rng(seed=7)
    for n in range(2, 6):
        matrix = rng.integers(-9, 10, size=(n, n)).astype(float)
        matrix[-1] = matrix[0]

        assert cofactor_determinant(matrix) == 0.0
        assert math.isclose(lu_determinant(matrix), 0.0, abs_tol=1e-9)


def test_row_swap_negates():
    rng = np.random.default_rng(seed=20250508)
    for _ in range(20):
        n = int(rng.integers(2, 6))
        matrix = rng.uniform(-5, 5, size=(n, n))
        i, j = rng.choice(n, size=2, replace=False)
        swapped = matrix.copy()
        swapped[[i, j]] = swapped[[j, i]]

        assert math.isclose(
            cofactor_determinant(swapped),
            -cofactor_determinant(matrix),
            rel_tol=1e-9, abs_tol=1e-12,
        )


@pytest.mark.parametrize("method", sorted(DETERMINANTS))
def test_matches_numpy(method):
    determinant = get_determinant(method)
    rng = np.random.default_rng(seed=11)
    for n in range(1, 7):
        matrix = rng.standard_normal(size=(n, n))
        assert math.isclose(
            determinant(matrix), np.linalg.det(matrix),
            rel_tol=1e-9, abs_tol=1e-10,
        )


def test_does_not_mutate():
    matrix = np.arange(16, dtype=float).reshape(4, 4) ** 2
    before = matrix.copy()

    _ = cofactor_determinant(matrix)
    _ = lu_determinant(matrix)

    assert np.array_equal(matrix, before)


def test_unknown_method():
    with pytest.raises(ValueError, match="Unknown determinant method"):
        get_determinant("sarrus")
