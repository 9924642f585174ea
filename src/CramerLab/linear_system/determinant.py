""" Determinants of small square matrices.

`cofactor_determinant` is the reference evaluator used by Cramer's rule.
`lu_determinant` is a faster drop-in with the same contract. Neither checks
its input: the matrix must be square and non-empty. """

import logging
import warnings
from typing import Callable

import numpy as np
from numpy.typing import NDArray
from scipy import linalg

logger = logging.getLogger(__name__)


def cofactor_determinant(matrix: NDArray) -> float:
    """
    Laplace expansion along the first row.

    The cost grows like n!, fine for the handful of unknowns Cramer's rule is
    meant for.
    """
    n = matrix.shape[0]
    if n == 1:
        return float(matrix[0, 0])
    if n == 2:
        return float(matrix[0, 0] * matrix[1, 1] - matrix[0, 1] * matrix[1, 0])

    columns = np.arange(n)
    det = 0.0
    for i in range(n):
        # drop row 0 and column i
        minor = matrix[1:, columns != i]
        sign = 1 if i % 2 == 0 else -1
        det += matrix[0, i] * cofactor_determinant(minor) * sign
    return float(det)


def lu_determinant(matrix: NDArray) -> float:
    """ Product of the U diagonal, signed by the row permutation. """
    with warnings.catch_warnings():
        # exactly singular matrices still factorize, U just has a zero pivot
        warnings.simplefilter("ignore", linalg.LinAlgWarning)
        lu, piv = linalg.lu_factor(matrix)

    swaps = np.count_nonzero(piv != np.arange(piv.size))
    sign = -1.0 if swaps % 2 else 1.0
    return float(sign * np.prod(np.diag(lu)))


DETERMINANTS: dict[str, Callable[[NDArray], float]] = {
    "cofactor": cofactor_determinant,
    "lu": lu_determinant,
}


def get_determinant(method: str) -> Callable[[NDArray], float]:
    try:
        determinant = DETERMINANTS[method]
    except KeyError:
        raise ValueError(
            f"Unknown determinant method '{method}'. "
            f"Choose one of: {', '.join(DETERMINANTS)}."
        ) from None
    logger.debug("determinant method: %s", method)
    return determinant
