import logging
from typing import Literal, overload

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import linalg

from CramerLab.linear_system.determinant import get_determinant
from CramerLab.linear_system.utils import (
    LinearSystem, SolveOutcome, split_augmented
)

logger = logging.getLogger(__name__)

DEFAULT_METHOD = "cofactor"


@overload
def cramer(
    augmented: ArrayLike,
    raw: Literal[False] = ...,
    *,
    method: str = ...,
) -> NDArray: ...


@overload
def cramer(
    augmented: ArrayLike,
    raw: Literal[True],
    *,
    method: str = ...,
) -> SolveOutcome: ...


def cramer(
    augmented: ArrayLike,
    raw: bool = False,
    *,
    method: str = DEFAULT_METHOD,
) -> NDArray | SolveOutcome:
    """
    Solves a system of linear equations with Cramer's rule.

    :param augmented: n rows of `n` coefficients followed by the equation
    result, e.g.
        [[3, 1, -5, 5],
         [4, 2, 7, 19],
         [5, -4, 1, 6]]
    :param raw: return a `SolveOutcome` with the intermediate determinants
    instead of only the unknowns
    :param method: determinant evaluator, "cofactor" or "lu"
    :raises InvalidInputError: when `augmented` is not n x (n+1) with n >= 2

    A singular system is not an error: `solved` is False and the unknowns
    come out as `inf`/`nan`.
    """
    coefficients, results = split_augmented(augmented)
    determinant = get_determinant(method)
    n = coefficients.shape[0]

    dd = determinant(coefficients)
    solved = dd != 0
    logger.debug("order %d system, determinant %g", n, dd)
    if not solved:
        logger.warning("singular %dx%d system, determinant is zero", n, n)

    determinants = np.empty(n, dtype=np.float64)
    for i in range(n):
        modified = coefficients.copy()
        modified[:, i] = results
        determinants[i] = determinant(modified)

    with np.errstate(divide='ignore', invalid='ignore'):
        result = determinants / np.float64(dd)

    if raw:
        return SolveOutcome(
            result=result,
            results=results.copy(),
            coefficients=coefficients.copy(),
            determinant=dd,
            determinants=determinants,
            solved=bool(solved),
        )

    return result


def cramer_system(ls: LinearSystem) -> NDArray:
    solution = cramer(ls.augmented())

    if ls.solution is None:
        ls.solution = solution
    else:
        assert np.allclose(ls.solution, solution), "Cramer's rule must match"

    return solution


def recommended(ls: LinearSystem) -> NDArray:
    solution = linalg.solve(ls.matrix, ls.rhs)

    if ls.solution is None:
        ls.solution = solution
    else:
        assert np.allclose(ls.solution, solution), "solve must match"

    return solution
