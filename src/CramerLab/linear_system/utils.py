from __future__ import annotations
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray


class InvalidInputError(ValueError):
    """ Raised when an augmented system is not an n x (n+1) array with
    n >= 2. """

    def __init__(self) -> None:
        super().__init__("Invalid input format")


def split_augmented(augmented: ArrayLike) -> tuple[NDArray, NDArray]:
    """
    Splits an augmented system `[matrix | rhs]` into its parts.

    :param augmented: n rows of n+1 numbers each, n >= 2
    :returns: (coefficients, results) as fresh float64 arrays of shape (n, n)
    and (n,)
    :raises InvalidInputError: for any other shape, ragged rows, or entries
    that cannot be read as floats
    """
    try:
        rows = np.array(augmented, dtype=np.float64)
    except (ValueError, TypeError) as err:
        raise InvalidInputError() from err

    if rows.ndim != 2:
        raise InvalidInputError()
    n = rows.shape[0]
    if n < 2 or rows.shape[1] != n + 1:
        raise InvalidInputError()

    coefficients = rows[:, :n].copy()
    results = rows[:, n].copy()
    return coefficients, results


@dataclass
class LinearSystem:
    matrix: NDArray
    rhs: NDArray
    solution: NDArray | None = None


    @classmethod
    def from_augmented(cls, augmented: ArrayLike) -> LinearSystem:
        matrix, rhs = split_augmented(augmented)
        return cls(matrix=matrix, rhs=rhs)


    def augmented(self) -> NDArray:
        """ The `[matrix | rhs]` layout accepted by `cramer`. """
        matrix = np.asarray(self.matrix, dtype=np.float64)
        rhs = np.asarray(self.rhs, dtype=np.float64)
        return np.column_stack((matrix, rhs))


    def __str__(self) -> str:
        lstr = f"{self.matrix=}\n"
        lstr += f"{self.solution=}\n"
        lstr += f"{self.rhs=}\n"
        return lstr


@dataclass
class SolveOutcome:
    """
    Everything Cramer's rule computed for one system.

    `result[i] == determinants[i] / determinant`. When `solved` is False the
    determinant is zero and `result` holds `inf`/`nan` values.
    """
    result: NDArray
    results: NDArray
    coefficients: NDArray
    determinant: float
    determinants: NDArray
    solved: bool
