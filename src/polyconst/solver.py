"""Exact polynomial coefficient recovery by fraction-free Gaussian elimination.

Given k points (x_i, y_i), solves the Vandermonde system

    sum_j c_j * x_i^j = y_i        for i in [0, k)

for the integer coefficients c_0..c_{k-1}. Elimination never divides:
row r is replaced by row_r * pivot - row_pivot * A[r][col], so every
intermediate stays an exact Python int. Rows are divided by the gcd of
their entries after each update, which keeps magnitudes in check without
leaving the integers.
"""

import logging
from math import gcd

from polyconst.basen import to_decimal
from polyconst.errors import NonExactDivisionError, SingularMatrixError

_logger = logging.getLogger(__name__)


def vandermonde(points) -> tuple:
    """Build A[i][j] = x_i^j and Y[i] = y_i. Returns (A, Y), freshly allocated."""
    k = len(points)
    A = []
    Y = []
    for x, y in points:
        row = []
        p = 1
        for _ in range(k):
            row.append(p)
            p *= x
        A.append(row)
        Y.append(y)
    return A, Y


def _normalize_row(row: list, y: int) -> int:
    """Divide row and its rhs by their common gcd in place. Returns new rhs."""
    g = gcd(y, *row)
    if g > 1:
        for j in range(len(row)):
            row[j] //= g
        y //= g
    return y


def eliminate(A: list, Y: list) -> None:
    """Reduce A (and Y) to upper-triangular form in place.

    Partial pivoting picks the row with the largest |A[r][i]| (first one
    on ties) for each column i.

    Raises:
        SingularMatrixError: pivot is zero after selection.
    """
    n = len(Y)
    for i in range(n):
        pivot_row = i
        for r in range(i + 1, n):
            if abs(A[r][i]) > abs(A[pivot_row][i]):
                pivot_row = r
        if pivot_row != i:
            A[i], A[pivot_row] = A[pivot_row], A[i]
            Y[i], Y[pivot_row] = Y[pivot_row], Y[i]

        pivot = A[i][i]
        if pivot == 0:
            raise SingularMatrixError(
                f"Zero pivot in column {i}: points are not independent")

        for r in range(i + 1, n):
            factor = A[r][i]
            if factor == 0:
                continue
            row_r, row_i = A[r], A[i]
            for j in range(i, n):
                row_r[j] = row_r[j] * pivot - row_i[j] * factor
            Y[r] = _normalize_row(row_r, Y[r] * pivot - Y[i] * factor)


def back_substitute(A: list, Y: list) -> list:
    """Solve upper-triangular A x = Y exactly.

    Raises:
        NonExactDivisionError: some x[i] is not an integer, i.e. the points
            do not come from an integer-coefficient polynomial.
    """
    n = len(Y)
    x = [0] * n
    for i in range(n - 1, -1, -1):
        s = 0
        for j in range(i + 1, n):
            s += A[i][j] * x[j]
        q, rem = divmod(Y[i] - s, A[i][i])
        if rem != 0:
            raise NonExactDivisionError(
                f"Coefficient {i} is not an integer: "
                f"({to_decimal(Y[i] - s)}) / ({to_decimal(A[i][i])}) "
                f"leaves remainder {to_decimal(rem)}")
        x[i] = q
    return x


def solve(points) -> list:
    """Recover the coefficient vector of the polynomial through `points`.

    Args:
        points: Sequence of k (x, y) pairs with distinct integer x.

    Returns:
        List of k ints, coeffs[i] = coefficient of x^i.
    """
    if not points:
        raise ValueError("Need at least one point")

    A, Y = vandermonde(points)
    eliminate(A, Y)
    if _logger.isEnabledFor(logging.DEBUG):
        _logger.debug("eliminated k=%d system, largest entry %d bits",
                      len(Y), max(abs(v).bit_length() for row in A for v in row))
    return back_substitute(A, Y)


def constant_term(points) -> int:
    """f(0) of the polynomial through `points` (coeffs[0] of solve)."""
    return solve(points)[0]
