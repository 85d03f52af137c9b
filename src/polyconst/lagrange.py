"""Exact Lagrange interpolation over the integers.

Alternate path to the constant term, used to cross-check the Gaussian
solver. Basis terms y_j * prod_{m!=j} (t - x_m) / (x_j - x_m) can be
fractional even when their sum is an integer, so they are summed over a
running common denominator and divided once at the end.
"""

from math import gcd

from polyconst.basen import to_decimal
from polyconst.errors import DuplicateXError, NonIntegerTermError


def _check_points(points) -> list:
    if not points:
        raise ValueError("Need at least one point")
    pts = list(points)
    seen = set()
    for x, _ in pts:
        if x in seen:
            raise DuplicateXError(x)
        seen.add(x)
    return pts


def interpolate_at(points, target: int) -> int:
    """Value at `target` of the interpolating polynomial through `points`.

    Raises:
        DuplicateXError: repeated x-coordinate.
        NonIntegerTermError: the interpolated value is not an integer.
    """
    pts = _check_points(points)
    n = len(pts)

    # Running fraction acc_num / acc_den, acc_den > 0.
    acc_num, acc_den = 0, 1
    for j in range(n):
        xj, yj = pts[j]
        num = yj
        den = 1
        for m in range(n):
            if m == j:
                continue
            xm = pts[m][0]
            num *= target - xm
            den *= xj - xm
        if den < 0:
            num, den = -num, -den
        lcm = acc_den // gcd(acc_den, den) * den
        acc_num = acc_num * (lcm // acc_den) + num * (lcm // den)
        acc_den = lcm

    q, rem = divmod(acc_num, acc_den)
    if rem != 0:
        raise NonIntegerTermError(
            f"Interpolated value at {to_decimal(target)} is "
            f"{to_decimal(acc_num)}/{to_decimal(acc_den)}, not an integer")
    return q


def evaluate_at_zero(points) -> int:
    """f(0) via Lagrange interpolation.

    For each j: numerator_j = prod_{m!=j} x_m and
    denominator_j = prod_{m!=j} (x_m - x_j); result is
    sum_j y_j * numerator_j / denominator_j, computed exactly.
    """
    return interpolate_at(points, 0)
