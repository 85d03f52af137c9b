"""Exact integer polynomial helpers."""


def poly_eval_low(coeffs: list, x: int) -> int:
    """Evaluate polynomial at x using Horner's method.

    coeffs = [a_0, a_1, ..., a_d] (lowest degree first)
    Returns a_0 + a_1 * x + ... + a_d * x^d, exactly.
    """
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def consistency_check(coeffs: list, points) -> list:
    """Find points that do not lie on the polynomial given by coeffs.

    Args:
        coeffs: Coefficients, lowest degree first.
        points: Sequence of (x, y) pairs to test.

    Returns:
        List of indices into points whose y differs from f(x).
    """
    return [i for i, (x, y) in enumerate(points)
            if poly_eval_low(coeffs, x) != y]
