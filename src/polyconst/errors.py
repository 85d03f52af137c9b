"""Exception hierarchy for polyconst.

Every failure kind is its own class so callers can tell them apart.
All of them derive from PolyConstError, which the CLI catches per document.
"""


class PolyConstError(Exception):
    """Base class for all polyconst errors."""


class DecodeError(PolyConstError):
    """A base-N string could not be turned into an integer."""


class InvalidBaseError(DecodeError):
    """Base outside [2, 36] or not an integer."""


class InvalidDigitError(DecodeError):
    """A character is not a digit of the stated base, or the string is empty."""


class PointSetError(PolyConstError):
    """Point collection violates its invariants."""


class DuplicateXError(PointSetError):
    """Two points share the same x-coordinate."""

    def __init__(self, x: int):
        from polyconst.basen import to_decimal
        super().__init__(f"Duplicate x-coordinate: {to_decimal(x)}")
        self.x = x


class InsufficientPointsError(PointSetError):
    """Fewer points available than the k required."""

    def __init__(self, have: int, need: int):
        from polyconst.basen import to_decimal
        super().__init__(
            f"Need at least {to_decimal(need)} points, got {to_decimal(have)}")
        self.have = have
        self.need = need


class SolverError(PolyConstError):
    """Failure inside the exact solvers."""


class SingularMatrixError(SolverError):
    """Zero pivot left after partial pivoting."""


class NonExactDivisionError(SolverError):
    """Back-substitution quotient is not an integer."""


class NonIntegerTermError(SolverError):
    """Lagrange sum at zero is not an integer."""


class CrossCheckError(SolverError):
    """Gaussian and Lagrange results disagree."""


class MalformedInputError(PolyConstError):
    """Problem document is unparsable or is missing a required field."""
