"""Exact recovery of a polynomial's constant term from base-encoded samples."""

from polyconst.basen import decode, encode
from polyconst.errors import (
    PolyConstError, DecodeError, InvalidBaseError, InvalidDigitError,
    PointSetError, DuplicateXError, InsufficientPointsError,
    SolverError, SingularMatrixError, NonExactDivisionError,
    NonIntegerTermError, CrossCheckError, MalformedInputError,
)
from polyconst.lagrange import evaluate_at_zero, interpolate_at
from polyconst.points import Point, PointSet
from polyconst.problem import Problem, load_problem, parse_problem, solve_problem
from polyconst.solver import constant_term, solve

__version__ = "0.1.0"
