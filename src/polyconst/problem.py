"""Problem documents: parse, validate, solve.

A document is a JSON object with a "keys" entry holding n and k, and one
entry per point keyed by the decimal x-coordinate:

    {"keys": {"n": 4, "k": 3},
     "1": {"base": "10", "value": "4"},
     "2": {"base": "2", "value": "111"},
     ...}
"""

import json
import logging
from dataclasses import dataclass

from polyconst import lagrange, solver
from polyconst.basen import decode, parse_base, to_decimal
from polyconst.defaults import DEFAULT_METHOD, METADATA_KEY, METHODS
from polyconst.errors import (
    CrossCheckError, DecodeError, DuplicateXError, MalformedInputError,
    NonIntegerTermError,
)
from polyconst.points import Point, PointSet
from polyconst.poly import consistency_check

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Problem:
    """One parsed problem instance."""
    n: int
    k: int
    points: PointSet
    source: str = "<input>"


def _int_field(obj: dict, name: str, source: str) -> int:
    if name not in obj:
        raise MalformedInputError(f"{source}: missing field '{METADATA_KEY}.{name}'")
    value = obj[name]
    if isinstance(value, bool):
        raise MalformedInputError(
            f"{source}: field '{METADATA_KEY}.{name}' must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value, 10)
        except ValueError:
            pass
    raise MalformedInputError(
        f"{source}: field '{METADATA_KEY}.{name}' must be an integer, got {value!r}")


def _parse_x(key: str, source: str) -> int:
    body = key[1:] if key[:1] in ("+", "-") else key
    if not (body.isascii() and body.isdigit()):
        raise MalformedInputError(
            f"{source}: point key {key!r} is not a decimal integer")
    return decode(key, 10)


def _parse_point(key: str, entry, source: str) -> Point:
    x = _parse_x(key, source)
    if not isinstance(entry, dict):
        raise MalformedInputError(f"{source}: point {key} must be an object")
    for field in ("base", "value"):
        if field not in entry:
            raise MalformedInputError(
                f"{source}: point {key} is missing field '{field}'")
    value = entry["value"]
    if not isinstance(value, str):
        raise MalformedInputError(
            f"{source}: point {key} field 'value' must be a string, got {value!r}")
    try:
        y = decode(value, parse_base(entry["base"]))
    except DecodeError as e:
        raise type(e)(f"{source}: point {key}: {e}") from e
    return Point(x, y)


def parse_problem(doc, source: str = "<input>") -> Problem:
    """Validate a decoded JSON document and build its Problem.

    Raises:
        MalformedInputError: document shape is wrong.
        InvalidBaseError, InvalidDigitError: a point's encoding is bad.
        DuplicateXError: two keys name the same x.
    """
    if not isinstance(doc, dict):
        raise MalformedInputError(f"{source}: document must be a JSON object")
    meta = doc.get(METADATA_KEY)
    if not isinstance(meta, dict):
        raise MalformedInputError(f"{source}: missing object '{METADATA_KEY}'")
    n = _int_field(meta, "n", source)
    k = _int_field(meta, "k", source)
    if k < 1:
        raise MalformedInputError(f"{source}: k must be >= 1, got {k}")

    points = [_parse_point(key, entry, source)
              for key, entry in doc.items() if key != METADATA_KEY]
    if n != len(points):
        _logger.warning("%s: n=%d but %d points supplied; using the points",
                        source, n, len(points))

    problem = Problem(n=n, k=k, points=PointSet.build(points), source=source)
    _logger.debug("%s: parsed n=%d k=%d with %d points", source, n, k,
                  len(problem.points))
    return problem


def _unique_keys(source: str):
    """object_pairs_hook rejecting repeated keys, which json would silently merge."""
    def hook(pairs):
        obj = {}
        for key, value in pairs:
            if key in obj:
                if key.isascii() and key.isdigit():
                    raise DuplicateXError(decode(key, 10))
                raise MalformedInputError(f"{source}: duplicate key {key!r}")
            obj[key] = value
        return obj
    return hook


def load_problem(path) -> Problem:
    """Read and parse a problem document from a file path.

    Raises:
        MalformedInputError: not UTF-8, not JSON, or a repeated key.
        DuplicateXError: a point key appears twice.
    """
    with open(path, encoding="utf-8") as f:
        try:
            doc = json.load(f, object_pairs_hook=_unique_keys(str(path)))
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"{path}: not UTF-8 text: {e}") from e
        except ValueError as e:
            # JSONDecodeError, or a number past the str->int digit limit
            raise MalformedInputError(f"{path}: invalid JSON: {e}") from e
    return parse_problem(doc, source=str(path))


def _surplus_mismatches(selected, surplus, coeffs) -> list:
    if coeffs is not None:
        return consistency_check(coeffs, surplus)
    bad = []
    for i, (x, y) in enumerate(surplus):
        try:
            if lagrange.interpolate_at(selected, x) != y:
                bad.append(i)
        except NonIntegerTermError:
            bad.append(i)
    return bad


def solve_problem(problem: Problem, method: str = DEFAULT_METHOD,
                  cross_check: bool = False) -> int:
    """Constant term of the polynomial through the first k points.

    Args:
        problem: Parsed problem.
        method: "gauss" (fraction-free elimination) or "lagrange".
        cross_check: Also run the other method and require agreement.

    Returns:
        The constant term as an int.
    """
    if method not in METHODS:
        raise ValueError(f"Unknown method {method!r}, expected one of {METHODS}")

    selected = problem.points.first_k(problem.k)
    coeffs = None
    if method == "gauss":
        coeffs = solver.solve(selected)
        result = coeffs[0]
    else:
        result = lagrange.evaluate_at_zero(selected)

    if cross_check:
        other = (lagrange.evaluate_at_zero(selected) if method == "gauss"
                 else solver.constant_term(selected))
        if other != result:
            raise CrossCheckError(
                f"{problem.source}: {method} gave {to_decimal(result)}, "
                f"other method gave {to_decimal(other)}")
        _logger.debug("%s: cross-check passed", problem.source)

    surplus = problem.points.rest(problem.k)
    if surplus:
        bad = _surplus_mismatches(selected, surplus, coeffs)
        if bad:
            _logger.warning("%s: %d surplus point(s) off the recovered polynomial: x=%s",
                            problem.source, len(bad),
                            "[" + ", ".join(to_decimal(surplus[i].x) for i in bad) + "]")
    return result
