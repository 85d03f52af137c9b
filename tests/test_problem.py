"""Tests for problem document parsing and solving."""

import json
import logging
import sys
import pytest
from polyconst.basen import encode
from polyconst.errors import (
    CrossCheckError, DuplicateXError, InsufficientPointsError,
    InvalidBaseError, InvalidDigitError, MalformedInputError,
)
from polyconst.points import Point
from polyconst.problem import load_problem, parse_problem, solve_problem


def doc_from_points(points, k, bases=(10,)):
    doc = {"keys": {"n": len(points), "k": k}}
    for i, (x, y) in enumerate(points):
        base = bases[i % len(bases)]
        doc[str(x)] = {"base": str(base), "value": encode(y, base)}
    return doc


class TestParse:

    def test_example(self, example_doc):
        problem = parse_problem(example_doc)
        assert problem.n == 4
        assert problem.k == 3
        assert list(problem.points) == [Point(1, 4), Point(2, 7),
                                        Point(3, 12), Point(6, 39)]

    def test_mixed_bases_decode(self):
        doc = {"keys": {"n": 3, "k": 3},
               "1": {"base": "10", "value": "4"},
               "2": {"base": "2", "value": "111"},
               "3": {"base": "16", "value": "c"}}
        problem = parse_problem(doc)
        assert list(problem.points) == [(1, 4), (2, 7), (3, 12)]

    def test_keys_as_strings(self):
        doc = {"keys": {"n": "1", "k": "1"}, "5": {"base": "10", "value": "9"}}
        problem = parse_problem(doc)
        assert (problem.n, problem.k) == (1, 1)

    def test_int_base_accepted(self):
        doc = {"keys": {"n": 1, "k": 1}, "5": {"base": 16, "value": "ff"}}
        assert parse_problem(doc).points[0] == (5, 255)

    def test_not_an_object(self):
        with pytest.raises(MalformedInputError):
            parse_problem([1, 2, 3])

    def test_missing_keys(self):
        with pytest.raises(MalformedInputError, match="keys"):
            parse_problem({"1": {"base": "10", "value": "4"}})

    def test_missing_k(self):
        with pytest.raises(MalformedInputError, match="keys.k"):
            parse_problem({"keys": {"n": 1}})

    def test_bad_k(self):
        for k in ("three", 1.5, True, 0, -2):
            with pytest.raises(MalformedInputError):
                parse_problem({"keys": {"n": 1, "k": k}})

    def test_bad_point_key(self):
        with pytest.raises(MalformedInputError, match="'x1'"):
            parse_problem({"keys": {"n": 1, "k": 1},
                           "x1": {"base": "10", "value": "4"}})

    def test_point_not_object(self):
        with pytest.raises(MalformedInputError):
            parse_problem({"keys": {"n": 1, "k": 1}, "1": "4"})

    def test_point_missing_field(self):
        with pytest.raises(MalformedInputError, match="'base'"):
            parse_problem({"keys": {"n": 1, "k": 1}, "1": {"value": "4"}})
        with pytest.raises(MalformedInputError, match="'value'"):
            parse_problem({"keys": {"n": 1, "k": 1}, "1": {"base": "10"}})

    def test_value_not_string(self):
        with pytest.raises(MalformedInputError):
            parse_problem({"keys": {"n": 1, "k": 1},
                           "1": {"base": "10", "value": 4}})

    def test_bad_digit_names_point(self):
        doc = {"keys": {"n": 2, "k": 1},
               "1": {"base": "10", "value": "4"},
               "2": {"base": "2", "value": "121"}}
        with pytest.raises(InvalidDigitError, match="point 2"):
            parse_problem(doc, source="case.json")

    def test_bad_base(self):
        doc = {"keys": {"n": 1, "k": 1}, "1": {"base": "40", "value": "4"}}
        with pytest.raises(InvalidBaseError, match="point 1"):
            parse_problem(doc)

    def test_duplicate_x_across_spellings(self):
        doc = {"keys": {"n": 2, "k": 2},
               "1": {"base": "10", "value": "4"},
               "01": {"base": "10", "value": "5"}}
        with pytest.raises(DuplicateXError):
            parse_problem(doc)

    def test_n_mismatch_warns(self, example_doc, caplog):
        example_doc["keys"]["n"] = 10
        with caplog.at_level(logging.WARNING, logger="polyconst.problem"):
            problem = parse_problem(example_doc)
        assert len(problem.points) == 4
        assert "n=10" in caplog.text


class TestLoad:

    def test_load_file(self, tmp_path, example_doc):
        path = tmp_path / "case.json"
        path.write_text(json.dumps(example_doc))
        problem = load_problem(path)
        assert problem.source == str(path)
        assert solve_problem(problem) == 3

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(MalformedInputError, match="invalid JSON"):
            load_problem(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_problem(tmp_path / "nope.json")

    def test_repeated_point_key(self, tmp_path):
        """json keeps only the last of two equal keys; that must not hide a duplicate x."""
        path = tmp_path / "dup.json"
        path.write_text('{"keys": {"n": 2, "k": 1}, '
                        '"1": {"base": "10", "value": "4"}, '
                        '"1": {"base": "10", "value": "9"}}')
        with pytest.raises(DuplicateXError) as exc:
            load_problem(path)
        assert exc.value.x == 1

    def test_repeated_metadata_key(self, tmp_path):
        path = tmp_path / "dup.json"
        path.write_text('{"keys": {"n": 1, "k": 1, "k": 2}, '
                        '"1": {"base": "10", "value": "4"}}')
        with pytest.raises(MalformedInputError, match="duplicate key 'k'"):
            load_problem(path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_bytes(b'{"keys": \xff}')
        with pytest.raises(MalformedInputError, match="UTF-8"):
            load_problem(path)

    @pytest.mark.skipif(not hasattr(sys, "set_int_max_str_digits"),
                        reason="interpreter has no str->int digit limit")
    def test_number_past_digit_limit(self, tmp_path):
        path = tmp_path / "big.json"
        path.write_text('{"keys": {"n": ' + "9" * 5000 + ', "k": 1}}')
        with pytest.raises(MalformedInputError):
            load_problem(path)

    def test_huge_values_in_strings(self, tmp_path):
        x_text = "1" + "0" * 5000
        path = tmp_path / "big.json"
        path.write_text(json.dumps({"keys": {"n": 1, "k": 1},
                                    x_text: {"base": "10", "value": "5"}}))
        problem = load_problem(path)
        assert problem.points[0] == (10 ** 5000, 5)


class TestSolve:

    def test_example(self, example_doc):
        assert solve_problem(parse_problem(example_doc)) == 3

    def test_methods_agree(self, example_doc):
        problem = parse_problem(example_doc)
        assert solve_problem(problem, method="lagrange") == 3
        assert solve_problem(problem, method="gauss", cross_check=True) == 3
        assert solve_problem(problem, method="lagrange", cross_check=True) == 3

    def test_unknown_method(self, example_doc):
        with pytest.raises(ValueError):
            solve_problem(parse_problem(example_doc), method="newton")

    def test_large_encoded_values(self, make_samples):
        coeffs, pts = make_samples(6, count=9, coeff_bound=10**60, x_range=(1, 100))
        doc = doc_from_points(pts, k=7, bases=(3, 7, 10, 16, 36))
        problem = parse_problem(doc)
        assert solve_problem(problem, cross_check=True) == coeffs[0]

    def test_uses_smallest_x_points(self):
        """Only the first k points by x are used; a wrong surplus point is ignored."""
        pts = [(1, 4), (2, 7), (3, 12), (4, 999)]
        assert solve_problem(parse_problem(doc_from_points(pts, 3))) == 3

    def test_surplus_mismatch_warns(self, caplog):
        pts = [(4, 999), (1, 4), (2, 7), (3, 12)]
        problem = parse_problem(doc_from_points(pts, 3))
        for method in ("gauss", "lagrange"):
            caplog.clear()
            with caplog.at_level(logging.WARNING, logger="polyconst.problem"):
                assert solve_problem(problem, method=method) == 3
            assert "x=[4]" in caplog.text

    def test_consistent_surplus_is_quiet(self, example_doc, caplog):
        with caplog.at_level(logging.WARNING, logger="polyconst.problem"):
            solve_problem(parse_problem(example_doc))
        assert caplog.text == ""

    def test_insufficient_points(self):
        doc = {"keys": {"n": 2, "k": 3},
               "1": {"base": "10", "value": "4"},
               "2": {"base": "10", "value": "7"}}
        with pytest.raises(InsufficientPointsError):
            solve_problem(parse_problem(doc))

    def test_cross_check_mismatch(self, monkeypatch, example_doc):
        from polyconst import problem as problem_mod
        monkeypatch.setattr(problem_mod.lagrange, "evaluate_at_zero", lambda pts: 42)
        with pytest.raises(CrossCheckError):
            solve_problem(parse_problem(example_doc), cross_check=True)
