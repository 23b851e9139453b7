"""
Tests for the operator enumeration and its membership semantics.
"""

import pytest

from fuzzylang.errors import (
    ErrorCodes,
    MissingOperandError,
    OutOfRangeError,
    UnexpectedOperandError,
    ValidationError,
)
from fuzzylang.fuzzy.membership import MembershipValue
from fuzzylang.fuzzy.operators import Operator, apply_operator, validate_threshold


class TestOperator:
    def test_arities(self):
        binary = {Operator.UNION, Operator.INTERSECTION, Operator.ADD, Operator.MULTIPLY, Operator.DIFFERENCE}
        for operator in Operator:
            assert operator.arity == (2 if operator in binary else 1)
            assert operator.is_binary == (operator in binary)

    def test_only_alpha_cut_takes_threshold(self):
        assert [op for op in Operator if op.requires_threshold] == [Operator.ALPHA_CUT]

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("union", Operator.UNION),
            ("UNION", Operator.UNION),
            ("Intersection", Operator.INTERSECTION),
            ("alpha_cut", Operator.ALPHA_CUT),
            ("AlphaCut", Operator.ALPHA_CUT),
            ("alpha-cut", Operator.ALPHA_CUT),
        ],
    )
    def test_from_name(self, name, expected):
        assert Operator.from_name(name) is expected

    def test_from_name_unknown(self):
        with pytest.raises(ValidationError) as exc_info:
            Operator.from_name("xor")
        assert exc_info.value.error_code == ErrorCodes.OPERATOR_UNKNOWN
        assert "union" in exc_info.value.details["supported"]


class TestApplyOperator:
    """Each row of the operator table."""

    @pytest.mark.parametrize(
        "operator,a,b,expected",
        [
            (Operator.UNION, 0.2, 0.7, 0.7),
            (Operator.UNION, 0.9, 0.1, 0.9),
            (Operator.INTERSECTION, 0.2, 0.7, 0.2),
            (Operator.INTERSECTION, 0.9, 0.1, 0.1),
            (Operator.ADD, 0.25, 0.5, 0.75),
            (Operator.ADD, 0.6, 0.7, 1.0),
            (Operator.MULTIPLY, 0.5, 0.5, 0.25),
            (Operator.MULTIPLY, 1.0, 0.3, 0.3),
            (Operator.DIFFERENCE, 0.75, 0.25, 0.5),
            (Operator.DIFFERENCE, 0.2, 0.7, 0.0),
        ],
    )
    def test_binary(self, operator, a, b, expected):
        result = apply_operator(operator, a, b)
        assert isinstance(result, MembershipValue)
        assert result == pytest.approx(expected)

    @pytest.mark.parametrize("a,expected", [(0.0, 1.0), (1.0, 0.0), (0.25, 0.75)])
    def test_complement(self, a, expected):
        assert apply_operator(Operator.COMPLEMENT, a) == expected

    @pytest.mark.parametrize(
        "a,threshold,expected",
        [(0.5, 0.5, 1.0), (0.49, 0.5, 0.0), (1.0, 1.0, 1.0), (0.99, 1.0, 0.0), (0.0, 0.0, 1.0)],
    )
    def test_alpha_cut(self, a, threshold, expected):
        assert apply_operator(Operator.ALPHA_CUT, a, threshold=threshold) == expected

    def test_binary_without_second_degree(self):
        with pytest.raises(MissingOperandError):
            apply_operator(Operator.UNION, 0.5)

    def test_unary_with_second_degree(self):
        with pytest.raises(UnexpectedOperandError):
            apply_operator(Operator.COMPLEMENT, 0.5, 0.5)


class TestValidateThreshold:
    def test_alpha_cut_threshold_is_wrapped(self):
        threshold = validate_threshold(Operator.ALPHA_CUT, 0.3)
        assert isinstance(threshold, MembershipValue)
        assert threshold == 0.3

    def test_missing_threshold(self):
        with pytest.raises(OutOfRangeError) as exc_info:
            validate_threshold(Operator.ALPHA_CUT, None)
        assert exc_info.value.error_code == ErrorCodes.OPERATOR_MISSING_THRESHOLD

    @pytest.mark.parametrize("threshold", [-0.1, 1.5])
    def test_threshold_out_of_range(self, threshold):
        with pytest.raises(OutOfRangeError) as exc_info:
            validate_threshold(Operator.ALPHA_CUT, threshold)
        assert exc_info.value.error_code == ErrorCodes.OPERATOR_THRESHOLD_OUT_OF_RANGE
        assert exc_info.value.details["threshold"] == threshold

    def test_threshold_on_other_operator(self):
        with pytest.raises(UnexpectedOperandError) as exc_info:
            validate_threshold(Operator.UNION, 0.5)
        assert exc_info.value.error_code == ErrorCodes.OPERATOR_UNEXPECTED_THRESHOLD

    def test_no_threshold_on_other_operator(self):
        assert validate_threshold(Operator.MULTIPLY, None) is None
