"""
Tests for the instruction-level evaluation gate.
"""

import pytest

from fuzzylang.errors import (
    ErrorCodes,
    InvalidInstructionError,
    OutOfRangeError,
    TypeMismatchError,
    UndefinedVariableError,
)
from fuzzylang.fuzzy.membership import MembershipValue
from fuzzylang.fuzzy.sets import primitive
from fuzzylang.logging import get_context_enricher
from fuzzylang.runtime.gate import Assign, EvaluationGate, EvaluationResult, Get, TestGate
from fuzzylang.runtime.scope import ScopeStack


class TestEvaluate:
    def test_assign_has_no_value(self, gate, above_half):
        result = gate.evaluate(Assign("a", above_half))
        assert isinstance(result, EvaluationResult)
        assert result.value is None
        assert gate.scopes.get("a") is above_half

    def test_get_returns_bound_set(self, gate, above_half):
        gate.evaluate(Assign("a", above_half))
        instruction = Get("a")
        result = gate.evaluate(instruction)
        assert result.value is above_half
        assert result.instruction is instruction

    def test_get_undefined(self, gate):
        with pytest.raises(UndefinedVariableError):
            gate.evaluate(Get("missing"))

    def test_get_with_expected_type(self, gate, rising):
        gate.evaluate(Assign("r", rising))
        assert gate.evaluate(Get("r", expected_type=float)).value is rising
        with pytest.raises(TypeMismatchError):
            gate.evaluate(Get("r", expected_type=str))

    def test_get_with_generic_expected_type(self, gate, rising):
        gate.evaluate(Assign("r", rising))
        with pytest.raises(TypeMismatchError) as exc_info:
            gate.evaluate(Get("r", expected_type=list[int]))
        assert exc_info.value.error_code == ErrorCodes.TYPE_INVALID_TAG

    def test_assign_with_element_type(self, gate, above_half):
        gate.evaluate(Assign("a", above_half, element_type=int))
        with pytest.raises(TypeMismatchError):
            gate.evaluate(Get("a", expected_type=str))

    def test_test_gate_returns_membership(self, gate, peaked):
        result = gate.evaluate(TestGate(peaked, 0.25))
        assert isinstance(result.value, MembershipValue)
        assert result.value == 0.5

    def test_test_gate_propagates_set_errors(self, gate):
        broken = primitive(lambda x: -1.0)
        with pytest.raises(OutOfRangeError):
            gate.evaluate(TestGate(broken, 0))

    def test_test_gate_needs_a_set(self, gate):
        with pytest.raises(TypeMismatchError):
            gate.evaluate(TestGate(lambda x: 1.0, 0))

    def test_unknown_instruction(self, gate):
        with pytest.raises(InvalidInstructionError) as exc_info:
            gate.evaluate(("assign", "a"))
        assert exc_info.value.error_code == ErrorCodes.EVAL_UNKNOWN_INSTRUCTION
        assert exc_info.value.details["instruction_type"] == "tuple"

    def test_gate_uses_shared_scope_stack(self, above_half, below_half):
        scopes = ScopeStack()
        gate = EvaluationGate(scopes)
        gate.evaluate(Assign("v", above_half))

        scopes.enter_scope()
        gate.evaluate(Assign("v", below_half))
        assert gate.evaluate(Get("v")).value is below_half

        scopes.exit_scope()
        assert gate.evaluate(Get("v")).value is above_half

    def test_default_scope_stack(self):
        assert EvaluationGate().scopes.depth == 1

    def test_evaluate_runs_in_log_context(self, gate):
        seen = []

        def traced(x):
            seen.append(get_context_enricher().current.operation)
            return 1.0

        gate.evaluate(TestGate(primitive(traced), 0))
        assert seen == ["evaluate"]
        assert get_context_enricher().current is None


class TestRun:
    def test_program(self, gate, above_half, below_half):
        union = above_half | below_half
        results = gate.run(
            [
                Assign("a", above_half),
                Assign("b", below_half),
                Assign("either", union),
                Get("either"),
                TestGate(union, 0.3),
                TestGate(~union, 0.3),
            ]
        )

        assert [r.value for r in results[:3]] == [None, None, None]
        assert results[3].value is union
        assert results[4].value == 1.0
        assert results[5].value == 0.0

    def test_run_stops_at_first_failure(self, gate, above_half):
        with pytest.raises(UndefinedVariableError):
            gate.run([Get("nope"), Assign("a", above_half)])
        assert not gate.scopes.is_defined("a")
