"""
Scopes and the instruction-level evaluation gate.
"""

from fuzzylang.runtime.gate import (
    Assign,
    EvaluationGate,
    EvaluationResult,
    Get,
    Instruction,
    TestGate,
)
from fuzzylang.runtime.scope import Binding, Environment, ScopeStack

__all__ = [
    "Binding",
    "Environment",
    "ScopeStack",
    "Assign",
    "Get",
    "TestGate",
    "Instruction",
    "EvaluationResult",
    "EvaluationGate",
]
