"""
Instruction dispatcher for the evaluation core.

The gate understands three instructions, the shape a compiler front end
targets:

- Assign(name, fuzzy_set): bind a set in the innermost scope
- Get(name): look a set up through the scope chain
- TestGate(fuzzy_set, element): evaluate membership of one element

The gate keeps no state besides the ScopeStack it evaluates against.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

from fuzzylang import get_logger, with_context
from fuzzylang.errors import ErrorCodes, InvalidInstructionError, TypeMismatchError
from fuzzylang.fuzzy.membership import MembershipValue
from fuzzylang.fuzzy.sets import FuzzySet
from fuzzylang.runtime.scope import ScopeStack

logger = get_logger(__name__)


@dataclass(frozen=True)
class Assign:
    """Bind ``fuzzy_set`` to ``name`` in the innermost scope."""

    name: str
    fuzzy_set: FuzzySet
    element_type: Optional[type] = None


@dataclass(frozen=True)
class Get:
    """Look up ``name``, optionally as a set over ``expected_type``."""

    name: str
    expected_type: Optional[type] = None


@dataclass(frozen=True)
class TestGate:
    """Evaluate the membership of ``element`` in ``fuzzy_set``."""

    __test__ = False  # not a pytest test class

    fuzzy_set: FuzzySet
    element: Any


Instruction = Union[Assign, Get, TestGate]


@dataclass(frozen=True)
class EvaluationResult:
    """
    Outcome of one instruction.

    ``value`` is None for Assign, the bound FuzzySet for Get and the
    MembershipValue for TestGate.
    """

    instruction: Instruction
    value: Optional[Union[FuzzySet, MembershipValue]] = None


class EvaluationGate:
    """Dispatches instructions against a ScopeStack."""

    def __init__(self, scopes: Optional[ScopeStack] = None):
        self.scopes = scopes if scopes is not None else ScopeStack()

    @with_context(operation_name="evaluate")
    def evaluate(self, instruction: Instruction) -> EvaluationResult:
        """
        Execute one instruction.

        Args:
            instruction: Assign, Get or TestGate

        Returns:
            EvaluationResult carrying the instruction's value

        Raises:
            InvalidInstructionError: For anything that is not a known instruction
            FuzzyLangError: Whatever the scope stack or the set raised
        """
        if isinstance(instruction, Assign):
            self.scopes.assign(
                instruction.name, instruction.fuzzy_set, element_type=instruction.element_type
            )
            return EvaluationResult(instruction)

        if isinstance(instruction, Get):
            fuzzy_set = self.scopes.get(instruction.name, expected_type=instruction.expected_type)
            return EvaluationResult(instruction, fuzzy_set)

        if isinstance(instruction, TestGate):
            if not isinstance(instruction.fuzzy_set, FuzzySet):
                logger.error(
                    f"TestGate target is not a fuzzy set: {type(instruction.fuzzy_set).__name__}"
                )
                raise TypeMismatchError(
                    message=f"TestGate needs a fuzzy set, got {type(instruction.fuzzy_set).__name__}",
                    error_code=ErrorCodes.TYPE_MISMATCH,
                    details={"actual_type": type(instruction.fuzzy_set).__name__},
                )
            degree = instruction.fuzzy_set.membership(instruction.element)
            logger.debug(
                "Membership of %r in %s: %s", instruction.element, instruction.fuzzy_set.describe(), float(degree)
            )
            return EvaluationResult(instruction, degree)

        logger.error(f"Unknown instruction: {instruction!r}")
        raise InvalidInstructionError(
            message=f"Unknown instruction type: {type(instruction).__name__}",
            error_code=ErrorCodes.EVAL_UNKNOWN_INSTRUCTION,
            details={
                "instruction_type": type(instruction).__name__,
                "supported": ["Assign", "Get", "TestGate"],
            },
        )

    def run(self, instructions: Iterable[Instruction]) -> list[EvaluationResult]:
        """
        Evaluate instructions in order, stopping at the first failure.

        Returns:
            One EvaluationResult per instruction evaluated
        """
        return [self.evaluate(instruction) for instruction in instructions]
