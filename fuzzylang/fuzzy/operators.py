"""
Operator algebra for combining fuzzy sets.

Operator is a closed enumeration; each member carries its operand arity.
``apply_operator`` holds the membership semantics of every operator and is
checked at import time to cover the whole enumeration.
"""

from enum import Enum
from typing import Callable, Optional

from fuzzylang import get_logger
from fuzzylang.errors import (
    ErrorCodes,
    MissingOperandError,
    OutOfRangeError,
    UnexpectedOperandError,
    ValidationError,
)
from fuzzylang.fuzzy.membership import MembershipValue

logger = get_logger(__name__)


class Operator(Enum):
    """Fuzzy set combinators and their operand arity."""

    UNION = ("union", 2)
    INTERSECTION = ("intersection", 2)
    COMPLEMENT = ("complement", 1)
    ADD = ("add", 2)
    MULTIPLY = ("multiply", 2)
    DIFFERENCE = ("difference", 2)
    ALPHA_CUT = ("alpha_cut", 1)

    def __init__(self, label: str, arity: int):
        self.label = label
        self.arity = arity

    @property
    def is_binary(self) -> bool:
        return self.arity == 2

    @property
    def requires_threshold(self) -> bool:
        return self is Operator.ALPHA_CUT

    @classmethod
    def from_name(cls, name: str) -> "Operator":
        """
        Look up an operator by label or member name, ignoring case.

        Accepts "union", "UNION", "alpha_cut", "AlphaCut" and "alpha-cut".

        Raises:
            ValidationError: If no operator has that name
        """
        key = name.replace("-", "_").lower()
        for operator in cls:
            if key in (operator.label, operator.label.replace("_", "")):
                return operator
        raise ValidationError(
            message=f"Unknown fuzzy set operator: {name}",
            error_code=ErrorCodes.OPERATOR_UNKNOWN,
            details={"name": name, "supported": [op.label for op in cls]},
        )

    def __repr__(self) -> str:
        return f"Operator.{self.name}"


_Semantics = Callable[[float, Optional[float], Optional[float]], float]

_SEMANTICS: dict[Operator, _Semantics] = {
    Operator.UNION: lambda a, b, t: max(a, b),
    Operator.INTERSECTION: lambda a, b, t: min(a, b),
    Operator.COMPLEMENT: lambda a, b, t: 1.0 - a,
    Operator.ADD: lambda a, b, t: min(1.0, a + b),
    Operator.MULTIPLY: lambda a, b, t: a * b,
    Operator.DIFFERENCE: lambda a, b, t: max(0.0, a - b),
    Operator.ALPHA_CUT: lambda a, b, t: 1.0 if a >= t else 0.0,
}

_unhandled = set(Operator) - set(_SEMANTICS)
if _unhandled:
    raise RuntimeError(f"Operators without membership semantics: {sorted(op.name for op in _unhandled)}")


def validate_threshold(operator: Operator, threshold: Optional[float]) -> Optional[MembershipValue]:
    """
    Check the threshold argument against the operator.

    Args:
        operator: Operator being constructed
        threshold: Threshold supplied by the caller, or None

    Returns:
        The threshold as a MembershipValue for ALPHA_CUT, otherwise None

    Raises:
        OutOfRangeError: If ALPHA_CUT has no threshold or one outside [0, 1]
        UnexpectedOperandError: If a threshold is given to any other operator
    """
    if not operator.requires_threshold:
        if threshold is not None:
            logger.error(f"Threshold {threshold} given to {operator.label}, which takes none")
            raise UnexpectedOperandError(
                message=f"Operator '{operator.label}' does not take a threshold",
                error_code=ErrorCodes.OPERATOR_UNEXPECTED_THRESHOLD,
                details={"operator": operator.label, "threshold": threshold},
            )
        return None

    if threshold is None:
        logger.error("Alpha-cut constructed without a threshold")
        raise OutOfRangeError(
            message="Alpha-cut requires a threshold in [0.0, 1.0]",
            error_code=ErrorCodes.OPERATOR_MISSING_THRESHOLD,
            details={"operator": operator.label, "threshold": None},
            suggestion="Pass threshold=<value between 0.0 and 1.0>",
        )

    try:
        return MembershipValue(threshold)
    except OutOfRangeError as e:
        logger.error(f"Alpha-cut threshold out of range: {threshold}")
        raise OutOfRangeError(
            message=f"Alpha-cut threshold {threshold} is outside [0.0, 1.0]",
            error_code=ErrorCodes.OPERATOR_THRESHOLD_OUT_OF_RANGE,
            details={"operator": operator.label, "threshold": float(threshold)},
        ) from e


def apply_operator(
    operator: Operator,
    a: float,
    b: Optional[float] = None,
    threshold: Optional[float] = None,
) -> MembershipValue:
    """
    Compute the membership degree of a combined set from its operand degrees.

    Args:
        operator: Operator to apply
        a: Degree of the first operand
        b: Degree of the second operand (binary operators only)
        threshold: Alpha-cut threshold (ALPHA_CUT only)

    Returns:
        Resulting degree, clamped into [0.0, 1.0]

    Raises:
        MissingOperandError: If a binary operator is given no second degree
        UnexpectedOperandError: If a unary operator is given a second degree
    """
    if operator.is_binary and b is None:
        raise MissingOperandError(
            message=f"Operator '{operator.label}' needs two operand degrees",
            error_code=ErrorCodes.OPERATOR_MISSING_OPERAND,
            details={"operator": operator.label},
        )
    if not operator.is_binary and b is not None:
        raise UnexpectedOperandError(
            message=f"Operator '{operator.label}' takes a single operand degree",
            error_code=ErrorCodes.OPERATOR_UNEXPECTED_OPERAND,
            details={"operator": operator.label},
        )

    cut = validate_threshold(operator, threshold)
    result = _SEMANTICS[operator](
        float(a),
        None if b is None else float(b),
        None if cut is None else float(cut),
    )
    return MembershipValue.clamp(result)
