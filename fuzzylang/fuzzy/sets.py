"""
Fuzzy set values.

A FuzzySet maps elements of some type T to a MembershipValue. There are two
variants:

- PrimitiveSet wraps a user-supplied membership function.
- CompositeSet wraps an Operator and one or two operand sets and evaluates
  them lazily on every ``membership`` call.

Operands are plain shared references, so the same set can appear in many
composites (and in scope bindings) at once. Composites can only reference
sets that already exist, which keeps every graph acyclic. Nothing is cached:
each membership query walks the graph again.

Example:
    ```python
    hot = primitive(TriangularMF([25, 35, 45]), element_type=float, name="hot")
    cold = primitive(TriangularMF([-5, 5, 15]), element_type=float, name="cold")

    mild = ~(hot | cold)
    mild.membership(20.0)  # MembershipValue(1.0)
    ```
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, Optional, TypeVar, Union, get_origin

import numpy as np
import pandas as pd

from fuzzylang import get_logger
from fuzzylang.errors import (
    ErrorCodes,
    MissingOperandError,
    OutOfRangeError,
    TypeMismatchError,
    UnexpectedOperandError,
)
from fuzzylang.fuzzy.membership import MembershipValue
from fuzzylang.fuzzy.operators import (
    Operator,
    apply_operator,
    validate_threshold,
)

logger = get_logger(__name__)

T = TypeVar("T")


class FuzzySet(ABC, Generic[T]):
    """
    Abstract fuzzy set over elements of type T.

    Attributes:
        element_type: Runtime tag for T, or None when the set accepts any element
        name: Optional label used in reprs and error details
    """

    __slots__ = ()

    @property
    @abstractmethod
    def element_type(self) -> Optional[type]:
        """Runtime element-type tag (None means untagged)."""

    @property
    @abstractmethod
    def name(self) -> Optional[str]:
        """Optional label of the set."""

    @property
    @abstractmethod
    def operands(self) -> tuple["FuzzySet[T]", ...]:
        """Operand sets, empty for primitives."""

    @abstractmethod
    def membership(self, element: T) -> MembershipValue:
        """
        Evaluate the degree to which ``element`` belongs to this set.

        Args:
            element: Element of the set's domain

        Returns:
            Membership degree in [0.0, 1.0]

        Raises:
            OutOfRangeError: If a membership function yields a value outside [0, 1]
        """

    def depth(self) -> int:
        """Height of the operand graph below this set (1 for a primitive)."""
        heights: dict[int, int] = {}
        pending = [(self, False)]
        while pending:
            node, expanded = pending.pop()
            if id(node) in heights:
                continue
            if expanded or not node.operands:
                heights[id(node)] = 1 + max((heights[id(o)] for o in node.operands), default=0)
            else:
                pending.append((node, True))
                pending.extend((o, False) for o in node.operands if id(o) not in heights)
        return heights[id(self)]

    def describe(self) -> str:
        """One-line label that never walks past the direct operands."""
        if self.name:
            return self.name
        return type(self).__name__

    def sample(self, elements: Union[Iterable[T], pd.Series]) -> Union[np.ndarray, pd.Series]:
        """
        Evaluate membership for many elements at once.

        Args:
            elements: Any iterable of elements, or a pandas Series

        Returns:
            numpy float array for iterables; a float Series sharing the input
            index for Series input
        """
        if isinstance(elements, pd.Series):
            logger.debug("Sampling %s over pandas Series of length %d", self.describe(), len(elements))
            return pd.Series(
                [float(self.membership(x)) for x in elements],
                index=elements.index,
                name=elements.name,
                dtype=float,
            )

        return np.fromiter((float(self.membership(x)) for x in elements), dtype=float)

    # Operator sugar; every expression goes through combine()

    def __or__(self, other: "FuzzySet[T]") -> "CompositeSet[T]":
        if not isinstance(other, FuzzySet):
            return NotImplemented
        return combine(self, Operator.UNION, other)

    def __and__(self, other: "FuzzySet[T]") -> "CompositeSet[T]":
        if not isinstance(other, FuzzySet):
            return NotImplemented
        return combine(self, Operator.INTERSECTION, other)

    def __add__(self, other: "FuzzySet[T]") -> "CompositeSet[T]":
        if not isinstance(other, FuzzySet):
            return NotImplemented
        return combine(self, Operator.ADD, other)

    def __mul__(self, other: "FuzzySet[T]") -> "CompositeSet[T]":
        if not isinstance(other, FuzzySet):
            return NotImplemented
        return combine(self, Operator.MULTIPLY, other)

    def __sub__(self, other: "FuzzySet[T]") -> "CompositeSet[T]":
        if not isinstance(other, FuzzySet):
            return NotImplemented
        return combine(self, Operator.DIFFERENCE, other)

    def __invert__(self) -> "CompositeSet[T]":
        return combine(self, Operator.COMPLEMENT)

    def complement(self) -> "CompositeSet[T]":
        return combine(self, Operator.COMPLEMENT)

    def alpha_cut(self, threshold: float) -> "CompositeSet[T]":
        return combine(self, Operator.ALPHA_CUT, threshold=threshold)


class PrimitiveSet(FuzzySet[T]):
    """A fuzzy set defined directly by a membership function."""

    __slots__ = ("_function", "_element_type", "_name")

    def __init__(
        self,
        function: Callable[[T], float],
        element_type: Optional[type] = None,
        name: Optional[str] = None,
    ):
        if not callable(function):
            logger.error(f"Primitive set needs a callable, got {type(function).__name__}")
            raise TypeError(
                f"Membership function must be callable, got {type(function).__name__}"
            )
        self._function = function
        self._element_type = validate_element_type(element_type)
        self._name = name

    @property
    def element_type(self) -> Optional[type]:
        return self._element_type

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def function(self) -> Callable[[T], float]:
        return self._function

    @property
    def operands(self) -> tuple:
        return ()

    def membership(self, element: T) -> MembershipValue:
        value = self._function(element)
        try:
            return MembershipValue(value)
        except OutOfRangeError as e:
            logger.error(
                f"Membership function of {self!r} returned {value!r} for element {element!r}"
            )
            raise OutOfRangeError(
                message=f"Membership function of {self!r} returned {value!r}, outside [0.0, 1.0]",
                error_code=ErrorCodes.VALUE_OUT_OF_RANGE,
                details={"set": self._name, "element": repr(element), "value": e.details.get("value")},
            ) from e

    def __repr__(self) -> str:
        if self._name:
            return f"PrimitiveSet({self._name!r})"
        return f"PrimitiveSet({self._function!r})"


def validate_element_type(tag: Optional[type], role: str = "element_type") -> Optional[type]:
    """
    Check that an element-type tag is a plain class (or None).

    Parameterized generics such as ``list[int]`` and typing constructs such as
    ``Optional[float]`` cannot be compared by subclass and are rejected.

    Raises:
        TypeMismatchError: If the tag is neither None nor a class
    """
    if tag is None or (isinstance(tag, type) and get_origin(tag) is None):
        return tag
    logger.error(f"Invalid {role} tag: {tag!r}")
    raise TypeMismatchError(
        message=f"{role} must be a class or None, got {tag!r}",
        error_code=ErrorCodes.TYPE_INVALID_TAG,
        details={"role": role, "tag": repr(tag)},
    )


def _resolve_element_type(operands: tuple[FuzzySet, ...], operator: Operator) -> Optional[type]:
    tags = [operand.element_type for operand in operands if operand.element_type is not None]
    if not tags:
        return None

    # The composite carries the most general tag; every other tag must be a subclass of it
    general = tags[0]
    for tag in tags[1:]:
        if issubclass(general, tag):
            general = tag
        elif not issubclass(tag, general):
            names = sorted({t.__name__ for t in tags})
            logger.error(f"Cannot combine sets over different element types with {operator.label}: {names}")
            raise TypeMismatchError(
                message=f"Cannot apply '{operator.label}' to sets over different element types: {', '.join(names)}",
                error_code=ErrorCodes.TYPE_INCOMPATIBLE_OPERANDS,
                details={"operator": operator.label, "element_types": names},
            )
    return general


class CompositeSet(FuzzySet[T]):
    """
    A fuzzy set defined as an operator applied to existing fuzzy sets.

    Construction only validates and links the operands; no membership
    function is evaluated until ``membership`` is called.
    """

    __slots__ = ("_operator", "_operands", "_threshold", "_element_type", "_name")

    def __init__(
        self,
        operator: Operator,
        first: FuzzySet[T],
        second: Optional[FuzzySet[T]] = None,
        threshold: Optional[float] = None,
        name: Optional[str] = None,
    ):
        if not isinstance(operator, Operator):
            operator = Operator.from_name(str(operator))

        for operand in (first, second):
            if operand is not None and not isinstance(operand, FuzzySet):
                logger.error(f"Operand of {operator.label} is not a fuzzy set: {operand!r}")
                raise TypeMismatchError(
                    message=f"Operands of '{operator.label}' must be fuzzy sets, got {type(operand).__name__}",
                    error_code=ErrorCodes.OPERATOR_NOT_A_SET,
                    details={"operator": operator.label, "operand_type": type(operand).__name__},
                )

        if operator.is_binary and second is None:
            logger.error(f"Binary operator {operator.label} combined without second operand")
            raise MissingOperandError(
                message=f"Operator '{operator.label}' requires two operands",
                error_code=ErrorCodes.OPERATOR_MISSING_OPERAND,
                details={"operator": operator.label, "arity": operator.arity},
            )
        if not operator.is_binary and second is not None:
            logger.error(f"Unary operator {operator.label} combined with a second operand")
            raise UnexpectedOperandError(
                message=f"Operator '{operator.label}' takes exactly one operand",
                error_code=ErrorCodes.OPERATOR_UNEXPECTED_OPERAND,
                details={"operator": operator.label, "arity": operator.arity},
            )

        operands = (first,) if second is None else (first, second)

        self._threshold = validate_threshold(operator, threshold)
        self._element_type = _resolve_element_type(operands, operator)
        self._operator = operator
        self._operands = operands
        self._name = name

    @property
    def operator(self) -> Operator:
        return self._operator

    @property
    def threshold(self) -> Optional[MembershipValue]:
        return self._threshold

    @property
    def element_type(self) -> Optional[type]:
        return self._element_type

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def operands(self) -> tuple[FuzzySet[T], ...]:
        return self._operands

    def membership(self, element: T) -> MembershipValue:
        degrees = [operand.membership(element) for operand in self._operands]
        second = degrees[1] if len(degrees) == 2 else None
        return apply_operator(self._operator, degrees[0], second, self._threshold)

    def __repr__(self) -> str:
        args = ", ".join(repr(operand) for operand in self._operands)
        if self._threshold is not None:
            args += f", threshold={float(self._threshold)}"
        label = f"{self._name}=" if self._name else ""
        return f"{label}{self._operator.label}({args})"

    def describe(self) -> str:
        if self._name:
            return self._name
        args = ", ".join(operand.name or type(operand).__name__ for operand in self._operands)
        return f"{self._operator.label}({args})"


def primitive(
    function: Callable[[T], float],
    element_type: Optional[type] = None,
    name: Optional[str] = None,
) -> PrimitiveSet[T]:
    """
    Build a fuzzy set from a membership function.

    Args:
        function: Pure function from an element to a degree in [0, 1]
        element_type: Optional runtime tag for the element type
        name: Optional label

    Returns:
        A new PrimitiveSet
    """
    fuzzy_set = PrimitiveSet(function, element_type=element_type, name=name)
    logger.debug("Created %s", fuzzy_set.describe())
    return fuzzy_set


def combine(
    first: FuzzySet[T],
    operator: Operator,
    second: Optional[FuzzySet[T]] = None,
    threshold: Optional[float] = None,
    name: Optional[str] = None,
) -> CompositeSet[T]:
    """
    Combine existing fuzzy sets with an operator, without evaluating them.

    Args:
        first: First (or only) operand
        operator: Operator to apply
        second: Second operand, required for binary operators
        threshold: Alpha-cut threshold, required for ALPHA_CUT only
        name: Optional label for the new set

    Returns:
        A new CompositeSet referencing the operands

    Raises:
        MissingOperandError: Binary operator without a second operand
        UnexpectedOperandError: Unary operator with a second operand, or a
            threshold on an operator other than ALPHA_CUT
        OutOfRangeError: ALPHA_CUT threshold absent or outside [0, 1]
        TypeMismatchError: Operands that are not fuzzy sets, or sets tagged
            with different element types
    """
    composite = CompositeSet(operator, first, second, threshold=threshold, name=name)
    logger.debug("Combined %s", composite.describe())
    return composite
