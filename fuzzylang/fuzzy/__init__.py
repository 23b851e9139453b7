"""
Fuzzy sets, membership values and the operator algebra.
"""

from fuzzylang.fuzzy.membership import (
    GaussianMF,
    MembershipFunction,
    MembershipFunctionFactory,
    MembershipValue,
    TrapezoidalMF,
    TriangularMF,
)
from fuzzylang.fuzzy.operators import Operator, apply_operator
from fuzzylang.fuzzy.sets import CompositeSet, FuzzySet, PrimitiveSet, combine, primitive
from fuzzylang.fuzzy.config import (
    FuzzySetConfigLoader,
    FuzzySetDefinitions,
    GaussianMFConfig,
    MembershipFunctionConfig,
    TrapezoidalMFConfig,
    TriangularMFConfig,
)

__all__ = [
    "MembershipValue",
    "MembershipFunction",
    "MembershipFunctionFactory",
    "TriangularMF",
    "TrapezoidalMF",
    "GaussianMF",
    "Operator",
    "apply_operator",
    "FuzzySet",
    "PrimitiveSet",
    "CompositeSet",
    "primitive",
    "combine",
    "FuzzySetConfigLoader",
    "FuzzySetDefinitions",
    "MembershipFunctionConfig",
    "TriangularMFConfig",
    "TrapezoidalMFConfig",
    "GaussianMFConfig",
]
