"""
Membership degrees and shaped membership functions.

MembershipValue is the scalar domain [0.0, 1.0] every fuzzy set maps into.
The shaped functions (triangular, trapezoidal, Gaussian) are callables over
real numbers that can be handed straight to ``primitive``.
"""

from abc import ABC, abstractmethod
from numbers import Real
from typing import Any

import numpy as np

from fuzzylang import get_logger
from fuzzylang.errors import ConfigurationError, ErrorCodes, OutOfRangeError, ValidationError

logger = get_logger(__name__)


class MembershipValue(float):
    """
    A degree of membership, validated to lie in [0.0, 1.0].

    Behaves exactly like a float in arithmetic and comparisons; the
    constructor is the only place values are checked.
    """

    MIN = 0.0
    MAX = 1.0

    def __new__(cls, value: Any) -> "MembershipValue":
        if isinstance(value, MembershipValue):
            return value

        if not isinstance(value, (Real, np.number)):
            raise ValidationError(
                message=f"Membership value must be a real number, got {type(value).__name__}",
                error_code=ErrorCodes.VALUE_NOT_NUMERIC,
                details={"value": repr(value), "type": type(value).__name__},
            )

        number = float(value)
        if np.isnan(number) or not (cls.MIN <= number <= cls.MAX):
            raise OutOfRangeError(
                message=f"Membership value {number} is outside [{cls.MIN}, {cls.MAX}]",
                error_code=ErrorCodes.VALUE_OUT_OF_RANGE,
                details={"value": number, "min": cls.MIN, "max": cls.MAX},
            )

        return super().__new__(cls, number)

    @classmethod
    def clamp(cls, value: float) -> "MembershipValue":
        """
        Clip a computed degree into [0.0, 1.0] before wrapping it.

        NaN is not clipped; it still fails validation.
        """
        number = float(value)
        if np.isnan(number):
            return cls(number)
        return cls(min(cls.MAX, max(cls.MIN, number)))

    def __repr__(self) -> str:
        return f"MembershipValue({float(self)!r})"


class MembershipFunction(ABC):
    """
    Abstract base class for shaped membership functions over real numbers.

    Subclasses implement ``degree``; calling the instance validates the
    result into a MembershipValue.
    """

    @abstractmethod
    def degree(self, x: float) -> float:
        """
        Compute the raw membership degree of ``x``.

        Args:
            x: Real-valued element

        Returns:
            Degree in [0, 1] (NaN for NaN input)
        """

    @property
    @abstractmethod
    def parameters(self) -> list[float]:
        """Parameters the function was built from."""

    def __call__(self, x: float) -> MembershipValue:
        return MembershipValue(self.degree(x))


def _check_parameter_count(kind: str, parameters: list[float], expected: int, names: str) -> None:
    if len(parameters) != expected:
        logger.error(
            f"Invalid {kind} MF parameters: expected {expected}, got {len(parameters)}"
        )
        raise ConfigurationError(
            message=f"{kind.capitalize()} membership function requires exactly {expected} parameters {names}",
            error_code=ErrorCodes.MF_INVALID_PARAMETER_COUNT,
            details={"expected": expected, "actual": len(parameters)},
        )


class TriangularMF(MembershipFunction):
    """
    Triangular membership function over parameters [a, b, c].

    - μ(x) = 0,                 if x <= a or x >= c
    - μ(x) = (x - a) / (b - a), if a < x < b
    - μ(x) = (c - x) / (c - b), if b < x < c
    - μ(b) = 1, which also covers the degenerate a = b = c singleton
    """

    def __init__(self, parameters: list[float]):
        _check_parameter_count("triangular", parameters, 3, "[a, b, c]")
        self.a, self.b, self.c = (float(p) for p in parameters)

        if not (self.a <= self.b <= self.c):
            logger.error(
                f"Invalid triangular MF parameter order: a={self.a}, b={self.b}, c={self.c}"
            )
            raise ConfigurationError(
                message="Triangular membership function parameters must satisfy: a ≤ b ≤ c",
                error_code=ErrorCodes.MF_INVALID_PARAMETER_ORDER,
                details={"parameters": {"a": self.a, "b": self.b, "c": self.c}},
            )

        # Zero-width slopes would divide by zero
        self._ab_diff = max(self.b - self.a, np.finfo(float).eps)
        self._bc_diff = max(self.c - self.b, np.finfo(float).eps)

    @property
    def parameters(self) -> list[float]:
        return [self.a, self.b, self.c]

    def degree(self, x: float) -> float:
        if np.isnan(x):
            return np.nan
        if x == self.b:
            return 1.0
        if x <= self.a or x >= self.c:
            return 0.0
        if x < self.b:
            return (x - self.a) / self._ab_diff
        return (self.c - x) / self._bc_diff

    def __repr__(self) -> str:
        return f"TriangularMF(a={self.a}, b={self.b}, c={self.c})"


class TrapezoidalMF(MembershipFunction):
    """
    Trapezoidal membership function over parameters [a, b, c, d].

    Rises on (a, b), plateaus at 1 on [b, c], falls on (c, d), 0 elsewhere.
    """

    def __init__(self, parameters: list[float]):
        _check_parameter_count("trapezoidal", parameters, 4, "[a, b, c, d]")
        self.a, self.b, self.c, self.d = (float(p) for p in parameters)

        if not (self.a <= self.b <= self.c <= self.d):
            logger.error(
                f"Invalid trapezoidal MF parameter order: a={self.a}, b={self.b}, c={self.c}, d={self.d}"
            )
            raise ConfigurationError(
                message="Trapezoidal membership function parameters must satisfy: a ≤ b ≤ c ≤ d",
                error_code=ErrorCodes.MF_INVALID_PARAMETER_ORDER,
                details={
                    "parameters": {"a": self.a, "b": self.b, "c": self.c, "d": self.d}
                },
            )

        self._ab_diff = max(self.b - self.a, np.finfo(float).eps)
        self._dc_diff = max(self.d - self.c, np.finfo(float).eps)

    @property
    def parameters(self) -> list[float]:
        return [self.a, self.b, self.c, self.d]

    def degree(self, x: float) -> float:
        if np.isnan(x):
            return np.nan
        if self.b <= x <= self.c:
            return 1.0
        if x <= self.a or x >= self.d:
            return 0.0
        if x < self.b:
            return (x - self.a) / self._ab_diff
        return (self.d - x) / self._dc_diff

    def __repr__(self) -> str:
        return f"TrapezoidalMF(a={self.a}, b={self.b}, c={self.c}, d={self.d})"


class GaussianMF(MembershipFunction):
    """
    Gaussian membership function over parameters [μ, σ].

    μ(x) = exp(-0.5 * ((x - μ) / σ)²), with σ > 0.
    """

    def __init__(self, parameters: list[float]):
        _check_parameter_count("gaussian", parameters, 2, "[μ, σ]")
        self.mu, self.sigma = (float(p) for p in parameters)

        if self.sigma <= 0:
            logger.error(f"Invalid Gaussian MF sigma: {self.sigma} (must be > 0)")
            raise ConfigurationError(
                message="Gaussian membership function sigma must be greater than 0",
                error_code=ErrorCodes.MF_INVALID_SIGMA,
                details={"sigma": self.sigma},
            )

    @property
    def parameters(self) -> list[float]:
        return [self.mu, self.sigma]

    def degree(self, x: float) -> float:
        z = (x - self.mu) / self.sigma
        return float(np.exp(-0.5 * z * z))

    def __repr__(self) -> str:
        return f"GaussianMF(μ={self.mu}, σ={self.sigma})"


class MembershipFunctionFactory:
    """Creates shaped membership functions from a type name and parameters."""

    _REGISTRY = {
        "triangular": TriangularMF,
        "trapezoidal": TrapezoidalMF,
        "gaussian": GaussianMF,
    }

    @classmethod
    def create(cls, mf_type: str, parameters: list[float]) -> MembershipFunction:
        """
        Create a membership function instance based on type and parameters.

        Args:
            mf_type: "triangular", "trapezoidal" or "gaussian" (case-insensitive)
            parameters: Parameters for the membership function

        Returns:
            MembershipFunction instance

        Raises:
            ConfigurationError: If the type is unknown or the parameters are invalid
        """
        mf_class = cls._REGISTRY.get(mf_type.lower())
        if mf_class is None:
            logger.error(f"Unknown membership function type: {mf_type}")
            raise ConfigurationError(
                message=f"Unknown membership function type: {mf_type}",
                error_code=ErrorCodes.MF_UNKNOWN_TYPE,
                details={"type": mf_type, "supported_types": cls.get_supported_types()},
            )
        return mf_class(parameters)

    @classmethod
    def get_supported_types(cls) -> list[str]:
        return list(cls._REGISTRY)
