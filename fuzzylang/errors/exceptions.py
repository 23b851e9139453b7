"""
Exception hierarchy for fuzzylang.

Every failure the evaluation core can report is a subclass of
FuzzyLangError. Construction-time errors (arity, ranges, element types)
stop an invalid fuzzy set from ever being built; evaluation-time errors
surface from the membership call that triggered them.
"""

from typing import Any, Optional


class FuzzyLangError(Exception):
    """
    Base exception class for all fuzzylang errors.

    Attributes:
        message: Human-readable error message
        error_code: Optional machine-readable code (see ErrorCodes)
        details: Optional dictionary with additional error details
        suggestion: Optional hint on how to fix the error
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Initialize a new FuzzyLangError.

        Args:
            message: Human-readable error message
            error_code: Optional error code for reference and documentation
            details: Optional dictionary with additional error details
            suggestion: Optional suggestion text for how to fix the error
        """
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestion = suggestion
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the error to a dictionary for structured reporting.

        Returns:
            Dictionary with error type, message, code, details and suggestion
        """
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "suggestion": self.suggestion,
        }

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


# --- Validation Errors ---


class ValidationError(FuzzyLangError):
    """
    Base class for values that fail validation.

    Covers membership degrees and thresholds outside [0, 1] and fuzzy sets
    used with the wrong element type.
    """

    pass


class OutOfRangeError(ValidationError):
    """
    Raised when a membership value or threshold lies outside [0.0, 1.0].

    Examples:
        A primitive set whose function returns 1.3:
            >>> raise OutOfRangeError(
            ...     message="Membership value 1.3 is outside [0.0, 1.0]",
            ...     error_code="VALUE-OutOfRange",
            ...     details={"value": 1.3, "min": 0.0, "max": 1.0},
            ... )
    """

    pass


class TypeMismatchError(ValidationError):
    """Raised when a fuzzy set is used with an incompatible element type."""

    pass


# --- Operator Errors ---


class OperandError(FuzzyLangError):
    """Base class for arity mismatches when combining fuzzy sets."""

    pass


class MissingOperandError(OperandError):
    """Raised when a binary operator is combined without its second operand."""

    pass


class UnexpectedOperandError(OperandError):
    """Raised when a unary operator is given a second operand."""

    pass


# --- Scope Errors ---


class ScopeError(FuzzyLangError):
    """Base class for errors raised by the scope stack."""

    pass


class UndefinedVariableError(ScopeError):
    """Raised when no scope on the stack binds the requested name."""

    pass


class CannotExitRootScopeError(ScopeError):
    """Raised when exiting a scope would pop the root environment."""

    pass


# --- Evaluation Errors ---


class EvaluationError(FuzzyLangError):
    """Base class for errors raised while dispatching instructions."""

    pass


class InvalidInstructionError(EvaluationError):
    """Raised when the evaluation gate receives an unknown instruction."""

    pass


# --- Configuration Errors ---


class ConfigurationError(FuzzyLangError):
    """
    Raised for invalid declarative fuzzy-set definitions.

    The fix is typically an edit to the definitions dict or YAML file.
    """

    pass


class InvalidConfigurationError(ConfigurationError):
    """Exception raised when configuration is invalid."""

    pass


class ConfigurationFileError(ConfigurationError):
    """Exception raised when a configuration file cannot be read."""

    pass
