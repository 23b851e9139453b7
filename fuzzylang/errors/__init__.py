"""
Error handling framework for fuzzylang.

This module exposes the exception hierarchy and the central error code
registry used throughout the package.
"""

from fuzzylang.errors.error_codes import ErrorCodes
from fuzzylang.errors.exceptions import (
    CannotExitRootScopeError,
    ConfigurationError,
    ConfigurationFileError,
    EvaluationError,
    FuzzyLangError,
    InvalidConfigurationError,
    InvalidInstructionError,
    MissingOperandError,
    OperandError,
    OutOfRangeError,
    ScopeError,
    TypeMismatchError,
    UndefinedVariableError,
    UnexpectedOperandError,
    ValidationError,
)

__all__ = [
    # Base exception
    "FuzzyLangError",
    # Error codes
    "ErrorCodes",
    # Validation
    "ValidationError",
    "OutOfRangeError",
    "TypeMismatchError",
    # Operators
    "OperandError",
    "MissingOperandError",
    "UnexpectedOperandError",
    # Scopes
    "ScopeError",
    "UndefinedVariableError",
    "CannotExitRootScopeError",
    # Evaluation
    "EvaluationError",
    "InvalidInstructionError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationFileError",
]
