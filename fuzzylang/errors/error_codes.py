"""
Central registry of error codes for fuzzylang.

Error codes follow the pattern: CATEGORY-ErrorName

Categories:
- VALUE: Membership value validation
- OPERATOR: Combination of fuzzy sets (arity, thresholds)
- TYPE: Element-type tags on fuzzy sets and bindings
- SCOPE: Variable environments and scope control
- EVAL: Instruction dispatch
- MF: Shaped membership function parameters
- CONFIG: Declarative set definitions and their files

Usage:
    from fuzzylang.errors.error_codes import ErrorCodes

    raise UndefinedVariableError(
        message="Undefined variable 'cold'",
        error_code=ErrorCodes.SCOPE_UNDEFINED_VARIABLE,
        ...
    )
"""


class ErrorCodes:
    """Central registry of error codes for consistent error handling."""

    # Membership values
    VALUE_OUT_OF_RANGE = "VALUE-OutOfRange"
    VALUE_NOT_NUMERIC = "VALUE-NotNumeric"

    # Operator construction
    OPERATOR_MISSING_OPERAND = "OPERATOR-MissingOperand"
    OPERATOR_UNEXPECTED_OPERAND = "OPERATOR-UnexpectedOperand"
    OPERATOR_THRESHOLD_OUT_OF_RANGE = "OPERATOR-ThresholdOutOfRange"
    OPERATOR_MISSING_THRESHOLD = "OPERATOR-MissingThreshold"
    OPERATOR_UNEXPECTED_THRESHOLD = "OPERATOR-UnexpectedThreshold"
    OPERATOR_NOT_A_SET = "OPERATOR-NotAFuzzySet"
    OPERATOR_UNKNOWN = "OPERATOR-Unknown"

    # Element types
    TYPE_MISMATCH = "TYPE-Mismatch"
    TYPE_INCOMPATIBLE_OPERANDS = "TYPE-IncompatibleOperands"
    TYPE_INVALID_TAG = "TYPE-InvalidTag"

    # Scopes
    SCOPE_UNDEFINED_VARIABLE = "SCOPE-UndefinedVariable"
    SCOPE_CANNOT_EXIT_ROOT = "SCOPE-CannotExitRoot"
    SCOPE_INVALID_NAME = "SCOPE-InvalidName"

    # Evaluation gate
    EVAL_UNKNOWN_INSTRUCTION = "EVAL-UnknownInstruction"

    # Shaped membership functions
    MF_INVALID_PARAMETER_COUNT = "MF-InvalidParameterCount"
    MF_INVALID_PARAMETER_ORDER = "MF-InvalidParameterOrder"
    MF_INVALID_SIGMA = "MF-InvalidSigma"
    MF_UNKNOWN_TYPE = "MF-UnknownType"

    # Declarative configuration
    CONFIG_EMPTY_DEFINITIONS = "CONFIG-EmptyDefinitions"
    CONFIG_FILE_NOT_FOUND = "CONFIG-FileNotFound"
    CONFIG_INVALID_YAML = "CONFIG-InvalidYaml"
    CONFIG_VALIDATION_FAILED = "CONFIG-ValidationFailed"
    CONFIG_LOAD_FAILED = "CONFIG-LoadFailed"
