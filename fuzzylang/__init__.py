"""
fuzzylang - evaluation core for a fuzzy-set construction and combination DSL.
"""

import os

from dotenv import load_dotenv

from fuzzylang.logging import (
    LogContext,
    configure_logging,
    get_logger,
    is_debug_mode,
    log_entry_exit,
    set_debug_mode,
    with_context,
)
from fuzzylang.version import __version__

# Load environment variables from .env file
load_dotenv()

if os.environ.get("FUZZYLANG_DEBUG", "").lower() in ("1", "true", "yes"):
    set_debug_mode(True)

configure_logging(log_dir=os.environ.get("FUZZYLANG_LOG_DIR") or None)

from fuzzylang.errors import (  # noqa: E402
    CannotExitRootScopeError,
    FuzzyLangError,
    MissingOperandError,
    OutOfRangeError,
    TypeMismatchError,
    UndefinedVariableError,
    UnexpectedOperandError,
)
from fuzzylang.fuzzy import (  # noqa: E402
    CompositeSet,
    FuzzySet,
    MembershipValue,
    Operator,
    PrimitiveSet,
    combine,
    primitive,
)
from fuzzylang.runtime import (  # noqa: E402
    Assign,
    EvaluationGate,
    EvaluationResult,
    Get,
    ScopeStack,
    TestGate,
)

__all__ = [
    "__version__",
    # Logging
    "LogContext",
    "configure_logging",
    "get_logger",
    "is_debug_mode",
    "log_entry_exit",
    "set_debug_mode",
    "with_context",
    # Errors
    "FuzzyLangError",
    "OutOfRangeError",
    "MissingOperandError",
    "UnexpectedOperandError",
    "UndefinedVariableError",
    "CannotExitRootScopeError",
    "TypeMismatchError",
    # Fuzzy sets
    "MembershipValue",
    "Operator",
    "FuzzySet",
    "PrimitiveSet",
    "CompositeSet",
    "primitive",
    "combine",
    # Runtime
    "ScopeStack",
    "Assign",
    "Get",
    "TestGate",
    "EvaluationResult",
    "EvaluationGate",
]
