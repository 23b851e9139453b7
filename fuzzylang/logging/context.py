"""
Context enrichment for log entries.

A stack of LogContext objects is kept by a logging filter; every record that
passes through a fuzzylang handler picks up the innermost context.
"""

import functools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])


@dataclass
class LogContext:
    """
    Container for contextual information to be added to log entries.

    Attributes:
        operation: Name of the running operation (e.g. "evaluate")
        function: Qualified name of the decorated function
        extra: Additional attributes copied onto each record
    """

    operation: Optional[str] = None
    function: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)


class ContextEnricher(logging.Filter):
    """Logging filter that copies the innermost LogContext onto records."""

    def __init__(self) -> None:
        super().__init__()
        self.context_stack: List[LogContext] = []

    def push_context(self, context: LogContext) -> None:
        self.context_stack.append(context)

    def pop_context(self) -> Optional[LogContext]:
        if not self.context_stack:
            return None
        return self.context_stack.pop()

    @property
    def current(self) -> Optional[LogContext]:
        return self.context_stack[-1] if self.context_stack else None

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Enrich a log record with the current context.

        Args:
            record: The log record to enrich

        Returns:
            Always True; the enricher never drops records
        """
        context = self.current
        if context is not None:
            if context.operation:
                record.operation = context.operation
            if context.function:
                record.function = context.function
            for key, value in context.extra.items():
                setattr(record, key, value)
        return True


_context_enricher = ContextEnricher()


def get_context_enricher() -> ContextEnricher:
    """Return the process-wide context enricher."""
    return _context_enricher


def with_context(
    operation_name: Optional[str] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> Callable[[F], F]:
    """
    Decorator to add function context to log entries within the function scope.

    Args:
        operation_name: Name of the operation (defaults to function name)
        extra: Additional context data to include

    Returns:
        Decorated function with context enrichment
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            context = LogContext(
                operation=operation_name or func.__name__,
                function=func.__qualname__,
                extra=dict(extra or {}),
            )
            _context_enricher.push_context(context)
            try:
                return func(*args, **kwargs)
            finally:
                _context_enricher.pop_context()

        return cast(F, wrapper)

    return decorator
