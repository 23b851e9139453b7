"""
Helper decorators for common logging patterns.
"""

import functools
import inspect
import logging
import time
from typing import Any, Callable, List, Optional, TypeVar, cast

from fuzzylang.logging.config import get_logger

F = TypeVar("F", bound=Callable[..., Any])


def _format_value(value: Any) -> Any:
    return value if isinstance(value, (int, float, str, bool)) else repr(value)


def log_entry_exit(
    logger: Optional[logging.Logger] = None,
    log_args: bool = False,
    log_result: bool = False,
    entry_level: int = logging.DEBUG,
    exit_level: int = logging.DEBUG,
    error_level: int = logging.ERROR,
) -> Callable[[F], F]:
    """
    Decorator to log function entry and exit.

    Args:
        logger: Logger to use (if None, get logger based on module name)
        log_args: Whether to log function arguments
        log_result: Whether to log function return value
        entry_level: Log level for entry messages
        exit_level: Log level for exit messages
        error_level: Log level for error messages

    Returns:
        Decorated function with entry/exit logging
    """

    def decorator(func: F) -> F:
        log = logger or get_logger(func.__module__)
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            func_name = func.__qualname__

            entry_msg = f"Entering {func_name}"
            if log_args and (args or kwargs):
                bound = signature.bind_partial(*args, **kwargs)
                arg_strs: List[str] = [
                    f"{name}={_format_value(value)}"
                    for name, value in bound.arguments.items()
                    if name != "self"
                ]
                entry_msg += f" with args: {', '.join(arg_strs)}"
            log.log(entry_level, entry_msg)

            start_time = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed = time.time() - start_time
                log.log(
                    error_level,
                    f"Exception in {func_name} after {elapsed:.3f}s: {type(e).__name__}: {e}",
                )
                raise

            elapsed = time.time() - start_time
            exit_msg = f"Exiting {func_name} after {elapsed:.3f}s"
            if log_result:
                result_str = str(_format_value(result))
                if len(result_str) > 1000:
                    result_str = result_str[:997] + "..."
                exit_msg += f" with result: {result_str}"
            log.log(exit_level, exit_msg)
            return result

        return cast(F, wrapper)

    return decorator
