"""
Logging system for fuzzylang.

This module provides a centralized logging configuration with console and
rotating file outputs, context enrichment, and entry/exit helpers.
"""

from fuzzylang.logging.config import (
    configure_logging,
    get_logger,
    is_debug_mode,
    set_debug_mode,
)
from fuzzylang.logging.context import LogContext, get_context_enricher, with_context
from fuzzylang.logging.helpers import log_entry_exit

__all__ = [
    # Configuration
    "configure_logging",
    "get_logger",
    "set_debug_mode",
    "is_debug_mode",
    # Context enrichment
    "LogContext",
    "get_context_enricher",
    "with_context",
    # Helper methods
    "log_entry_exit",
]
