"""
Shared utilities.

- logging: structured logging setup, contextual request logging
"""

from .logging import get_logger, log_context, log_function_call, setup_logging

__all__ = [
    "get_logger",
    "log_context",
    "log_function_call",
    "setup_logging",
]
