"""
Logging utilities for safe structured logging.

Helpers for attaching context to log records without writing whole
embeddings or recipe documents into the log stream.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

from recipe_search.core.exceptions import RecipeSearchException


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Convert a value to a short string for a log record.

    Numeric sequences are reported as vectors by dimension, other sequences
    and mappings by size.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        if value and all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value):
            return f"vector({len(value)} dims)"
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"

    try:
        val_str = value if isinstance(value, str) else str(value)
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"
    if len(val_str) > max_length:
        return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
    return val_str


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with structured context, safely converting all values.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Extra attributes for the log record
    """
    logger.log(level, message, extra={key: safe_log_value(val) for key, val in context.items()})


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception with its type, message and any domain details.

    Details carried by a RecipeSearchException are merged into the record
    under a "detail_" prefix.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    if isinstance(exc, RecipeSearchException):
        safe_context.update(
            {f"detail_{key}": safe_log_value(val) for key, val in exc.details.items()}
        )
    safe_context["error_type"] = type(exc).__name__
    safe_context["error_msg"] = exc.message if isinstance(exc, RecipeSearchException) else str(exc)
    logger.error(message, exc_info=exc, extra=safe_context)
