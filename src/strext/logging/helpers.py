from __future__ import annotations

"""Logging helpers for strext: namespaced loggers and operation tracing.

This module provides:
    - get_logger: Namespaced logger factory ("strext.*").
    - trace_ops: DEBUG traces gated by STREXT_TRACE_OPS.

The library never installs handlers; applications configure the "strext"
logger the way they configure any other.
"""

import logging
import os

from strext.constants import ENV_TRACE_OPS

BASE_LOGGER = "strext"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under "strext"."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def is_trace_ops_enabled() -> bool:
    """Check if operation tracing is enabled via env flag."""
    return os.getenv(ENV_TRACE_OPS) == "1"


def trace_ops(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit debug-verbosity operation traces only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context, attached to the record as
            ``context`` and appended to the message.
    """
    if not is_trace_ops_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
