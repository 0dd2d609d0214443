"""
strext.logging – Namespaced loggers and env-gated operation tracing.
"""
from .helpers import get_logger, is_trace_ops_enabled, trace_ops

__all__ = ["get_logger", "is_trace_ops_enabled", "trace_ops"]
