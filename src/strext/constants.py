from __future__ import annotations

"""Project-wide constants used across modules."""

# Line terminator recognised by the line helpers. CR is ordinary content.
LF: str = "\n"

# Environment toggle, read at call time.
ENV_TRACE_OPS: str = "STREXT_TRACE_OPS"
