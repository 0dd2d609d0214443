"""Exception taxonomy for strext.

"Not found" is never an error in this package: lookups return ``None``.
Exceptions are reserved for precondition violations.
"""


class StrextError(Exception):
    """Base class for every error raised by strext."""


class InvalidStateError(StrextError, RuntimeError):
    """Operation attempted on an object whose current state forbids it."""
