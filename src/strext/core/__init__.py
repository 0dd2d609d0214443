from __future__ import annotations

"""Public surface for strext.core.

Stable import location for the protocol types:

    from strext.core import TokenCursorProtocol
"""

from strext.core.interfaces.text import TokenCursorProtocol

__all__ = [
    "TokenCursorProtocol",
]
