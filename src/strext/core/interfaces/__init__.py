from .text import TokenCursorProtocol

__all__ = [
    "TokenCursorProtocol",
]
