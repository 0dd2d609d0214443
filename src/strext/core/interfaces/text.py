from __future__ import annotations
"""Cursor protocol definitions."""

from typing import Iterator, Optional, Protocol, runtime_checkable


@runtime_checkable
class TokenCursorProtocol(Protocol):
    """Holder of the remaining unconsumed text of a left-to-right tokenization.

    Implementations are expected to:
      * Return the text before the next needle and advance past it.
      * Enter a terminal (exhausted) state once the needle is not found.
      * Refuse further pops once exhausted.
    """

    @property
    def remaining(self) -> Optional[str]:
        ...

    @property
    def exhausted(self) -> bool:
        ...

    def pop(self, needle: str) -> str:
        ...

    def drain(self, needle: str) -> Iterator[str]:
        ...
