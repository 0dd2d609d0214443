from __future__ import annotations

"""Needle search and splitting around the leftmost occurrence.

`before` and `before_after` disagree on purpose when the needle is missing:

    before("abcdef", "zz")        -> None
    before_after("abcdef", "zz")  -> ("abcdef", None)

The second form is what lets `Cursor.pop` hand back the remainder as the
last token. An empty needle matches at index 0.
"""

import logging
from typing import Iterator, Optional, Tuple

from strext.errors import InvalidStateError
from strext.logging.helpers import get_logger, trace_ops


def before(haystack: str, needle: str) -> Optional[str]:
    """Return the text before the first *needle*, or None if absent."""
    i = haystack.find(needle)
    return haystack[:i] if i >= 0 else None


def before_or_self(haystack: str, needle: str) -> str:
    head = before(haystack, needle)
    return haystack if head is None else head


def before_after(haystack: str, needle: str) -> Tuple[str, Optional[str]]:
    """Split *haystack* around the first *needle*.

    Returns:
        ``(before, after)`` on a match, ``(haystack, None)`` otherwise.
    """
    i = haystack.find(needle)
    if i < 0:
        return haystack, None
    return haystack[:i], haystack[i + len(needle):]


class Cursor:
    """Remaining unconsumed text of a left-to-right tokenization.

    Each `pop` returns the text before the next needle and advances past it.
    When the needle is no longer found the whole remainder is returned and
    the cursor becomes exhausted (``remaining is None``); popping again
    raises `InvalidStateError`.

        c = Cursor("a,b,c")
        c.pop(",")  -> "a"   (remaining "b,c")
        c.pop(",")  -> "b"   (remaining "c")
        c.pop(",")  -> "c"   (exhausted)

    Instances are mutated in place and are not thread-safe.
    """

    def __init__(self, text: str, *, logger: Optional[logging.Logger] = None) -> None:
        if not isinstance(text, str):
            raise TypeError(f"Cursor text must be str, not {type(text).__name__}")
        self._remaining: Optional[str] = text
        self._log = logger or get_logger("needle")

    @property
    def remaining(self) -> Optional[str]:
        return self._remaining

    @property
    def exhausted(self) -> bool:
        return self._remaining is None

    def pop(self, needle: str) -> str:
        """Consume and return the token before *needle*.

        Raises:
            InvalidStateError: If the cursor is already exhausted.
        """
        if self._remaining is None:
            raise InvalidStateError(f"cursor exhausted; cannot pop {needle!r}")
        token, self._remaining = before_after(self._remaining, needle)
        trace_ops(
            self._log,
            "cursor pop",
            needle=needle,
            token=token,
            exhausted=self._remaining is None,
        )
        return token

    def drain(self, needle: str) -> Iterator[str]:
        """Pop tokens until the cursor is exhausted.

        Raises:
            ValueError: If *needle* is empty (the cursor would never advance).
            InvalidStateError: If the cursor is already exhausted.
        """
        if not needle:
            raise ValueError("drain() needs a non-empty needle")
        if self._remaining is None:
            raise InvalidStateError(f"cursor exhausted; cannot drain {needle!r}")
        return self._drain(needle)

    def _drain(self, needle: str) -> Iterator[str]:
        while self._remaining is not None:
            yield self.pop(needle)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._remaining!r})"


def pop_before(needle: str, cursor: Cursor) -> str:
    """Free-function form of `Cursor.pop`: return the next token, advance *cursor*."""
    return cursor.pop(needle)
