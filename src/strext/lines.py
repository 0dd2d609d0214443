"""Line handling with LF-only semantics.

Carriage returns are never treated specially: "a\\r\\n" chomps to "a\\r".

`unlines` is the inverse of `lines` only for text that ends with a
newline; text without one (the empty string included) gains one:

    unlines(lines("a\\nb\\n")) == "a\\nb\\n"
    unlines(lines("a\\nb"))    == "a\\nb\\n"
"""
from typing import Iterable, List

from strext.affix import suffix_removed_or_self
from strext.constants import LF


def chomp(s: str) -> str:
    """Remove a single trailing LF, if present."""
    return suffix_removed_or_self(s, LF)


def unchomp(s: str) -> str:
    """Ensure *s* ends with LF (idempotent)."""
    return s if s.endswith(LF) else s + LF


def lines(s: str) -> List[str]:
    """Split *s* on LF after chomping one trailing LF.

    A trailing newline does not produce an empty last element, and the empty
    string yields ``[""]``. A new list is built on every call.
    """
    return chomp(s).split(LF)


def unlines(xs: Iterable[object]) -> str:
    """Render every element followed by LF, the last one included."""
    return "".join(f"{x}{LF}" for x in xs)
