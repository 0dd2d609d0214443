from __future__ import annotations

"""strext – small string helpers with explicit "not found" semantics.

Lookups return ``None`` instead of raising; see `strext.errors` for the few
precondition violations that do raise.
"""

from strext.affix import (
    inner,
    inner_or_self,
    prefix_removed,
    prefix_removed_or_self,
    suffix_removed,
    suffix_removed_or_self,
)
from strext.constants import LF
from strext.errors import InvalidStateError, StrextError
from strext.joining import join, join_indexed
from strext.lines import chomp, lines, unchomp, unlines
from strext.needle import Cursor, before, before_after, before_or_self, pop_before

__version__ = "1.0.0"

__all__ = [
    "LF",
    "Cursor",
    "InvalidStateError",
    "StrextError",
    "before",
    "before_after",
    "before_or_self",
    "chomp",
    "inner",
    "inner_or_self",
    "join",
    "join_indexed",
    "lines",
    "pop_before",
    "prefix_removed",
    "prefix_removed_or_self",
    "suffix_removed",
    "suffix_removed_or_self",
    "unchomp",
    "unlines",
]
