from __future__ import annotations

"""Affix trimming: remove a literal prefix, suffix or both from a string.

Matching is exact and case-sensitive (`str.startswith` / `str.endswith`).
Functions without the ``_or_self`` tail return ``None`` when the affix does
not match; the ``_or_self`` variants return the input unchanged instead.

Examples:
    prefix_removed("foo.py", "foo")       -> ".py"
    prefix_removed("foo.py", "bar")       -> None
    suffix_removed_or_self("foo.py", "x") -> "foo.py"
    inner("[[x]]", "[[", "]]")            -> "x"
"""

from typing import Optional


def prefix_removed(s: str, prefix: str) -> Optional[str]:
    """Return *s* without *prefix*, or None if *s* does not start with it.

    An empty *prefix* always matches and returns *s* unchanged.
    """
    return s[len(prefix):] if s.startswith(prefix) else None


def prefix_removed_or_self(s: str, prefix: str) -> str:
    removed = prefix_removed(s, prefix)
    return s if removed is None else removed


def suffix_removed(s: str, suffix: str) -> Optional[str]:
    """Return *s* without *suffix*, or None if *s* does not end with it.

    An empty *suffix* always matches and returns *s* unchanged.
    """
    # Slice by absolute length: s[:-0] would be the empty string.
    return s[:len(s) - len(suffix)] if s.endswith(suffix) else None


def suffix_removed_or_self(s: str, suffix: str) -> str:
    removed = suffix_removed(s, suffix)
    return s if removed is None else removed


def inner(s: str, prefix: str, suffix: str) -> Optional[str]:
    """Strip *suffix* and then *prefix* from *s*; None unless both match.

    The suffix is removed first and the prefix is checked against what is
    left, so overlapping affixes on short strings resolve in that order:

        inner("ab", "ab", "ab")  -> None   ("" does not start with "ab")
        inner("aa", "a", "a")    -> ""
    """
    without_suffix = suffix_removed(s, suffix)
    if without_suffix is None:
        return None
    return prefix_removed(without_suffix, prefix)


def inner_or_self(s: str, prefix: str, suffix: str) -> str:
    stripped = inner(s, prefix, suffix)
    return s if stripped is None else stripped
