from __future__ import annotations

"""Sequence joining with an optional per-element mapper.

Elements (or mapper results) are rendered with `str()` and glued with the
separator. A missing separator means the empty string, not ", ".

The mapper may be given in the separator position when no separator is
wanted, so both of these produce "246":

    join([1, 2, 3], None, lambda x: x * 2)
    join([1, 2, 3], lambda x: x * 2)
"""

from typing import Any, Callable, Iterable, Optional, Tuple, TypeVar, Union

T = TypeVar("T")

Mapper = Callable[[T], Any]
IndexedMapper = Callable[[T, int], Any]


def _split_args(separator, f) -> Tuple[str, Optional[Callable]]:
    if callable(separator):
        if f is not None:
            raise TypeError("separator must be str or None when a mapper is also given")
        return "", separator
    return separator or "", f


def join(
    xs: Iterable[T],
    separator: Union[str, Mapper, None] = None,
    f: Optional[Mapper] = None,
) -> str:
    """Join the text of every element of *xs* with *separator*.

    Args:
        xs: Elements to render; consumed once.
        separator: Text placed between consecutive elements (default "").
            A callable here is taken as *f* when *f* is omitted.
        f: Optional mapper applied to each element before rendering.

    Returns:
        The joined text; "" for an empty iterable.

    Raises:
        TypeError: If *separator* is callable and *f* is also given.
    """
    sep, mapper = _split_args(separator, f)
    if mapper is None:
        return sep.join(str(x) for x in xs)
    return sep.join(str(mapper(x)) for x in xs)


def join_indexed(
    xs: Iterable[T],
    separator: Union[str, IndexedMapper, None] = None,
    f: Optional[IndexedMapper] = None,
) -> str:
    """Index-aware `join`: *f* receives ``(element, index)``, index from 0.

    Raises:
        TypeError: If no mapper is supplied, or two are.
    """
    sep, mapper = _split_args(separator, f)
    if mapper is None:
        raise TypeError("join_indexed() requires an (element, index) mapper")
    return sep.join(str(mapper(x, i)) for i, x in enumerate(xs))
