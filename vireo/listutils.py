# vireo/listutils.py
"""
List encoding helpers.

Design:
-------
* Lists are chains of pairs:
      list_of()        -> EMPTY
      list_of(a, ...)  -> V(a)(list_of(...))

* Access is application:
      lst(VALUE)        head
      lst(NEXT)         rest (EMPTY after the last element)

Everything here goes through VALUE / NEXT. Nothing peeks inside closures.
Builders are iterative so list length is not bounded by the interpreter
recursion limit; see vireo.recursive for the literal recursive forms.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List

from vireo.core.combinators import V, VALUE, NEXT
from vireo.core.empty import EMPTY


# ---------------------------------------------------------------------------
# Core constructors
# ---------------------------------------------------------------------------

def cons(h: Any, t: Any) -> Any:
    """Cons cell: V(h)(t)."""
    if h is EMPTY:
        raise ValueError("EMPTY is reserved as the end-of-list marker")
    return V(h)(t)


def list_of(*elements: Any) -> Any:
    """
    Build a list from its arguments, first argument at the head.

    Example:
        list_of(1, 2, 3)  ->  V(1)(V(2)(V(3)(EMPTY)))
    """
    return list_from_py(elements)


def list_from_py(seq: Iterable[Any]) -> Any:
    """Build a list from any Python iterable, preserving order."""
    items = list(seq)
    m = EMPTY
    for item in reversed(items):
        m = cons(item, m)
    return m


# ---------------------------------------------------------------------------
# Recognizers and accessors
# ---------------------------------------------------------------------------

def is_empty(lst: Any) -> bool:
    """Return True if lst is the end-of-list marker."""
    return lst is EMPTY


def head(lst: Any) -> Any:
    """Return the first element of a non-empty list."""
    if lst is EMPTY:
        raise TypeError("head: list is empty")
    return lst(VALUE)


def tail(lst: Any) -> Any:
    """Return the rest of a non-empty list (EMPTY after the last element)."""
    if lst is EMPTY:
        raise TypeError("tail: list is empty")
    return lst(NEXT)


def nth(lst: Any, n: int) -> Any:
    """Return the element at index n, following NEXT n times."""
    if n < 0:
        raise ValueError("nth only supports n>=0")
    cur = lst
    for _ in range(n):
        if cur is EMPTY:
            break
        cur = cur(NEXT)
    if cur is EMPTY:
        raise IndexError(f"nth: index {n} past end of list")
    return cur(VALUE)


def iter_list(lst: Any) -> Iterator[Any]:
    """Yield elements head to tail."""
    cur = lst
    while cur is not EMPTY:
        yield cur(VALUE)
        cur = cur(NEXT)


# ---------------------------------------------------------------------------
# Back to Python
# ---------------------------------------------------------------------------

def py_from_list(lst: Any) -> List[Any]:
    """Convert a list back to a Python list."""
    return list(iter_list(lst))
