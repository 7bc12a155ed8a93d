# vireo/higher.py
"""
Fold and map over combinator lists.

Both are *selectors*: curried functions of (current)(rest) that a list is
applied to, exactly like VALUE and NEXT:

    lst(fold(combine, initial))   -> accumulated result
    lst(map_(transform))          -> new list

A selector only ever sees a non-empty list, so the empty case lives in the
``*_list`` wrappers:

    fold_list(combine, initial, EMPTY)  -> initial
    map_list(transform, EMPTY)          -> EMPTY

The traversals loop on NEXT instead of recursing. Observable behavior is
the same as the structural forms in vireo.recursive.
"""

from __future__ import annotations

from typing import Any, Callable

from vireo.core.combinators import VALUE, NEXT, Selector
from vireo.core.empty import EMPTY
from vireo.listutils import list_from_py


Combine = Callable[[Any, Any], Any]


def fold(combine: Combine, initial: Any) -> Selector:
    """
    Left fold, head to tail.

    Each element e is combined once as ``combine(e, acc)``; the final
    accumulator is returned when the chain reaches EMPTY.
    """
    def on_current(current):
        def on_rest(rest):
            acc = combine(current, initial)
            cur = rest
            while cur is not EMPTY:
                acc = combine(cur(VALUE), acc)
                cur = cur(NEXT)
            return acc
        return on_rest
    return on_current


def map_(transform: Callable[[Any], Any]) -> Selector:
    """
    Rebuild a list with every element passed through transform.

    The result is a fresh chain of pairs, same length and order. The last
    element is closed off with EMPTY rather than descending into it.
    """
    def on_current(current):
        def on_rest(rest):
            out = [transform(current)]
            cur = rest
            while cur is not EMPTY:
                out.append(transform(cur(VALUE)))
                cur = cur(NEXT)
            return list_from_py(out)
        return on_rest
    return on_current


# ---------------------------------------------------------------------------
# Empty-safe entry points
# ---------------------------------------------------------------------------

def fold_list(combine: Combine, initial: Any, lst: Any) -> Any:
    """Fold lst, returning initial unchanged for EMPTY."""
    if lst is EMPTY:
        return initial
    return lst(fold(combine, initial))


def map_list(transform: Callable[[Any], Any], lst: Any) -> Any:
    """Map over lst, returning EMPTY for EMPTY."""
    if lst is EMPTY:
        return EMPTY
    return lst(map_(transform))


# ---------------------------------------------------------------------------
# Common folds
# ---------------------------------------------------------------------------

def length(lst: Any) -> int:
    """Number of elements."""
    return fold_list(lambda current, acc: acc + 1, 0, lst)


def sum_list(lst: Any) -> Any:
    """Sum of the elements, starting from 0."""
    return fold_list(lambda current, acc: current + acc, 0, lst)
