"""
Structural-recursion forms of the list builders and traversals.

These read exactly like the definitions: one case for EMPTY, one case for a
pair, recurse on the rest. They are kept as the reference semantics for
vireo.listutils / vireo.higher (see tests/test_recursive_parity.py).

Python stack depth grows with list length here. Use the iterative versions
for anything long.
"""

from __future__ import annotations

from typing import Any, Callable

from vireo.core.combinators import V, K, I, Selector
from vireo.core.empty import EMPTY


def _pair(h: Any, t: Any) -> Any:
    if h is EMPTY:
        raise ValueError("EMPTY is reserved as the end-of-list marker")
    return V(h)(t)


def list_of_recursive(*elements: Any) -> Any:
    if not elements:
        return EMPTY
    first, *rest = elements
    return _pair(first, list_of_recursive(*rest))


def fold_recursive(combine: Callable[[Any, Any], Any], initial: Any) -> Selector:
    def on_current(current):
        def on_rest(rest):
            acc = combine(current, initial)
            if rest is EMPTY:
                return acc
            return rest(fold_recursive(combine, acc))
        return on_rest
    return on_current


def map_recursive(transform: Callable[[Any], Any]) -> Selector:
    def on_current(current):
        def on_rest(rest):
            if rest is EMPTY:
                return _pair(transform(current), EMPTY)
            value = transform(current)
            return _pair(value, map_recursive(transform)(rest(K))(rest(K(I))))
        return on_rest
    return on_current
