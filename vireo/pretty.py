# vireo/pretty.py
"""
Pretty-print helpers for combinator lists.

Pairs are closures, so they have no useful repr of their own. These helpers
walk a list with VALUE / NEXT and render it compactly:

    pretty_list(list_of(1, 2, 3))   -> "⟨1, 2, 3⟩"
    pretty_list(EMPTY)              -> "⟨⟩"

A closure cannot tell us whether it is a pair, so callable elements are
shown as "λ" unless the caller says the list is nested (``nested=True``),
in which case they are rendered as lists too, down to ``max_depth``.
"""

from __future__ import annotations

from typing import Any

from vireo.core.combinators import VALUE, NEXT
from vireo.core.empty import EMPTY


def pretty_value(v: Any) -> str:
    """Render a single non-list value."""
    if v is EMPTY:
        return "⟨⟩"
    if callable(v):
        return "λ"
    return repr(v)


def pretty_list(
    lst: Any,
    *,
    max_width: int = 8,
    nested: bool = False,
    max_depth: int = 4,
) -> str:
    """Render a list as ⟨a, b, ...⟩, truncating after max_width elements."""
    if lst is EMPTY:
        return "⟨⟩"
    if max_depth <= 0:
        return "⟨…⟩"

    parts = []
    cur = lst
    while cur is not EMPTY:
        if len(parts) >= max_width:
            parts.append("…")
            break
        elem = cur(VALUE)
        if nested and callable(elem):
            parts.append(
                pretty_list(elem, max_width=max_width, nested=True, max_depth=max_depth - 1)
            )
        else:
            parts.append(pretty_value(elem))
        cur = cur(NEXT)
    return "⟨" + ", ".join(parts) + "⟩"
