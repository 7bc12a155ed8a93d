# vireo/__init__.py
"""
vireo public API surface.

Lists and pairs as nothing but functions:

    - Primitives: K, I, V
    - Selectors: VALUE (= K), NEXT (= K(I))
    - End of list: EMPTY
    - Lists: list_of, list_from_py, py_from_list, cons, is_empty,
             head, tail, nth, iter_list
    - Traversals: fold, map_, fold_list, map_list, length, sum_list
    - Pretty: pretty_list
    - High-level API: ints_to_list, list_to_ints, run_named_list_program
"""

from __future__ import annotations

from .core.combinators import K, I, V, VALUE, NEXT
from .core.empty import EMPTY

from .listutils import (
    cons,
    list_of,
    list_from_py,
    py_from_list,
    is_empty,
    head,
    tail,
    nth,
    iter_list,
)

from .higher import (
    fold,
    map_,
    fold_list,
    map_list,
    length,
    sum_list,
)

from .pretty import pretty_list

from .api import (
    ints_to_list,
    list_to_ints,
    run_named_list_program,
)


__version__ = "0.1.0"

__all__ = [
    # core
    "K",
    "I",
    "V",
    "VALUE",
    "NEXT",
    "EMPTY",

    # lists
    "cons",
    "list_of",
    "list_from_py",
    "py_from_list",
    "is_empty",
    "head",
    "tail",
    "nth",
    "iter_list",

    # traversals
    "fold",
    "map_",
    "fold_list",
    "map_list",
    "length",
    "sum_list",

    # pretty
    "pretty_list",

    # high-level API
    "ints_to_list",
    "list_to_ints",
    "run_named_list_program",
]
