# vireo/programs.py
"""
Named list "programs" built from the combinator core.

Each constructor returns a Program whose ``fn`` takes a list (a pair chain
or EMPTY) and returns either a new list or a plain value:

    - length_program      : count elements                    (scalar)
    - sum_program         : sum elements from 0               (scalar)
    - product_program     : multiply elements from 1          (scalar)
    - double_program      : map x -> 2x                       (list)
    - succ_list_program   : map x -> x + 1                    (list)
    - identity_program    : map I                             (list)
    - reverse_program     : fold V(cur)(acc) from EMPTY       (list)

Bodies only use fold / map and the K, I, V primitives.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from vireo.core.combinators import I, V
from vireo.core.empty import EMPTY
from vireo.higher import fold_list, map_list, length


RETURNS_LIST = "list"
RETURNS_SCALAR = "scalar"


@dataclass(frozen=True)
class Program:
    """A named transformation from a list to a list or a scalar."""

    name: str
    fn: Callable[[Any], Any]
    returns: str = RETURNS_LIST
    doc: str = ""

    def __call__(self, lst: Any) -> Any:
        return self.fn(lst)


def length_program() -> Program:
    return Program("length", length, RETURNS_SCALAR, "number of elements")


def sum_program() -> Program:
    return Program(
        "sum",
        lambda lst: fold_list(lambda cur, acc: cur + acc, 0, lst),
        RETURNS_SCALAR,
        "sum of the elements",
    )


def product_program() -> Program:
    return Program(
        "product",
        lambda lst: fold_list(lambda cur, acc: cur * acc, 1, lst),
        RETURNS_SCALAR,
        "product of the elements (1 for the empty list)",
    )


def double_program() -> Program:
    return Program(
        "double",
        lambda lst: map_list(lambda x: x * 2, lst),
        RETURNS_LIST,
        "each element doubled",
    )


def succ_list_program() -> Program:
    return Program(
        "succ-list",
        lambda lst: map_list(lambda x: x + 1, lst),
        RETURNS_LIST,
        "each element incremented",
    )


def identity_program() -> Program:
    return Program(
        "identity",
        lambda lst: map_list(I, lst),
        RETURNS_LIST,
        "a fresh copy of the list",
    )


def reverse_program() -> Program:
    # Folding with V conses each element onto the accumulator.
    return Program(
        "reverse",
        lambda lst: fold_list(lambda cur, acc: V(cur)(acc), EMPTY, lst),
        RETURNS_LIST,
        "elements in reverse order",
    )


BUILTIN_PROGRAMS = (
    length_program,
    sum_program,
    product_program,
    double_program,
    succ_list_program,
    identity_program,
    reverse_program,
)
