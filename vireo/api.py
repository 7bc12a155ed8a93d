# vireo/api.py
"""
High-level vireo API helpers.

A small, stable surface for running named programs on Python data:

    - ints_to_list(xs)          : [int] -> combinator list
    - list_to_ints(lst)         : combinator list -> [int]
    - run_named_list_program    : look up a named program and run it
"""

from __future__ import annotations

from typing import Any, List

from vireo.listutils import list_from_py, py_from_list
from .program_registry import get_program
from .programs import RETURNS_LIST


def ints_to_list(xs: List[int]) -> Any:
    """Encode a Python list of ints as a combinator list."""
    return list_from_py([int(x) for x in xs])


def list_to_ints(lst: Any) -> List[int]:
    """
    Decode a combinator list of ints back to Python ints.

    Raises TypeError if any element is not an int.
    """
    out: List[int] = []
    for elem in py_from_list(lst):
        if isinstance(elem, bool) or not isinstance(elem, int):
            raise TypeError(f"Element is not an integer: {elem!r}")
        out.append(elem)
    return out


def run_named_list_program(name: str, xs: List[int]) -> List[int] | int:
    """
    Look up a named program and run it on a list of Python ints.

    Args:
        name: Registered program name (e.g. "succ-list").
        xs:   Input list of integers.

    Returns:
        A list of ints for list programs, a single int for scalar ones.

    Raises:
        KeyError   if no such program is registered.
        TypeError  if the program yields anything other than ints.
    """
    prog = get_program(name)
    if prog is None:
        raise KeyError(f"No program named {name!r} is registered")

    result = prog(ints_to_list(xs))
    if prog.returns == RETURNS_LIST:
        return list_to_ints(result)
    if isinstance(result, bool) or not isinstance(result, int):
        raise TypeError(f"Scalar program {name!r} returned a non-integer: {result!r}")
    return result
