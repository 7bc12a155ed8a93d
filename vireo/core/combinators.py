"""
VIREO COMBINATOR CORE
=====================
No records, no fields. Pure application.

K(x)(y)    = x          kestrel
I(x)       = x          identity
V(x)(y)(f) = f(x)(y)    vireo (pair)

Selecting from a pair needs no new primitive:

V(x)(y)(K)    = K(x)(y)    = x
V(x)(y)(K(I)) = K(I)(x)(y) = I(y) = y

Everything else (lists, fold, map) is built on these three.
"""

from __future__ import annotations

from typing import Any, Callable

Selector = Callable[[Any], Callable[[Any], Any]]


def K(x):
    """Kestrel: return a function that ignores its argument and yields x."""
    return lambda y: x


def I(x):
    """Identity."""
    return x


def V(x):
    """
    Vireo: curry two values into a pair.

    The pair only forwards x and y, in that order, to whatever selector it
    is applied to. It never inspects them.
    """
    return lambda y: lambda f: f(x)(y)


# ---------- selector idioms ----------

VALUE = K       # first of a pair / head of a list
NEXT = K(I)     # second of a pair / rest of a list
