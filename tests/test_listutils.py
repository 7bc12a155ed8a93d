import sys

import pytest

from vireo import (
    EMPTY,
    K,
    I,
    V,
    NEXT,
    VALUE,
    cons,
    head,
    is_empty,
    iter_list,
    list_from_py,
    list_of,
    nth,
    py_from_list,
    tail,
)


# =============================================================================
# Hand-built chain
# =============================================================================

class TestHandBuiltList:
    """A list built directly from V, walked with K and K(I)."""

    @pytest.fixture
    def lst(self):
        return V(1)(V(2)(V(3)(V(4)(V(5)(EMPTY)))))

    def test_first_node(self, lst):
        assert lst(K) == 1

    def test_second_node(self, lst):
        assert lst(K(I))(K) == 2

    def test_third_node(self, lst):
        assert lst(NEXT)(NEXT)(VALUE) == 3

    def test_fifth_node_then_end(self, lst):
        fourth = lst(NEXT)(NEXT)(NEXT)
        assert fourth(VALUE) == 4

        fifth = fourth(NEXT)
        assert fifth(VALUE) == 5
        assert fifth(NEXT) is EMPTY


# =============================================================================
# Variadic constructor
# =============================================================================

def test_list_of_three():
    lst = list_of("a", "b", "c")
    assert lst(K) == "a"
    assert lst(K(I))(K) == "b"
    assert lst(K(I))(K(I))(K) == "c"
    assert lst(K(I))(K(I))(K(I)) is EMPTY


def test_list_of_nothing_is_empty():
    assert list_of() is EMPTY
    assert is_empty(list_of())


def test_list_of_keeps_identity_of_elements():
    a, b = object(), object()
    lst = list_of(a, b)
    assert head(lst) is a
    assert head(tail(lst)) is b


def test_list_of_accepts_none_and_falsey_elements():
    lst = list_of(None, 0, "", False)
    assert py_from_list(lst) == [None, 0, "", False]


def test_list_of_one_to_five_end_to_end():
    lst = list_of(1, 2, 3, 4, 5)
    fifth = lst(NEXT)(NEXT)(NEXT)(NEXT)
    assert fifth(VALUE) == 5
    assert fifth(NEXT) is EMPTY


def test_empty_marker_cannot_be_an_element():
    with pytest.raises(ValueError):
        list_of(1, EMPTY, 2)
    with pytest.raises(ValueError):
        cons(EMPTY, EMPTY)


def test_list_of_is_not_limited_by_recursion_depth():
    n = sys.getrecursionlimit() * 3
    lst = list_from_py(range(n))
    assert nth(lst, n - 1) == n - 1


def test_nested_lists_are_plain_elements():
    inner = list_of(1, 2)
    outer = list_of(inner, 3)
    assert head(outer) is inner
    assert py_from_list(head(outer)) == [1, 2]
    with pytest.raises(ValueError):
        list_of(inner, list_of())


# =============================================================================
# Accessors
# =============================================================================

def test_head_and_tail():
    lst = list_of(7, 8)
    assert head(lst) == 7
    assert head(tail(lst)) == 8
    assert tail(tail(lst)) is EMPTY


def test_head_and_tail_of_empty_raise_type_error():
    with pytest.raises(TypeError, match="head"):
        head(EMPTY)
    with pytest.raises(TypeError, match="tail"):
        tail(EMPTY)


def test_nth():
    lst = list_of("x", "y", "z")
    assert [nth(lst, i) for i in range(3)] == ["x", "y", "z"]


def test_nth_out_of_range():
    lst = list_of("x")
    with pytest.raises(IndexError):
        nth(lst, 1)
    with pytest.raises(IndexError):
        nth(lst, 5)
    with pytest.raises(IndexError):
        nth(EMPTY, 0)
    with pytest.raises(ValueError):
        nth(lst, -1)


def test_iter_list_is_lazy_and_ordered():
    it = iter_list(list_of(1, 2, 3))
    assert next(it) == 1
    assert list(it) == [2, 3]
    assert list(iter_list(EMPTY)) == []


def test_py_roundtrip_from_generator():
    lst = list_from_py(x * x for x in range(4))
    assert py_from_list(lst) == [0, 1, 4, 9]
