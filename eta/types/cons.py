"""Cons cells and list helpers for Eta.

Lists are immutable chains of Cons cells ending in Nil. Traversal is always
iterative so very long lists never touch the recursion limit.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator

from eta import LispValue
from eta.types.errors import EtaImproperListAccess, EtaTypeMismatch
from eta.types.nil import Nil, NilType
from eta.types.symbol import Symbol


class Cons:
    """A single immutable list cell."""

    __slots__ = ("head", "rest")

    def __init__(self, head: LispValue, rest: Cons | NilType = Nil):
        object.__setattr__(self, "head", head)
        object.__setattr__(self, "rest", rest)

    def __setattr__(self, name, value):
        raise AttributeError("Cons cells are immutable")

    def __iter__(self) -> Iterator[LispValue]:
        cell = self
        while isinstance(cell, Cons):
            yield cell.head
            cell = cell.rest

    def __bool__(self):
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cons):
            return False
        a, b = self, other
        while isinstance(a, Cons) and isinstance(b, Cons):
            if a is b:
                return True
            if not values_equal(a.head, b.head):
                return False
            a, b = a.rest, b.rest
        return a == b

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __str__(self) -> str:
        return lisp_str(self)

    def __repr__(self) -> str:
        return lisp_str(self)


def values_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality that keeps booleans distinct from 0 and 1."""
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    return a == b


def is_list(value: LispValue) -> bool:
    return value is Nil or isinstance(value, Cons)


def cons(head: LispValue, rest: Cons | NilType) -> Cons:
    """Prepend `head` to the list `rest`."""
    if not is_list(rest):
        raise EtaTypeMismatch(f"cons expects a list as its second argument, got {lisp_str(rest)}")
    return Cons(head, rest)


def car(value: LispValue) -> LispValue:
    if isinstance(value, Cons):
        return value.head
    if value is Nil:
        raise EtaImproperListAccess("car of empty list")
    raise EtaTypeMismatch(f"car expects a list, got {lisp_str(value)}")


def cdr(value: LispValue) -> Cons | NilType:
    if isinstance(value, Cons):
        return value.rest
    if value is Nil:
        raise EtaImproperListAccess("cdr of empty list")
    raise EtaTypeMismatch(f"cdr expects a list, got {lisp_str(value)}")


def make_list(items: Iterable[LispValue]) -> Cons | NilType:
    """Build a proper list from any finite iterable."""
    result: Cons | NilType = Nil
    for item in reversed(list(items)):
        result = Cons(item, result)
    return result


_str_trans = str.maketrans({'"': '\\"', "\\": "\\\\", "\n": "\\n"})


def lisp_str(value: LispValue) -> str:
    """Render a value the way the reader would write it."""
    if value is True:
        return "#t"
    if value is False:
        return "#f"
    if value is Nil:
        return "nil"
    if isinstance(value, str):
        return '"' + value.translate(_str_trans) + '"'
    if isinstance(value, Symbol):
        return value.id
    if isinstance(value, Cons):
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(" ".join(lisp_str(item) for item in value))
            buffer.write(")")
            return buffer.getvalue()
    if isinstance(value, (int, float)):
        return str(value)
    if callable(value):
        return f"<native {getattr(value, '__name__', type(value).__name__)}>"
    return str(value)
