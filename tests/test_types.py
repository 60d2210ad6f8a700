import pytest

from eta.types.closure import Closure
from eta.types.cons import Cons, car, cdr, cons, lisp_str, make_list, values_equal
from eta.types.environment import Environment
from eta.types.errors import (
    EtaArityMismatch,
    EtaImproperListAccess,
    EtaTypeMismatch,
    EtaUndefinedSymbol,
    EtaUnboundAssignment,
)
from eta.types.nil import Nil
from eta.types.symbol import Symbol, REST_MARKER


# ------------------ Symbols and lists ------------------

def test_symbols_are_interned_and_compare_by_name():
    assert Symbol("abc") == Symbol("".join(["a", "b", "c"]))
    assert Symbol("abc") != "abc"
    assert len({Symbol("x"), Symbol("x")}) == 1


def test_car_and_cdr_of_nil_fail():
    with pytest.raises(EtaImproperListAccess):
        car(Nil)
    with pytest.raises(EtaImproperListAccess):
        cdr(Nil)
    with pytest.raises(EtaImproperListAccess):
        Nil.head


def test_car_of_non_list_is_type_mismatch():
    with pytest.raises(EtaTypeMismatch):
        car(5)


def test_cons_prepends_one_element():
    lst = make_list([2, 3])
    longer = cons(1, lst)
    assert list(longer) == [1, 2, 3]
    assert longer.rest is lst
    assert list(lst) == [2, 3]


def test_cons_requires_list_tail():
    with pytest.raises(EtaTypeMismatch):
        cons(1, 2)


def test_cons_cells_are_immutable():
    cell = Cons(1)
    with pytest.raises(AttributeError):
        cell.head = 2


def test_iteration_is_restartable():
    lst = make_list([1, 2, 3])
    assert list(lst) == list(lst) == [1, 2, 3]
    assert list(Nil) == []


def test_structural_equality():
    a = make_list([1, make_list([Symbol("x"), "s"])])
    b = make_list([1, make_list([Symbol("x"), "s"])])
    assert a == b
    assert hash(a) == hash(b)
    assert a != make_list([1])
    assert make_list([]) is Nil


def test_booleans_are_not_numbers():
    assert not values_equal(True, 1)
    assert not values_equal(0, False)
    assert make_list([1]) != make_list([True])


def test_long_lists_do_not_recurse():
    items = list(range(200_000))
    assert make_list(items) == make_list(items)
    assert sum(1 for _ in make_list(items)) == 200_000


@pytest.mark.parametrize(
    "value, text",
    [
        (Nil, "nil"),
        (True, "#t"),
        (False, "#f"),
        (42, "42"),
        (Symbol("foo"), "foo"),
        ('say "hi"', '"say \\"hi\\""'),
        (make_list([1, Symbol("a"), make_list([2]), Nil]), "(1 a (2) nil)"),
    ]
)
def test_display_format(value, text):
    assert lisp_str(value) == text


def test_display_of_functions():
    def plus(env, args):
        return sum(args)

    closure = Closure((Symbol("x"),), (make_list([Symbol("+"), Symbol("x"), 1]),), Environment())
    assert lisp_str(plus) == "<native plus>"
    assert str(closure) == "(lambda (x) (+ x 1))"


# ------------------ Environment ------------------

def test_define_and_lookup():
    env = Environment()
    env.define(Symbol("x"), 5)
    assert env.lookup(Symbol("x")) == 5
    env.define(Symbol("x"), 6)
    assert env.lookup(Symbol("x")) == 6


def test_define_requires_symbol():
    with pytest.raises(EtaTypeMismatch):
        Environment().define("x", 1)


def test_lookup_walks_parent_chain():
    root = Environment()
    root.define(Symbol("x"), 1)
    child = root.extend().extend()
    assert child.lookup(Symbol("x")) == 1
    assert child.find(Symbol("x")) is root
    assert child.find(Symbol("y")) is None
    with pytest.raises(EtaUndefinedSymbol):
        child.lookup(Symbol("y"))


def test_define_in_child_shadows_without_touching_parent():
    root = Environment()
    root.define(Symbol("x"), 1)
    child = root.extend()
    child.define(Symbol("x"), 2)
    assert child.lookup(Symbol("x")) == 2
    assert root.lookup(Symbol("x")) == 1


def test_assign_mutates_nearest_binding():
    root = Environment()
    root.define(Symbol("x"), 1)
    middle = root.extend()
    leaf = middle.extend()
    leaf.assign(Symbol("x"), 10)
    assert root.lookup(Symbol("x")) == 10
    assert Symbol("x") not in leaf.vars
    assert Symbol("x") not in middle.vars


def test_assign_unbound_fails_and_creates_nothing():
    leaf = Environment().extend()
    with pytest.raises(EtaUnboundAssignment):
        leaf.assign(Symbol("nope"), 1)
    assert leaf.find(Symbol("nope")) is None


def test_environment_repr_shows_chain():
    root = Environment()
    root.define(Symbol("a"), 1)
    child = root.extend()
    child.define(Symbol("b"), 2)
    assert str(child) == "{b: 2} -> ..."
    assert repr(child) == "<Environment chain: {b: 2} -> {a: 1}>"


# ------------------ Closure binding ------------------

def test_bind_arguments_positional():
    env = Environment()
    closure = Closure((Symbol("a"), Symbol("b")), (Symbol("a"),), env)
    frame = closure.bind_arguments([1, 2])
    assert frame.outer is env
    assert frame.lookup(Symbol("a")) == 1
    assert frame.lookup(Symbol("b")) == 2


def test_bind_arguments_rest_marker():
    closure = Closure((Symbol("a"), REST_MARKER), (Symbol("a"),), Environment())
    assert closure.bind_arguments([1]).lookup(REST_MARKER) is Nil
    assert closure.bind_arguments([1, 2, 3]).lookup(REST_MARKER) == make_list([2, 3])


def test_bind_arguments_too_few():
    closure = Closure((Symbol("a"), Symbol("b")), (Symbol("a"),), Environment(), Symbol("f"))
    with pytest.raises(EtaArityMismatch, match="f expects 2"):
        closure.bind_arguments([1])
