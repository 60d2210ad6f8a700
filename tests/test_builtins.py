import pytest

from eta.types.cons import make_list
from eta.types.errors import EtaArityMismatch, EtaError, EtaImproperListAccess, EtaTypeMismatch
from eta.types.nil import Nil


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(+)", 0),
        ("(+ 1 2 3)", 6),
        ("(- 5)", -5),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 6 3)", 2),
        ("(/ 7 2)", 3.5),
        ("(/ 2)", 0.5),
        ("(mod 7 3)", 1),
        ("(= 1 1 1)", True),
        ("(= 1 2)", False),
        ("(= '(1 2) (list 1 2))", True),
        ("(= 1 #t)", False),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(>= 3 3 1)", True),
        ("(not nil)", True),
        ("(not 0)", False),
        ("(cons 1 '(2))", make_list([1, 2])),
        ("(cons 1 nil)", make_list([1])),
        ("(car '(1 2))", 1),
        ("(cdr '(1 2))", make_list([2])),
        ("(cdr '(1))", Nil),
        ("(list)", Nil),
        ("(null? nil)", True),
        ("(null? '(1))", False),
        ("(length '(a b c))", 3),
        ("(apply + '(1 2 3))", 6),
        ("(apply (lambda (a b) (- a b)) (list 10 4))", 6),
    ]
)
def test_builtins(interp, source, expected):
    result = interp.eval(source)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize("source", ['(+ 1 "a")', "(< 1 'b)", "(cons 1 2)", "(length 5)", "(apply + 5)", "(+ #t 1)"])
def test_type_errors(interp, source):
    with pytest.raises(EtaTypeMismatch):
        interp.eval(source)


@pytest.mark.parametrize("source", ["(car nil)", "(cdr nil)"])
def test_empty_list_access(interp, source):
    with pytest.raises(EtaImproperListAccess):
        interp.eval(source)


@pytest.mark.parametrize("source", ["(-)", "(car)", "(cons 1)", "(not 1 2)"])
def test_builtin_arity(interp, source):
    with pytest.raises(EtaArityMismatch):
        interp.eval(source)


def test_division_by_zero(interp):
    with pytest.raises(EtaError, match="Division by zero"):
        interp.eval("(/ 1 0)")
    with pytest.raises(EtaError, match="Division by zero"):
        interp.eval("(mod 1 0)")


def test_apply_runs_tail_calls_of_its_function(interp):
    interp.eval("(defun down (n) (if (= n 0) 'bottom (down (- n 1))))")
    assert str(interp.eval("(apply down '(40000))")) == "bottom"


def test_print(interp, capsys):
    assert interp.eval('(print "hi" 1 \'a (list #t nil))') is Nil
    assert capsys.readouterr().out == "hi 1 a (#t nil)\n"
