"""Built-in functions for the Eta runtime environment.

Native handles all share the signature fn(env, args): `env` is the caller's
environment and `args` a Python list of already-evaluated values.
"""
from __future__ import annotations

import operator
from typing import Callable

from eta import LispValue
from eta.evaluation.evaluator import apply_function
from eta.evaluation.special_forms.logic_forms import is_truthy
from eta.types.cons import cons as make_cons, car as list_car, cdr as list_cdr
from eta.types.cons import is_list, lisp_str, make_list, values_equal
from eta.types.environment import Environment
from eta.types.errors import EtaArityMismatch, EtaError, EtaTypeMismatch
from eta.types.nil import Nil
from eta.types.symbol import Symbol


def _check_arity(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        raise EtaArityMismatch(f"{name} requires exactly {count} argument(s), got {len(args)}")


def _is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _numbers(name: str, args: list[LispValue]) -> list[LispValue]:
    for arg in args:
        if not _is_number(arg):
            raise EtaTypeMismatch(f"All arguments to {name} must be numbers, got {lisp_str(arg)}")
    return args


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments."""
    return sum(_numbers("+", args))


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise EtaArityMismatch("- requires at least 1 argument")
    first, *rest = _numbers("-", args)
    if not rest:
        return -first
    for x in rest:
        first -= x
    return first


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    result = 1
    for x in _numbers("*", args):
        result *= x
    return result


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide the first number by the rest; integers divide exactly when they can."""
    if not args:
        raise EtaArityMismatch("/ requires at least 1 argument")
    first, *rest = _numbers("/", args)
    if not rest:
        first, rest = 1, [first]
    try:
        for x in rest:
            if isinstance(first, int) and isinstance(x, int) and first % x == 0:
                first //= x
            else:
                first /= x
    except ZeroDivisionError:
        raise EtaError("Division by zero") from None
    return first


def mod(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("mod", args, 2)
    a, b = _numbers("mod", args)
    if b == 0:
        raise EtaError("Division by zero")
    return a % b


# -------------------------------
# Comparison
# -------------------------------
def equals(env: Environment, args: list[LispValue]) -> bool:
    """#t if all arguments are structurally equal (or zero/one arg)."""
    return all(values_equal(a, b) for a, b in zip(args, args[1:]))


def _comparison(name: str, op: Callable[[LispValue, LispValue], bool]):
    def compare(env: Environment, args: list[LispValue]) -> bool:
        _numbers(name, args)
        return all(op(a, b) for a, b in zip(args, args[1:]))
    compare.__name__ = name
    return compare


lt = _comparison("<", operator.lt)
lte = _comparison("<=", operator.le)
gt = _comparison(">", operator.gt)
gte = _comparison(">=", operator.ge)


def logical_not(env: Environment, args: list[LispValue]) -> bool:
    _check_arity("not", args, 1)
    return not is_truthy(args[0])


# -------------------------------
# List operations
# -------------------------------
def cons(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("cons", args, 2)
    return make_cons(args[0], args[1])


def car(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("car", args, 1)
    return list_car(args[0])


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("cdr", args, 1)
    return list_cdr(args[0])


def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    return make_list(args)


def null(env: Environment, args: list[LispValue]) -> bool:
    _check_arity("null?", args, 1)
    return args[0] is Nil


def length(env: Environment, args: list[LispValue]) -> int:
    _check_arity("length", args, 1)
    if not is_list(args[0]):
        raise EtaTypeMismatch(f"length expects a list, got {lisp_str(args[0])}")
    return sum(1 for _ in args[0])


# -------------------------------
# Application and output
# -------------------------------
def apply(env: Environment, args: list[LispValue]) -> LispValue:
    """(apply fn list) calls fn with the elements of list as its arguments."""
    _check_arity("apply", args, 2)
    fn, fn_args = args
    if not is_list(fn_args):
        raise EtaTypeMismatch(f"apply expects a list of arguments, got {lisp_str(fn_args)}")
    return apply_function(fn, list(fn_args), env)


def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Print arguments separated by spaces; strings are printed without quotes."""
    print(" ".join(a if isinstance(a, str) else lisp_str(a) for a in args))
    return Nil


def register(env: Environment) -> None:
    """Register all builtin functions into the given (root) environment."""
    env.update(
        {
            Symbol("+"): add,
            Symbol("-"): sub,
            Symbol("*"): mul,
            Symbol("/"): div,
            Symbol("mod"): mod,
            Symbol("="): equals,
            Symbol("<"): lt,
            Symbol("<="): lte,
            Symbol(">"): gt,
            Symbol(">="): gte,
            Symbol("not"): logical_not,
            Symbol("cons"): cons,
            Symbol("car"): car,
            Symbol("cdr"): cdr,
            Symbol("list"): list_builtin,
            Symbol("null?"): null,
            Symbol("length"): length,
            Symbol("apply"): apply,
            Symbol("print"): print_builtin,
        }
    )
