from eta import SExpression, LispValue, EvaluatorFn
from eta.evaluation.context import EvalContext
from eta.types.cons import car, cdr
from eta.types.environment import Environment
from eta.types.nil import Nil


def is_truthy(val: LispValue) -> bool:
    """Only nil and #f are false; 0 and "" are true."""
    return not (val is Nil or val is False)


def and_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn, ctx: EvalContext) -> bool:
    """Short-circuiting logical AND of exactly two operands.

    (and a b) evaluates `a`, and `b` only if `a` is truthy. The result is
    always #t or #f, never one of the operand values.
    """
    a, b = car(tail), car(cdr(tail))
    settled = ctx.non_tail()
    return is_truthy(evaluate_fn(a, env, settled)) and is_truthy(evaluate_fn(b, env, settled))


def or_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn, ctx: EvalContext) -> bool:
    """Short-circuiting logical OR of exactly two operands.

    (or a b) evaluates `a`, and `b` only if `a` is falsy. Returns #t or #f.
    """
    a, b = car(tail), car(cdr(tail))
    settled = ctx.non_tail()
    return is_truthy(evaluate_fn(a, env, settled)) or is_truthy(evaluate_fn(b, env, settled))
