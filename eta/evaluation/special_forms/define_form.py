from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.evaluation.context import EvalContext
from eta.types.cons import car, cdr, lisp_str
from eta.types.environment import Environment
from eta.types.errors import EtaTypeMismatch
from eta.types.symbol import Symbol


def binding_name(name: SExpression, form: str) -> Symbol:
    if not isinstance(name, Symbol):
        raise EtaTypeMismatch(
            f"Symbol required for {form}; received {lisp_str(name)}, which is a {type(name).__name__}"
        )
    return name


def define_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    ctx: EvalContext,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame, shadowing any outer binding, and returns the value.
    """
    name = binding_name(car(tail), "define")
    value = evaluate_fn(car(cdr(tail)), env, ctx.non_tail())
    env.define(name, value)
    return value
