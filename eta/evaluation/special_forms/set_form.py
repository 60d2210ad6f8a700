from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.evaluation.context import EvalContext
from eta.evaluation.special_forms.define_form import binding_name
from eta.types.cons import car, cdr
from eta.types.environment import Environment


def set_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    ctx: EvalContext,
) -> LispValue:
    """(set name value) -- rebinds the nearest existing `name`, returns the value."""
    name = binding_name(car(tail), "set")
    value = evaluate_fn(car(cdr(tail)), env, ctx.non_tail())
    env.assign(name, value)
    return value
