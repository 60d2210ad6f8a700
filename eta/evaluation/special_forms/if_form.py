from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.evaluation.context import EvalContext
from eta.evaluation.special_forms.logic_forms import is_truthy
from eta.types.cons import Cons, car, cdr
from eta.types.environment import Environment
from eta.types.nil import Nil


def if_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    ctx: EvalContext,
) -> LispValue:
    """(if cond then [else]) -- a missing else yields nil."""
    condition = car(tail)
    then_expr = car(cdr(tail))
    else_part = cdr(cdr(tail))

    if is_truthy(evaluate_fn(condition, env, ctx.non_tail())):
        return evaluate_fn(then_expr, env, ctx)
    if isinstance(else_part, Cons):
        return evaluate_fn(else_part.head, env, ctx)
    return Nil
