from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.evaluation.context import EvalContext
from eta.evaluation.special_forms.logic_forms import is_truthy
from eta.types.cons import Cons, car, lisp_str
from eta.types.environment import Environment
from eta.types.errors import EtaTypeMismatch
from eta.types.nil import Nil


def cond_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    ctx: EvalContext,
) -> LispValue:
    """
    (cond (test1 expr1) (test2 expr2) ...)
    Tests run in order; the branch of the first truthy test is evaluated in
    the caller's tail context and later clauses are never looked at.
    """
    settled = ctx.non_tail()
    for clause in tail:
        if not isinstance(clause, Cons):
            raise EtaTypeMismatch(f"Expected conditional clause, found {lisp_str(clause)}")
        then_expr = car(clause.rest)
        if is_truthy(evaluate_fn(clause.head, env, settled)):
            return evaluate_fn(then_expr, env, ctx)
    return Nil
