from eta import SExpression, LispValue, EvaluatorFn
from eta.evaluation.context import EvalContext
from eta.types.cons import car
from eta.types.environment import Environment


def quote_form(
    tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn, _: EvalContext
) -> LispValue:
    return car(tail)
