from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.evaluation.block import evaluate_block
from eta.evaluation.context import EvalContext
from eta.types.environment import Environment


def begin_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    ctx: EvalContext,
) -> LispValue:
    return evaluate_block(tail, env, evaluate_fn, ctx)
