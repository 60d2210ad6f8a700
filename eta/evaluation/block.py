from typing import Iterable

from eta import SExpression, LispValue, EvaluatorFn
from eta.evaluation.context import EvalContext
from eta.types.environment import Environment
from eta.types.errors import EtaEmptyBody


def evaluate_block(
    forms: Iterable[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    ctx: EvalContext,
) -> LispValue:
    """
    Evaluate `forms` in order in `env` and return the last value.

    Every form but the last is evaluated for effect outside tail position;
    the last inherits `ctx`, so a call there may come back as a DeferredCall.
    """
    forms = iter(forms)
    try:
        current = next(forms)
    except StopIteration:
        raise EtaEmptyBody("Expected at least one expression in body") from None

    settled = ctx.non_tail()
    for following in forms:
        evaluate_fn(current, env, settled)
        current = following
    return evaluate_fn(current, env, ctx)
