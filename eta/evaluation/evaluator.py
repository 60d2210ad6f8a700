"""Core evaluator for the Eta interpreter.

Dispatches on expression shape: symbols are looked up, lists headed by a
special-form keyword go to their handler, other lists are calls, and
everything else evaluates to itself. Calls in the tail position of a
function body are returned as DeferredCall values for the trampoline in
`eta.evaluation.apply` instead of being made on the spot.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Iterable

from eta import SExpression, LispValue
from eta.evaluation.apply import trampoline
from eta.evaluation.block import evaluate_block
from eta.evaluation.context import EvalContext, TOP_LEVEL
from eta.evaluation.special_forms import SPECIAL_FORMS
from eta.types.cons import Cons
from eta.types.deferred_call import DeferredCall
from eta.types.environment import Environment
from eta.types.errors import EtaStackExhausted
from eta.types.symbol import Symbol

logger = logging.getLogger(__name__)


def _guard_stack(fn):
    """Report Python stack exhaustion from non-tail recursion as an EtaError."""
    @wraps(fn)
    def _(*args, **kws):
        try:
            return fn(*args, **kws)
        except RecursionError as e:
            logger.warning("Evaluation exhausted the stack in %s", fn.__name__)
            raise EtaStackExhausted(
                "Maximum recursion depth exceeded (non-tail recursion is not optimised)"
            ) from e
    return _


def _evaluate_form(expr: SExpression, env: Environment, ctx: EvalContext) -> LispValue:
    logger.debug("Evaluating %s", expr)
    return evaluate0(expr, env, ctx)


@_guard_stack
def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate one expression at top level."""
    return _evaluate_form(expr, env, TOP_LEVEL)


@_guard_stack
def evaluate_all(exprs: Iterable[SExpression], env: Environment) -> LispValue:
    """Evaluate expressions in order at top level and return the last value.

    Stops at the first error. An empty sequence raises EtaEmptyBody.
    """
    return evaluate_block(exprs, env, _evaluate_form, TOP_LEVEL)


@_guard_stack
def apply_function(fn: LispValue, args: list[LispValue], env: Environment) -> LispValue:
    """Call a function value with evaluated arguments, running tail calls to completion."""
    return trampoline(fn, list(args), env, evaluate0)


def evaluate0(
    expr: SExpression,
    env: Environment,
    ctx: EvalContext = TOP_LEVEL,
) -> LispValue | DeferredCall:
    """
    Core evaluator: a single step under the given context.
    Returns either a value or, in the tail of a function body, a DeferredCall.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)
        case Cons(head=Symbol() as keyword) if keyword in SPECIAL_FORMS:
            return SPECIAL_FORMS[keyword](expr.rest, env, evaluate0, ctx)
        case Cons():
            return evaluate_call(expr, env, ctx)

    # --- Atoms and nil return as-is ---
    return expr


def evaluate_call(expr: Cons, env: Environment, ctx: EvalContext) -> LispValue | DeferredCall:
    """Evaluate operator then operands left to right, then call or defer."""
    settled = ctx.non_tail()
    fn = evaluate0(expr.head, env, settled)
    args = [evaluate0(arg, env, settled) for arg in expr.rest]

    if ctx.defers_calls:
        return DeferredCall(fn, args)
    return trampoline(fn, args, env, evaluate0)
