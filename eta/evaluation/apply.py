"""Application engine for Eta.

`invoke` performs exactly one call of a closure or native handle. A closure
body evaluated by `invoke` may finish with a DeferredCall for its own tail
call; `trampoline` keeps invoking those until a real value comes back, which
is what lets tail recursion run without growing the Python stack.
"""

from eta import LispValue, EvaluatorFn
from eta.evaluation.block import evaluate_block
from eta.evaluation.context import FUNCTION_BODY
from eta.types.closure import Closure
from eta.types.cons import lisp_str
from eta.types.deferred_call import DeferredCall
from eta.types.environment import Environment
from eta.types.errors import EtaNotCallable


def invoke(
    fn: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | DeferredCall:
    """Call `fn` once with already-evaluated `args`.

    - Closure: bind args in a frame off the captured env and run the body
      as a block in tail position.
    - Native handle (any Python callable): called as fn(env, args).
    - Otherwise raise EtaNotCallable.
    """
    match fn:
        case Closure():
            frame = fn.bind_arguments(args)
            return evaluate_block(fn.body, frame, evaluate_fn, FUNCTION_BODY)
        case _ if callable(fn):
            return fn(env, args)
        case _:
            raise EtaNotCallable(f"{lisp_str(fn)} is not callable")


def trampoline(
    fn: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Invoke `fn`, then keep invoking DeferredCalls until a plain value comes back."""
    result = invoke(fn, args, env, evaluate_fn)
    while isinstance(result, DeferredCall):
        result = invoke(result.fn, result.args, env, evaluate_fn)
    return result
