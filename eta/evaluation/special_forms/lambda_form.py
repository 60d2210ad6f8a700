import logging

from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.evaluation.context import EvalContext
from eta.evaluation.special_forms.define_form import binding_name
from eta.types.closure import Closure
from eta.types.cons import car, cdr, is_list, lisp_str
from eta.types.environment import Environment
from eta.types.errors import EtaTypeMismatch
from eta.types.nil import Nil
from eta.types.symbol import Symbol

logger = logging.getLogger(__name__)


def parameter_names(params: SExpression) -> tuple[Symbol, ...]:
    if not is_list(params):
        raise EtaTypeMismatch(f"Expected list of parameter names, received {lisp_str(params)}")
    names = []
    for index, param in enumerate(params):
        if not isinstance(param, Symbol):
            raise EtaTypeMismatch(
                f"Expected list of parameter names, but parameter {index} is a {type(param).__name__}"
            )
        names.append(param)
    return tuple(names)


def make_closure(
    params: SExpression, body: SExpression, env: Environment, name: Symbol | None = None
) -> Closure:
    # An empty body is accepted here and reported when the closure is called.
    return Closure(parameter_names(params), tuple(body), env, name)


def lambda_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: EvalContext,
) -> LispValue:
    """(lambda (params...) body...) -- an anonymous closure over the current env."""
    return make_closure(car(tail), cdr(tail), env)


def defun_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: EvalContext,
) -> LispValue:
    """(defun name (params...) body...) -- defines a named closure, returns nil."""
    name = binding_name(car(tail), "defun")
    rest = cdr(tail)
    closure = make_closure(car(rest), cdr(rest), env, name)
    env.define(name, closure)
    logger.debug("defun %s %s", name, closure)
    return Nil
