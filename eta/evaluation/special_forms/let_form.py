from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.evaluation.block import evaluate_block
from eta.evaluation.context import EvalContext
from eta.evaluation.special_forms.define_form import binding_name
from eta.types.cons import Cons, car, cdr, is_list, lisp_str
from eta.types.environment import Environment
from eta.types.errors import EtaTypeMismatch


def let_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    ctx: EvalContext,
) -> LispValue:
    """
    (let ((name expr) ...) body...)

    All declarations share one new frame and are bound one at a time, so a
    later expr can see an earlier name (let* behaviour).
    """
    declarations = car(tail)
    if not is_list(declarations):
        raise EtaTypeMismatch("Expected list of declarations for let form")

    let_env = env.extend()
    settled = ctx.non_tail()
    for decl in declarations:
        if not isinstance(decl, Cons):
            raise EtaTypeMismatch(f"Expected declaration clause, found {lisp_str(decl)}")
        name = binding_name(decl.head, "let declaration")
        let_env.define(name, evaluate_fn(car(decl.rest), let_env, settled))

    return evaluate_block(cdr(tail), let_env, evaluate_fn, ctx)
