"""Registry of special forms for the Eta evaluator.

Maps keyword Symbols to handlers implementing non-standard evaluation rules.
Every handler takes (operands, env, evaluate_fn, ctx), where `operands` is
the list following the keyword. The evaluator consults this table before
treating a list as a function call.
"""

from eta.types.symbol import Symbol
from eta.evaluation.special_forms.define_form import define_form
from eta.evaluation.special_forms.set_form import set_form
from eta.evaluation.special_forms.lambda_form import lambda_form, defun_form
from eta.evaluation.special_forms.quote_form import quote_form
from eta.evaluation.special_forms.let_form import let_form
from eta.evaluation.special_forms.begin_form import begin_form
from eta.evaluation.special_forms.cond_form import cond_form
from eta.evaluation.special_forms.if_form import if_form
from eta.evaluation.special_forms.logic_forms import and_form, or_form

SPECIAL_FORMS = {
    Symbol("define"): define_form,
    Symbol("set"): set_form,
    Symbol("defun"): defun_form,
    Symbol("lambda"): lambda_form,
    Symbol("quote"): quote_form,
    Symbol("let"): let_form,
    Symbol("begin"): begin_form,
    Symbol("cond"): cond_form,
    Symbol("if"): if_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
}
