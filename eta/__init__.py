# Core type aliases for Eta's data model.
# Code and runtime values share one representation: atoms are plain Python
# int/float/str/bool, lists are Cons cells terminated by Nil, and names are
# interned Symbols.
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type passed to special-form handlers
EvaluatorFn = Callable[..., LispValue]
