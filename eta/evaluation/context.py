"""Per-step evaluation context threaded through the evaluator.

Two facts decide whether a call runs now or is handed to the trampoline:
whether evaluation is inside a function body at all, and whether the
expression is the final act of that body.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EvalContext:
    in_function: bool = False
    tail_position: bool = False

    @property
    def defers_calls(self) -> bool:
        """True when a call here must become a DeferredCall."""
        return self.in_function and self.tail_position

    def non_tail(self) -> EvalContext:
        """Context for a subexpression whose value the enclosing form still needs."""
        return FUNCTION_NON_TAIL if self.in_function else TOP_LEVEL


TOP_LEVEL = EvalContext()
FUNCTION_BODY = EvalContext(in_function=True, tail_position=True)
FUNCTION_NON_TAIL = EvalContext(in_function=True, tail_position=False)
