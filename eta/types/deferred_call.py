from eta import LispValue


class DeferredCall:
    """A call in tail position, held back until the trampoline runs it.

    Only the evaluator creates these and only the trampoline consumes them.
    """

    __slots__ = ("fn", "args")

    def __init__(self, fn: LispValue, args: list[LispValue]):
        self.fn = fn
        self.args = args

    def __repr__(self):
        return f"<DeferredCall {self.fn!r}>"
