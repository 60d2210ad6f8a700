"""Closure representation and argument binding for Eta."""

from __future__ import annotations

from io import StringIO

from eta import SExpression, LispValue
from eta.types.cons import make_list, lisp_str
from eta.types.environment import Environment
from eta.types.errors import EtaArityMismatch
from eta.types.symbol import Symbol, REST_MARKER


class Closure:
    """A first-class function: parameter names, body forms and captured env."""

    __slots__ = ("params", "body", "env", "name")

    def __init__(
        self,
        params: tuple[Symbol, ...],
        body: tuple[SExpression, ...],
        env: Environment,
        name: Symbol | None = None,
    ):
        self.params: tuple[Symbol, ...] = params
        self.body: tuple[SExpression, ...] = body
        # Shared with every other closure and call made in the same scope
        self.env: Environment = env
        self.name: Symbol | None = name

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")")
            for form in self.body:
                buffer.write(" ")
                buffer.write(lisp_str(form))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def bind_arguments(self, args: list[LispValue]) -> Environment:
        """
        Bind evaluated `args` to this closure's parameters and return the
        fresh call frame, parented to the captured environment.

        Parameters are bound positionally. When the rest marker is reached it
        is bound to a list of every remaining argument (possibly empty) and
        binding stops. Surplus arguments without a rest marker are ignored.
        """
        frame = self.env.extend()
        for index, param in enumerate(self.params):
            if param == REST_MARKER:
                frame.define(REST_MARKER, make_list(args[index:]))
                break
            if index >= len(args):
                required = [p for p in self.params if p != REST_MARKER]
                raise EtaArityMismatch(
                    f"{self.name or 'lambda'} expects {len(required)} argument(s), got {len(args)}"
                )
            frame.define(param, args[index])
        return frame
