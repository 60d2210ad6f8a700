"""Runtime environment for Eta.

An Environment is one binding frame mapping Symbols to evaluated values,
with an `outer` link to its parent frame. Frames form a tree: every call and
every `let` block hangs a fresh frame off an existing one, and closures keep
the frame they were created in alive by holding a reference to it.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from eta import LispValue
from eta.types.errors import EtaTypeMismatch, EtaUndefinedSymbol, EtaUnboundAssignment
from eta.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def extend(self) -> Environment:
        """Return a new, empty child frame of this one."""
        return Environment(outer=self)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any earlier binding.

        Raises EtaTypeMismatch if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise EtaTypeMismatch(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def assign(self, name: Symbol, value: LispValue) -> None:
        """Update the nearest existing binding for `name` in place.

        Raises EtaUnboundAssignment if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise EtaUnboundAssignment(f"Cannot set unbound symbol {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Return the value bound to `name`, searching outward from this frame.

        Raises EtaUndefinedSymbol if the chain is exhausted.
        """
        env: Optional[Environment] = self
        while env is not None:
            try:
                return env.vars[name]
            except KeyError:
                env = env.outer
        raise EtaUndefinedSymbol(f'"{name}" is not defined')

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                with StringIO() as frame:
                    env._write_vars(frame)
                    chain.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
