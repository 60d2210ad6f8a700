from __future__ import annotations

from eta.types.errors import EtaImproperListAccess


class NilType:
    """The empty list. Iterates as an empty sequence and is falsy."""

    __slots__ = ()

    def __repr__(self): return "nil"
    def __bool__(self): return False
    def __iter__(self): return iter(())

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)

    @property
    def head(self):
        raise EtaImproperListAccess("Cannot take the head of the empty list")

    @property
    def rest(self):
        raise EtaImproperListAccess("Cannot take the rest of the empty list")


Nil = NilType()
