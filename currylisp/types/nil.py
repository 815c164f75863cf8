from __future__ import annotations


class NilType:
    """The empty list and the only false value."""

    __slots__ = ()

    def __repr__(self): return "NIL"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash("NIL")

    def __iter__(self):
        return iter(())

    def __len__(self):
        return 0


class TType:
    """The canonical true value."""

    __slots__ = ()

    def __repr__(self): return "T"
    def __bool__(self): return True

    def __eq__(self, other):
        return isinstance(other, TType)

    def __hash__(self):
        return hash("T")


Nil = NilType()
T = TType()


def truth(flag: bool) -> TType | NilType:
    return T if flag else Nil
