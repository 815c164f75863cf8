"""Reader-produced quote wrappers: 'x, `x, ,x and ,@x."""

from __future__ import annotations

from currylisp import SExpression


class _Wrapper:
    __slots__ = ("value",)
    prefix = ""
    type_name = ""

    def __init__(self, value: SExpression):
        self.value: SExpression = value

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        from currylisp.printer import to_repr
        return to_repr(self)


class Quoted(_Wrapper):
    __slots__ = ()
    prefix = "'"
    type_name = "Quoted"


class Backquoted(_Wrapper):
    __slots__ = ()
    prefix = "`"
    type_name = "BackQuoted"


class Comma(_Wrapper):
    __slots__ = ()
    prefix = ","
    type_name = "Comma"


class CommaSplice(_Wrapper):
    __slots__ = ()
    prefix = ",@"
    type_name = "CommaSplice"


QUOTE_WRAPPERS = (Quoted, Backquoted, Comma, CommaSplice)
