"""User-defined callables: functions, partially applied functions and macros.

Neither functions nor macros capture the scope they were created in; every
invocation opens a fresh scope under the caller's environment.
"""

from __future__ import annotations

from currylisp import SExpression, LispValue
from currylisp.errors import ArityError, LispTypeError
from currylisp.types.nil import Nil
from currylisp.types.pair import Pair, to_list
from currylisp.types.symbol import Symbol


def parse_params(form: SExpression, kind: str) -> list[Symbol]:
    """Validate a parameter list form (Nil or a proper list of symbols)."""
    if form is Nil:
        return []
    if not isinstance(form, Pair):
        raise LispTypeError(f"first argument of {kind} must be list")
    params = to_list(form, f"{kind} parameter list")
    for p in params:
        if not isinstance(p, Symbol):
            raise LispTypeError(f"list elements of {kind} must be symbol, got {p!r}")
    return params


class _Callable:
    __slots__ = ("params", "body")
    kind = ""

    def __init__(self, params: list[Symbol], body: list[SExpression]):
        for p in params:
            if not isinstance(p, Symbol):
                raise LispTypeError(f"{self.kind} parameter must be symbol, got {p!r}")
        self.params: list[Symbol] = list(params)
        self.body: list[SExpression] = list(body)

    @classmethod
    def from_forms(cls, params_form: SExpression, body_forms: list[SExpression]):
        return cls(parse_params(params_form, cls.kind), body_forms)

    @property
    def arity(self) -> int:
        return len(self.params)

    def __repr__(self) -> str:
        from currylisp.printer import to_repr
        return to_repr(self)


class Function(_Callable):
    """A lambda: positional parameters and a body evaluated as an implicit progn."""

    __slots__ = ()
    kind = "lambda"


class Macro(_Callable):
    """Same shape as Function; called with unevaluated arguments and re-evaluated."""

    __slots__ = ()
    kind = "macro"


class PartialFunction:
    """A Function with some leading arguments already bound."""

    __slots__ = ("function", "supplied")

    def __init__(self, function: Function, supplied: list[LispValue]):
        if len(supplied) >= function.arity:
            raise ArityError(
                f"partial application needs fewer than {function.arity} arguments, "
                f"got {len(supplied)}"
            )
        self.function: Function = function
        self.supplied: tuple[LispValue, ...] = tuple(supplied)

    def __repr__(self) -> str:
        from currylisp.printer import to_repr
        return to_repr(self)
