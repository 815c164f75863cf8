"""Textual representation of values.

`to_repr` gives the machine-readable form used by the REPL echo, `write`,
`prin1`, `print` and `debug`; `to_display` is the human form used by `princ`,
which differs only in printing strings without quotes.
"""

from __future__ import annotations

from io import StringIO

from currylisp import LispValue
from currylisp.errors import RecursionDepthError
from currylisp.types.lambda_fn import Function, Macro, PartialFunction
from currylisp.types.native_fn import NativeFunction
from currylisp.types.nil import NilType, TType
from currylisp.types.pair import Pair
from currylisp.types.quoting import QUOTE_WRAPPERS
from currylisp.types.symbol import Symbol


def format_float(x: float) -> str:
    return f"{x:f}"


def _write(value: LispValue, buffer: StringIO, readable: bool) -> None:
    if isinstance(value, NilType):
        buffer.write("NIL")
    elif isinstance(value, TType):
        buffer.write("T")
    elif isinstance(value, int):
        buffer.write(str(value))
    elif isinstance(value, float):
        buffer.write(format_float(value))
    elif isinstance(value, str):
        buffer.write(f'"{value}"' if readable else value)
    elif isinstance(value, Symbol):
        buffer.write(value.id)
    elif isinstance(value, Pair):
        buffer.write("(")
        cell: LispValue = value
        first = True
        while isinstance(cell, Pair):
            if not first:
                buffer.write(" ")
            _write(cell.car, buffer, readable)
            first = False
            cell = cell.cdr
        if not isinstance(cell, NilType):
            buffer.write(" . ")
            _write(cell, buffer, readable)
        buffer.write(")")
    elif isinstance(value, QUOTE_WRAPPERS):
        buffer.write(value.prefix)
        _write(value.value, buffer, readable)
    elif isinstance(value, (Function, Macro)):
        buffer.write("<FUNCTION (" if isinstance(value, Function) else "<MACRO (")
        buffer.write(" ".join(p.id for p in value.params))
        buffer.write(")")
        for form in value.body:
            buffer.write(" ")
            _write(form, buffer, readable)
        buffer.write(">")
    elif isinstance(value, PartialFunction):
        buffer.write("<PARTIAL ")
        _write(value.function, buffer, readable)
        for arg in value.supplied:
            buffer.write(" ")
            _write(arg, buffer, readable)
        buffer.write(">")
    elif isinstance(value, NativeFunction):
        buffer.write(f"<NATIVE {value.name}>")
    else:
        buffer.write(repr(value))


def _render(value: LispValue, readable: bool) -> str:
    with StringIO() as buffer:
        try:
            _write(value, buffer, readable)
        except RecursionError:
            raise RecursionDepthError("value nested too deeply to print") from None
        return buffer.getvalue()


def to_repr(value: LispValue) -> str:
    return _render(value, True)


def to_display(value: LispValue) -> str:
    return _render(value, False)
