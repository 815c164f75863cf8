"""Built-in functions for the currylisp runtime environment.

This module defines list processing, arithmetic, numeric and string
comparison, conversions, type inspection and binding helpers exposed to Lisp
code. Every function here receives its arguments already evaluated, as
``fn(env, args)``.
"""
from __future__ import annotations

import math
import operator
from functools import reduce
from typing import Callable

from currylisp import LispValue
from currylisp.errors import ArityError, DivisionByZeroError, LispTypeError
from currylisp.printer import format_float, to_repr
from currylisp.types.environment import Environment
from currylisp.types.lambda_fn import Function, Macro, PartialFunction
from currylisp.types.native_fn import NativeFunction
from currylisp.types.nil import Nil, NilType, T, TType, truth
from currylisp.types.pair import Pair
from currylisp.types.quoting import QUOTE_WRAPPERS
from currylisp.types.symbol import Symbol


def expect_args(name: str, args: list[LispValue], n: int) -> None:
    """Raise ArityError unless exactly `n` arguments were supplied."""
    if len(args) < n:
        raise ArityError(f"too few arguments for {name}")
    if len(args) > n:
        raise ArityError(f"too many arguments for {name}")


def is_number(x: LispValue) -> bool:
    return isinstance(x, (int, float))


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    return Pair.from_iterable(args)


def car(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the head of a list; Nil for Nil."""
    expect_args("car", args, 1)
    xs = args[0]
    if xs is Nil:
        return Nil
    if isinstance(xs, Pair):
        return xs.car
    raise LispTypeError(f"{to_repr(xs)} is not a list")


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the rest of a list; Nil for Nil."""
    expect_args("cdr", args, 1)
    xs = args[0]
    if xs is Nil:
        return Nil
    if isinstance(xs, Pair):
        return xs.cdr
    raise LispTypeError(f"{to_repr(xs)} is not a list")


def cons(env: Environment, args: list[LispValue]) -> Pair:
    """Prepend the first argument to the second; a non-list second argument makes a dotted pair."""
    expect_args("cons", args, 2)
    head, tail = args
    return Pair(head, tail)


def atom(env: Environment, args: list[LispValue]) -> LispValue:
    expect_args("atom", args, 1)
    return truth(not isinstance(args[0], Pair))


# -------------------------------
# Arithmetic
# -------------------------------
def _int_div(a: int, b: int) -> int:
    # Truncates toward zero
    if b == 0:
        raise DivisionByZeroError("division by zero")
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _float_div(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


ARITH_OPS: dict[str, tuple[Callable[[int, int], int], Callable[[float, float], float]]] = {
    "+": (operator.add, operator.add),
    "-": (operator.sub, operator.sub),
    "*": (operator.mul, operator.mul),
    "/": (_int_div, _float_div),
}
ARITH_NAMES = {"+": "add", "-": "sub", "*": "mul", "/": "div"}


def _arith(name: str) -> Callable[[Environment, list[LispValue]], LispValue]:
    int_op, float_op = ARITH_OPS[name]

    def step(acc: LispValue, x: LispValue) -> LispValue:
        if isinstance(acc, int) and isinstance(x, int):
            return int_op(acc, x)
        return float_op(float(acc), float(x))

    def fold(env: Environment, args: list[LispValue]) -> LispValue:
        if len(args) < 2:
            raise ArityError(f"too few arguments for {name}")
        # Validate everything before computing anything
        for x in args:
            if not is_number(x):
                raise LispTypeError(
                    f"{name} cannot be applied to non-numeric object {to_repr(x)}"
                )
        return reduce(step, args[1:], args[0])

    fold.__name__ = f"arith_{ARITH_NAMES[name]}"
    fold.__doc__ = f"({name} a b ...): left fold; any float argument promotes to float."
    return fold


# -------------------------------
# Comparison
# -------------------------------
NUM_COMPARISONS: dict[str, Callable[[LispValue, LispValue], bool]] = {
    "=": operator.eq,
    "/=": operator.ne,
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
}


def _compare_numbers(name: str):
    op = NUM_COMPARISONS[name]

    def compare(env: Environment, args: list[LispValue]) -> LispValue:
        expect_args(name, args, 2)
        a, b = args
        if not is_number(a) or not is_number(b):
            raise LispTypeError(
                f"{name} cannot be applied to non-numeric objects: "
                f"lhs is {to_repr(a)} and rhs is {to_repr(b)}"
            )
        if isinstance(a, float) or isinstance(b, float):
            a, b = float(a), float(b)
        return truth(op(a, b))

    return compare


STRING_COMPARISONS: dict[str, tuple[Callable[[str, str], bool], bool]] = {
    "string=": (operator.eq, False),
    "string/=": (operator.ne, False),
    "string<": (operator.lt, False),
    "string>": (operator.gt, False),
    "string<=": (operator.le, False),
    "string>=": (operator.ge, False),
    "string-equal": (operator.eq, True),
}


def _compare_strings(name: str):
    op, ignore_case = STRING_COMPARISONS[name]

    def compare(env: Environment, args: list[LispValue]) -> LispValue:
        expect_args(name, args, 2)
        a, b = args
        if not isinstance(a, str) or not isinstance(b, str):
            raise LispTypeError(f"arguments of {name} must be string")
        if ignore_case:
            a, b = a.lower(), b.lower()
        return truth(op(a, b))

    return compare


# -------------------------------
# Strings and conversions
# -------------------------------
def concat(env: Environment, args: list[LispValue]) -> str:
    """(concat s1 s2 ...): join strings."""
    for a in args:
        if not isinstance(a, str):
            raise LispTypeError("arguments of concat must be string")
    return "".join(args)


def int_to_string(env: Environment, args: list[LispValue]) -> str:
    expect_args("int-to-string", args, 1)
    x = args[0]
    if not isinstance(x, int):
        raise LispTypeError(f"given object is not an integer: {to_repr(x)}")
    return str(x)


def num_to_string(env: Environment, args: list[LispValue]) -> str:
    expect_args("num-to-string", args, 1)
    x = args[0]
    if not isinstance(x, float):
        raise LispTypeError(f"given object is not a number: {to_repr(x)}")
    return format_float(x)


def type_name(value: LispValue) -> str:
    """Name of the variant of `value`, as reported by type-of."""
    if isinstance(value, Pair):
        return "List"
    if isinstance(value, TType):
        return "T"
    if isinstance(value, NilType):
        return "NIL"
    if isinstance(value, int):
        return "Integer"
    if isinstance(value, float):
        return "Number"
    if isinstance(value, str):
        return "String"
    if isinstance(value, Symbol):
        return "Symbol"
    if isinstance(value, Function):
        return "Function"
    if isinstance(value, PartialFunction):
        return "PartiallyAppliedFunction"
    if isinstance(value, Macro):
        return "Macro"
    if isinstance(value, NativeFunction):
        return "NativeFunction"
    if isinstance(value, QUOTE_WRAPPERS):
        return value.type_name
    raise LispTypeError(f"not a Lisp value: {value!r}")


def type_of(env: Environment, args: list[LispValue]) -> str:
    expect_args("type-of", args, 1)
    return type_name(args[0])


def debug(env: Environment, args: list[LispValue]) -> str:
    """(debug x): the printed representation of x as a string."""
    expect_args("debug", args, 1)
    return to_repr(args[0])


# -------------------------------
# Binding
# -------------------------------
def set_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(set 'name value): bind in the calling scope and return the value."""
    expect_args("set", args, 2)
    name, value = args
    if not isinstance(name, Symbol):
        raise LispTypeError(f"first argument of set must be symbol, got {to_repr(name)}")
    env.bind(name, value)
    return value


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    "list": list_builtin,
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "atom": atom,
    **{name: _arith(name) for name in ARITH_OPS},
    **{name: _compare_numbers(name) for name in NUM_COMPARISONS},
    **{name: _compare_strings(name) for name in STRING_COMPARISONS},
    "concat": concat,
    "int-to-string": int_to_string,
    "num-to-string": num_to_string,
    "type-of": type_of,
    "debug": debug,
    "set": set_builtin,
}


def register(env: Environment):
    env.update({Symbol(name): NativeFunction(name, fn) for name, fn in BUILTINS.items()})
    env.update({
        Symbol("T"): T,
        Symbol("NIL"): Nil,
    })
