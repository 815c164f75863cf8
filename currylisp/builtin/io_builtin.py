"""Console output and input builtins."""
from __future__ import annotations

import re
import sys

from currylisp import LispValue
from currylisp.builtin.env_builtin import expect_args
from currylisp.errors import LispTypeError, ReadError
from currylisp.printer import to_display, to_repr
from currylisp.runtime_context import get_console_input
from currylisp.types.environment import Environment
from currylisp.types.native_fn import NativeFunction
from currylisp.types.symbol import Symbol

INTEGER_INPUT_RE = re.compile(r"[+-]?\d+")
NUMBER_INPUT_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def _emit(text: str) -> None:
    # Resolve sys.stdout at call time so redirected output is honoured
    sys.stdout.write(text)
    sys.stdout.flush()


def write(env: Environment, args: list[LispValue]) -> LispValue:
    expect_args("write", args, 1)
    _emit(to_repr(args[0]))
    return args[0]


def prin1(env: Environment, args: list[LispValue]) -> LispValue:
    expect_args("prin1", args, 1)
    _emit(to_repr(args[0]))
    return args[0]


def princ(env: Environment, args: list[LispValue]) -> LispValue:
    """(princ x): like prin1 but strings are written without quotes."""
    expect_args("princ", args, 1)
    _emit(to_display(args[0]))
    return args[0]


def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(print x): a newline, then the readable form of x."""
    expect_args("print", args, 1)
    _emit("\n" + to_repr(args[0]))
    return args[0]


def write_line(env: Environment, args: list[LispValue]) -> str:
    expect_args("write-line", args, 1)
    line = args[0]
    if not isinstance(line, str):
        raise LispTypeError(f"argument of write-line must be string, got {to_repr(line)}")
    _emit(line + "\n")
    return line


def _next_token(what: str) -> str:
    token = get_console_input().next_token()
    if token is None:
        raise ReadError(f"failed to read {what}: end of input")
    return token


def read_str(env: Environment, args: list[LispValue]) -> str:
    expect_args("read-str", args, 0)
    return _next_token("a string")


def read_int(env: Environment, args: list[LispValue]) -> int:
    expect_args("read-int", args, 0)
    token = _next_token("an integer")
    if not INTEGER_INPUT_RE.fullmatch(token):
        raise ReadError(f"failed to read an integer from {token!r}")
    return int(token)


def read_num(env: Environment, args: list[LispValue]) -> float:
    expect_args("read-num", args, 0)
    token = _next_token("a number")
    if not NUMBER_INPUT_RE.fullmatch(token):
        raise ReadError(f"failed to read a number from {token!r}")
    return float(token)


IO_BUILTINS = {
    "write": write,
    "write-line": write_line,
    "print": print_builtin,
    "prin1": prin1,
    "princ": princ,
    "read-str": read_str,
    "read-int": read_int,
    "read-num": read_num,
}


def register(env: Environment):
    env.update({Symbol(name): NativeFunction(name, fn) for name, fn in IO_BUILTINS.items()})
