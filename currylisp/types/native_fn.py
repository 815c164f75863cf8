from __future__ import annotations

from typing import Callable

from currylisp import LispValue


class NativeFunction:
    """A primitive implemented in Python.

    `fn` is called as ``fn(env, args)``. When `raw_args` is set the primitive is
    a special form: `args` holds the unevaluated argument expressions and `fn`
    is called as ``fn(args, env, evaluate_fn)`` instead.
    """

    __slots__ = ("name", "fn", "raw_args")

    def __init__(self, name: str, fn: Callable[..., LispValue], raw_args: bool = False):
        self.name = name
        self.fn = fn
        self.raw_args = raw_args

    def __repr__(self) -> str:
        return f"<NATIVE {self.name}>"
