"""Runtime environment for currylisp.

An Environment is one scope: a mapping of Symbols to values plus a link to
the enclosing scope. The root scope holds the primitives and globals; each
function or macro invocation pushes a child scope under the caller's scope.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from currylisp import LispValue
from currylisp.errors import LispTypeError, UnboundSymbolError
from currylisp.types.nil import Nil
from currylisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer", "lenient_unbound")

    def __init__(self, outer: Optional[Environment] = None, lenient_unbound: bool = False):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        # Only consulted on the root scope
        self.lenient_unbound = lenient_unbound

    def child(self) -> Environment:
        """Open a new innermost scope whose outer scope is this one."""
        return Environment(outer=self)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def bind(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this scope, shadowing any outer binding.

        Raises LispTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispTypeError(f"Cannot bind {name!r}: not a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest scope in the chain that binds `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost scope first.

        A miss raises UnboundSymbolError, or yields Nil when the root scope
        was created with `lenient_unbound`.
        """
        env = self.find(name)
        if env is not None:
            return env.vars[name]
        if self.root().lenient_unbound:
            return Nil
        raise UnboundSymbolError(f"no such symbol exist: {name}")

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-bind a mapping of Symbol -> value in this scope."""
        for k, v in mapping.items():
            self.bind(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
