"""Cons cells.

A list is a chain of Pair cells terminated by Nil. `cdr` may hold any value
when a cell is built directly (a dotted pair). Cells are only mutated while a
chain is being built by `ListBuilder`; once handed to the evaluator
they are treated as immutable, so no chain can become cyclic.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from currylisp import LispValue
from currylisp.errors import LispTypeError
from currylisp.types.nil import Nil


class Pair:
    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue = Nil):
        self.car: LispValue = car
        self.cdr: LispValue = cdr

    @classmethod
    def from_iterable(cls, items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
        """Build a chain from `items`; an empty iterable gives `tail` itself."""
        builder = ListBuilder()
        for item in items:
            builder.append(item)
        return builder.build(tail)

    def __iter__(self) -> Iterator[LispValue]:
        """Iterate the elements of a proper list; an improper tail is an error."""
        cell: LispValue = self
        while isinstance(cell, Pair):
            yield cell.car
            cell = cell.cdr
        if cell is not Nil:
            raise LispTypeError(f"improper list: {self!r}")

    def __len__(self) -> int:
        n = 0
        for _ in self:
            n += 1
        return n

    def __eq__(self, other: object) -> bool:
        a: LispValue = self
        b: LispValue = other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        return not isinstance(a, Pair) and not isinstance(b, Pair) and a == b

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        from currylisp.printer import to_repr
        return to_repr(self)


class ListBuilder:
    """Accumulates elements with O(1) appends, then yields a Pair chain."""

    __slots__ = ("head", "tail")

    def __init__(self):
        self.head: Pair | None = None
        self.tail: Pair | None = None

    def append(self, value: LispValue) -> None:
        cell = Pair(value)
        if self.tail is None:
            self.head = cell
        else:
            self.tail.cdr = cell
        self.tail = cell

    def extend(self, values: Iterable[LispValue]) -> None:
        for v in values:
            self.append(v)

    def build(self, tail: LispValue = Nil) -> LispValue:
        if self.head is None:
            return tail
        self.tail.cdr = tail
        return self.head


def to_list(value: LispValue, what: str = "argument list") -> list[LispValue]:
    """Convert Nil or a proper Pair chain to a Python list."""
    if value is Nil:
        return []
    if isinstance(value, Pair):
        cell: LispValue = value
        out: list[LispValue] = []
        while isinstance(cell, Pair):
            out.append(cell.car)
            cell = cell.cdr
        if cell is not Nil:
            raise LispTypeError(f"{what} must be a proper list")
        return out
    raise LispTypeError(f"{what} must be a list")


def lisp_list(*items: LispValue) -> LispValue:
    return Pair.from_iterable(items)
