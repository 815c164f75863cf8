import pytest

from currylisp.errors import LispTypeError, UnboundSymbolError
from currylisp.types.environment import Environment
from currylisp.types.nil import Nil
from currylisp.types.symbol import Symbol


def test_symbols_are_interned():
    assert Symbol("abc") == Symbol("abc")
    assert Symbol("abc") is not Symbol("abc")
    assert Symbol("abc").id is Symbol("abc").id
    assert Symbol("abc") != Symbol("abd")
    assert hash(Symbol("x")) == hash(Symbol("x"))


def test_lookup_falls_through_the_chain():
    root = Environment()
    root.bind(Symbol("a"), 1)
    inner = root.child().child()
    assert inner.lookup(Symbol("a")) == 1
    assert inner.find(Symbol("a")) is root
    assert inner.root() is root


def test_inner_binding_shadows_outer():
    root = Environment()
    root.bind(Symbol("a"), 1)
    inner = root.child()
    inner.bind(Symbol("a"), 2)
    assert inner.lookup(Symbol("a")) == 2
    assert root.lookup(Symbol("a")) == 1


def test_root_miss_raises_unless_lenient():
    with pytest.raises(UnboundSymbolError):
        Environment().child().lookup(Symbol("missing"))
    lenient = Environment(lenient_unbound=True)
    assert lenient.child().lookup(Symbol("missing")) is Nil


def test_bind_requires_symbol():
    with pytest.raises(LispTypeError):
        Environment().bind("a", 1)


def test_contains_and_iter():
    root = Environment()
    root.update({Symbol("a"): 1, Symbol("b"): 2})
    inner = root.child()
    assert Symbol("a") in inner
    assert Symbol("z") not in inner
    assert list(root) == [Symbol("a"), Symbol("b")]
    assert list(inner) == []


def test_str_and_repr():
    root = Environment()
    root.bind(Symbol("a"), 1)
    inner = root.child()
    inner.bind(Symbol("b"), "x")
    assert str(inner) == "{b: 'x'} -> ..."
    assert repr(inner) == "<Environment chain: {b: 'x'} -> {a: 1}>"
