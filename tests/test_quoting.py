import pytest

from currylisp.errors import LispSyntaxError, LispTypeError
from currylisp.printer import to_repr
from currylisp.types.nil import Nil
from currylisp.types.pair import lisp_list
from currylisp.types.quoting import Backquoted, Comma, Quoted
from currylisp.types.symbol import Symbol


def test_quote_returns_form_unevaluated(interp):
    assert interp.eval("(quote (+ 1 2))") == lisp_list(Symbol("+"), 1, 2)
    assert interp.eval("'(+ 1 2)") == lisp_list(Symbol("+"), 1, 2)


def test_quote_of_quote_is_a_list(interp):
    result = interp.eval("(quote (quote X))")
    assert result == lisp_list(Symbol("quote"), Symbol("X"))


def test_nested_reader_quote_keeps_wrapper(interp):
    assert interp.eval("''a") == Quoted(Symbol("a"))
    assert to_repr(interp.eval("''a")) == "'a"


def test_quoted_empty_list_is_nil(interp):
    assert interp.eval("'()") is Nil


def test_backquote_without_commas_is_literal(interp):
    assert interp.eval("`(1 2 3)") == lisp_list(1, 2, 3)
    assert interp.eval("`a") == Symbol("a")


def test_backquote_with_comma(interp):
    interp.eval("(setq x 10)")
    assert interp.eval("`(a ,x b)") == lisp_list(Symbol("a"), 10, Symbol("b"))
    assert interp.eval("`(a ,(+ x 1))") == lisp_list(Symbol("a"), 11)


def test_backquote_comma_at_top_level(interp):
    interp.eval("(setq x 10)")
    assert interp.eval("`,x") == 10


def test_backquote_with_splice(interp):
    interp.eval("(setq xs '(2 3))")
    assert interp.eval("`(1 ,@xs 4)") == lisp_list(1, 2, 3, 4)
    assert interp.eval("`(,@xs)") == lisp_list(2, 3)


def test_splice_of_nil_contributes_nothing(interp):
    assert interp.eval("`(1 ,@() 2)") == lisp_list(1, 2)
    assert interp.eval("`(,@'())") is Nil


def test_splice_of_non_list_is_type_error(interp):
    with pytest.raises(LispTypeError):
        interp.eval("`(1 ,@5)")


def test_splice_outside_list_is_syntax_error(interp):
    with pytest.raises(LispSyntaxError):
        interp.eval("`,@'(1 2)")


def test_substitution_inside_nested_lists(interp):
    interp.eval("(setq y 7)")
    assert interp.eval("`(a (b ,y))") == lisp_list(Symbol("a"), lisp_list(Symbol("b"), 7))


def test_substitution_inside_quote(interp):
    interp.eval("(setq y 7)")
    assert interp.eval("`'(a ,y)") == Quoted(lisp_list(Symbol("a"), 7))


def test_nested_backquote_keeps_inner_commas(interp):
    interp.eval("(setq y 7)")
    result = interp.eval("`(a `(b ,y))")
    inner = Backquoted(lisp_list(Symbol("b"), Comma(Symbol("y"))))
    assert result == lisp_list(Symbol("a"), inner)


def test_backquote_does_not_mutate_template(interp):
    interp.eval("(defun make (v) `(item ,v))")
    assert interp.eval("(make 1)") == lisp_list(Symbol("item"), 1)
    assert interp.eval("(make 2)") == lisp_list(Symbol("item"), 2)


@pytest.mark.parametrize("source", [",x", ",@x", "(list ,x)"])
def test_comma_outside_backquote_is_illegal(interp, source):
    interp.eval("(setq x 1)")
    with pytest.raises(LispSyntaxError, match="comma is illegal outside of backquote"):
        interp.eval(source)
