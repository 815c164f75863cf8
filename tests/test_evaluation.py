import os

import pytest

from currylisp.errors import (
    ArityError,
    LispTypeError,
    RecursionDepthError,
    UnboundSymbolError,
)
from currylisp.interpreter import Interpreter
from currylisp.types.lambda_fn import Function, Macro
from currylisp.types.native_fn import NativeFunction
from currylisp.types.nil import Nil, T
from currylisp.types.pair import lisp_list
from currylisp.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", 42),
        ("2.5", 2.5),
        ('"abc"', "abc"),
        ("()", Nil),
        ("T", T),
        ("NIL", Nil),
        ("(quote (1 2))", lisp_list(1, 2)),
        ("'sym", Symbol("sym")),
        ("(if T 1 2)", 1),
        ("(if NIL 1 2)", 2),
        ("(if () 1 2)", 2),
        ("(if 0 1 2)", 1),
        ('(if "" 1 2)', 1),
        ("(progn 1 2 3)", 3),
        ("(progn)", Nil),
        ("((lambda (x) (* x x)) 7)", 49),
        ("((lambda () 5))", 5),
        ("((lambda (x)) 1)", Nil),
        ("(list 1 (+ 1 1) 3)", lisp_list(1, 2, 3)),
        ("(list)", Nil),
    ]
)
def test_evaluate_forms(interp, source, expected):
    assert interp.eval(source) == expected


def test_eval_returns_list_for_several_forms(interp):
    assert interp.eval("1 2 3") == [1, 2, 3]
    assert interp.eval("") is Nil


def test_symbols_evaluate_to_bindings(interp):
    interp.eval("(setq a 10)")
    assert interp.eval("a") == 10


def test_unbound_symbol_raises(interp):
    with pytest.raises(UnboundSymbolError, match="no such symbol exist: nope"):
        interp.eval("nope")


def test_lenient_unbound_yields_nil():
    interp = Interpreter(prelude=None, lenient_unbound=True)
    assert interp.eval("nope") is Nil
    assert interp.eval("((lambda (x) undefined-thing) 1)") is Nil


def test_lenient_unbound_from_environment_variable(monkeypatch):
    monkeypatch.setenv("CURRYLISP_LENIENT_UNBOUND", "yes")
    assert Interpreter(prelude=None).eval("nope") is Nil


def test_setq_returns_value_and_binds_in_current_scope(interp):
    assert interp.eval("(setq x (+ 1 2))") == 3
    interp.eval("(defun shadow () (setq x 99) x)")
    assert interp.eval("(shadow)") == 99
    # The function's setq did not touch the outer binding
    assert interp.eval("x") == 3


def test_set_binds_evaluated_symbol(interp):
    assert interp.eval("(set 'y 5)") == 5
    assert interp.eval("y") == 5
    with pytest.raises(LispTypeError):
        interp.eval("(set 1 5)")


def test_defun_returns_function_and_binds(interp):
    fn = interp.eval("(defun sq (x) (* x x))")
    assert isinstance(fn, Function)
    assert interp.eval("(sq 9)") == 81


def test_defun_body_is_implicit_progn(interp, capsys):
    interp.eval('(defun noisy (x) (princ "a") (princ "b") x)')
    assert interp.eval("(noisy 4)") == 4
    assert capsys.readouterr().out == "ab"


def test_dynamic_scoping_sees_callers_bindings(interp):
    interp.eval("(defun get-free () free)")
    interp.eval("(defun caller (free) (get-free))")
    assert interp.eval("(caller 17)") == 17


def test_recursion(interp):
    interp.eval("(defun fact (n) (if (<= n 1) 1 (* n (fact (- n 1)))))")
    assert interp.eval("(fact 10)") == 3628800
    assert interp.eval("(fact 25)") == 15511210043330985984000000


def test_runaway_recursion_is_a_lisp_error(interp):
    interp.eval("(defun loop-forever (n) (loop-forever n))")
    with pytest.raises(RecursionDepthError):
        interp.eval("(loop-forever 1)")


def test_special_forms_are_first_class_natives(interp):
    assert isinstance(interp.eval("if"), NativeFunction)
    assert isinstance(interp.eval("defmacro"), NativeFunction)
    # and may be shadowed like any other binding
    interp.eval("(setq progn 1)")
    assert interp.eval("progn") == 1


@pytest.mark.parametrize(
    "source, error",
    [
        ("(if T 1)", ArityError),
        ("(if T 1 2 3)", ArityError),
        ("(quote)", ArityError),
        ("(quote a b)", ArityError),
        ("(lambda)", ArityError),
        ("(lambda x x)", LispTypeError),
        ("(lambda (1) 1)", LispTypeError),
        ("(defun 1 (x) x)", LispTypeError),
        ("(defun f)", ArityError),
        ("(setq 1 2)", LispTypeError),
        ("(setq a)", ArityError),
        ("(1 2 3)", LispTypeError),
        ('("f" 1)', LispTypeError),
        ("(car 1)", LispTypeError),
        ("(car '(1) '(2))", ArityError),
    ]
)
def test_evaluation_errors(interp, source, error):
    with pytest.raises(error):
        interp.eval(source)


def test_not_callable_message(interp):
    with pytest.raises(LispTypeError, match="1 is not callable"):
        interp.eval("(1 2)")


def test_error_aborts_only_current_form(interp):
    with pytest.raises(UnboundSymbolError):
        interp.eval("(setq kept 1) (undefined) (setq lost 2)")
    assert interp.eval("kept") == 1
    with pytest.raises(UnboundSymbolError):
        interp.eval("lost")


def test_macro_form_creates_macro(interp):
    m = interp.eval("(macro (a) a)")
    assert isinstance(m, Macro)
    assert m.arity == 1


def test_prelude_string_is_evaluated():
    interp = Interpreter(prelude="(defun inc (x) (+ x 1))")
    assert interp.eval("(inc 41)") == 42


def test_prelude_files_from_config(tmp_path, monkeypatch):
    first = tmp_path / "a.lisp"
    second = tmp_path / "b.lisp"
    first.write_text("(defun inc (x) (+ x 1))")
    second.write_text("(setq answer (inc 41))")
    monkeypatch.setenv("CURRYLISP_PRELUDE_PATH", f"{first}{os.pathsep}{second}")
    interp = Interpreter()
    assert interp.eval("answer") == 42
