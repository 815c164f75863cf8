"""Special form: defmacro.

Binds a macro in the current scope, exactly as defun binds a function.
"""

from __future__ import annotations

from currylisp import EvaluatorFn, SExpression, LispValue
from currylisp.errors import ArityError, LispTypeError
from currylisp.types.symbol import Symbol
from currylisp.types.environment import Environment
from currylisp.evaluation.special_forms.lambda_form import macro_form


def defmacro_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Bind the macro named by the first argument, with params/body in the rest."""
    if len(tail) < 2:
        raise ArityError("too few arguments for defmacro")

    macro_name = tail[0]
    if not isinstance(macro_name, Symbol):
        raise LispTypeError(f"first argument of defmacro must be symbol, got {macro_name!r}")

    macro = macro_form(tail[1:], env, evaluate_fn)
    env.bind(macro_name, macro)
    return macro
