"""Core evaluator for the currylisp interpreter.

Dispatches on the variant of the expression: symbols are looked up, quote
wrappers are unwrapped (backquote with comma substitution), lists are
applications, and everything else evaluates to itself.
"""

from __future__ import annotations

from currylisp import SExpression, LispValue
from currylisp.errors import LispSyntaxError, RecursionDepthError
from currylisp.evaluation.apply import apply
from currylisp.evaluation.special_forms.quote_forms import eval_backquote
from currylisp.types.environment import Environment
from currylisp.types.pair import Pair
from currylisp.types.quoting import Backquoted, Comma, CommaSplice, Quoted
from currylisp.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Evaluate `expr` in `env`, reporting runaway recursion as a Lisp error.
    """
    try:
        return evaluate0(expr, env)
    except RecursionError:
        raise RecursionDepthError("maximum evaluation depth exceeded") from None


def evaluate0(expr: SExpression, env: Environment) -> LispValue:
    """
    Core evaluator: one recursive-descent step per form.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case Pair(car=head, cdr=arg_list):
            fn = evaluate0(head, env)
            return apply(fn, arg_list, env, evaluate0)

        case Quoted(value=quoted):
            return quoted

        case Backquoted(value=template):
            return eval_backquote(evaluate0, template, env)

        case Comma() | CommaSplice():
            raise LispSyntaxError("comma is illegal outside of backquote")

    # --- Atoms and callables return as-is ---
    return expr
