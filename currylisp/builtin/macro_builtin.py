from __future__ import annotations

from currylisp import LispValue
from currylisp.builtin.env_builtin import expect_args
from currylisp.errors import LispTypeError
from currylisp.evaluation.apply import expand_macro
from currylisp.evaluation.evaluator import evaluate0
from currylisp.printer import to_repr
from currylisp.types.environment import Environment
from currylisp.types.lambda_fn import Macro
from currylisp.types.native_fn import NativeFunction
from currylisp.types.pair import Pair, to_list
from currylisp.types.symbol import Symbol


def macroexpand(env: Environment, args: list[LispValue]) -> LispValue:
    """(macroexpand '(m a b)): the expansion of a macro call, without evaluating it.

    A symbol head is looked up; any other head is evaluated and must yield a Macro.
    """
    expect_args("macroexpand", args, 1)
    form = args[0]
    if not isinstance(form, Pair):
        raise LispTypeError("first argument of macroexpand must be evaluated to list")

    head = form.car
    macro = env.lookup(head) if isinstance(head, Symbol) else evaluate0(head, env)
    if not isinstance(macro, Macro):
        raise LispTypeError(f"{to_repr(head)} is not a macro")

    return expand_macro(macro, to_list(form.cdr), env, evaluate0)


def register(env: Environment):
    env.update({Symbol("macroexpand"): NativeFunction("macroexpand", macroexpand)})
