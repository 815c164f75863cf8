from currylisp import EvaluatorFn
from currylisp import SExpression, LispValue
from currylisp.errors import ArityError, LispTypeError
from currylisp.types.symbol import Symbol
from currylisp.types.environment import Environment


def setq_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(setq name value): bind in the current scope; an outer binding is shadowed, not updated."""
    if len(tail) != 2:
        raise ArityError("setq requires exactly 2 arguments: (setq var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise LispTypeError(f"first argument of setq must be symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.bind(var_sym, value)

    return value
