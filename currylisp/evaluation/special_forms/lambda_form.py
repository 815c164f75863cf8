from currylisp.errors import ArityError
from currylisp.types.lambda_fn import Function, Macro

from currylisp import EvaluatorFn
from currylisp import SExpression, LispValue
from currylisp.types.environment import Environment


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Function:
    # (lambda (params) body...) allows zero or more body forms, run as an
    # implicit progn. With no body forms, calling the function yields NIL.
    if not tail:
        raise ArityError("too few arguments for lambda")
    return Function.from_forms(tail[0], tail[1:])


def macro_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Macro:
    """(macro (params) body...): an anonymous macro."""
    if not tail:
        raise ArityError("too few arguments for macro")
    return Macro.from_forms(tail[0], tail[1:])
