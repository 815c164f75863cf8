from currylisp import EvaluatorFn
from currylisp import SExpression, LispValue
from currylisp.errors import ArityError, LispTypeError
from currylisp.types.environment import Environment
from currylisp.types.symbol import Symbol
from currylisp.evaluation.special_forms.lambda_form import lambda_form


def defun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun name (params) body...)
    Binds `name` in the current scope to the new function and returns it.
    """
    if len(tail) < 2:
        raise ArityError("too few arguments for defun")

    name = tail[0]
    if not isinstance(name, Symbol):
        raise LispTypeError("first argument of defun must be symbol")
    fn = lambda_form(tail[1:], env, evaluate_fn)
    env.bind(name, fn)
    return fn
