from currylisp import EvaluatorFn
from currylisp import SExpression, LispValue
from currylisp.errors import ArityError
from currylisp.types.nil import Nil
from currylisp.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise ArityError(f"if requires a condition, a then-form and an else-form, got {len(tail)} arguments")

    # Lisp truthiness: anything but Nil is true
    if evaluate_fn(tail[0], env) is not Nil:
        return evaluate_fn(tail[1], env)
    return evaluate_fn(tail[2], env)
