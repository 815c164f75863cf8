from currylisp import EvaluatorFn
from currylisp import SExpression, LispValue
from currylisp.types.environment import Environment
from currylisp.evaluation.apply import evaluate_sequence


def progn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    return evaluate_sequence(tail, env, evaluate_fn)
