"""Application engine for currylisp.

This module centralizes the calling convention of every callable variant:
- NativeFunction: special forms get raw argument expressions, builtins get
  the evaluated values.
- Function: arguments are evaluated in the caller's scope; too few arguments
  curry into a PartialFunction, too many raise ArityError.
- PartialFunction: newly supplied arguments are appended to the stored ones
  and the Function rule runs again on the combined list.
- Macro: the body runs against the unevaluated arguments to produce an
  expansion, which is then evaluated in the caller's scope.

Keeping this logic in one place prevents duplication between the evaluator,
special forms, and builtin helpers (macroexpand reuses expand_macro).
"""

from __future__ import annotations

import logging

from currylisp import EvaluatorFn, LispValue, SExpression
from currylisp.errors import ArityError, LispTypeError
from currylisp.printer import to_repr
from currylisp.types.environment import Environment
from currylisp.types.lambda_fn import Function, Macro, PartialFunction
from currylisp.types.native_fn import NativeFunction
from currylisp.types.nil import Nil
from currylisp.types.pair import to_list

logger = logging.getLogger(__name__)

CALLABLE_TYPES = (NativeFunction, Function, PartialFunction, Macro)


def is_callable(value: LispValue) -> bool:
    return isinstance(value, CALLABLE_TYPES)


def evaluate_args(
    arg_exprs: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> list[LispValue]:
    return [evaluate_fn(arg, env) for arg in arg_exprs]


def evaluate_sequence(
    forms: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """Evaluate `forms` in order and return the last value (Nil if none)."""
    result: LispValue = Nil
    for form in forms:
        result = evaluate_fn(form, env)
    return result


def apply_native(
    fn: NativeFunction,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if fn.raw_args:
        return fn.fn(arg_exprs, env, evaluate_fn)
    return fn.fn(env, evaluate_args(arg_exprs, env, evaluate_fn))


def apply_function(
    fn: Function,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Function to already-evaluated arguments.

    Parameters:
    - fn: The Function being applied.
    - args: The evaluated argument values, including any partially supplied ones.
    - env: The calling environment; the call scope is nested under it.
    - evaluate_fn: Evaluator used for the body forms.

    Behavior:
    - Fewer arguments than parameters returns a PartialFunction.
    - Exactly as many binds them in a fresh scope and runs the body.
    - Too many arguments raises ArityError.
    """
    provided = len(args)
    arity = fn.arity

    if provided > arity:
        raise ArityError(
            f"too many arguments to function: expect {arity}, but got {provided}"
        )

    if provided < arity:
        logger.debug("partial application: %d of %d arguments", provided, arity)
        return PartialFunction(fn, args)

    call_env = env.child()
    for param, value in zip(fn.params, args):
        call_env.bind(param, value)
    return evaluate_sequence(fn.body, call_env, evaluate_fn)


def apply_partial(
    fn: PartialFunction,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    combined = list(fn.supplied) + evaluate_args(arg_exprs, env, evaluate_fn)
    return apply_function(fn.function, combined, env, evaluate_fn)


def expand_macro(
    macro: Macro,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SExpression:
    """Run the macro body against the raw argument expressions; return the expansion.

    The expansion itself is not evaluated here.
    """
    if len(arg_exprs) != macro.arity:
        raise ArityError(
            f"different number of argument to macro: expect {macro.arity}, "
            f"but got {len(arg_exprs)}"
        )
    expand_env = env.child()
    for param, form in zip(macro.params, arg_exprs):
        expand_env.bind(param, form)
    return evaluate_sequence(macro.body, expand_env, evaluate_fn)


def apply_macro(
    macro: Macro,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    expansion = expand_macro(macro, arg_exprs, env, evaluate_fn)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("macro expansion: %s", to_repr(expansion))
    return evaluate_fn(expansion, env)


def apply(
    head: LispValue,
    arg_list: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply `head` to the unevaluated argument list `arg_list` (a Pair chain or Nil).

    Raises LispTypeError if `head` is not callable or the argument list is improper.
    """
    if not is_callable(head):
        raise LispTypeError(f"{to_repr(head)} is not callable")

    arg_exprs = to_list(arg_list)

    if isinstance(head, NativeFunction):
        return apply_native(head, arg_exprs, env, evaluate_fn)
    if isinstance(head, Function):
        return apply_function(head, evaluate_args(arg_exprs, env, evaluate_fn), env, evaluate_fn)
    if isinstance(head, PartialFunction):
        return apply_partial(head, arg_exprs, env, evaluate_fn)
    return apply_macro(head, arg_exprs, env, evaluate_fn)
