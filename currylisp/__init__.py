# Core type aliases for the currylisp data model.
# Atoms are plain Python values (int, float, str); everything else is one of the
# classes in currylisp.types (Symbol, Pair, the quoting wrappers, callables and
# the Nil/T sentinels).
#
# Naming guidance:
# - SExpression: Use in reader/parser/macro code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; code and data share one representation.

from typing import Any, Callable

__version__ = "0.3.0"

# Runtime value alias
LispValue = Any
# Forms alias (often used interchangeably with LispValue)
SExpression = LispValue

# Evaluator function type: (expr, env) -> value, handed to special forms
EvaluatorFn = Callable[..., LispValue]
