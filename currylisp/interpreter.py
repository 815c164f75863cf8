from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Literal

from currylisp import LispValue, config
from currylisp.builtin.env_builtin import register
from currylisp.builtin.io_builtin import register as register_io
from currylisp.builtin.macro_builtin import register as register_macros
from currylisp.evaluation.evaluator import evaluate
from currylisp.evaluation.special_forms import register as register_special_forms
from currylisp.printer import to_repr
from currylisp.reader.parser import TokenStream, lex
from currylisp.types.environment import Environment
from currylisp.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates currylisp code against one root Environment.
    Definitions made by one call are visible to the next.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        lenient_unbound: bool | None = None,
    ):
        if lenient_unbound is None:
            lenient_unbound = config.lenient_unbound()
        self.env: Environment = Environment(lenient_unbound=lenient_unbound)
        register_special_forms(self.env)
        register(self.env)
        register_io(self.env)
        register_macros(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            self.load_prelude_files(config.get_prelude_files())
        elif prelude:
            self.eval_prelude(prelude)

    def load_prelude_files(self, paths: Iterable[Path]) -> None:
        for path in paths:
            logger.debug("loading prelude %s", path)
            self.eval_prelude(Path(path).read_text(encoding="utf-8"))

    def eval_prelude(self, code: str) -> None:
        for _ in self.run(code):
            pass

    def run(self, code: str) -> Iterator[LispValue]:
        """Yield the value of each top-level form as it is evaluated.

        Forms are read lazily, so a form runs before later forms are parsed;
        the first error propagates and stops the iteration.
        """
        stream = TokenStream(lex(code))
        for expr in stream.parse_all():
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("eval: %s", to_repr(expr))
            yield evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        results = list(self.run(code))
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results
