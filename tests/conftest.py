import io

import pytest

from currylisp.interpreter import Interpreter
from currylisp.runtime_context import ConsoleInput, get_console_input, set_console_input


@pytest.fixture
def interp():
    """Fresh interpreter with no prelude and strict unbound lookup."""
    return Interpreter(prelude=None, lenient_unbound=False)


@pytest.fixture
def env(interp):
    return interp.env


@pytest.fixture
def console():
    """Install a console reader fed from a string; restores the previous one."""
    previous = get_console_input()

    def feed(text: str) -> ConsoleInput:
        reader = ConsoleInput(io.StringIO(text))
        set_console_input(reader)
        return reader

    yield feed
    set_console_input(previous)
