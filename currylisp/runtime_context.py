from __future__ import annotations

import sys
from collections import deque
from typing import Optional, TextIO

# NOTE: process-global, like the interpreter itself (single-threaded).


class ConsoleInput:
    """Whitespace-delimited token reader over a text stream.

    `stream` of None means "whatever sys.stdin is at read time", so tests that
    swap sys.stdin see their replacement.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.pending: deque[str] = deque()

    def _source(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stdin

    def next_token(self) -> Optional[str]:
        """Return the next token, reading further lines as needed; None at EOF."""
        while not self.pending:
            line = self._source().readline()
            if not line:
                return None
            self.pending.extend(line.split())
        return self.pending.popleft()


_console_input = ConsoleInput()


def set_console_input(console: ConsoleInput) -> None:
    global _console_input
    _console_input = console


def get_console_input() -> ConsoleInput:
    return _console_input
