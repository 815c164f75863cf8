"""Command line entry point: `currylisp [FILE]` or `python -m currylisp`."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from currylisp import __version__, config
from currylisp.errors import LispError
from currylisp.interpreter import Interpreter
from currylisp.printer import to_repr

logger = logging.getLogger(__name__)

BANNER = "press CTRL-D to exit from this interpreter"
PROMPT = "input: "


def report(error: LispError) -> None:
    logger.debug("evaluation failed", exc_info=error)
    print(f"error: {error}", file=sys.stderr)


def run_file(interp: Interpreter, path: str) -> int:
    try:
        with open(path, "r", encoding="utf-8") as f:
            source = f.read()
    except OSError as e:
        print(f"cannot read {path}: {e.strerror}", file=sys.stderr)
        return 1

    try:
        for _ in interp.run(source):
            pass
    except LispError as e:
        report(e)
        return 1
    return 0


def repl(interp: Interpreter) -> int:
    print(BANNER)
    while True:
        sys.stdout.write(PROMPT)
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            print()
            return 0
        try:
            for result in interp.run(line):
                print(to_repr(result))
        except LispError as e:
            report(e)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="currylisp",
        description="A small Lisp with automatic currying and macros",
    )
    parser.add_argument("file", nargs="?", help="program to run; starts a REPL when omitted")
    parser.add_argument("--debug", action="store_true", help="log evaluation steps to stderr")
    parser.add_argument(
        "--lenient-unbound",
        action="store_true",
        default=None,
        help="unbound symbols evaluate to NIL instead of raising",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.debug else config.get_log_level()
    logging.basicConfig(level=level, stream=sys.stderr)
    sys.setrecursionlimit(config.get_recursion_limit())

    try:
        interp = Interpreter(lenient_unbound=args.lenient_unbound)
    except OSError as e:
        print(f"cannot load prelude: {e}", file=sys.stderr)
        return 1
    except LispError as e:
        report(e)
        return 1

    if args.file:
        return run_file(interp, args.file)
    return repl(interp)


if __name__ == "__main__":
    sys.exit(main())
