"""
  Lisp Reader: Lexer and Parser

- `lex` turns source text into a stream of (token_type, token_value) tuples
- `TokenStream` parses that stream by recursive descent into values:

    - ()            -> Nil
    - (a b c)       -> Pair chain terminated by Nil
    - identifiers   -> Symbol
    - 12 / 1.5      -> int / float
    - "text"        -> str (no escape processing)
    - 'x `x ,x ,@x  -> Quoted / Backquoted / Comma / CommaSplice
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from currylisp import SExpression
from currylisp.errors import LexError, ParseError
from currylisp.types.nil import Nil
from currylisp.types.pair import ListBuilder
from currylisp.types.quoting import Backquoted, Comma, CommaSplice, Quoted
from currylisp.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # '
    r"|(?P<backquote>`)"  # `
    r"|(?P<splice>,@)"  # ,@ only when the @ is adjacent
    r"|(?P<comma>,)"  # ,
    r"|(?P<atmark>@)"  # @ on its own
    r"|(?P<number>[0-9]+\.[0-9]+)"  # float literal
    r"|(?P<integer>[0-9]+)"  # integer literal
    r'|(?P<string>"[^"]*")'  # a " always ends the string
    r"|(?P<symbol>[A-Za-z+\-*/=<>][A-Za-z0-9+\-*/=<>]*)"  # identifiers
)

Token = tuple[str, object]

PREFIXES = {
    "quote": Quoted,
    "backquote": Backquoted,
    "comma": Comma,
    "splice": CommaSplice,
}

DISPLAY = {
    "lparen": "(",
    "rparen": ")",
    "quote": "'",
    "backquote": "`",
    "comma": ",",
    "splice": ",@",
    "atmark": "@",
}


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"':
                raise LexError(f"unterminated string starting at {pos}")
            raise LexError(f"unexpected character '{source[pos]}' found at {pos}")
        kind = m.lastgroup
        text = m.group()
        pos = m.end()
        if kind == "integer":
            yield kind, int(text)
        elif kind == "number":
            yield kind, float(text)
        elif kind == "string":
            yield kind, text[1:-1]
        else:
            yield kind, text


def describe(token: Token) -> str:
    kind, value = token
    if kind == "string":
        return f'"{value}"'
    return DISPLAY.get(kind, str(value))


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], object]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], object]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise ParseError("expected token, but not found")

        if tok_type == "lparen":
            return self._parse_list_tail()

        if tok_type in ("integer", "number", "string"):
            return tok_val

        if tok_type == "symbol":
            return Symbol(tok_val)

        # Quote forms wrap whatever expression follows
        if tok_type in PREFIXES:
            if self.at_end():
                raise ParseError(f"expected expression after {DISPLAY[tok_type]}")
            return PREFIXES[tok_type](self.parse_expr())

        raise ParseError(
            "expected (, integer, number, string, identifier, ', `, or ',', but got "
            + describe((tok_type, tok_val))
        )

    def _parse_list_tail(self) -> SExpression:
        builder = ListBuilder()
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                raise ParseError("expected ), but not found")
            if tok_type == "rparen":
                self.advance()
                # () reads as Nil
                return builder.build(Nil)
            builder.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            try:
                expr = self.parse_expr()
            except RecursionError:
                raise ParseError("nesting too deep") from None
            yield expr


def parse(source: str) -> list[SExpression]:
    """Read every top-level expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
