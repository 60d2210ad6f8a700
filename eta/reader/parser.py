"""
  Eta Reader: lexer and parser

- Streaming, lazy parsing
- Emits the evaluator's own value model:

    - nil      -> Nil
    - lists    -> Cons cells ending in Nil
    - symbols  -> Symbol
    - strings  -> str
    - numbers  -> int/float
    - #t / #f  -> True / False
    - 'expr    -> (quote expr)
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from eta import SExpression
from eta.types.cons import Cons, make_list
from eta.types.errors import EtaSyntaxError
from eta.types.nil import Nil
from eta.types.symbol import Symbol

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # 'expr
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\'";]+)',  # fallback: symbols and numbers
    re.DOTALL,
)

INT_RE = re.compile(r"[+-]?\d+")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise EtaSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.lastgroup != "comment":
            yield m.lastgroup, m.group()


def atom(token: str) -> SExpression:
    """Convert a bare token to nil, a boolean, a number or a Symbol."""
    if token == "nil":
        return Nil
    if token == "#t":
        return True
    if token == "#f":
        return False
    if INT_RE.fullmatch(token):
        return int(token)
    if FLOAT_RE.fullmatch(token):
        return float(token)
    return Symbol(token)


def unescape(token: str) -> str:
    return re.sub(r"\\(.)", lambda m: ESCAPES.get(m.group(1), m.group(1)), token[1:-1], flags=re.DOTALL)


class TokenStream:
    """Builds expressions from tokens without recursing per nesting level.

    Open lists live on an explicit stack, so arbitrarily deep input is
    bounded by memory rather than by the Python recursion limit.
    """

    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression | None:
        """Read one expression, or return None at end of input."""
        open_lists: list[list[SExpression]] = []
        # pending quote count for each nesting level, outermost first
        quotes: list[int] = [0]

        while True:
            tok_type, tok_val = self.advance()

            if tok_type is None:
                if open_lists:
                    raise EtaSyntaxError("Unmatched '('")
                if quotes[-1]:
                    raise EtaSyntaxError("Expected an expression after quote")
                return None

            if tok_type == "quote":
                quotes[-1] += 1
                continue

            if tok_type == "lparen":
                open_lists.append([])
                quotes.append(0)
                continue

            if tok_type == "rparen":
                if not open_lists:
                    raise EtaSyntaxError(f"Unexpected {tok_val!r}")
                if quotes.pop():
                    raise EtaSyntaxError("Expected an expression after quote")
                expr = make_list(open_lists.pop())
            elif tok_type == "symbol":
                expr = atom(tok_val)
            elif tok_type == "string":
                expr = unescape(tok_val)
            else:
                raise EtaSyntaxError(f"Unexpected {tok_val!r}")

            for _ in range(quotes[-1]):
                expr = Cons(QUOTE, Cons(expr))
            quotes[-1] = 0

            if not open_lists:
                return expr
            open_lists[-1].append(expr)

    def parse_all(self) -> Iterator[SExpression]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def read(source: str) -> list[SExpression]:
    """Parse every top-level expression in `source`."""
    exprs = list(TokenStream(lex(source)).parse_all())
    logger.debug("Read %d expression(s)", len(exprs))
    return exprs
