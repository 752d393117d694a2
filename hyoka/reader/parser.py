"""
  Hyoka Reader: tokenizer and recursive-descent parser

- `(` and `)` are standalone tokens, everything else is split on whitespace
- Emits Expression nodes:

    - numbers -> Number (float)
    - anything else that is not a paren -> Symbol
    - ( ... ) -> List

- One expression is read per call; tokens after it are left in the stream.
"""

from __future__ import annotations

import re
from collections import deque
from typing import Iterable, Iterator, Optional

from hyoka.config import get_max_depth
from hyoka.errors import NestingTooDeep, UnexpectedCloseParen, UnexpectedEOF
from hyoka.types.expression import Expression, List, Number
from hyoka.types.symbol import Symbol

LPAREN = "("
RPAREN = ")"

# ASCII whitespace only; other Unicode spaces stay inside tokens
WHITESPACE_RE = re.compile(r"[ \t\n\f\r]+")


def tokenize(source: str) -> list[str]:
    """Split source text into tokens; never fails."""
    padded = source.replace(LPAREN, f" {LPAREN} ").replace(RPAREN, f" {RPAREN} ")
    return [token for token in WHITESPACE_RE.split(padded) if token]


def parse_atom(token: str) -> Expression:
    # float() accepts "1_000"; digit-group underscores stay symbols here
    if "_" not in token:
        try:
            return Number(float(token))
        except ValueError:
            pass
    return Symbol(token)


class TokenStream:
    """Consumes a token sequence from the front."""

    def __init__(self, tokens: Iterable[str], max_depth: Optional[int] = None):
        self.tokens: deque[str] = tokens if isinstance(tokens, deque) else deque(tokens)
        self.max_depth: int = max_depth if max_depth is not None else get_max_depth()

    def peek(self) -> Optional[str]:
        return self.tokens[0] if self.tokens else None

    def advance(self) -> str:
        if not self.tokens:
            raise UnexpectedEOF("unexpected EOF while parsing the tokens")
        return self.tokens.popleft()

    @property
    def remaining(self) -> int:
        return len(self.tokens)

    def parse_expr(self) -> Expression:
        try:
            return self._read(0)
        except RecursionError as exc:
            raise NestingTooDeep("lists nested too deeply for the Python stack") from exc

    def _read(self, depth: int) -> Expression:
        token = self.advance()

        if token == RPAREN:
            raise UnexpectedCloseParen("unexpected ')' found while parsing tokens")

        if token == LPAREN:
            if depth >= self.max_depth:
                raise NestingTooDeep(f"lists nested deeper than {self.max_depth} levels")
            items: list[Expression] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise UnexpectedEOF("unexpected EOF while reading a list, expected ')'")
                if nxt == RPAREN:
                    self.advance()
                    return List(items)
                items.append(self._read(depth + 1))

        return parse_atom(token)

    def parse_all(self) -> Iterator[Expression]:
        while self.tokens:
            yield self.parse_expr()


def parse_tokens(tokens: Iterable[str], max_depth: Optional[int] = None) -> Expression:
    """Parse one expression from the front of `tokens`.

    When `tokens` is a list or deque it is consumed in place, so whatever follows
    the expression is still there afterwards.
    """
    if isinstance(tokens, list):
        stream = TokenStream(deque(tokens), max_depth)
        try:
            return stream.parse_expr()
        finally:
            tokens[:] = stream.tokens
    return TokenStream(tokens, max_depth).parse_expr()


def parse(source: str, max_depth: Optional[int] = None) -> Expression:
    """Tokenize `source` and parse its first expression."""
    return parse_tokens(tokenize(source), max_depth)
