"""
  mal Reader, Lexer and Parser

- Streaming, lazy tokenizing
- Emits Python values directly as the expression tree:

    - nil -> Nil
    - true / false -> bool
    - integers -> int
    - strings -> str (the text between the quotes, escapes kept as written)
    - :keywords -> Keyword
    - symbols -> Symbol
    - lists -> tuple
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from mal import SExpression
from mal.errors import MalParseError, MalUnexpectedToken
from mal.types.keyword import Keyword
from mal.types.nil import Nil
from mal.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"[\s,]*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*"?)'  # double-quoted strings, possibly unterminated
    r'|(?P<atom>[^\s,();"]+)'  # everything else up to a separator or delimiter
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"-?[0-9]+")
STRING_RE = re.compile(r'"((?:\\.|[^\\"])*)"', re.DOTALL)

LITERALS: dict[str, SExpression] = {
    "nil": Nil,
    "true": True,
    "false": False,
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only separators remain
            break
        pos = m.end()
        if m.lastgroup == "comment":
            continue
        yield m.lastgroup, m.group(m.lastgroup)


def _string_body(token: str) -> str:
    m = STRING_RE.fullmatch(token)
    if m is None:
        raise MalParseError(f"Unbalanced string: expected '\"', got EOF in {token}")
    return m.group(1)


def read_atom(token: str) -> SExpression:
    """Classify a bare atom token."""
    if token in LITERALS:
        return LITERALS[token]
    if INT_RE.fullmatch(token):
        return int(token)
    if token.startswith(":"):
        return Keyword(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            raise MalParseError("No tokens found")

        if tok_type == "lparen":
            self.advance()
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise MalUnexpectedToken("Expected ')' but found EOF")
                if next_type == "rparen":
                    self.advance()
                    break
                items.append(self.parse_expr())
            return tuple(items)

        if tok_type == "rparen":
            raise MalUnexpectedToken("Unexpected ')'")

        self.advance()
        if tok_type == "string":
            return _string_body(tok_val)
        return read_atom(tok_val)

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read_str(source: str) -> SExpression:
    """Read the first form in `source`. Raises MalParseError if there is none."""
    return TokenStream(lex(source)).parse_expr()


def read_all(source: str) -> list[SExpression]:
    """Read every form in `source`, in order. Raises MalParseError if there are none."""
    forms = list(TokenStream(lex(source)).parse_all())
    if not forms:
        raise MalParseError("No tokens found")
    return forms
