"""
  Lisp Reader, Lexer and Parser

- Lexing is lazy: `lex` yields (token_type, token_value) tuples
- Emits Python primitives instead of Cons cells:

    - nil -> Nil
    - lists -> Python list
    - symbols -> Symbol
    - strings -> str (escapes resolved)
    - integers -> int (signed 64-bit), other numbers -> float
    - #t / #f -> bool
    - '(...) -> [Symbol("quote"), [...]]

Only `'` directly followed by a list is quote sugar; `'foo` reads as the
symbol `'foo`, which the evaluator treats as a quoted symbol.
"""

from __future__ import annotations

import re
from typing import Iterator, Iterable, Optional

from lispr import SExpression
from lispr.types.errors import EmptyExpression, MismatchedParens, ErroneousToken
from lispr.types.nil import Nil
from lispr.types.symbol import Symbol
from lispr.types.value import INT_MIN, INT_MAX


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # comment to end of line
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings, backslash escapes
    r'|(?P<unterminated>"(?:\\.|[^\\"])*)'  # string missing its closing quote
    r'|(?P<item>[^\s()";]+)'  # fallback: atoms
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"[+-]?[0-9]+\Z")
# digits in INT_MAX; anything longer is read as a Float
INT_DIGITS = len(str(INT_MAX))
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

Token = tuple[str, str]


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    while True:
        match = TOKEN_RE.match(source, pos)
        if match is None:
            # nothing but whitespace left
            return
        pos = match.end()
        kind = match.lastgroup
        if kind == "comment":
            continue
        if kind == "unterminated":
            raise ErroneousToken(match.group(kind))
        yield kind, match.group(kind)


def atomize(token: str) -> SExpression:
    """Turn a bare item into a number, boolean, nil or Symbol."""
    if INT_RE.match(token):
        if len(token.lstrip("+-").lstrip("0")) <= INT_DIGITS:
            n = int(token)
            if INT_MIN <= n <= INT_MAX:
                return n
        return float(token)
    if "_" not in token:
        try:
            return float(token)
        except ValueError:
            pass
    if token == "#t":
        return True
    if token == "#f":
        return False
    if token == "nil":
        return Nil
    return Symbol(token)


def unescape(token: str) -> str:
    """Strip the surrounding quotes and resolve backslash escapes."""
    return ESCAPE_RE.sub(r"\1", token[1:-1])


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

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

    def parse_list(self) -> list[SExpression]:
        """Parse list items up to and including the closing paren."""
        items: list[SExpression] = []
        while True:
            tok_type, _ = self.peek()
            if tok_type == "rparen":
                self.advance()
                return items
            if tok_type is None:
                raise MismatchedParens()
            items.append(self.parse_expr())

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise EmptyExpression()

        if tok_type == "lparen":
            return self.parse_list()

        if tok_type == "rparen":
            raise ErroneousToken(")")

        if tok_type == "string":
            return unescape(tok_val)

        # Quoted list: '(a b) -> (quote (a b))
        if tok_val == "'":
            if self.advance()[0] != "lparen":
                raise ErroneousToken("'")
            return [Symbol("quote"), self.parse_list()]

        return atomize(tok_val)

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def tokenize(source: str) -> list[Token]:
    """Lex `source` completely and check it is readable as a whole.

    Raises EmptyExpression when there are no tokens and MismatchedParens when
    the paren counts differ.
    """
    tokens = list(lex(source))
    if not tokens:
        raise EmptyExpression()
    left = sum(1 for kind, _ in tokens if kind == "lparen")
    right = sum(1 for kind, _ in tokens if kind == "rparen")
    if left != right:
        raise MismatchedParens()
    return tokens


def parse(tokens: Iterable[Token]) -> SExpression:
    return TokenStream(tokens).parse_expr()


def parse_all(tokens: Iterable[Token]) -> Iterator[SExpression]:
    return TokenStream(tokens).parse_all()


def read(source: str) -> SExpression:
    """Read the first expression in `source`."""
    return parse(tokenize(source))


def read_all(source: str) -> list[SExpression]:
    """Read every top-level expression in `source`."""
    return list(parse_all(tokenize(source)))
