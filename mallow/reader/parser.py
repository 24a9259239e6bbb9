"""
  Lisp Reader, Lexer and Parser

- One regular-expression scan produces the token stream
- Recursive descent with one token of lookahead builds the form
- Emits Python values:

    - nil -> Nil
    - true / false -> True / False
    - integers / floats -> int / float
    - strings -> str (escapes decoded)
    - :name -> Keyword
    - other atoms -> Symbol
    - (...) -> list
    - [...] -> Vector
    - {...} -> HashMap
    - 'x `x ~x ~@x @x -> (quote x) (quasiquote x) (unquote x) (splice-unquote x) (deref x)
    - ^m x -> (with-meta x m)
"""

from __future__ import annotations

import math
import re
from typing import Iterator, Optional

from mallow import SExpression
from mallow.errors import MallowReadError
from mallow.types.nil import Nil
from mallow.types.symbol import Symbol, Keyword
from mallow.types.containers import Vector, HashMap
from mallow.reader.reader_macros import reader_macros


TOKEN_RE = re.compile(
    r"[\s,]*(?:"
    r"(?P<macro>~@|['`~^@])"  # reader macros
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r'|(?P<string>"(?:\\[\s\S]|[^\\"])*"?)'  # double-quoted strings, possibly unterminated
    r"|(?P<comment>;.*)"  # single-line comment
    r'|(?P<atom>[^\s\[\]{}()\'"`@,;]+)'  # everything else
    r")"
)

INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)(?:[eE][+-]?[0-9]+)?")
STRING_RE = re.compile(r'"(?:\\.|[^\\"])*"', re.DOTALL)
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

ESCAPES: dict[str, str] = {
    '"': '"',
    "n": "\n",
    "\\": "\\",
}

NAMED_ATOMS: dict[str, SExpression] = {
    "nil": Nil,
    "true": True,
    "false": False,
}

# Sequence openers: token kind -> (closer kind, closer text, constructor)
SEQUENCES = {
    "lparen": ("rparen", ")", list),
    "lbracket": ("rbracket", "]", Vector),
    "lbrace": ("rbrace", "}", HashMap),
}
CLOSERS = {"rparen": ")", "rbracket": "]", "rbrace": "}"}


class CommentType:
    """Placeholder read from input that holds only a comment."""

    __slots__ = ()

    def __repr__(self):
        return "Comment"


Comment = CommentType()


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples in source order."""
    for match in TOKEN_RE.finditer(source):
        kind = match.lastgroup
        if kind is not None:
            yield kind, match.group(kind)


def tokenize(source: str) -> list[str]:
    """Return the raw token texts of `source`, comments included."""
    return [text for _, text in lex(source)]


def unescape(body: str) -> str:
    """Decode \\" \\n and \\\\ in one left-to-right pass; other escapes stay verbatim."""
    return ESCAPE_RE.sub(lambda m: ESCAPES.get(m.group(1), m.group(0)), body)


def read_atom(token: str) -> SExpression:
    """Resolve a single atom token to its value."""
    if token.startswith(";"):
        return Comment
    if INT_RE.fullmatch(token):
        return int(token)
    if FLOAT_RE.fullmatch(token):
        value = float(token)
        if math.isinf(value):
            raise MallowReadError(f"float literal out of range: {token}")
        return value
    if STRING_RE.fullmatch(token):
        return unescape(token[1:-1])
    if token.startswith('"'):
        raise MallowReadError("expected '\"', got EOF")
    if token.startswith(":"):
        return Keyword(token[1:])
    if token in NAMED_ATOMS:
        return NAMED_ATOMS[token]
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
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

    def skip_comments(self) -> bool:
        """Consume leading comment tokens; report whether any were seen."""
        skipped = False
        while self.peek()[0] == "comment":
            self.advance()
            skipped = True
        return skipped

    def parse_expr(self) -> SExpression:
        """Read one form starting at the next token.

        Returns None at end of input and Comment for a comment token.
        """
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "macro":
            self.advance()
            return reader_macros.dispatch(tok_val, self)

        if tok_type in SEQUENCES:
            return self.read_sequence(tok_type)

        if tok_type in CLOSERS:
            raise MallowReadError(f"unexpected '{tok_val}'")

        # comment, string and atom tokens
        self.advance()
        return read_atom(tok_val)

    def parse_operand(self) -> SExpression:
        """Read the form a reader macro or sequence applies to, skipping comments."""
        self.skip_comments()
        if self.peek()[0] is None:
            raise MallowReadError("expected a form, got EOF")
        return self.parse_expr()

    def read_sequence(self, opener: str) -> SExpression:
        closer, closer_text, build = SEQUENCES[opener]
        self.advance()  # consume the opener
        items: list[SExpression] = []
        while True:
            self.skip_comments()
            tok_type, _ = self.peek()
            if tok_type is None:
                raise MallowReadError(f"expected '{closer_text}', got EOF")
            if tok_type == closer:
                self.advance()
                break
            items.append(self.parse_expr())

        if build is HashMap:
            if len(items) % 2:
                raise MallowReadError("map literal requires an even number of forms")
            return HashMap.from_flat(items)
        return build(items)

    def parse_all(self) -> Iterator[SExpression]:
        """Yield every top-level form, discarding comments."""
        while True:
            self.skip_comments()
            if self.peek()[0] is None:
                break
            yield self.parse_expr()


def read_str(source: str) -> SExpression:
    """Read exactly one top-level form from `source`; trailing tokens are ignored.

    A source holding only comments reads as Comment.
    """
    stream = TokenStream(lex(source))
    had_comment = stream.skip_comments()
    if stream.peek()[0] is None:
        if had_comment:
            return Comment
        raise MallowReadError("expected a form, got EOF")
    return stream.parse_expr()
