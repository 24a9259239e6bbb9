from __future__ import annotations

from typing import TYPE_CHECKING

from mallow import SExpression
from mallow.types.symbol import Symbol

if TYPE_CHECKING:
    from mallow.reader.parser import TokenStream


class ReaderMacro:
    """Rewrite rule for a reader-macro token.

    `arity` operand forms are read after the token. With `swap` set the
    operands are placed in reverse source order, so `^META FORM` becomes
    `(with-meta FORM META)`.
    """

    __slots__ = ("head", "arity", "swap")

    def __init__(self, head: Symbol, arity: int = 1, swap: bool = False):
        self.head = head
        self.arity = arity
        self.swap = swap


class ReaderMacros:
    """
    Registry of reader macros.
    Maps special characters or sequences (like ', `, ~@) to the canonical
    form symbol that heads the list they expand into.
    """

    def __init__(self):
        self.macros: dict[str, ReaderMacro] = {}

    def define(self, token: str, macro: ReaderMacro) -> None:
        """Register a reader macro for a given character or sequence."""
        self.macros[token] = macro

    def dispatch(self, token: str, stream: "TokenStream") -> SExpression:
        """Read the macro's operands from the stream and build the expanded list."""
        if token not in self.macros:
            raise ValueError(f"No reader macro defined for {token!r}")
        macro = self.macros[token]
        operands = [stream.parse_operand() for _ in range(macro.arity)]
        if macro.swap:
            operands.reverse()
        return [macro.head, *operands]


# -------------------------
# Single global instance
# -------------------------
reader_macros: ReaderMacros = ReaderMacros()

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    "~": Symbol("unquote"),
    "~@": Symbol("splice-unquote"),
    "@": Symbol("deref"),
}

for key, name in QUOTE_FORMS.items():
    reader_macros.define(key, ReaderMacro(name))

# Metadata: ^META FORM => (with-meta FORM META)
reader_macros.define("^", ReaderMacro(Symbol("with-meta"), arity=2, swap=True))
