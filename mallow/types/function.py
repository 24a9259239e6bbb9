"""Native (Python-implemented) functions exposed to Lisp code."""

from __future__ import annotations

from typing import Callable

from mallow import LispValue

# Primitives receive the calling environment and the evaluated arguments
NativeFn = Callable[["Environment", list[LispValue]], LispValue]


class Function:
    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, env, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def renamed(self, name: str) -> Function:
        """Same native callable, known under a new name."""
        return Function(name, self.fn)

    def __repr__(self) -> str:
        return f"#<{self.name}>"
