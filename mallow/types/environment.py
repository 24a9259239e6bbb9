"""Runtime environment for Mallow.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Scopes are shared by reference: every
Closure created in a scope keeps that same scope alive, and a binding added to
it later is visible to all of them.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from mallow import LispValue
from mallow.errors import MallowInvalidSymbol, MallowUnboundSymbol
from mallow.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        # Insertion-ordered; rebinding a name keeps its original position
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def set(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this scope only, overwriting in place.

        Outer scopes are never touched; a binding here shadows theirs.
        Raises MallowInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MallowInvalidSymbol(f"Cannot bind {name!r}: not a symbol")
        self.vars[name] = value

    def remove(self, name: Symbol) -> None:
        """Drop `name` from this scope if present; outer scopes are left alone."""
        self.vars.pop(name, None)

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol) -> LispValue:
        """Look up `name`, walking outward to the root.

        Raises MallowUnboundSymbol naming the symbol if no scope binds it.
        """
        env = self.find(name)
        if env is None:
            raise MallowUnboundSymbol(f"'{name}' not found")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-bind a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
