"""Closure representation for Mallow."""

from __future__ import annotations

from mallow import SExpression, LispValue
from mallow.types.environment import Environment
from mallow.types.symbol import Symbol
from mallow.types.bind import bind_arguments


class Closure:
    """A first-class `fn*` value: parameters, one body form, and its defining scope."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        # Shared, not copied: later bindings in env are visible to the body
        self.env: Environment = env

    def __repr__(self) -> str:
        return "#<lambda:(" + " ".join(str(p) for p in self.params) + ")>"

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this closure's parameters and
        return a new Environment, child of the captured one, for the body.
        """
        return bind_arguments(self.params, list(args), self.env)
