"""Parameter-list validation and argument binding for closures.

A parameter list is a sequence of Symbols, optionally ending in `& rest`:
the Symbol after `&` receives every remaining argument as a List.
"""

from __future__ import annotations

from mallow import LispValue, SExpression
from mallow.errors import MallowArityError, MallowSyntaxError
from mallow.types.environment import Environment
from mallow.types.symbol import Symbol

REST_MARKER = Symbol("&")


def parse_params(params: SExpression) -> list[Symbol]:
    """Validate an `fn*` parameter list (List or Vector) and return it as a list."""
    if not isinstance(params, list):
        raise MallowSyntaxError(f"fn* parameters must be a list or vector, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol):
            raise MallowSyntaxError(f"fn* parameter must be a symbol, got {p!r}")
    if REST_MARKER in params:
        i = params.index(REST_MARKER)
        if len(params) != i + 2 or params[i + 1] == REST_MARKER:
            raise MallowSyntaxError("fn* '&' must be followed by exactly one symbol")
    return list(params)


def bind_arguments(
    params: list[Symbol], args: list[LispValue], outer: Environment
) -> Environment:
    """Bind `args` to `params` in a fresh child of `outer`.

    Raises MallowArityError naming the expected and actual counts.
    """
    env = Environment(outer)
    if REST_MARKER in params:
        required = params.index(REST_MARKER)
        if len(args) < required:
            raise MallowArityError(
                f"expected at least {required} arguments, got {len(args)}"
            )
        for name, value in zip(params[:required], args):
            env.set(name, value)
        env.set(params[required + 1], list(args[required:]))
        return env

    if len(args) != len(params):
        raise MallowArityError(f"expected {len(params)} arguments, got {len(args)}")
    for name, value in zip(params, args):
        env.set(name, value)
    return env
