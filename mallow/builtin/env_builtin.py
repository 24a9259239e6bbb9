"""Built-in functions for the Mallow runtime environment.

This module defines the primitive table installed into the root environment:
arithmetic, comparison, equality, list predicates, and string/print helpers.
Every primitive has the native signature `(env, args) -> value`.
"""
from __future__ import annotations

import operator
from typing import Callable

from mallow import LispValue
from mallow.errors import MallowTypeError, MallowArityError
from mallow.printer import pr_str
from mallow.types.containers import Vector
from mallow.types.environment import Environment
from mallow.types.equality import is_equal
from mallow.types.function import Function
from mallow.types.nil import Nil
from mallow.types.symbol import Symbol


def _is_number(x: LispValue) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _check_arity(name: str, expr: list[LispValue], n: int) -> None:
    if len(expr) != n:
        raise MallowArityError(f"{name} expects {n} arguments, got {len(expr)}")


def _numeric_pair(name: str, expr: list[LispValue]) -> tuple:
    """Unpack exactly two numeric arguments."""
    _check_arity(name, expr, 2)
    a, b = expr
    if not (_is_number(a) and _is_number(b)):
        raise MallowTypeError(
            f"Cannot calc \"{name}\" between {pr_str(a)} and {pr_str(b)}"
        )
    return a, b


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """Sum of two numbers; an int and a float give a float."""
    a, b = _numeric_pair("+", expr)
    return a + b


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    """Difference of two numbers."""
    a, b = _numeric_pair("-", expr)
    return a - b


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    """Product of two numbers."""
    a, b = _numeric_pair("*", expr)
    return a * b


def div(env: Environment, expr: list[LispValue]) -> LispValue:
    """Quotient of two numbers; two ints divide to an int truncated toward zero."""
    a, b = _numeric_pair("/", expr)
    if b == 0:
        raise MallowTypeError("Division by zero")
    if isinstance(a, int) and isinstance(b, int):
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q
    return a / b


# -------------------------------
# Comparison
# -------------------------------
def _comparison(name: str, op: Callable[[LispValue, LispValue], bool]):
    def compare(env: Environment, expr: list[LispValue]) -> bool:
        a, b = _numeric_pair(name, expr)
        return op(a, b)
    compare.__doc__ = f"({name} a b) on two numbers."
    return compare


lt = _comparison("<", operator.lt)
lte = _comparison("<=", operator.le)
gt = _comparison(">", operator.gt)
gte = _comparison(">=", operator.ge)


def equals(env: Environment, expr: list[LispValue]) -> bool:
    """Structural equality of two values; lists equal vectors with the same items."""
    _check_arity("=", expr, 2)
    return is_equal(expr[0], expr[1])


# -------------------------------
# Lists
# -------------------------------
def _is_sequence(x: LispValue) -> bool:
    return isinstance(x, list)


def list_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Construct a list from the provided arguments."""
    return list(expr)


def is_list(env: Environment, expr: list[LispValue]) -> bool:
    """True for a list; vectors are not lists."""
    return bool(expr) and isinstance(expr[0], list) and not isinstance(expr[0], Vector)


def is_empty(env: Environment, expr: list[LispValue]) -> bool:
    """True for an empty list or vector."""
    return bool(expr) and _is_sequence(expr[0]) and len(expr[0]) == 0


def count(env: Environment, expr: list[LispValue]) -> int:
    """Length of a list or vector; 0 for anything else, nil included."""
    if expr and _is_sequence(expr[0]):
        return len(expr[0])
    return 0


# -------------------------------
# Strings and printing
# -------------------------------
def pr_str_builtin(env: Environment, expr: list[LispValue]) -> str:
    """Readable rendering of the arguments joined with a space."""
    return " ".join(pr_str(a, True) for a in expr)


def str_builtin(env: Environment, expr: list[LispValue]) -> str:
    """Raw rendering of the arguments concatenated."""
    return "".join(pr_str(a, False) for a in expr)


def prn(env: Environment, expr: list[LispValue]) -> LispValue:
    """Print the readable rendering of the arguments on one line; returns nil."""
    print(" ".join(pr_str(a, True) for a in expr))
    return Nil


def println(env: Environment, expr: list[LispValue]) -> LispValue:
    """Print the raw rendering of the arguments on one line; returns nil."""
    print(" ".join(pr_str(a, False) for a in expr))
    return Nil


BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "list": list_builtin,
    "list?": is_list,
    "empty?": is_empty,
    "count": count,
    "pr-str": pr_str_builtin,
    "str": str_builtin,
    "prn": prn,
    "println": println,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update({Symbol(name): Function(name, fn) for name, fn in BUILTINS.items()})
