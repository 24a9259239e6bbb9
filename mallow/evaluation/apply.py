"""Application engine for Mallow.

- Native Functions are called with the caller's environment and the
  evaluated arguments; their result is final.
- Closures bind the arguments in a child of their *captured* environment
  and hand the body back as a TailCall, which keeps scoping lexical and
  closure calls in tail position off the Python stack.
"""

from mallow import LispValue
from mallow.errors import MallowTypeError
from mallow.types.environment import Environment
from mallow.types.function import Function
from mallow.types.closure import Closure
from mallow.types.tail_call import TailCall
from mallow.printer import pr_str


def apply_closure(fn: Closure, args: list[LispValue]) -> TailCall:
    """Bind `args` to the closure's parameters and defer its body."""
    new_env = fn.extend_env(args)
    return TailCall(fn.body, new_env)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
) -> LispValue | TailCall:
    """Apply either a Closure or a native Function.

    Raises MallowTypeError for anything else in function position.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args)
    elif isinstance(head, Function):
        return head(env, args)
    else:
        raise MallowTypeError(f"Cannot apply non-function {pr_str(head)}")
