from mallow import SExpression
from mallow.types.environment import Environment


class TailCall:
    """Pending evaluation of `expr` in `env`, resumed by the evaluate trampoline."""

    __slots__ = ("expr", "env")

    def __init__(self, expr: SExpression, env: Environment):
        self.expr = expr
        self.env = env
