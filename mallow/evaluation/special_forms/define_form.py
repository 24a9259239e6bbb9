import logging

from mallow import EvaluatorFn
from mallow import SExpression, LispValue
from mallow.errors import MallowSyntaxError
from mallow.types.environment import Environment
from mallow.types.function import Function
from mallow.types.symbol import Symbol

logger = logging.getLogger(__name__)


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def! name value)
    Binds in the current scope and returns the bound value. A native Function
    is renamed to `name` and its previous name is dropped from this scope.
    """
    if len(tail) != 2:
        raise MallowSyntaxError(f"def! requires exactly 2 arguments, got {len(tail)}")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MallowSyntaxError(f"def! name must be a symbol, got {name!r}")

    value = evaluate_fn(val_expr, env)
    if isinstance(value, Function):
        env.remove(Symbol(value.name))
        value = value.renamed(name.id)
    env.set(name, value)
    logger.debug("def! %s", name)
    return value
