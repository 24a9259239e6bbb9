from mallow import EvaluatorFn
from mallow import SExpression, LispValue
from mallow.errors import MallowSyntaxError
from mallow.types.bind import parse_params
from mallow.types.closure import Closure
from mallow.types.environment import Environment


def fn_form(
    tail: list[SExpression],
    env: Environment,
    _: EvaluatorFn,
) -> LispValue:
    """
    (fn* (params...) body)
    Captures `env` itself, not a copy.
    """
    if len(tail) != 2:
        raise MallowSyntaxError(
            f"fn* requires a parameter list and one body form, got {len(tail)} forms"
        )
    params, body = tail
    return Closure(parse_params(params), body, env)
