from mallow import EvaluatorFn
from mallow import SExpression
from mallow.errors import MallowSyntaxError
from mallow.types.environment import Environment
from mallow.types.symbol import Symbol
from mallow.types.tail_call import TailCall


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    """
    (let* (name1 expr1 name2 expr2 ...) body)
    Each expr is evaluated in the new scope, so later bindings see earlier ones.
    The body is in tail position.
    """
    if len(tail) != 2:
        raise MallowSyntaxError(f"let* requires bindings and a body, got {len(tail)} forms")

    bindings, body = tail
    if not isinstance(bindings, list):
        raise MallowSyntaxError(f"let* bindings must be a list or vector, got {bindings!r}")
    if len(bindings) % 2:
        raise MallowSyntaxError("let* bindings require an even number of forms")

    let_env = Environment(outer=env)
    for name, expr in zip(bindings[0::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise MallowSyntaxError(f"let* binding name must be a symbol, got {name!r}")
        let_env.set(name, evaluate_fn(expr, let_env))
    return TailCall(body, let_env)
