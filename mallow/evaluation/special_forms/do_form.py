from mallow import EvaluatorFn
from mallow import SExpression, LispValue
from mallow.types.environment import Environment
from mallow.types.nil import Nil
from mallow.types.tail_call import TailCall


def do_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    if not tail:
        return Nil
    for e in tail[:-1]:
        evaluate_fn(e, env)
    return TailCall(tail[-1], env)
