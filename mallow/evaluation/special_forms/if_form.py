from mallow import EvaluatorFn
from mallow import SExpression, LispValue
from mallow.errors import MallowSyntaxError
from mallow.types.environment import Environment
from mallow.types.nil import Nil
from mallow.types.tail_call import TailCall


def is_truthy(value: LispValue) -> bool:
    # Only nil and false are falsey; 0, "" and () are true
    return not (value is Nil or value is False)


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    if len(tail) < 2:
        raise MallowSyntaxError("if requires a condition and a then-expression")
    if len(tail) > 3:
        raise MallowSyntaxError(f"if takes at most 3 arguments, got {len(tail)}")

    cond = evaluate_fn(tail[0], env)
    if is_truthy(cond):
        return TailCall(tail[1], env)
    elif len(tail) > 2:
        return TailCall(tail[2], env)
    else:
        return Nil
