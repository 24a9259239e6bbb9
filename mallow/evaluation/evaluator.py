"""Core evaluator and trampoline for the Mallow interpreter.

Implements special-form dispatch and tail-call aware application. Special
forms and closure application hand back a TailCall for the form in tail
position; `evaluate` resumes it in a loop instead of recursing, so
tail-recursive programs run in constant Python stack.
"""

from __future__ import annotations

from mallow import SExpression, LispValue
from mallow.types.environment import Environment
from mallow.types.symbol import Symbol
from mallow.types.containers import HashMap
from mallow.types.tail_call import TailCall
from mallow.evaluation.apply import apply
from mallow.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Trampoline evaluator: evaluate `expr` in `env` to a final value.
    """
    result = evaluate0(expr, env)
    while isinstance(result, TailCall):
        result = evaluate0(result.expr, result.env)
    return result


def evaluate0(expr: SExpression, env: Environment) -> LispValue | TailCall:
    """
    Core evaluator: single-step evaluation.
    Returns either a value or a TailCall for the trampoline to resume.
    """
    match expr:
        case [head, *tail_args]:
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)

            # Ordinary application: function position and arguments alike
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, env)

        case Symbol():
            return env.get(expr)

        case HashMap():
            return HashMap(
                (evaluate(k, env), evaluate(v, env)) for k, v in expr
            )

    # --- Atoms and empty sequences return as-is ---
    return expr
