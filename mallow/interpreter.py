from __future__ import annotations

import logging

from mallow import SExpression, LispValue
from mallow.reader.parser import lex, read_str, TokenStream, Comment
from mallow.printer import pr_str
from mallow.types.nil import Nil
from mallow.types.environment import Environment
from mallow.evaluation.evaluator import evaluate
from mallow.builtin.env_builtin import register

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading, evaluating and printing Mallow code.
    Maintains the root Environment across calls, so definitions persist.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = Environment()
        register(self.env)

        if prelude:
            self.eval_prelude(prelude)

    def read(self, text: str) -> SExpression:
        """Read the first form of `text`."""
        return read_str(text)

    def eval_prelude(self, code: str) -> None:
        self.eval(code)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; returns the last value, or Nil if none."""
        stream = TokenStream(lex(code))
        result: LispValue = Nil
        for expr in stream.parse_all():
            result = evaluate(expr, self.env)
        return result

    def rep(self, line: str) -> str:
        """Read one form from `line`, evaluate it and print the result readably.

        Raises MallowError on read or evaluation failure.
        """
        form = self.read(line)
        if form is Comment:
            return ""
        logger.debug("rep: %s", pr_str(form))
        return pr_str(evaluate(form, self.env), readable=True)
