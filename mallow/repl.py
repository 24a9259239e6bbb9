"""
Line-oriented REPL for Mallow.

Each non-blank input line is passed to `Interpreter.rep`; results go to
stdout and errors to stderr as `Err: <message>`. An error never ends the
session; end of input does.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from mallow.config import get_prompt, get_log_level, get_recursion_limit
from mallow.errors import MallowError
from mallow.interpreter import Interpreter

logger = logging.getLogger(__name__)


def read_line(prompt: str) -> Optional[str]:
    """Read one line from stdin; None signals end of input."""
    try:
        return input(prompt)
    except EOFError:
        return None


def repl(
    interpreter: Interpreter,
    read_line: Callable[[str], Optional[str]] = read_line,
    prompt: Optional[str] = None,
) -> None:
    prompt = get_prompt() if prompt is None else prompt
    while (line := read_line(prompt)) is not None:
        if not line.strip():
            continue
        try:
            output = interpreter.rep(line)
        except MallowError as e:
            logger.debug("error in %r: %s", line, e)
            print(f"Err: {e}", file=sys.stderr)
            continue
        except RecursionError:
            logger.debug("recursion limit exceeded in %r", line)
            print("Err: maximum recursion depth exceeded", file=sys.stderr)
            continue
        print(output)


def main() -> None:
    logging.basicConfig(level=get_log_level())
    limit = get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)
    logger.info("starting REPL")
    repl(Interpreter())


if __name__ == "__main__":
    main()
