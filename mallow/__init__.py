# Core type aliases for Mallow's data model.
# Plain Python values (int, float, str, bool, list) stand in for runtime values
# wherever they are unambiguous; Symbol, Keyword, Vector, HashMap, Function and
# Closure cover the rest.
#
# Naming guidance:
# - SExpression: Use in reader/printer code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type handed to special forms
EvaluatorFn = Callable[..., LispValue]
