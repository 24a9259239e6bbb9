from mallow.types.symbol import Symbol, Keyword
from mallow.types.nil import Nil, NilType
from mallow.types.containers import Vector, HashMap
from mallow.types.environment import Environment
from mallow.types.function import Function
from mallow.types.closure import Closure
from mallow.types.tail_call import TailCall
from mallow.types.equality import is_equal, value_hash

__all__ = [
    "Symbol",
    "Keyword",
    "Nil",
    "NilType",
    "Vector",
    "HashMap",
    "Environment",
    "Function",
    "Closure",
    "TailCall",
    "is_equal",
    "value_hash",
]
