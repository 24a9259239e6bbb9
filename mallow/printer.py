"""Render Mallow values back to reader syntax.

`readable=True` escapes and quotes strings so the output reads back to an
equal value (`pr-str`, `prn`, the REPL). `readable=False` writes strings raw
(`str`, `println`).
"""

from __future__ import annotations

from io import StringIO

from mallow import LispValue
from mallow.types.nil import NilType
from mallow.types.symbol import Symbol, Keyword
from mallow.types.containers import Vector, HashMap
from mallow.types.function import Function
from mallow.types.closure import Closure
from mallow.reader.parser import CommentType


def escape(s: str) -> str:
    """Escape backslashes, double quotes and newlines for readable output."""
    return s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def pr_str(value: LispValue, readable: bool = True) -> str:
    with StringIO() as buffer:
        _write(buffer, value, readable)
        return buffer.getvalue()


def _write_seq(buffer: StringIO, items, readable: bool, open_: str, close: str) -> None:
    buffer.write(open_)
    first = True
    for item in items:
        if not first:
            buffer.write(" ")
        _write(buffer, item, readable)
        first = False
    buffer.write(close)


def _write(buffer: StringIO, value: LispValue, readable: bool) -> None:
    match value:
        case NilType():
            buffer.write("nil")
        case bool():
            buffer.write("true" if value else "false")
        case int():
            buffer.write(str(value))
        case float():
            buffer.write(repr(value))
        case str():
            buffer.write(f'"{escape(value)}"' if readable else value)
        case Symbol():
            buffer.write(value.id)
        case Keyword():
            buffer.write(f":{value.id}")
        case Vector():
            _write_seq(buffer, value, readable, "[", "]")
        case list():
            _write_seq(buffer, value, readable, "(", ")")
        case HashMap():
            flat = [x for pair in value for x in pair]
            _write_seq(buffer, flat, readable, "{", "}")
        case Function():
            buffer.write(f"#<{value.name}>")
        case Closure():
            buffer.write("#<lambda:")
            _write_seq(buffer, value.params, readable, "(", ")")
            buffer.write(">")
        case CommentType():
            pass
        case _:
            buffer.write(str(value))
