"""Render Pebble values as text.

Two modes:
- readable: strings are quoted and escaped so the output reads back as the
  same value;
- display: strings are emitted raw.
Callables never show their contents.
"""

from __future__ import annotations

from pebble import LispValue
from pebble.types.callables import Closure, Primitive, SpecialForm
from pebble.types.nil import NilType, EndOfInputType
from pebble.types.seq import List
from pebble.types.symbol import Symbol

_ESCAPES = str.maketrans({
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
})


def escape_string(s: str) -> str:
    return s.translate(_ESCAPES)


def pr_str(value: LispValue, readably: bool = True) -> str:
    match value:
        case NilType():
            return "nil"
        case EndOfInputType():
            return ""
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case str():
            return f'"{escape_string(value)}"' if readably else value
        case Symbol():
            return value.id
        case List():
            inner = " ".join(pr_str(v, readably) for v in value)
            return f"{value.open}{inner}{value.close}"
        case Primitive():
            return "<#builtin function>"
        case SpecialForm():
            return "<#special form>"
        case Closure():
            return "<#function>"
    return str(value)


def pr_seq(values: list[LispValue], readably: bool, sep: str) -> str:
    """Render each value and join them with `sep`."""
    return sep.join(pr_str(v, readably) for v in values)
