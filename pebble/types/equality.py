"""Structural equality for Pebble values."""

from __future__ import annotations

from pebble import LispValue
from pebble.types.callables import Closure
from pebble.types.seq import HashMap, List


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep equality for Pebble values.

    - Round lists and vectors compare equal when their elements do; a map
      literal only ever equals another map literal.
    - Booleans never equal integers (Python's True == 1 does not apply).
    - Closures compare by parameters and body; the captured environment is
      ignored. Primitives and special forms compare by name and native
      function.
    """
    if a is b:
        return True
    if isinstance(a, List) and isinstance(b, List):
        if isinstance(a, HashMap) != isinstance(b, HashMap):
            return False
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Closure) and isinstance(b, Closure):
        return (
            a.params == b.params
            and a.rest == b.rest
            and is_equal(List(a.body), List(b.body))
        )
    if type(a) != type(b):
        return False
    return a == b
