"""Value model and environment chain."""

from pebble.types.nil import Nil, NilType, EndOfInput, EndOfInputType
from pebble.types.symbol import Symbol
from pebble.types.seq import List, Vector, HashMap
from pebble.types.callables import Primitive, SpecialForm, Closure
from pebble.types.environment import Environment
from pebble.types.equality import is_equal

__all__ = [
    "Nil",
    "NilType",
    "EndOfInput",
    "EndOfInputType",
    "Symbol",
    "List",
    "Vector",
    "HashMap",
    "Primitive",
    "SpecialForm",
    "Closure",
    "Environment",
    "is_equal",
]
