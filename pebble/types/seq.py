"""Sequence flavors.

All three flavors are Python lists so that indexing, slicing and iteration work
unchanged; the subclass only records which brackets the printer should use.
A plain round list is `List`; the evaluator treats a `List` in head position as
a call, while `Vector` and `HashMap` evaluate element-wise.
"""

from __future__ import annotations


class List(list):
    """Parenthesised list: ( ... )"""

    __slots__ = ()
    open, close = "(", ")"

    def __repr__(self) -> str:
        return f"List({list.__repr__(self)})"


class Vector(List):
    """Square-bracket vector: [ ... ]"""

    __slots__ = ()
    open, close = "[", "]"

    def __repr__(self) -> str:
        return f"Vector({list.__repr__(self)})"


class HashMap(List):
    """Curly-brace map literal: { ... }; kept as an ordered sequence."""

    __slots__ = ()
    open, close = "{", "}"

    def __repr__(self) -> str:
        return f"HashMap({list.__repr__(self)})"


def is_round(value) -> bool:
    return type(value) is List


def same_flavor(template: List, items) -> List:
    """Build a new sequence of the same flavor as `template` holding `items`."""
    return type(template)(items)


def is_sequential(value) -> bool:
    """True for round lists and vectors; map literals are not sequential."""
    return isinstance(value, List) and not isinstance(value, HashMap)
