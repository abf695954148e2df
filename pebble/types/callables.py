"""Callable values: native primitives, special forms and user closures.

The set is closed; the evaluator dispatches on these three classes with
`match` rather than through a common method.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

from pebble import LispValue, SExpression, EvaluatorFn

if TYPE_CHECKING:
    from pebble.types.environment import Environment


PrimitiveFn = Callable[[list[LispValue]], LispValue]
SpecialFormFn = Callable[[list[SExpression], "Environment", EvaluatorFn], LispValue]


@dataclass(frozen=True)
class Primitive:
    """A native operation over already-evaluated arguments.

    `arity` is the exact argument count the operation accepts; None means
    any number of arguments.
    """

    name: str
    fn: PrimitiveFn
    arity: Optional[int] = None

    def __repr__(self) -> str:
        return f"<Primitive {self.name}>"


@dataclass(frozen=True)
class SpecialForm:
    """A native operation over unevaluated argument expressions."""

    name: str
    fn: SpecialFormFn

    def __repr__(self) -> str:
        return f"<SpecialForm {self.name}>"


@dataclass(eq=False)
class Closure:
    """A user-defined function with formal parameters, body, and closure env."""

    params: list[str]
    rest: Optional[str]
    body: list[SExpression]
    env: "Environment" = field(repr=False)

    def __str__(self) -> str:
        formals = " ".join(self.params)
        if self.rest is not None:
            formals = f"{formals} & {self.rest}".strip()
        return f"(fn* ({formals}) ...)"
