from __future__ import annotations

from pebble import LispValue, SExpression
from pebble.errors import PebbleArityError, PebbleMalformedParams
from pebble.types.callables import Closure
from pebble.types.environment import Environment
from pebble.types.seq import List, is_sequential
from pebble.types.symbol import Symbol


def parse_params(param_list: SExpression) -> tuple[list[str], str | None]:
    """
    Split a fn* parameter list into fixed parameter names and an optional
    variadic name.

    Accepts a round or square list of symbols, optionally containing a single
    `&` followed by exactly one symbol. Anything else raises
    PebbleMalformedParams.
    """
    if not is_sequential(param_list):
        raise PebbleMalformedParams(
            "fn* first argument must be a list or vector of parameter symbols"
        )

    formals = list(param_list)
    rest: str | None = None
    markers = [i for i, f in enumerate(formals) if isinstance(f, Symbol) and f.is_rest_marker]
    if markers:
        pos = markers[0]
        trailing = formals[pos + 1 :]
        if len(trailing) != 1:
            raise PebbleMalformedParams(
                f"& must be followed by exactly one symbol, got {len(trailing)}"
            )
        if not isinstance(trailing[0], Symbol) or trailing[0].is_rest_marker:
            raise PebbleMalformedParams("Expected symbol after &")
        rest = trailing[0].id
        formals = formals[:pos]

    names: list[str] = []
    for formal in formals:
        if not isinstance(formal, Symbol):
            raise PebbleMalformedParams(f"fn* parameters must be symbols, got {formal!r}")
        names.append(formal.id)
    return names, rest


def bind_arguments(fn: Closure, supplied_args: list[LispValue]) -> Environment:
    """
    Bind evaluated arguments to a closure's parameters.

    Returns a new Environment whose outer is the closure's captured
    environment (never the caller's), holding one binding per fixed
    parameter and, for variadic closures, the remaining arguments as a list.
    """
    fixed = len(fn.params)
    provided = len(supplied_args)

    if fn.rest is None and provided != fixed:
        raise PebbleArityError(f"Expected {fixed} arguments but got {provided}")
    if fn.rest is not None and provided < fixed:
        raise PebbleArityError(f"Expected at least {fixed} arguments but got {provided}")

    local_env = Environment(outer=fn.env)
    for name, value in zip(fn.params, supplied_args):
        local_env.set(name, value)
    if fn.rest is not None:
        local_env.set(fn.rest, List(supplied_args[fixed:]))
    return local_env
