"""Application engine for Pebble.

Centralizes how already-evaluated arguments are handed to a callable:
- Primitives get an exact arity check, then the argument list.
- Closures get a fresh scope chained to their captured environment (see
  pebble.types.bind) and evaluate their body forms in order.

Special forms never reach this module; they need their arguments unevaluated.
"""

from __future__ import annotations

import logging

from pebble import LispValue, EvaluatorFn
from pebble.errors import PebbleArityError, PebbleNotCallable
from pebble.types.bind import bind_arguments
from pebble.types.callables import Closure, Primitive
from pebble.types.nil import Nil

logger = logging.getLogger("pebble.evaluation")


def apply_primitive(fn: Primitive, args: list[LispValue]) -> LispValue:
    if fn.arity is not None and len(args) != fn.arity:
        noun = "argument" if fn.arity == 1 else "arguments"
        raise PebbleArityError(
            f"{fn.name} requires exactly {fn.arity} {noun}, got {len(args)}"
        )
    return fn.fn(args)


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a user closure.

    The body is a sequence of forms; the value of the last one is returned.
    """
    new_env = bind_arguments(fn, args)
    logger.debug("Applying %s to %d argument(s)", fn, len(args))
    result: LispValue = Nil
    for expr in fn.body:
        result = evaluate_fn(expr, new_env)
    return result


def apply(head: object, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply either a Primitive or a Closure to evaluated arguments."""
    if isinstance(head, Primitive):
        return apply_primitive(head, args)
    elif isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    else:
        raise PebbleNotCallable(f"Cannot apply non-function {head!r}")
