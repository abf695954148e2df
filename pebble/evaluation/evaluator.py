"""Core evaluator for the Pebble interpreter.

Dispatches on the shape of the expression: symbols resolve through the
environment chain, round lists are calls, vectors and map literals evaluate
element-wise, everything else evaluates to itself.
"""

from __future__ import annotations

from pebble import SExpression, LispValue
from pebble.errors import PebbleNotCallable
from pebble.evaluation.apply import apply
from pebble.printer import pr_str
from pebble.types.callables import Closure, Primitive, SpecialForm
from pebble.types.environment import Environment
from pebble.types.seq import List, is_round, same_flavor
from pebble.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate a Pebble expression in the given environment."""
    match expr:
        case Symbol():
            return env.lookup(expr)
        case List() if not expr:
            return expr
        case List() if is_round(expr):
            return evaluate_call(expr, env)
        case List():
            return same_flavor(expr, [evaluate(e, env) for e in expr])

    # --- Atoms and callables return as-is ---
    return expr


def evaluate_call(expr: List, env: Environment) -> LispValue:
    """Evaluate a non-empty round list as an application of its head."""
    head, *tail_args = expr
    fn = evaluate(head, env)

    match fn:
        case SpecialForm():
            # Special forms receive their arguments unevaluated.
            return fn.fn(tail_args, env, evaluate)
        case Primitive() | Closure():
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, evaluate)

    raise PebbleNotCallable(f"First element is not a function: {pr_str(fn)}")
