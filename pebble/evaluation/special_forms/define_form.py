from pebble import EvaluatorFn
from pebble import SExpression, LispValue
from pebble.errors import PebbleArityError, PebbleTypeError
from pebble.types.environment import Environment
from pebble.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def! name value)
    Binds in the current scope only and returns the bound value.
    """
    if len(tail) != 2:
        raise PebbleArityError("def! requires exactly two arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise PebbleTypeError("def! first argument must be a symbol")
    value = evaluate_fn(val_expr, env)
    return env.set(name, value)
