from pebble import EvaluatorFn
from pebble import SExpression, LispValue
from pebble.errors import PebbleArityError, PebbleBindingArityError, PebbleTypeError
from pebble.types.environment import Environment
from pebble.types.seq import is_sequential
from pebble.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let* (name1 expr1 name2 expr2 ...) body)
    All pairs bind sequentially into one child scope, so later expressions
    see earlier names.
    """
    if len(tail) != 2:
        raise PebbleArityError("let* requires exactly two arguments")

    bindings, body = tail
    if not is_sequential(bindings):
        raise PebbleTypeError("let* first argument must be a list or vector of bindings")
    if len(bindings) % 2 != 0:
        raise PebbleBindingArityError("let* bindings must be symbol/value pairs")

    local_env = Environment(outer=env)
    for name, expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise PebbleTypeError(f"let* binding names must be symbols, got {name!r}")
        local_env.set(name, evaluate_fn(expr, local_env))

    return evaluate_fn(body, local_env)
