from pebble import EvaluatorFn
from pebble import SExpression, LispValue
from pebble.errors import PebbleArityError
from pebble.types.environment import Environment
from pebble.types.nil import Nil


def is_truthy(value: LispValue) -> bool:
    """Everything except nil and false is true (0, "" and () included)."""
    return value is not Nil and value is not False


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise PebbleArityError("if requires two or three arguments")

    cond = evaluate_fn(tail[0], env)

    if is_truthy(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
