import logging

from pebble import EvaluatorFn
from pebble import SExpression, LispValue
from pebble.errors import PebbleArityError
from pebble.types.bind import parse_params
from pebble.types.callables import Closure
from pebble.types.environment import Environment

logger = logging.getLogger("pebble.evaluation")


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (fn* (params...) body) or (fn* [params...] body)
    The closure keeps a reference to `env`, not a copy, so later def! calls
    against that scope are visible inside the body.
    """
    if len(tail) != 2:
        raise PebbleArityError("fn* requires exactly two arguments")

    params, rest = parse_params(tail[0])
    closure = Closure(params, rest, [tail[1]], env)
    logger.debug("Created closure %s", closure)
    return closure
