from pebble import EvaluatorFn
from pebble import SExpression, LispValue
from pebble.types.environment import Environment
from pebble.types.nil import Nil


def do_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = Nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result
