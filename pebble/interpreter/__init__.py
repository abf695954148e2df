from __future__ import annotations

import logging

from pebble import LispValue
from pebble.builtin.env_builtin import create_root_env
from pebble.errors import PebbleError, PebbleParseError
from pebble.evaluation.evaluator import evaluate
from pebble.printer import pr_seq
from pebble.reader.parser import read_str
from pebble.types.environment import Environment

logger = logging.getLogger("pebble.interpreter")


class Interpreter:
    """
    Orchestrates reading, evaluating and printing Pebble code.
    Maintains one root Environment across calls, so definitions persist.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else create_root_env()

    def eval(self, code: str) -> list[LispValue]:
        """Evaluate every form in `code` and return their values in order.

        The whole of `code` is parsed before anything is evaluated, so a parse
        error anywhere leaves the environment untouched. The first evaluation
        failure propagates; forms evaluated before it keep their effects.
        """
        forms = read_str(code)
        return [evaluate(expr, self.env) for expr in forms]

    def rep(self, line: str) -> str:
        """Read, evaluate and print one line of input.

        Errors are rendered as text rather than raised.
        """
        try:
            results = self.eval(line)
        except PebbleParseError as e:
            logger.debug("Parse error: %s", e.format())
            return f"Error: {e.format()}"
        except PebbleError as e:
            logger.debug("Evaluation error (%s): %s", type(e).__name__, e)
            return f"Error: {e}"
        return pr_seq(results, True, " ")
