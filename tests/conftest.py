import pytest

from pebble.builtin.env_builtin import create_root_env
from pebble.evaluation.evaluator import evaluate
from pebble.interpreter import Interpreter
from pebble.reader.parser import read_str


@pytest.fixture
def env():
    """Fresh root environment with builtins and special forms loaded."""
    return create_root_env()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate every form in a source string; return the last value."""
    def _run(source: str):
        result = None
        for expr in read_str(source):
            result = evaluate(expr, env)
        return result
    return _run
