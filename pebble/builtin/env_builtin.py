"""Built-in functions for the Pebble runtime environment.

This module defines the arithmetic, comparison, list, predicate and output
primitives exposed to Pebble code, and the bootstrap routine that binds them
(together with the special forms) into a fresh root environment.
"""
from __future__ import annotations

from pebble import LispValue
from pebble.errors import PebbleArithmeticOverflow, PebbleDivideByZero, PebbleTypeError
from pebble.evaluation.special_forms import SPECIAL_FORMS
from pebble.printer import pr_seq
from pebble.types.callables import Primitive, SpecialForm
from pebble.types.environment import Environment
from pebble.types.equality import is_equal
from pebble.types.nil import Nil
from pebble.types.seq import List, is_sequential

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def is_number(x: LispValue) -> bool:
    """Integers only; bool is an int subclass in Python but not a number here."""
    return isinstance(x, int) and not isinstance(x, bool)


def _numbers(name: str, expr: list[LispValue]) -> tuple[int, int]:
    a, b = expr
    if not (is_number(a) and is_number(b)):
        raise PebbleTypeError(f"All arguments to {name} must be numbers")
    return a, b


def _checked(name: str, result: int) -> int:
    if not INT64_MIN <= result <= INT64_MAX:
        raise PebbleArithmeticOverflow(f"Integer overflow in {name}")
    return result


# -------------------------------
# Arithmetic
# -------------------------------
def add(expr: list[LispValue]) -> LispValue:
    """Return the sum of two numbers."""
    a, b = _numbers("+", expr)
    return _checked("+", a + b)


def sub(expr: list[LispValue]) -> LispValue:
    """Subtract the second number from the first."""
    a, b = _numbers("-", expr)
    return _checked("-", a - b)


def mul(expr: list[LispValue]) -> LispValue:
    """Return the product of two numbers."""
    a, b = _numbers("*", expr)
    return _checked("*", a * b)


def div(expr: list[LispValue]) -> LispValue:
    """Integer division truncating toward zero, as fixed-width integers do."""
    a, b = _numbers("/", expr)
    if b == 0:
        raise PebbleDivideByZero("Division by 0")
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return _checked("/", q)


# -------------------------------
# Comparison
# -------------------------------
def lt(expr: list[LispValue]) -> bool:
    a, b = _numbers("<", expr)
    return a < b


def lte(expr: list[LispValue]) -> bool:
    a, b = _numbers("<=", expr)
    return a <= b


def gt(expr: list[LispValue]) -> bool:
    a, b = _numbers(">", expr)
    return a > b


def gte(expr: list[LispValue]) -> bool:
    a, b = _numbers(">=", expr)
    return a >= b


def equals(expr: list[LispValue]) -> bool:
    """Structural equality; lists and vectors with equal contents are equal."""
    a, b = expr
    return is_equal(a, b)


# -------------------------------
# Lists and predicates
# -------------------------------
def list_builtin(expr: list[LispValue]) -> List:
    """Construct a round list from the provided arguments."""
    return List(expr)


def is_list(expr: list[LispValue]) -> bool:
    """True only for round lists; vectors and map literals are not lists."""
    return type(expr[0]) is List


def is_empty(expr: list[LispValue]) -> bool:
    """True for an empty list, vector or string; false for anything else."""
    x = expr[0]
    if is_sequential(x) or isinstance(x, str):
        return len(x) == 0
    return False


def count(expr: list[LispValue]) -> LispValue:
    """Length of a list or string, 0 for nil, nil for anything else.

    The nil fallback is deliberately permissive: (count 5) is not an error.
    """
    x = expr[0]
    if is_sequential(x) or isinstance(x, str):
        return len(x)
    if x is Nil:
        return 0
    return Nil


# -------------------------------
# Strings and output
# -------------------------------
def pr_str_builtin(expr: list[LispValue]) -> str:
    return pr_seq(expr, True, " ")


def str_builtin(expr: list[LispValue]) -> str:
    return pr_seq(expr, False, "")


def prn(expr: list[LispValue]) -> LispValue:
    """Print readable representations of args, space-separated; returns Nil."""
    print(pr_seq(expr, True, " "))
    return Nil


def println_builtin(expr: list[LispValue]) -> LispValue:
    """Print display representations of args, space-separated; returns Nil."""
    print(pr_seq(expr, False, " "))
    return Nil


PRIMITIVES: list[Primitive] = [
    Primitive("+", add, 2),
    Primitive("-", sub, 2),
    Primitive("*", mul, 2),
    Primitive("/", div, 2),
    Primitive("<", lt, 2),
    Primitive("<=", lte, 2),
    Primitive(">", gt, 2),
    Primitive(">=", gte, 2),
    Primitive("=", equals, 2),
    Primitive("list", list_builtin),
    Primitive("list?", is_list, 1),
    Primitive("empty?", is_empty, 1),
    Primitive("count", count, 1),
    Primitive("pr-str", pr_str_builtin),
    Primitive("str", str_builtin),
    Primitive("prn", prn),
    Primitive("println", println_builtin),
]


def register(env: Environment) -> None:
    """Register all primitives and special forms into the given environment."""
    env.update({p.name: p for p in PRIMITIVES})
    env.update({name: SpecialForm(name, fn) for name, fn in SPECIAL_FORMS.items()})


def create_root_env() -> Environment:
    """Return a new root environment holding every builtin binding."""
    env = Environment()
    register(env)
    return env
