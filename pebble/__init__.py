# Core type aliases for Pebble's data model.
# Atoms are plain Python values (int, bool, str) plus the Nil/EndOfInput sentinels
# and Symbol; sequences are list subclasses that remember their bracket flavor.
#
# Naming guidance:
# - SExpression: Use in reader/printer code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; code and data share one representation.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (the reader and the evaluator share one representation)
SExpression = LispValue

# Evaluator function type: Python evaluator handed to special forms
EvaluatorFn = Callable[..., LispValue]
