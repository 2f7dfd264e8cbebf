# Core type aliases for the mal data model.
# Runtime values are plain Python objects where one fits (bool, int, str,
# tuple for lists) plus a handful of small classes under mal.types for the
# variants Python has no native counterpart for (Nil, Symbol, Keyword,
# BuiltinFn, Closure).
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Lists are tuples in both roles, so the aliases are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias
SExpression = LispValue

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]
