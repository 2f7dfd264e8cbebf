"""Built-in functions for the mal runtime environment.

This module defines the fixed primitive table: integer arithmetic and
comparison, structural equality, and the list helpers. Every primitive takes
the calling environment and a list of already-evaluated arguments, and raises
MalArityError / MalTypeError for any argument shape it does not accept.
"""
from __future__ import annotations

from typing import Callable

from mal import LispValue
from mal.errors import MalArityError, MalTypeError, MalDivisionByZero
from mal.types.builtin_fn import BuiltinFn, PrimitiveFn
from mal.types.environment import Environment
from mal.types.nil import NilType
from mal.types.symbol import Symbol


def is_int(value: LispValue) -> bool:
    # bool is a subclass of int; true/false are not integers here
    return isinstance(value, int) and not isinstance(value, bool)


def _expect_arity(name: str, expr: list[LispValue], n: int) -> None:
    if len(expr) != n:
        raise MalArityError(f"{name} requires exactly {n} argument(s), got {len(expr)}")


def _expect_ints(name: str, expr: list[LispValue]) -> tuple[int, int]:
    _expect_arity(name, expr, 2)
    a, b = expr
    if not (is_int(a) and is_int(b)):
        raise MalTypeError(f"Wrong type of arguments for `{name}' operator")
    return a, b


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> int:
    a, b = _expect_ints("+", expr)
    return a + b


def sub(env: Environment, expr: list[LispValue]) -> int:
    a, b = _expect_ints("-", expr)
    return a - b


def mul(env: Environment, expr: list[LispValue]) -> int:
    a, b = _expect_ints("*", expr)
    return a * b


def div(env: Environment, expr: list[LispValue]) -> int:
    """Integer division truncating toward zero."""
    a, b = _expect_ints("/", expr)
    if b == 0:
        raise MalDivisionByZero("Division by zero")
    q = a // b
    if q < 0 and q * b != a:
        q += 1
    return q


# -------------------------------
# Comparison
# -------------------------------
def _comparison(name: str, op: Callable[[int, int], bool]) -> PrimitiveFn:
    def compare(env: Environment, expr: list[LispValue]) -> bool:
        a, b = _expect_ints(name, expr)
        return op(a, b)
    return compare


lt = _comparison("<", lambda a, b: a < b)
lte = _comparison("<=", lambda a, b: a <= b)
gt = _comparison(">", lambda a, b: a > b)
gte = _comparison(">=", lambda a, b: a >= b)


# -------------------------------
# Equality
# -------------------------------
def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality for Nil, booleans, integers, strings and lists.

    Lists compare element-wise and must have the same length. Any other
    pairing, including values of different types, is unequal.
    """
    if isinstance(a, tuple) and isinstance(b, tuple):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) is not type(b):
        return False
    if isinstance(a, (NilType, bool, int, str)):
        return a == b
    return False


def equals(env: Environment, expr: list[LispValue]) -> bool:
    _expect_arity("=", expr, 2)
    return is_equal(expr[0], expr[1])


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, expr: list[LispValue]) -> tuple:
    return tuple(expr)


def is_list(env: Environment, expr: list[LispValue]) -> bool:
    _expect_arity("list?", expr, 1)
    return isinstance(expr[0], tuple)


def is_empty(env: Environment, expr: list[LispValue]) -> bool:
    _expect_arity("empty?", expr, 1)
    return isinstance(expr[0], tuple) and len(expr[0]) == 0


def count(env: Environment, expr: list[LispValue]) -> int:
    """Length of a list. Any non-list value counts as 1."""
    _expect_arity("count", expr, 1)
    value = expr[0]
    if isinstance(value, tuple):
        return len(value)
    return 1


# -------------------------------
# Registration
# -------------------------------
CORE_NS: dict[str, PrimitiveFn] = {
    '+': add,
    '-': sub,
    '*': mul,
    '/': div,
    '=': equals,
    '<': lt,
    '<=': lte,
    '>': gt,
    '>=': gte,
    'list': list_builtin,
    'list?': is_list,
    'empty?': is_empty,
    'count': count,
}


def register(env: Environment) -> None:
    env.update({Symbol(name): BuiltinFn(name, fn) for name, fn in CORE_NS.items()})
