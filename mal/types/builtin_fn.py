"""Primitive function values backed by Python callables."""

from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from mal import LispValue

if TYPE_CHECKING:
    from mal.types.environment import Environment

PrimitiveFn = Callable[["Environment", list[LispValue]], LispValue]


class BuiltinFn:
    """A named primitive. Called as ``fn(env, args)`` with evaluated args."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"<BuiltinFn {self.name}>"
