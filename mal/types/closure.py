"""User-defined function values created by ``fn*``."""

from __future__ import annotations

from io import StringIO

from mal import SExpression, LispValue
from mal.types.environment import Environment
from mal.types.symbol import Symbol
from mal.types.bind import bind_arguments


class Closure:
    """A first-class function with formal parameters, body, and closure env.

    The captured environment is held by reference, never copied, so a
    ``def!`` that runs after the ``fn*`` (for example a recursive definition
    of the closure itself) is visible from the body.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: tuple[Symbol, ...], body: SExpression, env: Environment):
        self.params: tuple[Symbol, ...] = params
        self.body: SExpression = body
        self.env: Environment = env

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Closure (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")>")
            return buffer.getvalue()

    # --- Evaluation helpers ---
    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this closure's parameters and
        return a new Environment for evaluating the body.
        """
        return bind_arguments(self.params, args, self.env)
