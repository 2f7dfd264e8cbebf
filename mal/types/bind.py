from __future__ import annotations

from typing import Sequence

from mal import LispValue
from mal.types.environment import Environment
from mal.errors import MalArityError
from mal.types.symbol import Symbol


def bind_arguments(
    params: Sequence[Symbol],
    supplied_args: Sequence[LispValue],
    closure_env: Environment,
) -> Environment:
    """
    Single source of truth for closure argument binding.

    Returns a new Environment whose outer is the closure_env, with each
    parameter bound to the argument in the same position. The number of
    arguments must match the number of parameters exactly.
    """
    if len(params) != len(supplied_args):
        raise MalArityError(
            f"Expected {len(params)} argument(s), got {len(supplied_args)}"
        )
    local_env = Environment(outer=closure_env)
    for name, value in zip(params, supplied_args):
        local_env.set(name, value)
    return local_env
