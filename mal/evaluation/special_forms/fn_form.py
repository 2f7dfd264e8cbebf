from mal import EvaluatorFn
from mal import SExpression, LispValue
from mal.errors import MalArityError, MalTypeError
from mal.types.closure import Closure
from mal.types.environment import Environment
from mal.types.symbol import Symbol


def fn_form(
    tail: list[SExpression],
    env: Environment,
    _: EvaluatorFn,
) -> LispValue:
    """
    (fn* (p1 p2 ...) body)
    Nothing is evaluated; the closure captures `env` by reference.
    """
    if len(tail) != 2:
        raise MalArityError("fn* requires a parameter list and a body: (fn* (params) body)")
    params, body = tail
    if not isinstance(params, tuple):
        raise MalTypeError(f"fn* parameters must be a list, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol):
            raise MalTypeError(f"fn* parameter must be a Symbol, got {p!r}")
    return Closure(params, body, env)
