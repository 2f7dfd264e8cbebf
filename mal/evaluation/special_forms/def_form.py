from mal import EvaluatorFn
from mal import SExpression, LispValue
from mal.errors import MalArityError, MalTypeError
from mal.types.symbol import Symbol
from mal.types.environment import Environment


def def_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def! name expr)
    Binds in the current frame, no child scope, and returns the value.
    """
    if len(tail) != 2:
        raise MalArityError("def! requires exactly 2 arguments: (def! name expr)")
    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MalTypeError(f"def! first argument must be a Symbol, got {name!r}")
    value = evaluate_fn(val_expr, env)
    env.set(name, value)
    return value
