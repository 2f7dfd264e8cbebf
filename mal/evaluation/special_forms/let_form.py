from mal import EvaluatorFn
from mal import SExpression, LispValue
from mal.errors import MalArityError, MalTypeError
from mal.types.symbol import Symbol
from mal.types.environment import Environment


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let* (k1 v1 k2 v2 ...) body)
    Each value is evaluated in the scope being built, so later bindings
    see earlier ones. Nothing bound here is visible after the form.
    """
    if len(tail) != 2:
        raise MalArityError("let* requires a binding list and a body: (let* (k v ...) body)")
    bindings, body = tail
    if not isinstance(bindings, tuple):
        raise MalTypeError(f"let* bindings must be a list, got {bindings!r}")
    if len(bindings) % 2 != 0:
        raise MalArityError("let* bindings must come in name/value pairs")

    local_env = Environment(outer=env)
    for key, val_expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(key, Symbol):
            raise MalTypeError(f"let* binding name must be a Symbol, got {key!r}")
        local_env.set(key, evaluate_fn(val_expr, local_env))
    return evaluate_fn(body, local_env)
