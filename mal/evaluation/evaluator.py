"""Core evaluator for the mal interpreter.

Implements special-form dispatch and ordinary application. Special forms are
recognised by the literal symbol in head position before anything is
evaluated, so a user binding named `if` or `def!` never shadows the form.
"""

from __future__ import annotations

from mal import SExpression, LispValue
from mal.types.environment import Environment
from mal.types.symbol import Symbol
from mal.evaluation.apply import apply
from mal.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Evaluate `expr` in `env` and return its value.

    Errors are raised as MalError subclasses and abort the whole expression.
    """
    match expr:
        case Symbol():
            return env.get(expr)

        case ():
            # The empty list evaluates to itself, it is never a call.
            return expr

        case (Symbol() as head, *tail_args) if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail_args, env, evaluate)

        case (head, *tail_args):
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate)

    # --- Atoms return as-is ---
    return expr
