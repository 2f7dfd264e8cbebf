"""Application engine for mal.

Function application for the evaluator lives here:
- BuiltinFn values are invoked with the caller's environment and the
  already-evaluated arguments.
- Closures get a fresh call environment (child of the captured one) and
  their body is evaluated there. This is plain recursion, with no tail-call
  elimination; runtime_context.call_frame bounds the depth.
- Anything else in function position is an error.
"""

from mal import LispValue, EvaluatorFn
from mal.errors import MalNotCallable
from mal.printer import pr_str
from mal.runtime_context import call_frame
from mal.types.builtin_fn import BuiltinFn
from mal.types.closure import Closure
from mal.types.environment import Environment


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a user-defined closure to already-evaluated arguments.

    Raises MalArityError when the argument count does not match the
    parameter list, and MalRecursionError when nesting gets too deep.
    """
    new_env = fn.extend_env(args)
    with call_frame():
        return evaluate_fn(fn.body, new_env)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a BuiltinFn; raise MalNotCallable otherwise."""
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, BuiltinFn):
        return head(env, args)
    else:
        raise MalNotCallable(f"{pr_str(head)} is not a function")
