from __future__ import annotations

import logging
import sys

from mal import LispValue
from mal.builtin.core_builtin import register
from mal.errors import MalParseError, MalRecursionError
from mal.evaluation.evaluator import evaluate
from mal.printer import pr_str
from mal.reader.parser import read_all
from mal.runtime_context import get_max_call_depth
from mal.types.environment import Environment

logger = logging.getLogger(__name__)

# Python frames used by one nested closure call, plus room for the host.
FRAMES_PER_CALL = 8
FRAME_HEADROOM = 200


def ensure_recursion_limit(max_call_depth: int) -> None:
    """Raise Python's recursion limit so `max_call_depth` closure calls fit."""
    needed = max_call_depth * FRAMES_PER_CALL + FRAME_HEADROOM
    if sys.getrecursionlimit() < needed:
        sys.setrecursionlimit(needed)


class Interpreter:
    """
    Reads and evaluates mal code against one global environment.
    Definitions persist across calls, so one Interpreter is one session.
    """

    def __init__(self):
        self.env: Environment = Environment()
        register(self.env)
        ensure_recursion_limit(get_max_call_depth())

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` in order and return the last value.

        Forms before a failing one keep their effects.
        """
        try:
            forms = read_all(code)
        except RecursionError as e:
            raise MalParseError("Input is nested too deeply") from e

        result: LispValue = None
        for expr in forms:
            try:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Evaluating %s", pr_str(expr))
                result = evaluate(expr, self.env)
            except RecursionError as e:
                raise MalRecursionError("Maximum recursion depth exceeded") from e
        return result

    def rep(self, code: str) -> str:
        """Read, evaluate and print."""
        value = self.eval(code)
        try:
            return pr_str(value)
        except RecursionError as e:
            raise MalRecursionError("Value is nested too deeply to print") from e
