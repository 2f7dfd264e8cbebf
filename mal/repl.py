"""
Line-oriented read-eval-print loop for mal.

Each line is read, every form on it is evaluated in the session's global
environment, and the last result is printed. Errors are reported and the
session carries on with the next line. End of input ends the session.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from mal import config
from mal.errors import MalError
from mal.interpreter import Interpreter

logger = logging.getLogger(__name__)


def run_repl(
    interp: Interpreter | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    interp = interp or Interpreter()
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    prompt = config.get_prompt() if prompt is None else prompt
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        if not line.strip():
            continue
        try:
            stdout.write(interp.rep(line) + "\n")
        except MalError as e:
            logger.debug("%s: %s", type(e).__name__, e)
            stderr.write(f"error: {e}\n")
    stdout.write("\n")


def main() -> None:
    logging.basicConfig(level=config.get_log_level())
    run_repl()


if __name__ == "__main__":
    main()
