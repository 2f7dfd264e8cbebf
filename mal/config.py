"""Session settings, read from environment variables at call time.

MAL_MAX_CALL_DEPTH bounds nested closure calls. There is no tail-call
elimination, so each call costs a handful of Python frames; the interpreter
raises Python's recursion limit to fit the configured depth (see
mal.interpreter.ensure_recursion_limit), and the default leaves room for
the recursive programs the language is meant for.
"""
from __future__ import annotations
import logging
import os

logger = logging.getLogger(__name__)

# Defaults
DEFAULT_PROMPT = "mal> "
DEFAULT_MAX_CALL_DEPTH = 500
DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", var, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive, using %d", var, raw, default)
        return default
    return value


def get_prompt() -> str:
    return os.environ.get('MAL_PROMPT', DEFAULT_PROMPT)


def get_max_call_depth() -> int:
    return int_from_env('MAL_MAX_CALL_DEPTH', DEFAULT_MAX_CALL_DEPTH)


def get_log_level() -> str:
    return os.environ.get('MAL_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
