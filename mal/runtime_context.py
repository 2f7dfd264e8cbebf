from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from mal import config
from mal.errors import MalRecursionError

# NOTE: process-global, like the rest of the session state. The evaluator
# is single-threaded.
_call_depth: int = 0
_max_call_depth: int | None = None


def set_max_call_depth(limit: int | None) -> None:
    global _max_call_depth
    _max_call_depth = limit


def get_max_call_depth() -> int:
    if _max_call_depth is None:
        return config.get_max_call_depth()
    return _max_call_depth


def get_call_depth() -> int:
    return _call_depth


@contextmanager
def call_frame() -> Iterator[int]:
    """Track one closure call; raise MalRecursionError past the depth limit."""
    global _call_depth
    limit = get_max_call_depth()
    if _call_depth >= limit:
        raise MalRecursionError(f"Maximum call depth of {limit} exceeded")
    _call_depth += 1
    try:
        yield _call_depth
    finally:
        _call_depth -= 1
