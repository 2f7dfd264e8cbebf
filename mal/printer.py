"""Textual representation of runtime values."""

from __future__ import annotations

from mal import LispValue
from mal.types.builtin_fn import BuiltinFn
from mal.types.closure import Closure
from mal.types.keyword import Keyword
from mal.types.nil import NilType
from mal.types.symbol import Symbol

BUILTIN_TAG = "<std:fn>"
CLOSURE_TAG = "<user:fn>"


def pr_str(value: LispValue) -> str:
    """Render `value` the way the reader would read it back.

    Strings hold their text exactly as written between the quotes, escapes
    included, so they only need the quotes put back.
    """
    if isinstance(value, NilType):
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (Symbol, Keyword)):
        return value.id
    if isinstance(value, tuple):
        return "(" + " ".join([pr_str(v) for v in value]) + ")"
    if isinstance(value, BuiltinFn):
        return BUILTIN_TAG
    if isinstance(value, Closure):
        return CLOSURE_TAG
    raise TypeError(f"Not a mal value: {value!r}")
