from __future__ import annotations
import sys


class Keyword:
    """A self-evaluating ``:name`` atom. The stored name keeps its colon."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        if not name.startswith(":"):
            name = ":" + name
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Keyword) and self.id == other.id

    def __hash__(self) -> int:
        return hash(("keyword", self.id))

    def __repr__(self):
        return f"Keyword({self.id!r})"

    def __str__(self):
        return self.id
