"""Runtime environment for mal.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. The session's global environment is the
root of the tree; every `let*` and every closure call hangs a fresh child
off it (or off another child).
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from mal import LispValue
from mal.errors import MalSymbolNotFound, MalTypeError
from mal.types.symbol import Symbol


def _as_symbol(name: Symbol | str) -> Symbol:
    if isinstance(name, Symbol):
        return name
    if isinstance(name, str):
        return Symbol(name)
    raise MalTypeError(f"Cannot bind {name!r}: expected a symbol")


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def set(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only, replacing any previous binding."""
        self.vars[_as_symbol(name)] = value

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`, or None."""
        symbol = _as_symbol(name)
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol | str) -> LispValue:
        """Look up the value bound to `name`, searching outward.

        Raises MalSymbolNotFound if no frame binds it.
        """
        symbol = _as_symbol(name)
        env = self.find(symbol)
        if env is None:
            raise MalSymbolNotFound(f"'{symbol}' not found")
        return env.vars[symbol]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def __contains__(self, name: Symbol | str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
