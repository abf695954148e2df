"""Runtime environment for Pebble.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. Scopes are shared by reference: child
scopes, in-flight calls and closures may all hold the same Environment, and a
later `set` on it is visible to every holder.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from pebble import LispValue
from pebble.errors import PebbleUnboundSymbol
from pebble.types.symbol import Symbol


def _name(key: str | Symbol) -> str:
    return key.id if isinstance(key, Symbol) else key


class Environment:
    """Hierarchical mapping from names to Pebble values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    @property
    def is_root(self) -> bool:
        return self.outer is None

    def set(self, name: str | Symbol, value: LispValue) -> LispValue:
        """Bind `name` to `value` in this scope only, shadowing any outer binding."""
        self.vars[_name(name)] = value
        return value

    def find(self, name: str | Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        key = _name(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: str | Symbol) -> Optional[LispValue]:
        """Return the value bound to `name` in the chain, or None if unbound.

        None is never a Pebble value (nil is the Nil sentinel), so it is
        unambiguous as the not-found marker.
        """
        env = self.find(name)
        if env is None:
            return None
        return env.vars[_name(name)]

    def lookup(self, name: str | Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises PebbleUnboundSymbol if no scope in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise PebbleUnboundSymbol(f"Symbol '{_name(name)}' not found in environment")
        return env.vars[_name(name)]

    def update(self, mapping: dict[str, LispValue]) -> None:
        """Bulk-bind a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
