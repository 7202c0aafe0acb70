"""Runtime environment for lispr.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Frames are shared by reference: a closure
keeps the frame it was created in, and every call frame created for it points
back at that same frame. The `outer` chain never forms a cycle.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from lispr import LispValue
from lispr.types.errors import LisprTypeError
from lispr.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, overwriting any local binding.

        Parent frames are never touched.
        """
        if not isinstance(name, Symbol):
            raise LisprTypeError("define", "Symbol", type(name).__name__)
        self.vars[name] = value

    def undefine(self, name: Symbol) -> None:
        """Remove the local binding for `name`; inherited bindings stay visible."""
        self.vars.pop(name, None)

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        An unbound name evaluates to a string of itself, so barewords such as
        `(cat hello world)` read as text.
        """
        env = self.find(name)
        if env is None:
            return str(name)
        return env.vars[name]

    def names(self) -> list[Symbol]:
        """Symbols bound in this frame only, in definition order."""
        return list(self.vars)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

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
        return "<Environment chain: " + " -> ".join(chain) + ">"
