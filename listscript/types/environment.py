"""Runtime environment for ListScript.

The Environment is a persistent chain of single-binding frames, newest first.
`define` never mutates a chain: it returns a new frame whose tail is the
receiver, so chains captured earlier keep seeing what they saw. Lookups scan
front to back, so a newer binding of a name shadows older ones.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from listscript import Value
from listscript.types.errors import ListScriptUnboundSymbol

_MISSING = object()


class Environment:
    """One frame of a binding chain; the empty chain has no name."""

    __slots__ = ("name", "value", "outer")

    def __init__(
        self,
        name: Optional[str] = None,
        value: Optional[Value] = None,
        outer: Optional[Environment] = None,
    ):
        self.name: Optional[str] = name
        self.value: Optional[Value] = value
        self.outer: Optional[Environment] = outer

    @classmethod
    def empty(cls) -> Environment:
        return cls()

    def define(self, name: str, value: Value) -> Environment:
        """Return a new chain with `name` bound to `value` in front of this one."""
        return Environment(name, value, self)

    def define_many(self, bindings: dict[str, Value]) -> Environment:
        env = self
        for k, v in bindings.items():
            env = env.define(k, v)
        return env

    def _frames(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            if env.name is not None:
                yield env
            env = env.outer

    def get(self, name: str, default=None):
        for frame in self._frames():
            if frame.name == name:
                return frame.value
        return default

    def lookup(self, name: str) -> Value:
        """Look up the newest value bound to `name`.

        Raises ListScriptUnboundSymbol if no frame binds it.
        """
        value = self.get(name, _MISSING)
        if value is _MISSING:
            raise ListScriptUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return value

    def __contains__(self, name: str) -> bool:
        return self.get(name, _MISSING) is not _MISSING

    def __iter__(self) -> Iterator[tuple[str, Value]]:
        """Yield (name, value) pairs newest first, shadowed ones included."""
        for frame in self._frames():
            yield frame.name, frame.value

    def __len__(self) -> int:
        return sum(1 for _ in self._frames())

    def names(self) -> list[str]:
        """Visible names, newest first, without duplicates."""
        seen: dict[str, None] = {}
        for frame in self._frames():
            seen.setdefault(frame.name, None)
        return list(seen)

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            buffer.write(" -> ".join(f"{k}: {v!r}" for k, v in self))
            buffer.write(">")
            return buffer.getvalue()


def define(env: Environment, name: str, value: Value) -> Environment:
    return env.define(name, value)


def lookup(env: Environment, name: str) -> Value:
    return env.lookup(name)
