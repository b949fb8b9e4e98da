from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from listscript import config
from listscript.types.environment import Environment


@dataclass
class RuntimeContext:
    """State shared by every scope of one interpreter."""

    max_depth: int = field(default_factory=config.get_max_depth)
    out: Optional[TextIO] = None

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so capsys/redirect_stdout see the current stdout
        return self.out if self.out is not None else sys.stdout


class Scope:
    """Mutable reference to the current environment chain.

    `def` replaces `scope.env`; a function call gets a child scope whose env
    extends the caller's chain, so definitions made inside a call vanish with it.
    """

    __slots__ = ("env", "depth", "context")

    def __init__(self, env: Environment, context: RuntimeContext | None = None, depth: int = 0):
        self.env = env
        self.context = context if context is not None else RuntimeContext()
        self.depth = depth

    def child(self, env: Environment) -> Scope:
        return Scope(env, self.context, self.depth + 1)

    def define(self, name: str, value) -> None:
        self.env = self.env.define(name, value)
