"""Node types for ListScript.

Every node is both syntax and value: the parser builds them, the evaluator
returns them, and a function definition (Def) is itself the function value.
Nodes are frozen and compound children are tuples, so nodes can be shared
freely between lists (`rest` and `cons` alias children rather than copy).
"""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass


class ErrorKind(enum.Enum):
    UNDEFINED_SYMBOL = "undefined-symbol"
    ARITY_MISMATCH = "arity-mismatch"
    TYPE_ERROR = "type-error"
    DOMAIN_ERROR = "domain-error"
    UNKNOWN_PRIMITIVE = "unknown-primitive"
    APPLY_NON_FUNCTION = "apply-non-function"
    INVALID_EXPRESSION = "invalid-expression"
    RECURSION_LIMIT = "recursion-limit"


class Node:
    """Base class of the closed node family."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Number(Node):
    value: int


@dataclass(frozen=True, slots=True)
class Boolean(Node):
    value: bool

    def __bool__(self) -> bool:
        return self.value


@dataclass(frozen=True, slots=True)
class String(Node):
    text: str


@dataclass(frozen=True, slots=True)
class Symbol(Node):
    name: str

    def __post_init__(self):
        # Intern names: lookups compare them constantly
        object.__setattr__(self, "name", sys.intern(self.name))

    def __str__(self):
        return self.name


@dataclass(frozen=True, slots=True)
class PrimitiveOp(Node):
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True, slots=True)
class Error(Node):
    message: str
    kind: ErrorKind = ErrorKind.INVALID_EXPRESSION


@dataclass(frozen=True, slots=True)
class Compound(Node):
    children: tuple[Node, ...] = ()

    def __post_init__(self):
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self):
        return iter(self.children)

    def __getitem__(self, index):
        return self.children[index]


@dataclass(frozen=True, slots=True)
class List(Compound):
    """Data sequence, or call sugar when the head is a Symbol or PrimitiveOp."""

    def is_call(self) -> bool:
        return bool(self.children) and isinstance(self.children[0], (Symbol, PrimitiveOp))


@dataclass(frozen=True, slots=True)
class Data(Compound):
    """Explicitly tagged literal sequence; never treated as a call."""


@dataclass(frozen=True, slots=True)
class Args(Compound):
    """Formal parameter list of a function definition."""

    @property
    def names(self) -> list[str]:
        return [p.name for p in self.children]


@dataclass(frozen=True, slots=True)
class FunctionCall(Compound):
    @property
    def operator(self) -> Node:
        return self.children[0]

    @property
    def arguments(self) -> tuple[Node, ...]:
        return self.children[1:]


@dataclass(frozen=True, slots=True)
class Def(Compound):
    """`def name value` (2 children) or `def name args(...) body` (3 children)."""

    @property
    def name(self) -> str:
        return self.children[0].name

    @property
    def is_function(self) -> bool:
        return len(self.children) == 3

    @property
    def params(self) -> Args:
        return self.children[1]

    @property
    def body(self) -> Node:
        return self.children[2]

    @property
    def value(self) -> Node:
        return self.children[1]


@dataclass(frozen=True, slots=True)
class If(Compound):
    @property
    def condition(self) -> Node:
        return self.children[0]

    @property
    def then_branch(self) -> Node:
        return self.children[1]

    @property
    def else_branch(self) -> Node:
        return self.children[2]


TRUE = Boolean(True)
FALSE = Boolean(False)


def make_function(name: str, params: list[str], body: Node) -> Def:
    """Build a function Def node from plain names (handy for hosts and tests)."""
    return Def((Symbol(name), Args(tuple(Symbol(p) for p in params)), body))
