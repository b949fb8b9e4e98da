"""Primitive operators for the ListScript runtime.

This module defines the arithmetic, comparison, list and output primitives,
and `register`, which builds the initial environment. Each primitive takes
the calling scope and the already-evaluated arguments and returns a node;
failures are returned as Error nodes, never raised.
"""
from __future__ import annotations

from typing import Callable

from listscript import Value
from listscript.printer import print_node
from listscript.runtime_context import Scope
from listscript.types.environment import Environment
from listscript.types.node import (
    Boolean,
    Error,
    ErrorKind,
    List,
    Number,
    PrimitiveOp,
    FALSE,
    TRUE,
)

Primitive = Callable[[Scope, list[Value]], Value]


def _arity_error(message: str) -> Error:
    return Error(f"Arity mismatch: {message}", ErrorKind.ARITY_MISMATCH)


def _type_error(message: str) -> Error:
    return Error(f"Type error: {message}", ErrorKind.TYPE_ERROR)


def _numbers(args: list[Value], kind: str) -> tuple[int, int] | Error:
    if len(args) != 2:
        return _arity_error(f"Expected 2 arguments for {kind} operator")
    a, b = args
    if not isinstance(a, Number) or not isinstance(b, Number):
        return _type_error("Arguments must be numbers")
    return a.value, b.value


def _list_argument(name: str, args: list[Value]) -> List | Error:
    if len(args) != 1:
        return _arity_error(f"'{name}' expects 1 argument")
    (xs,) = args
    if not isinstance(xs, List):
        return _type_error(f"'{name}' expects a list")
    if not xs.children:
        return Error(f"'{name}' called on empty list", ErrorKind.DOMAIN_ERROR)
    return xs


# -------------------------------
# Arithmetic
# -------------------------------
def _arithmetic(op: Callable[[int, int], int | Error]) -> Primitive:
    def primitive(scope: Scope, args: list[Value]) -> Value:
        operands = _numbers(args, "arithmetic")
        if isinstance(operands, Error):
            return operands
        result = op(*operands)
        return result if isinstance(result, Error) else Number(result)
    return primitive


def _truncating_div(a: int, b: int) -> int | Error:
    if b == 0:
        return Error("Division by zero", ErrorKind.DOMAIN_ERROR)
    # Round toward zero, as fixed-width integer division does
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


add = _arithmetic(lambda a, b: a + b)
sub = _arithmetic(lambda a, b: a - b)
mul = _arithmetic(lambda a, b: a * b)
div = _arithmetic(_truncating_div)


# -------------------------------
# Comparison
# -------------------------------
def _comparison(op: Callable[[int, int], bool]) -> Primitive:
    def primitive(scope: Scope, args: list[Value]) -> Value:
        operands = _numbers(args, "comparison")
        if isinstance(operands, Error):
            return operands
        return Boolean(op(*operands))
    return primitive


lt = _comparison(lambda a, b: a < b)
gt = _comparison(lambda a, b: a > b)
eq = _comparison(lambda a, b: a == b)


# -------------------------------
# List operations
# -------------------------------
def first(scope: Scope, args: list[Value]) -> Value:
    """The first element itself, not a copy."""
    xs = _list_argument("first", args)
    if isinstance(xs, Error):
        return xs
    return xs.children[0]


def rest(scope: Scope, args: list[Value]) -> Value:
    """A new List sharing every element but the first."""
    xs = _list_argument("rest", args)
    if isinstance(xs, Error):
        return xs
    return List(xs.children[1:])


def cons(scope: Scope, args: list[Value]) -> Value:
    if len(args) != 2:
        return _arity_error("'cons' expects 2 arguments")
    head, tail = args
    if not isinstance(tail, List):
        return _type_error("'cons' second argument must be a list")
    return List((head, *tail.children))


# -------------------------------
# Output
# -------------------------------
def write(scope: Scope, args: list[Value]) -> Value:
    if len(args) != 1:
        return _arity_error("'write' expects 1 argument")
    out = scope.context.stream
    print_node(args[0], out)
    out.write("\n")
    return TRUE


PRIMITIVES: dict[str, Primitive] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "<": lt,
    ">": gt,
    "eq?": eq,
    "first": first,
    "rest": rest,
    "cons": cons,
    "write": write,
}


def register(env: Environment | None = None) -> Environment:
    """Return `env` (or an empty chain) extended with the primitives and booleans."""
    if env is None:
        env = Environment.empty()
    env = env.define_many({name: PrimitiveOp(name) for name in PRIMITIVES})
    return env.define_many({"true": TRUE, "false": FALSE})
