"""Display format of ListScript values.

    Number        -> decimal
    Boolean       -> true / false
    String        -> "text"
    Symbol / op   -> bare name
    Error         -> Error: <message>
    List          -> list(a b c)
    Data          -> data(a b c)
    FunctionCall  -> func_call(f a b)
    function Def  -> <function name>
    None          -> nil
"""

from __future__ import annotations

from io import StringIO
from typing import Optional, TextIO

from listscript import Value
from listscript.types.node import (
    Boolean,
    Compound,
    Data,
    Def,
    Error,
    FunctionCall,
    List,
    Number,
    PrimitiveOp,
    String,
    Symbol,
)

COMPOUND_TAGS = {
    List: "list",
    Data: "data",
    FunctionCall: "func_call",
}


def _write(node: Optional[Value], buffer: TextIO) -> None:
    match node:
        case None:
            buffer.write("nil")
        case Number(value=value):
            buffer.write(str(value))
        case Boolean(value=value):
            buffer.write("true" if value else "false")
        case String(text=text):
            buffer.write(f'"{text}"')
        case Symbol(name=name) | PrimitiveOp(name=name):
            buffer.write(name)
        case Error(message=message):
            buffer.write(f"Error: {message}")
        case Def() if node.is_function:
            buffer.write(f"<function {node.name}>")
        case Compound() if type(node) in COMPOUND_TAGS:
            buffer.write(COMPOUND_TAGS[type(node)])
            buffer.write("(")
            for i, child in enumerate(node.children):
                if i:
                    buffer.write(" ")
                _write(child, buffer)
            buffer.write(")")
        case _:
            buffer.write("?")


def to_display(node: Optional[Value]) -> str:
    with StringIO() as buffer:
        _write(node, buffer)
        return buffer.getvalue()


def print_node(node: Optional[Value], out: TextIO) -> None:
    """Write the display form of `node` (no trailing newline)."""
    _write(node, out)
