import io

import pytest

from listscript.printer import print_node, to_display
from listscript.types.node import (
    Args,
    Boolean,
    Data,
    Def,
    Error,
    FunctionCall,
    If,
    List,
    Number,
    PrimitiveOp,
    String,
    Symbol,
    make_function,
)


@pytest.mark.parametrize(
    "node,expected",
    [
        (Number(-12), "-12"),
        (Boolean(True), "true"),
        (Boolean(False), "false"),
        (String("hi there"), '"hi there"'),
        (Symbol("foo"), "foo"),
        (PrimitiveOp("eq?"), "eq?"),
        (Error("Division by zero"), "Error: Division by zero"),
        (List(()), "list()"),
        (List((Number(1), List((Number(2), Number(3))))), "list(1 list(2 3))"),
        (Data((Symbol("a"), String("b"))), 'data(a "b")'),
        (FunctionCall((Symbol("f"), Number(1))), "func_call(f 1)"),
        (make_function("sq", ["n"], Number(0)), "<function sq>"),
        (None, "nil"),
        (Args((Symbol("a"),)), "?"),
        (If((Boolean(True), Number(1), Number(2))), "?"),
        (Def((Symbol("x"), Number(1))), "?"),
    ]
)
def test_display_format(node, expected):
    assert to_display(node) == expected


def test_print_node_writes_without_newline():
    buffer = io.StringIO()
    print_node(List((Number(1), Boolean(False))), buffer)
    assert buffer.getvalue() == "list(1 false)"
