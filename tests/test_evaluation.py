import pytest

from listscript.evaluation.evaluator import evaluate
from listscript.builtin.primitives import register
from listscript.reader.parser import parse
from listscript.runtime_context import RuntimeContext, Scope
from listscript.types.node import (
    Args,
    Boolean,
    Data,
    Error,
    ErrorKind,
    FunctionCall,
    List,
    Number,
    PrimitiveOp,
    String,
    Symbol,
)

# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

@pytest.fixture
def scope():
    env = register().define("x", Number(42)).define("y", Number(100))
    return Scope(env, RuntimeContext(max_depth=64))

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

@pytest.mark.parametrize(
    "node",
    [
        Number(1),
        Boolean(True),
        String("hello"),
        Error("boom"),
        PrimitiveOp("+"),
        Data((Symbol("undefined"), Number(1))),
    ]
)
def test_self_evaluating_literals(scope, node):
    assert evaluate(node, scope) is node


def test_symbol_lookup(scope):
    assert evaluate(Symbol("x"), scope) == Number(42)
    assert evaluate(Symbol("+"), scope) == PrimitiveOp("+")
    assert evaluate(Symbol("z"), scope) == Error("Undefined symbol 'z'", ErrorKind.UNDEFINED_SYMBOL)


def test_data_list_evaluates_children(scope):
    result = evaluate(parse("list(x y 3)"), scope)
    assert result == List((Number(42), Number(100), Number(3)))


def test_list_with_symbol_head_is_a_call(scope):
    assert evaluate(parse("list(+ x y)"), scope) == Number(142)


def test_list_with_primitive_head_is_a_call(scope):
    node = List((PrimitiveOp("*"), Number(6), Number(7)))
    assert evaluate(node, scope) == Number(42)


def test_nested_list_is_not_a_call(scope):
    assert evaluate(parse("list(list(1) 2)"), scope) == List((List((Number(1),)), Number(2)))


def test_empty_list_and_empty_call(scope):
    assert evaluate(List(()), scope) == List(())
    assert evaluate(FunctionCall(()), scope) == List(())


def test_list_stops_at_first_error(scope, capsys):
    result = evaluate(parse("list(1 undefinedSym write(99))"), scope)
    assert result == Error("Undefined symbol 'undefinedSym'", ErrorKind.UNDEFINED_SYMBOL)
    assert capsys.readouterr().out == ""


def test_call_with_undefined_operator_skips_arguments(scope, capsys):
    result = evaluate(parse("list(undefinedSym (write 99))"), scope)
    assert isinstance(result, Error)
    assert result.message == "Undefined symbol 'undefinedSym'"
    assert capsys.readouterr().out == ""


def test_arguments_short_circuit_left_to_right(scope, capsys):
    result = evaluate(parse("+(write(1) nope write(2))"), scope)
    assert result == Error("Undefined symbol 'nope'", ErrorKind.UNDEFINED_SYMBOL)
    # write(1) already ran before the error arose
    assert capsys.readouterr().out == "1\n"


def test_apply_non_function(scope):
    assert evaluate(parse("x(1)"), scope) == Error(
        "Cannot apply a non-function or undefined operator", ErrorKind.APPLY_NON_FUNCTION
    )


def test_unknown_primitive(scope):
    node = FunctionCall((PrimitiveOp("frobnicate"), Number(1)))
    assert evaluate(node, scope) == Error("Unknown primitive operator", ErrorKind.UNKNOWN_PRIMITIVE)


def test_args_node_cannot_be_evaluated(scope):
    assert evaluate(Args((Symbol("a"),)), scope) == Error(
        "Cannot evaluate expression of this type", ErrorKind.INVALID_EXPRESSION
    )


def test_write_prints_and_returns_true(scope, capsys):
    assert evaluate(parse('write(list(1 "two" data(three)))'), scope) == Boolean(True)
    assert capsys.readouterr().out == 'list(1 "two" data(three))\n'


def test_write_arity(scope, capsys):
    assert evaluate(parse("write(1 2)"), scope) == Error(
        "Arity mismatch: 'write' expects 1 argument", ErrorKind.ARITY_MISMATCH
    )
    assert capsys.readouterr().out == ""
