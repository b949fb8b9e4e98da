"""Core evaluator for the ListScript interpreter.

Evaluation never raises for language-level failures: every failure is an
Error node, and every place that receives a sub-result hands an Error straight
back to its caller (left-to-right short-circuit).
"""

from __future__ import annotations

from listscript import Expression, Value
from listscript.runtime_context import Scope
from listscript.evaluation.apply import apply
from listscript.evaluation.special_forms import SPECIAL_FORMS
from listscript.types.node import (
    Boolean,
    Data,
    Error,
    ErrorKind,
    FunctionCall,
    If,
    List,
    Number,
    PrimitiveOp,
    String,
    Symbol,
)
from listscript.types.errors import ListScriptUnboundSymbol


def evaluate(expr: Expression, scope: Scope) -> Value:
    """Evaluate `expr` in `scope`; `def` may replace `scope.env`."""
    match expr:
        case Number() | Boolean() | String() | Error() | PrimitiveOp() | Data():
            return expr

        case Symbol(name=name):
            try:
                return scope.env.lookup(name)
            except ListScriptUnboundSymbol:
                return Error(f"Undefined symbol '{name}'", ErrorKind.UNDEFINED_SYMBOL)

        case List(children=children):
            if expr.is_call():
                return evaluate_call(FunctionCall(children), scope)
            if len(children) == 1 and isinstance(children[0], If):
                # list(if ...) groups a conditional, it does not wrap its result
                return evaluate(children[0], scope)
            return evaluate_sequence(children, scope)

        case FunctionCall():
            return evaluate_call(expr, scope)

    special = SPECIAL_FORMS.get(type(expr))
    if special is not None:
        return special(expr, scope, evaluate)

    return Error("Cannot evaluate expression of this type", ErrorKind.INVALID_EXPRESSION)


def evaluate_sequence(children: tuple[Expression, ...], scope: Scope) -> Value:
    """Evaluate a data list element-wise into a new List."""
    results = []
    for child in children:
        value = evaluate(child, scope)
        if isinstance(value, Error):
            return value
        results.append(value)
    return List(tuple(results))


def evaluate_call(call: FunctionCall, scope: Scope) -> Value:
    if not call.children:
        return List()

    op = evaluate(call.operator, scope)
    if isinstance(op, Error):
        return op

    args: list[Value] = []
    for arg in call.arguments:
        value = evaluate(arg, scope)
        if isinstance(value, Error):
            return value
        args.append(value)

    return apply(op, args, scope, evaluate)
