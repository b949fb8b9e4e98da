from listscript import EvaluatorFn
from listscript import Value
from listscript.runtime_context import Scope
from listscript.types.node import Def, Error, ErrorKind, TRUE


def define_form(
    expr: Def,
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    def name args(p ...) body  -> binds name to the Def node itself, returns true
    def name value             -> binds name to the evaluated value, returns it

    The binding replaces the chain held by `scope`, so a def inside a function
    body is only visible for the rest of that call.
    """
    if len(expr.children) not in (2, 3):
        return Error("Cannot evaluate expression of this type", ErrorKind.INVALID_EXPRESSION)
    if expr.is_function:
        scope.define(expr.name, expr)
        return TRUE

    value = evaluate_fn(expr.value, scope)
    scope.define(expr.name, value)
    return value
