from listscript import EvaluatorFn
from listscript import Value
from listscript.runtime_context import Scope
from listscript.types.node import Boolean, Error, ErrorKind, If


def if_form(
    expr: If,
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> Value:
    if len(expr.children) != 3:
        return Error("Cannot evaluate expression of this type", ErrorKind.INVALID_EXPRESSION)
    cond = evaluate_fn(expr.condition, scope)
    if isinstance(cond, Error):
        return cond
    # No truthiness: only a Boolean may decide a branch
    if not isinstance(cond, Boolean):
        return Error("'if' condition must be a boolean", ErrorKind.TYPE_ERROR)

    if cond.value:
        return evaluate_fn(expr.then_branch, scope)
    return evaluate_fn(expr.else_branch, scope)
