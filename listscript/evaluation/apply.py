"""Application engine for ListScript.

This module centralizes what happens once a call's operator and arguments
have been evaluated:
- PrimitiveOp operators are resolved by name in the primitive table.
- Function Def operators bind their parameters in a new frame on top of the
  CALLER'S environment (dynamic scoping) and evaluate their body there.
- Anything else cannot be applied.
"""

import logging

from listscript import EvaluatorFn, Value
from listscript.runtime_context import Scope
from listscript.builtin.primitives import PRIMITIVES
from listscript.types.node import Def, Error, ErrorKind, PrimitiveOp

logger = logging.getLogger(__name__)


def apply_primitive(op: PrimitiveOp, args: list[Value], scope: Scope) -> Value:
    fn = PRIMITIVES.get(op.name)
    if fn is None:
        return Error("Unknown primitive operator", ErrorKind.UNKNOWN_PRIMITIVE)
    return fn(scope, args)


def apply_function(
    fn: Def,
    args: list[Value],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Apply a user-defined function.

    Parameters:
    - fn: the 3-child Def node acting as the function value.
    - args: the already-evaluated argument values.
    - scope: the caller's scope; the call frame extends scope.env, not the
      environment the function was defined in.
    - evaluate_fn: evaluator used for the body.

    The function's own name is bound first so the body can recurse even when
    the name is not visible to the caller.
    """
    params = fn.params.names
    if len(params) != len(args):
        return Error("Arity mismatch in user-defined function", ErrorKind.ARITY_MISMATCH)

    if scope.depth >= scope.context.max_depth:
        logger.debug("call depth limit %d reached in %s", scope.context.max_depth, fn.name)
        return Error("Maximum recursion depth exceeded", ErrorKind.RECURSION_LIMIT)

    local_env = scope.env.define(fn.name, fn)
    for name, value in zip(params, args):
        local_env = local_env.define(name, value)
    return evaluate_fn(fn.body, scope.child(local_env))


def apply(
    op: Value,
    args: list[Value],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Apply either a primitive or a user-defined function.

    - For PrimitiveOp, defer to the primitive table.
    - For a function Def, defer to apply_function.
    - Otherwise, return an apply-non-function Error.
    """
    if isinstance(op, PrimitiveOp):
        return apply_primitive(op, args, scope)
    elif isinstance(op, Def) and op.is_function:
        return apply_function(op, args, scope, evaluate_fn)
    else:
        return Error("Cannot apply a non-function or undefined operator", ErrorKind.APPLY_NON_FUNCTION)
