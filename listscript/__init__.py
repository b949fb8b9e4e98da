# Core type aliases for the ListScript data model.
# A single family of node classes (listscript.types.node) represents both
# parsed syntax and evaluated values; there is no separate value layer.
#
# Naming guidance:
# - Expression: use in reader/parser code to denote syntactic forms.
# - Value:      use in evaluator/runtime code to denote evaluated results.
# Both aliases resolve to Node and are interchangeable.

from typing import Callable

from listscript.types.node import Node

__version__ = "0.6.0"

# Runtime value alias
Value = Node
# Syntax alias (same node family)
Expression = Node

# Evaluator function type: passed into special forms and the application engine
EvaluatorFn = Callable[..., Value]
