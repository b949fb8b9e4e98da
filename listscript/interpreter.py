from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator, Optional, TextIO

from listscript import Value, config
from listscript.builtin.primitives import register
from listscript.evaluation.evaluator import evaluate
from listscript.reader.parser import parse_line
from listscript.runtime_context import RuntimeContext, Scope
from listscript.types.errors import ListScriptSyntaxError
from listscript.types.node import Error, ErrorKind

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Line-at-a-time interpreter for ListScript.
    Keeps the top-level environment between lines, so definitions persist.
    Each line is parsed completely before any of it is evaluated: a parse
    error abandons the whole line and leaves the environment untouched.
    """

    def __init__(
        self,
        max_depth: Optional[int] = None,
        max_token_length: Optional[int] = None,
        out: Optional[TextIO] = None,
    ):
        self.context = RuntimeContext(
            max_depth=max_depth if max_depth is not None else config.get_max_depth(),
            out=out,
        )
        self.max_token_length = (
            max_token_length if max_token_length is not None else config.get_max_token_length()
        )
        self.scope = Scope(register(), self.context)

        # Deep ListScript recursion needs more host stack than the default allows
        wanted = self.context.max_depth * config.FRAMES_PER_CALL
        if sys.getrecursionlimit() < wanted:
            sys.setrecursionlimit(wanted)

    @property
    def env(self):
        return self.scope.env

    def eval_expression(self, expr) -> Value:
        """Evaluate one parsed expression at top level."""
        self.scope.depth = 0
        try:
            return evaluate(expr, self.scope)
        except RecursionError:
            logger.debug("host recursion limit hit during evaluation")
            return Error("Maximum recursion depth exceeded", ErrorKind.RECURSION_LIMIT)

    def iter_line(self, line: str) -> Iterator[Value]:
        """Parse `line`, then evaluate its expressions one by one, yielding each result.

        Raises ListScriptSyntaxError before anything is evaluated.
        """
        # Every expression on the line runs, not only the first
        exprs = parse_line(line, self.max_token_length)
        for expr in exprs:
            yield self.eval_expression(expr)

    def eval_line(self, line: str) -> list[Value]:
        return list(self.iter_line(line))

    def eval(self, code: str) -> Optional[Value]:
        """Evaluate each line of `code` in turn and return the last result.

        Expressions never span lines. Returns None when there was nothing to evaluate.
        """
        result: Optional[Value] = None
        for line in code.splitlines():
            for value in self.iter_line(line):
                result = value
        return result

    def run_file(self, path: str | Path, out: Optional[TextIO] = None) -> list[Value]:
        """Evaluate a script line by line.

        Parse errors are reported on `out` with their line number and the
        script carries on with the next line.
        """
        out = out if out is not None else self.context.stream
        results: list[Value] = []
        with open(path, encoding="utf-8") as f:
            for line_num, line in enumerate(f, start=1):
                try:
                    results.extend(self.iter_line(line))
                except ListScriptSyntaxError as ex:
                    logger.debug("%s:%d: %s", path, line_num, ex)
                    out.write(f"{path}:{line_num}: Parse error: {ex}\n")
        return results
