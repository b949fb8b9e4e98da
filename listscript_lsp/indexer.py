from __future__ import annotations

"""
Lightweight indexer for ListScript files without evaluating code.

Each line is an independent unit, so the document is indexed line by line:
- definitions: `def name value` (var) and `def name args(...) body` (function)
- diagnostics: parse errors reported by the real parser, with their column

Token positions come from the interpreter's own Lexer, so what the index
sees is exactly what the interpreter would read.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from listscript.reader.lexer import Lexer
from listscript.reader.parser import parse_line
from listscript.types.errors import ListScriptSyntaxError


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class LineDiagnostic:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    diagnostics: List[LineDiagnostic] = field(default_factory=list)


def _index_definitions(idx: DocumentIndex, text: str, line_num: int, max_token_length: Optional[int]) -> None:
    lexer = Lexer(text, max_token_length)
    prev = None
    while True:
        try:
            tok = lexer.next_token()
        except ListScriptSyntaxError:
            return
        if tok is None:
            return
        if prev is not None and prev.kind == "atom" and prev.value == "def" and tok.kind == "atom":
            name, col = tok.value, lexer.token_start
            kind = "function" if _next_is_args(lexer) else "var"
            # Later definitions win, as they do at runtime
            idx.symbols[name] = SymbolDef(name=name, kind=kind, line=line_num, col=col)
        prev = tok


def _next_is_args(lexer: Lexer) -> bool:
    probe = Lexer(lexer.text, lexer.max_token_length)
    probe.pos = lexer.pos
    try:
        tok = probe.next_token()
    except ListScriptSyntaxError:
        return False
    return tok is not None and tok.kind == "atom" and tok.value == "args"


def build_index(text: str, max_token_length: Optional[int] = None) -> DocumentIndex:
    idx = DocumentIndex()
    for line_num, line in enumerate(text.splitlines()):
        try:
            parse_line(line, max_token_length)
        except ListScriptSyntaxError as ex:
            col = ex.column if ex.column is not None else 0
            idx.diagnostics.append(LineDiagnostic(message=ex.message, line=line_num, col=col))
        _index_definitions(idx, line, line_num, max_token_length)
    return idx


# Primitive signatures for quick hover/signature help without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "+": "+(a b) -> number",
    "-": "-(a b) -> number",
    "*": "*(a b) -> number",
    "/": "/(a b) -> number, truncating; error on zero divisor",
    "<": "<(a b) -> boolean",
    ">": ">(a b) -> boolean",
    "eq?": "eq?(a b) -> boolean",
    "first": "first(xs) -> first element; error on empty list",
    "rest": "rest(xs) -> list without the first element; error on empty list",
    "cons": "cons(x xs) -> list with x in front",
    "write": "write(x) -> prints x, returns true",
}

KEYWORDS: Dict[str, str] = {
    "def": "def name value | def name args(p ...) body",
    "args": "args(p ...) parameter list of a function definition",
    "if": "if condition true-branch false-branch",
    "list": "list(x ...) list, or a call when its head is a symbol",
    "data": "data(x ...) literal list, never a call",
}
