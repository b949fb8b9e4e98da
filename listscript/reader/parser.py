"""
  ListScript Parser

Recursive descent over a token cursor; the lexer is pulled one token at a
time, and the only look-ahead is Lexer.peek_char (to tell a call `f(x)` from a
bare atom `f`).

    - def name value              -> Def(name, value)
    - def name args(p ...) body   -> Def(name, Args, body)
    - if cond then else           -> If
    - list(...) / (...)           -> List
    - data(...)                   -> Data
    - atom(...)                   -> FunctionCall(Symbol(atom), ...)
    - atom                        -> Number | Symbol
    - "text"                      -> Number (if all digits) | String

Malformed input raises ListScriptSyntaxError; nothing is validated beyond
the structural shape.
"""

from __future__ import annotations

import re
from typing import Optional

from listscript import Expression
from listscript.reader.lexer import Lexer, Token
from listscript.types.errors import ListScriptSyntaxError
from listscript.types.node import (
    Args,
    Data,
    Def,
    FunctionCall,
    If,
    List,
    Number,
    String,
    Symbol,
)

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_atom(token: Token) -> Expression:
    """Classify a token that is not a keyword or a call head."""
    if INTEGER_RE.fullmatch(token.value):
        return Number(int(token.value))
    if token.quoted:
        return String(token.value)
    return Symbol(token.value)


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.token: Optional[Token] = None

    def advance(self) -> Optional[Token]:
        self.token = self.lexer.next_token()
        return self.token

    def _error(self, message: str) -> ListScriptSyntaxError:
        return ListScriptSyntaxError(message, self.lexer.token_start)

    def _is(self, kind: str, value: Optional[str] = None) -> bool:
        tok = self.token
        return tok is not None and tok.kind == kind and (value is None or tok.value == value)

    def _expect_lparen(self, after: str) -> None:
        self.advance()
        if not self._is("lparen"):
            raise self._error(f"Expected '(' after '{after}'")

    def _next_expression(self, what: str) -> Expression:
        if self.advance() is None:
            raise self._error(f"Unexpected end of line: missing {what}")
        return self.parse_expression()

    def parse_paren_content(self) -> list[Expression]:
        """Parse expressions up to the matching ')'; the '(' is already consumed."""
        items: list[Expression] = []
        while True:
            if self.advance() is None:
                raise self._error("Unmatched '('")
            if self._is("rparen"):
                return items
            items.append(self.parse_expression())

    def parse_expression(self) -> Expression:
        """Parse one expression starting at the current token."""
        tok = self.token
        if tok is None:
            raise self._error("Unexpected end of line")

        if tok.kind == "lparen":
            return List(tuple(self.parse_paren_content()))
        if tok.kind == "rparen":
            raise self._error("Unexpected ')'")
        if tok.kind == "string":
            return parse_atom(tok)

        if tok.value == "def":
            return self.parse_def()
        if tok.value == "if":
            cond = self._next_expression("if condition")
            then = self._next_expression("if true-branch")
            other = self._next_expression("if false-branch")
            return If((cond, then, other))
        if tok.value == "list":
            self._expect_lparen("list")
            return List(tuple(self.parse_paren_content()))
        if tok.value == "data":
            self._expect_lparen("data")
            return Data(tuple(self.parse_paren_content()))

        if self.lexer.peek_char() == "(":
            self.advance()  # consume '('
            args = self.parse_paren_content()
            return FunctionCall((Symbol(tok.value), *args))
        return parse_atom(tok)

    def parse_def(self) -> Def:
        self.advance()
        if not self._is("atom"):
            raise self._error("Expected a name after 'def'")
        name = Symbol(self.token.value)

        if self.advance() is None:
            raise self._error("Unexpected end of line: missing def value")
        if self._is("atom", "args"):
            self._expect_lparen("args")
            params: list[Symbol] = []
            while True:
                if self.advance() is None:
                    raise self._error("Unmatched '(' in parameter list")
                if self._is("rparen"):
                    break
                if not self._is("atom"):
                    raise self._error("Parameter names must be plain symbols")
                params.append(Symbol(self.token.value))
            body = self._next_expression("function body")
            return Def((name, Args(tuple(params)), body))

        return Def((name, self.parse_expression()))

    def parse_all(self) -> list[Expression]:
        """Parse every expression remaining on the line."""
        exprs: list[Expression] = []
        while self.advance() is not None:
            exprs.append(self.parse_expression())
        return exprs


def parse_line(text: str, max_token_length: Optional[int] = None) -> list[Expression]:
    """Parse one line of source into its top-level expressions."""
    parser = Parser(Lexer(text, max_token_length))
    try:
        return parser.parse_all()
    except RecursionError:
        raise parser._error("Expression nested too deeply") from None


def parse(text: str, max_token_length: Optional[int] = None) -> Expression:
    """Parse the first expression of a line and ignore the rest."""
    parser = Parser(Lexer(text, max_token_length))
    if parser.advance() is None:
        raise ListScriptSyntaxError("Empty input")
    try:
        return parser.parse_expression()
    except RecursionError:
        raise parser._error("Expression nested too deeply") from None
