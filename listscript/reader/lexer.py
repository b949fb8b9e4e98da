"""
  ListScript Lexer

- One line of source at a time; tokens are produced on demand
- Token kinds:

    - lparen / rparen -> a single '(' or ')'
    - string          -> body of a double-quoted literal (quotes dropped)
    - atom            -> any other run of non-space, non-paren characters
                         (keywords, identifiers, numbers)

- ';' at a token boundary comments out the rest of the line
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Optional

from listscript.types.errors import ListScriptSyntaxError
from listscript import config


# Whitespace and comments between tokens
SKIP_RE = re.compile(r"(?:[ \t\r\n]+|;[^\n]*)*")

TOKEN_RE = re.compile(
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|"(?P<string>[^"\n]*)"?'  # double-quoted body, closing quote optional
    r"|(?P<atom>[^ \t\r\n()]+)"  # fallback: atoms
)


class Token(NamedTuple):
    kind: str
    value: str

    @property
    def quoted(self) -> bool:
        return self.kind == "string"


class Lexer:
    """Cursor over a single line of text."""

    def __init__(self, text: str, max_token_length: Optional[int] = None):
        self.text = text
        self.pos = 0
        self.max_token_length = (
            max_token_length if max_token_length is not None else config.get_max_token_length()
        )
        # Column where the most recent token started
        self.token_start = 0

    def _skip(self, pos: int) -> int:
        return SKIP_RE.match(self.text, pos).end()

    def peek_char(self) -> str:
        """Next non-space, non-comment character, or '' at end; does not advance."""
        pos = self._skip(self.pos)
        return self.text[pos] if pos < len(self.text) else ""

    def at_end(self) -> bool:
        return self.peek_char() == ""

    def next_token(self) -> Optional[Token]:
        self.pos = self._skip(self.pos)
        if self.pos >= len(self.text):
            return None

        m = TOKEN_RE.match(self.text, self.pos)
        # TOKEN_RE matches any non-space character, and _skip stopped at one
        kind = m.lastgroup
        value = m.group(kind)
        if len(value) > self.max_token_length:
            raise ListScriptSyntaxError(
                f"Token exceeds maximum length of {self.max_token_length} characters: {value[:12]}...",
                self.pos,
            )
        self.token_start = self.pos
        self.pos = m.end()
        return Token(kind, value)


def lex(source: str, max_token_length: Optional[int] = None) -> Iterator[Token]:
    """Token generator over one line: yields Token(kind, value) tuples."""
    lexer = Lexer(source, max_token_length)
    while (token := lexer.next_token()) is not None:
        yield token
