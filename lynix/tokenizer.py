"""Tokenizer for source text, with collected diagnostics."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, TextIO

from .files import get_absolute_path
from .location import Position
from .lyson import Lyson

_END = "\0"
_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_ESCAPES = {"n": "\n", "t": "\t", "b": "\b", '"': '"', "\\": "\\"}
_NEWLINE_TEXT = "\\n"


class TokenType(IntEnum):
    """Kind of a token."""

    EOF = 0
    STR = 1
    INT = 2
    HEX = 3
    CHAR = 4
    FLOAT = 5
    DOUBLE = 6
    SYMBOL = 7
    IDENTIFIER = 8

    @property
    def label(self) -> str:
        """Name used when tokens are rendered."""
        return _LABELS[self]


_LABELS = {
    TokenType.EOF: "EOF",
    TokenType.STR: "String",
    TokenType.INT: "Int",
    TokenType.HEX: "Hex",
    TokenType.CHAR: "Char",
    TokenType.FLOAT: "Float",
    TokenType.DOUBLE: "Double",
    TokenType.SYMBOL: "Symbol",
    TokenType.IDENTIFIER: "Identifier",
}


@dataclass(frozen=True)
class Token:
    """A token and the position where scanning it ended."""

    type: TokenType
    value: str
    pos: Position


class Scanner:
    """Splits source text into tokens, collecting error messages."""

    def __init__(self, source: str, path: "str | os.PathLike[str]") -> None:
        self.source = source
        self.path = os.fspath(path)
        self.index = 0
        self.eof = False
        self.line = 1
        self.column = 0
        self.tokens: List[Token] = []
        self.errors: List[str] = []

    @property
    def pos(self) -> Position:
        return Position(self.line, self.column)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def _current(self) -> str:
        return self.source[self.index] if self.index < len(self.source) else _END

    def _peek(self) -> str:
        nxt = self.index + 1
        return self.source[nxt] if nxt < len(self.source) else _END

    def _advance(self) -> None:
        self.index += 1
        self.column += 1

    def _make(self, kind: TokenType, value: str) -> Token:
        return Token(kind, value, self.pos)

    def _fail(self, message: str) -> None:
        self.errors.append(message)

    def _read_escape(self, out: List[str]) -> None:
        c = self._current()
        mapped = _ESCAPES.get(c)
        if mapped is None:
            self._fail("Unknown escape sequence in character literal")
            if c != _END:
                out.append(c)
        else:
            out.append(mapped)
        self._advance()

    def _scan_string(self) -> Token:
        out: List[str] = []
        self._advance()
        if self._current() == '"':
            self._advance()
            return self._make(TokenType.STR, "")
        while self._current() not in ('"', _END):
            if self._current() == "\\":
                self._advance()
                self._read_escape(out)
            else:
                out.append(self._current())
                self._advance()
        if self._current() == '"':
            self._advance()
        else:
            self._fail("Unclosed string literal")
        return self._make(TokenType.STR, "".join(out))

    def _scan_char(self) -> Token:
        out: List[str] = []
        self._advance()
        if self._current() == "\\":
            self._advance()
            self._read_escape(out)
        else:
            if self._current() != _END:
                out.append(self._current())
            self._advance()
        if self._current() != "'":
            self._fail("Unclosed character literal")
        else:
            self._advance()
        return self._make(TokenType.CHAR, "".join(out))

    def _take_while(self, out: List[str], allowed: frozenset) -> None:
        while self._current() in allowed:
            out.append(self._current())
            self._advance()

    def _scan_number(self) -> Token:
        out: List[str] = []
        kind = TokenType.INT
        if self._current() == "0" and self._peek() in ("x", "X"):
            kind = TokenType.HEX
            out.append("0")
            self._advance()
            out.append(self._current())
            self._advance()
            self._take_while(out, _HEX_DIGITS)
        self._take_while(out, _DIGITS)
        if self._current() == ".":
            kind = TokenType.FLOAT
            out.append(".")
            self._advance()
            self._take_while(out, _DIGITS)
        if self._current() in ("e", "E"):
            kind = TokenType.FLOAT
            out.append(self._current())
            self._advance()
            if self._current() in ("+", "-"):
                out.append(self._current())
                self._advance()
            self._take_while(out, _DIGITS)
        if self._current() in ("f", "F"):
            self._advance()
            kind = TokenType.FLOAT
        if self._current() in ("d", "D"):
            self._advance()
            kind = TokenType.DOUBLE
        return self._make(kind, "".join(out))

    def _scan_identifier(self) -> Token:
        out: List[str] = []
        while self._current().isalnum() or self._current() == "_":
            out.append(self._current())
            self._advance()
        return self._make(TokenType.IDENTIFIER, "".join(out))

    def _skip_block_comment(self) -> None:
        while True:
            c = self._current()
            if c == _END:
                self._fail("Unclosed block comment")
                return
            if c == "*" and self._peek() == "/":
                self._advance()
                self._advance()
                return
            if c == "\n":
                self.line += 1
                self.column = 0
            self._advance()

    def next_token(self) -> Token:
        """Scan and return the next token; EOF once the input is used up."""
        while True:
            if self._current() == "\n":
                self._advance()
                result = self._make(TokenType.SYMBOL, _NEWLINE_TEXT)
                self.line += 1
                self.column = 0
                return result
            while self._current().isspace():
                self._advance()
            if self._current() == "/":
                nxt = self._peek()
                if nxt == "/":
                    self._advance()
                    self._advance()
                    if self._current() not in ("\n", _END):
                        self._advance()
                        continue
                elif nxt == "*":
                    self._advance()
                    self._advance()
                    self._skip_block_comment()
                    continue
            break

        c = self._current()
        if self.index >= len(self.source) or c == _END:
            self.eof = True
            return self._make(TokenType.EOF, "")
        if c == '"':
            return self._scan_string()
        if c == "'":
            return self._scan_char()
        if c in _DIGITS:
            return self._scan_number()
        if c.isalpha() or c == "_":
            return self._scan_identifier()
        self._advance()
        return self._make(TokenType.SYMBOL, c)

    def scan_tokens(self) -> List[Token]:
        """Scan up to and including EOF; return all tokens scanned so far."""
        while not self.eof:
            self.tokens.append(self.next_token())
        return self.tokens

    def to_lyson(self) -> Lyson:
        """Describe the scanned tokens as a document tree."""
        root = Lyson.create_object()
        try:
            path: Optional[str] = get_absolute_path(self.path)
        except OSError:
            path = None
        root.append_str("path", path)
        root.append_int("count", len(self.tokens))
        array = Lyson.create_array()
        for item in self.tokens:
            child = Lyson.create_object()
            child.append_str("type", item.type.label)
            child.append_str("value", item.value)
            position = Lyson.create_object()
            position.append_int("line", item.pos.line)
            position.append_int("column", item.pos.column)
            child.append_object("position", position)
            array.append_object(None, child)
        root.append_array("tokens", array)
        return root

    def render_tokens(self, file: Optional[TextIO] = None) -> None:
        """Write the indented token document to ``file`` (stdout by default)."""
        out = sys.stdout if file is None else file
        out.write(self.to_lyson().to_string(1))