"""Event-driven streaming parser for the document format.

The parser reports structure through a handler called with an event and
the text gathered for it. Whitespace is skipped everywhere, string
contents included.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Optional

EventHandler = Callable[["LysonEvent", str], None]


class LysonState(IntEnum):
    """Internal state of the stream."""

    START = 0
    IN_STRING = 1
    ESCAPE = 2
    IN_NUMBER = 3
    IN_TRUE = 4
    IN_FALSE = 5
    IN_NULL = 6
    AFTER_KEY = 7
    AFTER_VALUE = 8
    IN_ARRAY = 9
    IN_OBJECT = 10


class LysonEvent(IntEnum):
    """Events reported to the handler."""

    OBJECT_START = 0
    OBJECT_END = 1
    ARRAY_START = 2
    ARRAY_END = 3
    KEY = 4
    STRING = 5
    NUMBER = 6
    BOOLEAN = 7
    NULL = 8


class LysonResult(IntEnum):
    """Outcome codes of parsing."""

    PARSE_SUCCESS = 0
    INVALID_STARTING_CHARACTER = -1
    INVALID_CHARACTER = -2
    INVALID_COMMA = -3
    INVALID_VALUE = -4
    SHOULD_BE_COLON = -5
    UNCLOSED_STRUCTURE = -6


class LysonParseError(ValueError):
    """Raised when the input cannot be parsed."""

    def __init__(self, result: LysonResult, char: Optional[str] = None) -> None:
        self.result = result
        self.char = char
        message = result.name.lower().replace("_", " ")
        if char is not None:
            message = f"{message} at {char!r}"
        super().__init__(message)


_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f"}

_KEYWORDS = {
    LysonState.IN_TRUE: ("true", LysonEvent.BOOLEAN),
    LysonState.IN_FALSE: ("false", LysonEvent.BOOLEAN),
    LysonState.IN_NULL: ("null", LysonEvent.NULL),
}

_NUMBER_CHARS = frozenset(".eE+-")


class LysonStream:
    """Incremental parser; feed text in any number of chunks."""

    def __init__(self, handler: Optional[EventHandler] = None) -> None:
        self.handler = handler
        self.state = LysonState.START
        self.prev = LysonState.START
        self.depth = 0
        self.key = False
        self.in_value = False
        self._buf: list[str] = []

    def _trigger(self, event: LysonEvent) -> None:
        if self.handler is not None:
            self.handler(event, "".join(self._buf))
        self._buf.clear()

    def _fail(self, result: LysonResult, char: str) -> None:
        raise LysonParseError(result, char)

    def _open(self, char: str) -> None:
        self.depth += 1
        if char == "{":
            self.state = LysonState.IN_OBJECT
            self._trigger(LysonEvent.OBJECT_START)
        else:
            self.state = LysonState.IN_ARRAY
            self._trigger(LysonEvent.ARRAY_START)

    def _close(self, event: LysonEvent, char: str) -> None:
        if self.depth <= 0:
            self._fail(LysonResult.UNCLOSED_STRUCTURE, char)
        self.depth -= 1
        self._trigger(event)

    def _begin_literal(self, state: LysonState, char: str) -> None:
        self.state = state
        self._buf.clear()
        self._buf.append(char)

    def _step(self, c: str) -> bool:
        """Process one character; return False if it must be read again."""
        state = self.state
        if state is LysonState.START:
            if c in "{[":
                self._open(c)
            else:
                self._fail(LysonResult.INVALID_STARTING_CHARACTER, c)
        elif state is LysonState.IN_OBJECT:
            if c == '"':
                self.state = LysonState.IN_STRING
                if not self.in_value:
                    self.key = True
                self._buf.clear()
            elif c in "[{":
                self.state = LysonState.START
                if c == "{":
                    self.in_value = False
                self._buf.clear()
                return False
            elif c == "}":
                self._close(LysonEvent.OBJECT_END, c)
                self.state = LysonState.AFTER_VALUE
            else:
                self._fail(LysonResult.INVALID_CHARACTER, c)
        elif state is LysonState.IN_ARRAY:
            if c == "]":
                self._close(LysonEvent.ARRAY_END, c)
                self.state = LysonState.AFTER_VALUE
            elif c == '"':
                self.state = LysonState.IN_STRING
                self.key = False
                self._buf.clear()
            elif c in "{[":
                self._open(c)
            elif c.isdigit() or c == "-":
                self._begin_literal(LysonState.IN_NUMBER, c)
            elif c == "t":
                self._begin_literal(LysonState.IN_TRUE, c)
            elif c == "f":
                self._begin_literal(LysonState.IN_FALSE, c)
            elif c == "n":
                self._begin_literal(LysonState.IN_NULL, c)
            else:
                self._fail(LysonResult.INVALID_CHARACTER, c)
        elif state is LysonState.IN_STRING:
            if c == "\\":
                self.prev = LysonState.IN_STRING
                self.state = LysonState.ESCAPE
            elif c == '"':
                if self.key:
                    self._trigger(LysonEvent.KEY)
                    self.state = LysonState.AFTER_KEY
                else:
                    self._trigger(LysonEvent.STRING)
                    self.state = LysonState.AFTER_VALUE
            else:
                self._buf.append(c)
        elif state is LysonState.ESCAPE:
            if c != "u":
                self._buf.append(_ESCAPES.get(c, c))
            self.state = self.prev
        elif state is LysonState.AFTER_KEY:
            if c == ":":
                self.state = LysonState.IN_OBJECT
                self.in_value = True
                self.key = False
            else:
                self._fail(LysonResult.SHOULD_BE_COLON, c)
        elif state is LysonState.AFTER_VALUE:
            if c == ",":
                if self.depth <= 0:
                    self._fail(LysonResult.INVALID_COMMA, c)
                if self.prev is LysonState.IN_ARRAY:
                    self.state = LysonState.IN_ARRAY
                else:
                    self.state = LysonState.IN_OBJECT
            elif c == "}":
                self._close(LysonEvent.OBJECT_END, c)
            elif c == "]":
                self._close(LysonEvent.ARRAY_END, c)
            else:
                self._fail(LysonResult.INVALID_CHARACTER, c)
            self.in_value = False
        elif state is LysonState.IN_NUMBER:
            if c.isdigit() or c in _NUMBER_CHARS:
                self._buf.append(c)
            else:
                self._trigger(LysonEvent.NUMBER)
                self.state = LysonState.AFTER_VALUE
                return False
        else:
            word, event = _KEYWORDS[state]
            self._buf.append(c)
            if len(self._buf) == len(word):
                if "".join(self._buf) != word:
                    self._fail(LysonResult.INVALID_VALUE, c)
                self._trigger(event)
                self.state = LysonState.AFTER_VALUE
        return True

    def feed(self, data: str) -> None:
        """Parse a chunk of text; raise LysonParseError on malformed input."""
        for char in data:
            if char.isspace():
                continue
            while not self._step(char):
                pass

    def finalize(self) -> None:
        """Signal the end of input; raise if a structure is left open."""
        if self.depth != 0:
            raise LysonParseError(LysonResult.UNCLOSED_STRUCTURE)