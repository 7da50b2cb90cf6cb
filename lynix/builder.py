"""Build a document tree from parser events."""

from __future__ import annotations

import re
from typing import List, Optional

from .lyson import Lyson, LysonType
from .lyson_parser import LysonEvent, LysonStream

_INTEGER = re.compile(r"[+-]?\d+")
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _to_int32(value: int) -> int:
    value = max(_INT64_MIN, min(_INT64_MAX, value))
    return ((value + 2**31) % 2**32) - 2**31


class TreeBuilder:
    """Event handler that assembles a Lyson tree."""

    def __init__(self) -> None:
        self.root: Optional[Lyson] = None
        self.current: Optional[Lyson] = None
        self.key: Optional[str] = None
        self._stack: List[Lyson] = []

    def built(self) -> Optional[Lyson]:
        """Return the root of the tree built so far."""
        return self.root

    def __call__(self, event: LysonEvent, data: str) -> None:
        self.handle(event, data)

    def _attach(self, node: Lyson) -> None:
        current = self.current
        if current is None:
            self.root = node
            self.current = node
            return
        if current.type is LysonType.OBJECT:
            node.key = self.key
            self.key = None
            current.children.append(node)
        elif current.type is LysonType.ARRAY:
            current.children.append(node)

    def _open(self, node: Lyson) -> None:
        if self.root is None:
            self.root = node
        else:
            self._attach(node)
        if self.current is not None:
            self._stack.append(self.current)
        self.current = node

    def _append_number(self, data: str) -> None:
        if _INTEGER.fullmatch(data):
            self.current.append_int(self.key, _to_int32(int(data)))
        elif _DECIMAL.fullmatch(data):
            self.current.append_double(self.key, float(data))

    def handle(self, event: LysonEvent, data: str) -> None:
        """Apply one parser event to the tree."""
        if event is LysonEvent.OBJECT_START:
            self._open(Lyson.create_object())
        elif event is LysonEvent.ARRAY_START:
            self._open(Lyson.create_array())
        elif event is LysonEvent.KEY:
            self.key = data or None
        elif event in (LysonEvent.OBJECT_END, LysonEvent.ARRAY_END):
            self.current = self._stack.pop() if self._stack else None
        elif self.current is None or not self.current.is_container:
            return
        elif event is LysonEvent.STRING:
            if data:
                self.current.append_str(self.key, data)
        elif event is LysonEvent.NUMBER:
            self._append_number(data)
        elif event is LysonEvent.BOOLEAN:
            if data == "true":
                self.current.append_true(self.key)
            else:
                self.current.append_false(self.key)
        elif event is LysonEvent.NULL:
            self.current.append_null(self.key)


def parse(text: str) -> Optional[Lyson]:
    """Parse a whole document; raise LysonParseError if it is malformed."""
    builder = TreeBuilder()
    stream = LysonStream(builder.handle)
    stream.feed(text)
    stream.finalize()
    return builder.built()