"""A small JSON document tree with a compact and an indented serializer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, List, Optional, Union

_INDENT = "    "

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class LysonType(IntEnum):
    """Kind of value a node holds."""

    NULL = 0
    BOOL = 1
    INT = 3
    DOUBLE = 4
    STRING = 5
    ARRAY = 6
    OBJECT = 7


Scalar = Union[bool, int, float, str, None]


@dataclass
class Lyson:
    """One node of a document: a scalar, or an array or object with children."""

    type: LysonType
    key: Optional[str] = None
    value: Scalar = None
    children: List["Lyson"] = field(default_factory=list)

    @classmethod
    def create_object(cls) -> "Lyson":
        """Return a new, empty object node."""
        return cls(LysonType.OBJECT)

    @classmethod
    def create_array(cls) -> "Lyson":
        """Return a new, empty array node."""
        return cls(LysonType.ARRAY)

    @property
    def is_container(self) -> bool:
        return self.type in (LysonType.OBJECT, LysonType.ARRAY)

    def _require_container(self) -> None:
        if not self.is_container:
            raise TypeError(
                f"cannot append members to a {self.type.name.lower()} node"
            )

    def _append(self, key: Optional[str], node: "Lyson") -> "Lyson":
        self._require_container()
        if self.type is LysonType.OBJECT and key is not None:
            node.key = key
        self.children.append(node)
        return node

    def append_int(self, key: Optional[str], value: int) -> "Lyson":
        """Append an integer member; the key is ignored inside arrays."""
        return self._append(key, Lyson(LysonType.INT, value=int(value)))

    def append_str(self, key: Optional[str], value: Optional[str]) -> "Lyson":
        """Append a string member; ``None`` is stored as an empty string."""
        text = "" if value is None else str(value)
        return self._append(key, Lyson(LysonType.STRING, value=text))

    def append_double(self, key: Optional[str], value: float) -> "Lyson":
        """Append a floating-point member."""
        return self._append(key, Lyson(LysonType.DOUBLE, value=float(value)))

    def append_null(self, key: Optional[str]) -> "Lyson":
        """Append a null member."""
        return self._append(key, Lyson(LysonType.NULL))

    def append_true(self, key: Optional[str]) -> "Lyson":
        """Append a true member."""
        return self._append(key, Lyson(LysonType.BOOL, value=True))

    def append_false(self, key: Optional[str]) -> "Lyson":
        """Append a false member."""
        return self._append(key, Lyson(LysonType.BOOL, value=False))

    def _append_node(self, key: Optional[str], child: "Lyson") -> "Lyson":
        self._require_container()
        if self.type is LysonType.OBJECT:
            if key is not None:
                child.key = key
        else:
            child.key = None
        self.children.append(child)
        return child

    def append_object(self, key: Optional[str], child: "Lyson") -> "Lyson":
        """Append an existing object node as a member and return it."""
        return self._append_node(key, child)

    def append_array(self, key: Optional[str], child: "Lyson") -> "Lyson":
        """Append an existing array node as a member and return it."""
        return self._append_node(key, child)

    def __iter__(self) -> Iterator["Lyson"]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def to_string(self, mode: int = 0) -> str:
        """Serialize; a positive ``mode`` indents with four spaces per level."""
        parts: List[str] = []
        _write(self, parts, 0, mode > 0)
        return "".join(parts)


def lyson_to_string(node: Optional[Lyson], mode: int = 0) -> str:
    """Serialize ``node``; a missing node is written as ``null``."""
    if node is None:
        return "null"
    return node.to_string(mode)


def _escape(text: str) -> str:
    out = []
    for ch in text:
        escaped = _ESCAPES.get(ch)
        if escaped is not None:
            out.append(escaped)
        elif ord(ch) < 32 or ord(ch) == 127:
            out.append(f"\\u{ord(ch):04X}")
        else:
            out.append(ch)
    return "".join(out)


def _format_double(value: float) -> str:
    magnitude = abs(value)
    if magnitude > 1e15 or (magnitude != 0 and magnitude < 1e-15):
        return "%.16e" % value
    return "%.16g" % value


def _write(node: Lyson, out: List[str], level: int, pretty: bool) -> None:
    kind = node.type
    if kind is LysonType.NULL:
        out.append("null")
    elif kind is LysonType.BOOL:
        out.append("true" if node.value else "false")
    elif kind is LysonType.INT:
        out.append(str(int(node.value)))
    elif kind is LysonType.DOUBLE:
        out.append(_format_double(float(node.value)))
    elif kind is LysonType.STRING:
        out.append(f'"{_escape(node.value or "")}"')
    elif kind in (LysonType.ARRAY, LysonType.OBJECT):
        is_object = kind is LysonType.OBJECT
        opening, closing = ("{", "}") if is_object else ("[", "]")
        out.append(opening)
        if pretty and node.children:
            out.append("\n")
        last = len(node.children) - 1
        for position, child in enumerate(node.children):
            if pretty:
                out.append(_INDENT * (level + 1))
            if is_object:
                out.append(f'"{_escape(child.key or "")}"')
                out.append(": " if pretty else ":")
            _write(child, out, level + 1, pretty)
            if position < last:
                out.append(",")
            if pretty:
                out.append("\n")
        if pretty and node.children:
            out.append(_INDENT * level)
        out.append(closing)