"""Source positions, ranges and syntax tree nodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Optional


@dataclass(frozen=True, order=True)
class Position:
    """A line and column in a source file."""

    line: int
    column: int


@dataclass(frozen=True)
class Location:
    """A range of source text between two positions."""

    start: Position
    end: Position


class AstType(IntEnum):
    """Kind of a syntax tree node."""

    PROGRAM = 0


@dataclass
class AST:
    """Base of all syntax tree nodes."""

    type: ClassVar[AstType]
    range: Location


@dataclass
class ProgramAST(AST):
    """Root node of a parsed source file."""

    type: ClassVar[AstType] = AstType.PROGRAM
    path: str = ""
    value: Optional[AST] = None