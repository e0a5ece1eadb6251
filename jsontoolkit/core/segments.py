"""
Query AST for jsontoolkit path expressions.

A compiled path is a tuple of segments that always begins with
``RootSegment``. Filter segments carry a ``Predicate`` comparing a property
reachable from the candidate node against a literal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

Literal = Union[bool, int, float, str]


class ComparisonOperator(Enum):
    """Comparison operators allowed inside a filter."""

    EQ = "=="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    @property
    def is_ordering(self) -> bool:
        return self not in (ComparisonOperator.EQ, ComparisonOperator.NE)


def _format_name(name: str) -> str:
    escaped = name.replace("\\", "\\\\").replace("'", "\\'")
    return f"['{escaped}']"


def format_literal(value: Literal) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return _format_name(value)[1:-1]
    return repr(value)


@dataclass(frozen=True)
class Predicate:
    """Single comparison ``@.path <operator> literal``."""

    path: tuple[str, ...]
    operator: ComparisonOperator
    literal: Literal

    def __str__(self) -> str:
        reference = "@" + "".join(f".{name}" for name in self.path)
        return f"{reference} {self.operator.value} {format_literal(self.literal)}"


@dataclass(frozen=True)
class RootSegment:
    def __str__(self) -> str:
        return "$"


@dataclass(frozen=True)
class PropertySegment:
    name: str

    def __str__(self) -> str:
        return _format_name(self.name)


@dataclass(frozen=True)
class WildcardSegment:
    def __str__(self) -> str:
        return "[*]"


@dataclass(frozen=True)
class IndexSegment:
    index: int

    def __str__(self) -> str:
        return f"[{self.index}]"


@dataclass(frozen=True)
class RecursiveDescentSegment:
    def __str__(self) -> str:
        return ".."


@dataclass(frozen=True)
class FilterSegment:
    predicate: Predicate

    def __str__(self) -> str:
        return f"[?({self.predicate})]"


Segment = Union[
    RootSegment,
    PropertySegment,
    WildcardSegment,
    IndexSegment,
    RecursiveDescentSegment,
    FilterSegment,
]


def format_segments(segments: tuple[Segment, ...]) -> str:
    """Render segments back into canonical bracket-notation path syntax."""
    return "".join(str(segment) for segment in segments)
