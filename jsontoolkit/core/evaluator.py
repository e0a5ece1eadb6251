"""
Tree-walking evaluator for compiled path segments.

Each segment turns the incoming stream of candidates into a new stream, and the
streams are chained generators: nothing is traversed until a caller pulls the
next match, so taking the first result only walks as much of the tree as
needed to produce it.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from .nodes import (
    Key,
    NodeKind,
    format_location,
    get_element,
    get_property,
    iter_children,
    iter_descendants,
    kind_of,
)
from .predicates import holds
from .segments import (
    FilterSegment,
    IndexSegment,
    Predicate,
    PropertySegment,
    RecursiveDescentSegment,
    RootSegment,
    Segment,
    WildcardSegment,
)

Candidate = tuple[tuple[Key, ...], Any]


@dataclass(frozen=True)
class Match:
    """A node selected by a query, plus where it was found."""

    value: Any
    location: tuple[Key, ...]

    @property
    def path(self) -> str:
        """Normalized path of the node, e.g. ``$['users'][0]['name']``."""
        return format_location(self.location)

    @property
    def kind(self) -> NodeKind:
        return kind_of(self.value)


class Evaluator:
    """Applies a segment tuple to a tree root."""

    def __init__(self, segments: tuple[Segment, ...]):
        if not segments or not isinstance(segments[0], RootSegment):
            raise ValueError("segments must start with RootSegment")
        self.segments = segments

    def evaluate(self, root: Any) -> Iterator[Match]:
        """Lazily yield every match of the segments against ``root``."""
        candidates: Iterable[Candidate] = iter([((), root)])
        for segment in self.segments[1:]:
            candidates = self._apply(segment, candidates)
        for location, value in candidates:
            yield Match(value, location)

    def _apply(
        self, segment: Segment, candidates: Iterable[Candidate]
    ) -> Iterator[Candidate]:
        if isinstance(segment, PropertySegment):
            return _select_property(candidates, segment.name)
        if isinstance(segment, WildcardSegment):
            return _select_children(candidates)
        if isinstance(segment, IndexSegment):
            return _select_index(candidates, segment.index)
        if isinstance(segment, RecursiveDescentSegment):
            return _select_descendants(candidates)
        if isinstance(segment, FilterSegment):
            return _select_filtered(candidates, segment.predicate)
        raise TypeError(f"Unsupported segment: {segment!r}")


def _select_property(candidates: Iterable[Candidate], name: str) -> Iterator[Candidate]:
    for location, node in candidates:
        found, value = get_property(node, name)
        if found:
            yield location + (name,), value


def _select_children(candidates: Iterable[Candidate]) -> Iterator[Candidate]:
    for location, node in candidates:
        for key, child in iter_children(node):
            yield location + (key,), child


def _select_index(candidates: Iterable[Candidate], index: int) -> Iterator[Candidate]:
    for location, node in candidates:
        found, value = get_element(node, index)
        if found:
            yield location + (index,), value


def _select_descendants(candidates: Iterable[Candidate]) -> Iterator[Candidate]:
    for location, node in candidates:
        yield location, node
        yield from iter_descendants(node, location)


def _select_filtered(
    candidates: Iterable[Candidate], predicate: Predicate
) -> Iterator[Candidate]:
    for location, node in candidates:
        if kind_of(node) != NodeKind.ARRAY:
            continue
        for index, item in enumerate(node):
            if holds(predicate, item):
                yield location + (index,), item
