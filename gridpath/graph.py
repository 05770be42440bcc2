"""Index-addressed cave graph with worklist path counting."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Tuple

logger = logging.getLogger(__name__)

START = "start"
END = "end"


class GraphError(ValueError):
    """Raised when a graph is missing required caves."""


class GraphParseError(GraphError):
    """Raised when an edge list cannot be parsed."""


class CaveKind(Enum):
    START = "start"
    END = "end"
    BIG = "big"
    SMALL = "small"


def cave_kind(name: str) -> CaveKind:
    if name == START:
        return CaveKind.START
    if name == END:
        return CaveKind.END
    if name[:1].isupper():
        return CaveKind.BIG
    return CaveKind.SMALL


@dataclass
class CaveGraph:
    """Undirected graph whose caves live in a list and link by index."""

    names: List[str] = field(default_factory=list)
    adjacency: List[List[int]] = field(default_factory=list)
    _index: Dict[str, int] = field(default_factory=dict, repr=False, compare=False)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def add_cave(self, name: str) -> int:
        """Return the index of ``name``, adding the cave if it is new."""
        idx = self._index.get(name)
        if idx is None:
            idx = len(self.names)
            self.names.append(name)
            self.adjacency.append([])
            self._index[name] = idx
        return idx

    def add_edge(self, a: str, b: str) -> None:
        ia, ib = self.add_cave(a), self.add_cave(b)
        self.adjacency[ia].append(ib)
        self.adjacency[ib].append(ia)

    @classmethod
    def from_edges(cls, text: str) -> "CaveGraph":
        """Build a graph from lines like ``start-A``."""

        graph = cls()
        for lineno, raw in enumerate(text.strip().splitlines(), start=1):
            line = raw.strip()
            if not line:
                continue
            a, sep, b = line.partition("-")
            if not sep or not a or not b or "-" in b:
                raise GraphParseError(f"line {lineno}: expected 'a-b', got {line!r}")
            graph.add_edge(a, b)
        return graph

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def index(self, name: str) -> int:
        return self._index[name]

    def kind(self, idx: int) -> CaveKind:
        return cave_kind(self.names[idx])

    def count_paths(self, allow_one_revisit: bool = False) -> int:
        """Count paths from ``start`` to ``end``.

        Small caves are entered at most once, except that with
        ``allow_one_revisit`` a single small cave may be entered twice per
        path. ``start`` is never re-entered.
        """

        if START not in self._index or END not in self._index:
            raise GraphError("graph needs both a 'start' and an 'end' cave")
        kinds = [self.kind(i) for i in range(len(self.names))]
        start, end = self._index[START], self._index[END]

        count = 0
        stack: List[Tuple[int, FrozenSet[int], bool]] = [(start, frozenset([start]), False)]
        while stack:
            node, visited, revisited = stack.pop()
            if node == end:
                count += 1
                continue
            for nxt in self.adjacency[node]:
                kind = kinds[nxt]
                if kind is CaveKind.START:
                    continue
                if kind is CaveKind.BIG:
                    stack.append((nxt, visited, revisited))
                elif nxt not in visited:
                    stack.append((nxt, visited | {nxt}, revisited))
                elif allow_one_revisit and not revisited and kind is CaveKind.SMALL:
                    stack.append((nxt, visited, True))

        logger.debug("Counted %d paths (revisit=%s)", count, allow_one_revisit)
        return count

    # ------------------------------------------------------------------
    # Plain data form
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {"names": list(self.names), "adjacency": [list(a) for a in self.adjacency]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CaveGraph":
        names = [str(n) for n in data.get("names", [])]
        adjacency = [[int(i) for i in a] for a in data.get("adjacency", [])]
        if len(names) != len(adjacency):
            raise GraphParseError("names and adjacency lists differ in length")
        for links in adjacency:
            for i in links:
                if not 0 <= i < len(names):
                    raise GraphParseError(f"adjacency refers to unknown cave index {i}")
        graph = cls(names, adjacency)
        graph._index = {name: i for i, name in enumerate(names)}
        return graph


__all__ = [
    "CaveGraph",
    "CaveKind",
    "GraphError",
    "GraphParseError",
    "cave_kind",
]
