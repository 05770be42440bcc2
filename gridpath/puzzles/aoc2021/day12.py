"""2021 day 12: counting paths through a cave system."""

from __future__ import annotations

from ...graph import CaveGraph

TITLE = "Passage Pathing"


def part1(text: str) -> int:
    return CaveGraph.from_edges(text).count_paths()


def part2(text: str) -> int:
    return CaveGraph.from_edges(text).count_paths(allow_one_revisit=True)
