"""2024 day 12: fencing garden plot regions."""

from __future__ import annotations

from typing import FrozenSet, List

from ...core.grid import Coord, Grid, grid_lines
from ...search.flood import connected_regions, region_perimeter, region_sides

TITLE = "Garden Groups"


def parse(text: str) -> Grid:
    # Plant letters are stored by code point so equal letters compare equal.
    return Grid.from_rows(tuple(ord(ch) for ch in line) for line in grid_lines(text))


def regions(text: str) -> List[FrozenSet[Coord]]:
    return connected_regions(parse(text))


def part1(text: str) -> int:
    return sum(len(region) * region_perimeter(region) for region in regions(text))


def part2(text: str) -> int:
    return sum(len(region) * region_sides(region) for region in regions(text))
