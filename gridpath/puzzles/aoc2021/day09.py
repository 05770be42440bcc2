"""2021 day 9: low points and basins of a height map."""

from __future__ import annotations

from math import prod
from typing import List

from ...core.grid import Coord, Grid
from ...core.neighbors import neighbors
from ...search.flood import flood_fill
from ..registry import PuzzleInputError

TITLE = "Smoke Basin"

RIDGE = 9


def parse(text: str) -> Grid:
    # Height 9 never belongs to a basin.
    return Grid.from_digits(text, blocked_value=RIDGE)


def low_points(grid: Grid) -> List[Coord]:
    """Cells strictly lower than every orthogonal neighbour."""
    return [
        coord
        for coord in grid.coords()
        if all(grid[coord] < grid[n] for n in neighbors(grid, coord, passable_only=False))
    ]


def basin_sizes(grid: Grid) -> List[int]:
    sizes = [len(flood_fill(grid, low)[0]) for low in low_points(grid)]
    return sorted(sizes, reverse=True)


def part1(text: str) -> int:
    grid = parse(text)
    return sum(grid[coord] + 1 for coord in low_points(grid))


def part2(text: str) -> int:
    sizes = basin_sizes(parse(text))
    if len(sizes) < 3:
        raise PuzzleInputError(f"expected at least 3 basins, found {len(sizes)}")
    return prod(sizes[:3])
