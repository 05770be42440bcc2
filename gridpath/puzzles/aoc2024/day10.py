"""2024 day 10: hiking trails on a topographic map."""

from __future__ import annotations

from ...core.grid import Coord, Grid
from ...search.flood import StepFilter, count_walks, flood_fill

TITLE = "Hoof It"

TRAILHEAD = 0
SUMMIT = 9


def _uphill(grid: Grid) -> StepFilter:
    def can_step(src: Coord, dst: Coord) -> bool:
        return grid[dst] - grid[src] == 1

    return can_step


def trailhead_score(grid: Grid, head: Coord) -> int:
    """Number of distinct summits reachable from ``head``."""
    costs, _ = flood_fill(grid, head, can_step=_uphill(grid))
    return sum(1 for coord in costs if grid[coord] == SUMMIT)


def trailhead_rating(grid: Grid, head: Coord) -> int:
    """Number of distinct uphill trails from ``head`` to any summit."""
    return count_walks(grid, head, _uphill(grid), lambda coord: grid[coord] == SUMMIT)


def part1(text: str) -> int:
    grid = Grid.from_digits(text)
    return sum(trailhead_score(grid, head) for head in grid.find(TRAILHEAD))


def part2(text: str) -> int:
    grid = Grid.from_digits(text)
    return sum(trailhead_rating(grid, head) for head in grid.find(TRAILHEAD))
