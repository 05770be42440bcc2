"""2021 day 15: lowest total risk path through a chiton cave."""

from __future__ import annotations

import logging

from ...core.grid import Grid
from ...search.engine import a_star
from ..registry import PuzzleInputError

logger = logging.getLogger(__name__)

TITLE = "Chiton"

TILE_FACTOR = 5


def lowest_risk(grid: Grid) -> int:
    goal = (grid.height - 1, grid.width - 1)
    result = a_star(grid, (0, 0), goal)
    if result.distance is None:
        raise PuzzleInputError("no path from the top left to the bottom right")
    logger.debug("Risk %d found after %d expansions", result.distance, result.expanded)
    return result.distance


def part1(text: str) -> int:
    return lowest_risk(Grid.from_digits(text))


def part2(text: str) -> int:
    return lowest_risk(Grid.from_digits(text).tiled(TILE_FACTOR))
