"""Step-wise grid simulations.

Every step function takes a :class:`Grid` and returns a brand new one, so a
simulation is just repeated application of a pure function.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import List, Optional, Tuple

from .core.grid import Coord, Grid, GridParseError, grid_lines
from .core.neighbors import Connectivity, Delta, neighbors, offset

logger = logging.getLogger(__name__)

FLASH_THRESHOLD = 9
DEFAULT_STEP_LIMIT = 100_000


# ---------------------------------------------------------------------------
# Flashing octopuses (8-connected energy cascade)
# ---------------------------------------------------------------------------

def octopus_step(grid: Grid) -> Tuple[Grid, int]:
    """Advance the energy grid by one step.

    Every cell gains 1 energy; cells above the threshold flash once, giving
    1 energy to all eight neighbours, which may cascade. Flashed cells end
    the step at 0. Returns ``(next_grid, flash_count)``.
    """

    levels = [[value + 1 for value in row] for row in grid.cells]
    stack: List[Coord] = [
        (r, c) for r, c in grid.coords() if levels[r][c] > FLASH_THRESHOLD
    ]
    flashed = set(stack)
    while stack:
        coord = stack.pop()
        for r, c in neighbors(grid, coord, Connectivity.EIGHT, passable_only=False):
            levels[r][c] += 1
            if levels[r][c] > FLASH_THRESHOLD and (r, c) not in flashed:
                flashed.add((r, c))
                stack.append((r, c))

    for r, c in flashed:
        levels[r][c] = 0
    return grid.with_cells(levels), len(flashed)


def count_flashes(grid: Grid, steps: int) -> int:
    total = 0
    for _ in range(steps):
        grid, flashes = octopus_step(grid)
        total += flashes
    return total


def first_synchronized_step(grid: Grid, limit: int = DEFAULT_STEP_LIMIT) -> Optional[int]:
    """Return the first step (1-based) in which every cell flashes."""

    size = grid.width * grid.height
    for step in range(1, limit + 1):
        grid, flashes = octopus_step(grid)
        if flashes == size:
            return step
    logger.warning("No synchronized flash within %d steps", limit)
    return None


# ---------------------------------------------------------------------------
# Sea cucumber herds (toroidal grid)
# ---------------------------------------------------------------------------

class Herd(IntEnum):
    EMPTY = 0
    EAST = 1
    SOUTH = 2


_HERD_CHARS = {".": Herd.EMPTY, ">": Herd.EAST, "v": Herd.SOUTH}
HERD_SYMBOLS = {int(v): k for k, v in _HERD_CHARS.items()}


def parse_herds(text: str) -> Grid:
    rows = []
    for lineno, line in enumerate(grid_lines(text), start=1):
        try:
            rows.append(tuple(_HERD_CHARS[ch] for ch in line))
        except KeyError as exc:
            raise GridParseError(f"line {lineno}: unknown herd symbol {exc.args[0]!r}") from exc
    if len({len(row) for row in rows}) != 1:
        raise GridParseError("herd map rows differ in length")
    return Grid.from_rows(rows)


def _advance(grid: Grid, herd: Herd, delta: Delta) -> Tuple[Grid, int]:
    cells = [list(row) for row in grid.cells]
    moves = 0
    for coord in grid.coords():
        if grid[coord] != herd:
            continue
        target = grid.wrap(offset(coord, delta))
        if grid[target] == Herd.EMPTY:
            cells[target[0]][target[1]] = herd
            cells[coord[0]][coord[1]] = Herd.EMPTY
            moves += 1
    return grid.with_cells(cells), moves


def _herd_step_counted(grid: Grid) -> Tuple[Grid, int]:
    grid, east = _advance(grid, Herd.EAST, (0, 1))
    grid, south = _advance(grid, Herd.SOUTH, (1, 0))
    return grid, east + south


def herd_step(grid: Grid) -> Grid:
    """Move the east-facing herd, then the south-facing herd.

    Cucumbers leaving one edge re-enter on the opposite edge.
    """

    return _herd_step_counted(grid)[0]


def steps_until_stable(grid: Grid, limit: int = DEFAULT_STEP_LIMIT) -> Optional[int]:
    """Return the first step (1-based) on which no cucumber moves."""

    for step in range(1, limit + 1):
        grid, moves = _herd_step_counted(grid)
        if moves == 0:
            return step
    logger.warning("Herds still moving after %d steps", limit)
    return None


__all__ = [
    "HERD_SYMBOLS",
    "Herd",
    "count_flashes",
    "first_synchronized_step",
    "herd_step",
    "octopus_step",
    "parse_herds",
    "steps_until_stable",
]
