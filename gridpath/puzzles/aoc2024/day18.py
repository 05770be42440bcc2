"""2024 day 18: escaping a memory grid while bytes fall."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ...core.grid import Coord, Grid
from ...search.engine import a_star
from ..registry import PuzzleInputError

TITLE = "RAM Run"

GRID_SIZE = 71
FALLEN_BYTES = 1024


def parse(text: str) -> List[Coord]:
    """Parse ``x,y`` lines into ``(row, col)`` coordinates."""

    coords: List[Coord] = []
    for lineno, raw in enumerate(text.strip().splitlines(), start=1):
        line = raw.strip()
        x, sep, y = line.partition(",")
        try:
            if not sep:
                raise ValueError(line)
            coords.append((int(y), int(x)))
        except ValueError as exc:
            raise PuzzleInputError(f"line {lineno}: expected 'x,y', got {line!r}") from exc
    return coords


def escape_steps(size: int, corrupted: Sequence[Coord]) -> Optional[int]:
    """Fewest steps from the top left to the bottom right, ``None`` if cut off."""

    grid = Grid.uniform(size, size).with_blocked(corrupted)
    start = (0, 0)
    if grid.is_blocked(start):
        return None
    return a_star(grid, start, (size - 1, size - 1)).distance


def part1(text: str, size: int = GRID_SIZE, fallen: int = FALLEN_BYTES) -> int:
    steps = escape_steps(size, parse(text)[:fallen])
    if steps is None:
        raise PuzzleInputError(f"exit unreachable after {fallen} bytes")
    return steps


def part2(text: str, size: int = GRID_SIZE) -> str:
    """Return ``x,y`` of the first byte that cuts the exit off."""

    corrupted = parse(text)
    if escape_steps(size, corrupted) is not None:
        raise PuzzleInputError("the exit stays reachable after every byte")

    # Smallest prefix length that blocks the exit.
    lo, hi = 0, len(corrupted)
    while lo < hi:
        mid = (lo + hi) // 2
        if escape_steps(size, corrupted[:mid]) is None:
            hi = mid
        else:
            lo = mid + 1
    row, col = corrupted[lo - 1]
    return f"{col},{row}"
