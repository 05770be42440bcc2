"""Neighbour generation and coordinate arithmetic for grids."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from .grid import Coord, Grid


Delta = Tuple[int, int]


class Connectivity(Enum):
    """Which cells count as adjacent."""

    FOUR = 4
    EIGHT = 8

    @property
    def offsets(self) -> Tuple[Delta, ...]:
        if self is Connectivity.FOUR:
            return _FOUR
        return _EIGHT


# up, right, down, left
_FOUR: Tuple[Delta, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))
_EIGHT: Tuple[Delta, ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


class Direction(Enum):
    """Compass heading for oriented search states."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def delta(self) -> Delta:
        return _FOUR[self.value]

    def rotate_cw(self) -> "Direction":
        return Direction((self.value + 1) % 4)

    def rotate_ccw(self) -> "Direction":
        return Direction((self.value - 1) % 4)


def offset(coord: Coord, delta: Delta) -> Coord:
    """Return ``coord`` moved by ``delta`` without any bounds check."""
    return coord[0] + delta[0], coord[1] + delta[1]


def checked_offset(grid: Grid, coord: Coord, delta: Delta) -> Optional[Coord]:
    """Return ``coord`` moved by ``delta`` or ``None`` if that leaves ``grid``."""
    moved = offset(coord, delta)
    return moved if grid.in_bounds(moved) else None


def neighbors(
    grid: Grid,
    coord: Coord,
    connectivity: Connectivity = Connectivity.FOUR,
    passable_only: bool = True,
) -> List[Coord]:
    """Return the in-bounds neighbours of ``coord``.

    With ``passable_only`` blocked cells are dropped as well. Cells past an
    edge are never wrapped to the opposite side; use :meth:`Grid.wrap` for
    toroidal grids.
    """

    out: List[Coord] = []
    for delta in connectivity.offsets:
        n = checked_offset(grid, coord, delta)
        if n is None:
            continue
        if passable_only and grid.is_blocked(n):
            continue
        out.append(n)
    return out


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def chebyshev(a: Coord, b: Coord) -> int:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


__all__ = [
    "Connectivity",
    "Delta",
    "Direction",
    "chebyshev",
    "checked_offset",
    "manhattan",
    "neighbors",
    "offset",
]
