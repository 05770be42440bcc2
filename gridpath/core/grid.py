"""Immutable rectangular grid of traversal costs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple


Coord = Tuple[int, int]  # (row, col)


class GridError(ValueError):
    """Raised when a grid would be non-rectangular or hold invalid costs."""


class GridParseError(GridError):
    """Raised when grid text cannot be parsed."""


@dataclass(frozen=True)
class Grid:
    """Rectangular, read-only grid of non-negative integer cell costs.

    ``blocked`` holds coordinates that can never be entered, independent of
    their cost. Every operation that "changes" a grid returns a new one.
    """

    cells: Tuple[Tuple[int, ...], ...]
    blocked: FrozenSet[Coord] = frozenset()

    def __post_init__(self) -> None:
        rows = tuple(tuple(row) for row in self.cells)
        if not rows or not rows[0]:
            raise GridError("grid must contain at least one cell")
        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise GridError(f"row {r} has {len(row)} cells, expected {width}")
            for c, value in enumerate(row):
                if not isinstance(value, int) or value < 0:
                    raise GridError(f"cell {(r, c)} has invalid cost {value!r}")
        blocked = frozenset(self.blocked)
        for r, c in blocked:
            if not (0 <= r < len(rows) and 0 <= c < width):
                raise GridError(f"blocked cell {(r, c)} is outside the grid")
        object.__setattr__(self, "cells", rows)
        object.__setattr__(self, "blocked", blocked)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]], blocked: Iterable[Coord] = ()) -> "Grid":
        return cls(tuple(tuple(row) for row in rows), frozenset(blocked))

    @classmethod
    def uniform(
        cls, width: int, height: int, cost: int = 1, blocked: Iterable[Coord] = ()
    ) -> "Grid":
        """Return a ``width`` x ``height`` grid where every cell costs ``cost``."""

        return cls(tuple((cost,) * width for _ in range(height)), frozenset(blocked))

    @classmethod
    def from_digits(cls, text: str, blocked_value: Optional[int] = None) -> "Grid":
        """Parse a block of digit rows such as ``"1163\\n1381"``.

        Cells holding ``blocked_value`` are marked as blocked.
        """

        rows: List[Tuple[int, ...]] = []
        for lineno, line in enumerate(grid_lines(text), start=1):
            if not line.isdigit():
                raise GridParseError(f"line {lineno}: expected only digits, got {line!r}")
            rows.append(tuple(int(ch) for ch in line))
        _check_rectangular(rows)
        blocked: set[Coord] = set()
        if blocked_value is not None:
            blocked = {
                (r, c)
                for r, row in enumerate(rows)
                for c, value in enumerate(row)
                if value == blocked_value
            }
        return cls(tuple(rows), frozenset(blocked))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return len(self.cells[0])

    @property
    def height(self) -> int:
        return len(self.cells)

    def dimensions(self) -> Tuple[int, int]:
        """Return ``(width, height)``."""
        return self.width, self.height

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.height and 0 <= c < self.width

    def get(self, coord: Coord) -> Optional[int]:
        """Return the cost at ``coord`` or ``None`` when out of bounds."""
        if not self.in_bounds(coord):
            return None
        r, c = coord
        return self.cells[r][c]

    def __getitem__(self, coord: Coord) -> int:
        value = self.get(coord)
        if value is None:
            raise IndexError(f"{coord} is outside the grid")
        return value

    def is_blocked(self, coord: Coord) -> bool:
        return coord in self.blocked

    def is_passable(self, coord: Coord) -> bool:
        return self.in_bounds(coord) and coord not in self.blocked

    def coords(self) -> Iterator[Coord]:
        """Yield every coordinate in row-major order."""
        for r in range(self.height):
            for c in range(self.width):
                yield (r, c)

    def find(self, value: int) -> List[Coord]:
        """Return all coordinates holding ``value`` in row-major order."""
        return [coord for coord in self.coords() if self.cells[coord[0]][coord[1]] == value]

    def min_cost(self) -> int:
        """Smallest cost among passable cells (0 if every cell is blocked)."""
        costs = [self.cells[r][c] for r, c in self.coords() if (r, c) not in self.blocked]
        return min(costs) if costs else 0

    def wrap(self, coord: Coord) -> Coord:
        """Map ``coord`` onto the grid treating both axes as toroidal."""
        r, c = coord
        return r % self.height, c % self.width

    # ------------------------------------------------------------------
    # Derived grids
    # ------------------------------------------------------------------
    def with_blocked(self, extra: Iterable[Coord]) -> "Grid":
        return Grid(self.cells, self.blocked | frozenset(extra))

    def with_cells(self, rows: Iterable[Iterable[int]]) -> "Grid":
        return Grid(tuple(tuple(row) for row in rows), self.blocked)

    def tiled(self, factor: int, wrap_at: int = 9) -> "Grid":
        """Repeat the grid ``factor`` times on both axes.

        Each tile step to the right or down adds 1 to every cost, and costs
        above ``wrap_at`` wrap back around to 1.
        The top-left tile is an exact copy of the original grid.
        """

        if factor < 1:
            raise GridError("tile factor must be at least 1")
        h, w = self.height, self.width
        rows = []
        for tr in range(factor):
            for row in self.cells:
                out: List[int] = []
                for tc in range(factor):
                    shift = tr + tc
                    if shift == 0:
                        out.extend(row)
                    else:
                        out.extend((v + shift - 1) % wrap_at + 1 for v in row)
                rows.append(tuple(out))
        blocked = {
            (r + tr * h, c + tc * w)
            for r, c in self.blocked
            for tr in range(factor)
            for tc in range(factor)
        }
        return Grid(tuple(rows), frozenset(blocked))

    def render(self, symbols: Optional[Mapping[int, str]] = None) -> str:
        """Return a text picture of the grid, ``#`` for blocked cells."""
        lines = []
        for r, row in enumerate(self.cells):
            chars = []
            for c, value in enumerate(row):
                if (r, c) in self.blocked:
                    chars.append("#")
                elif symbols is not None and value in symbols:
                    chars.append(symbols[value])
                else:
                    chars.append(str(value) if value < 10 else "+")
            lines.append("".join(chars))
        return "\n".join(lines)


@dataclass(frozen=True)
class Maze:
    """Grid parsed from a character map together with its marker cells."""

    grid: Grid
    markers: Dict[str, Tuple[Coord, ...]] = field(default_factory=dict, hash=False)

    def marker(self, char: str) -> Coord:
        """Return the single coordinate marked with ``char``."""

        found = self.markers.get(char, ())
        if len(found) != 1:
            raise GridParseError(f"expected exactly one {char!r} marker, found {len(found)}")
        return found[0]


def parse_maze(text: str, wall: str = "#", markers: str = "SE") -> Maze:
    """Parse a character map where ``wall`` cells are blocked.

    Every other cell costs 1. Positions of the characters in ``markers`` are
    collected so callers can locate start and end points.
    """

    rows: List[Tuple[int, ...]] = []
    blocked: set[Coord] = set()
    found: Dict[str, List[Coord]] = {m: [] for m in markers}
    for r, line in enumerate(grid_lines(text)):
        for c, ch in enumerate(line):
            if ch == wall:
                blocked.add((r, c))
            elif ch in found:
                found[ch].append((r, c))
        rows.append((1,) * len(line))
    _check_rectangular(rows)
    return Maze(Grid(tuple(rows), frozenset(blocked)), {m: tuple(v) for m, v in found.items()})


def grid_lines(text: str) -> List[str]:
    """Split a grid block into stripped lines, rejecting empty input."""
    lines = [line.strip() for line in text.strip().splitlines()]
    if not lines or not lines[0]:
        raise GridParseError("grid text is empty")
    return lines


def _check_rectangular(rows: Sequence[Sequence[int]]) -> None:
    width = len(rows[0])
    for lineno, row in enumerate(rows, start=1):
        if len(row) != width:
            raise GridParseError(f"line {lineno}: has {len(row)} cells, expected {width}")


__all__ = ["Coord", "Grid", "GridError", "GridParseError", "Maze", "grid_lines", "parse_maze"]
