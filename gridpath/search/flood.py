"""Breadth-first flood fill and region analysis."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from ..core.grid import Coord, Grid
from ..core.neighbors import Connectivity, neighbors

StepFilter = Callable[[Coord, Coord], bool]


def flood_fill(
    grid: Grid,
    start: Coord,
    max_cost: Optional[int] = None,
    connectivity: Connectivity = Connectivity.FOUR,
    can_step: Optional[StepFilter] = None,
) -> Tuple[Dict[Coord, int], Dict[Coord, Coord]]:
    """BFS from ``start`` with a cost of 1 per step.

    Only passable cells are entered, and ``can_step(src, dst)`` can veto
    individual moves. Cells further than ``max_cost`` steps are not visited.
    Returns ``(costs, parents)``.
    """

    costs: Dict[Coord, int] = {start: 0}
    parents: Dict[Coord, Coord] = {}

    q: Deque[Coord] = deque([start])
    while q:
        current = q.popleft()
        base = costs[current]
        if max_cost is not None and base >= max_cost:
            continue

        for n in neighbors(grid, current, connectivity):
            if n in costs:
                continue
            if can_step is not None and not can_step(current, n):
                continue
            costs[n] = base + 1
            parents[n] = current
            q.append(n)

    return costs, parents


def connected_regions(
    grid: Grid, connectivity: Connectivity = Connectivity.FOUR
) -> List[FrozenSet[Coord]]:
    """Group passable cells into connected regions of equal value.

    Regions are returned in row-major order of their first cell.
    """

    seen: Set[Coord] = set()
    regions: List[FrozenSet[Coord]] = []
    for coord in grid.coords():
        if coord in seen or grid.is_blocked(coord):
            continue
        value = grid[coord]
        costs, _ = flood_fill(
            grid, coord, connectivity=connectivity, can_step=lambda _src, dst: grid[dst] == value
        )
        region = frozenset(costs)
        seen.update(region)
        regions.append(region)
    return regions


def region_perimeter(region: Iterable[Coord]) -> int:
    """Number of unit edges separating ``region`` from everything else."""
    cells = set(region)
    total = 0
    for r, c in cells:
        for n in ((r - 1, c), (r, c + 1), (r + 1, c), (r, c - 1)):
            if n not in cells:
                total += 1
    return total


def region_sides(region: Iterable[Coord]) -> int:
    """Number of straight fence sides around ``region``.

    A polygon has as many sides as corners, so this counts corners: an outer
    corner where both orthogonal neighbours are outside, and an inner corner
    where both are inside but the diagonal is not.
    """

    cells = set(region)
    corners = 0
    for r, c in cells:
        for dr in (-1, 1):
            for dc in (-1, 1):
                vertical = (r + dr, c) in cells
                horizontal = (r, c + dc) in cells
                diagonal = (r + dr, c + dc) in cells
                if not vertical and not horizontal:
                    corners += 1
                elif vertical and horizontal and not diagonal:
                    corners += 1
    return corners


def count_walks(
    grid: Grid,
    start: Coord,
    can_step: StepFilter,
    is_end: Callable[[Coord], bool],
    connectivity: Connectivity = Connectivity.FOUR,
) -> int:
    """Count distinct walks from ``start`` that finish on an end cell.

    Uses an explicit stack. ``can_step`` must not allow cycles (for example
    "height rises by one"), otherwise the count is unbounded.
    """

    count = 0
    stack: List[Coord] = [start]
    while stack:
        current = stack.pop()
        if is_end(current):
            count += 1
            continue
        for n in neighbors(grid, current, connectivity):
            if can_step(current, n):
                stack.append(n)
    return count


__all__ = [
    "connected_regions",
    "count_walks",
    "flood_fill",
    "region_perimeter",
    "region_sides",
]
