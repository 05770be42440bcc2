"""Path reconstruction from search bookkeeping."""

from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, Iterable, List, Mapping, Sequence, Set, TypeVar

from ..core.grid import Coord, Grid

if TYPE_CHECKING:
    from .engine import SearchNode


S = TypeVar("S", bound=Hashable)


def reconstruct_path(nodes: Mapping[S, "SearchNode[S]"], goal: S) -> List[S]:
    """Walk predecessor links from ``goal`` back to the start.

    Returns the states ordered start -> goal, or an empty list if ``goal``
    was never recorded.
    """

    if goal not in nodes:
        return []
    path: List[S] = []
    current = goal
    while True:
        path.append(current)
        prev = nodes[current].predecessor
        if prev is None:
            break
        current = prev
    path.reverse()
    return path


def best_path_states(
    nodes: Mapping[S, "SearchNode[S]"],
    ties: Mapping[S, Sequence[S]],
    goals: Iterable[S],
) -> Set[S]:
    """Return every state that lies on some optimal path to one of ``goals``.

    ``ties`` must come from a search run with ``track_ties=True``.
    """

    seen: Set[S] = set()
    stack: List[S] = [g for g in goals if g in nodes]
    while stack:
        state = stack.pop()
        if state in seen:
            continue
        seen.add(state)
        node = nodes[state]
        if node.predecessor is not None:
            stack.append(node.predecessor)
        stack.extend(ties.get(state, ()))
    return seen


def path_cost(grid: Grid, path: Sequence[Coord]) -> int:
    """Sum of the costs of every cell entered along ``path``."""
    return sum(grid[coord] for coord in path[1:])


__all__ = ["best_path_states", "path_cost", "reconstruct_path"]
