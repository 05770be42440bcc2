"""Priority-queue best-first search: Dijkstra and A*."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from heapq import heappop, heappush
from typing import (
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterable,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from ..core.grid import Coord, Grid
from ..core.neighbors import Connectivity, chebyshev, manhattan, neighbors
from .paths import reconstruct_path

logger = logging.getLogger(__name__)


S = TypeVar("S", bound=Hashable)

Expand = Callable[[S], Iterable[Tuple[S, int]]]


@dataclass(frozen=True)
class SearchNode(Generic[S]):
    """Best known way of reaching ``state`` during one search."""

    state: S
    distance: int
    predecessor: Optional[S] = None


@dataclass
class SearchResult(Generic[S]):
    """Bookkeeping produced by a single search call.

    ``goal`` is the goal state that was expanded, or ``None`` when the search
    ran out of frontier without reaching one.
    """

    start: S
    nodes: Dict[S, SearchNode[S]]
    goal: Optional[S] = None
    ties: Dict[S, List[S]] = field(default_factory=dict)
    expanded: int = 0

    @property
    def found(self) -> bool:
        return self.goal is not None

    @property
    def distance(self) -> Optional[int]:
        """Distance to the goal, ``None`` if there is no path."""
        if self.goal is None:
            return None
        return self.nodes[self.goal].distance

    def distance_to(self, state: S) -> Optional[int]:
        node = self.nodes.get(state)
        return None if node is None else node.distance

    def path(self, goal: Optional[S] = None) -> List[S]:
        """Return the path from start to ``goal`` (default: the reached goal)."""
        target = self.goal if goal is None else goal
        if target is None:
            return []
        return reconstruct_path(self.nodes, target)


def best_first(
    start: S,
    expand: Expand,
    is_goal: Optional[Callable[[S], bool]] = None,
    heuristic: Optional[Callable[[S], int]] = None,
    track_ties: bool = False,
    on_relax: Optional[Callable[[SearchNode[S]], None]] = None,
) -> SearchResult[S]:
    """Run a best-first search from ``start``.

    Parameters
    ----------
    expand:
        Returns ``(next_state, edge_cost)`` pairs for a state. Costs must be
        non-negative.
    is_goal:
        Stop as soon as a state satisfying this predicate is expanded. Without
        it the whole reachable space is explored.
    heuristic:
        Estimated remaining cost for A*. It must never overestimate.
    track_ties:
        Also remember predecessors that reach a state at exactly its best
        distance, so every optimal path can be recovered.
    on_relax:
        Called with each newly recorded node.

    Returns
    -------
    SearchResult
        ``found`` is ``False`` when no goal was reachable.
    """

    h = heuristic if heuristic is not None else (lambda _state: 0)
    nodes: Dict[S, SearchNode[S]] = {start: SearchNode(start, 0)}
    ties: Dict[S, List[S]] = {}
    counter = itertools.count()
    frontier: List[Tuple[int, int, int, S]] = [(h(start), next(counter), 0, start)]
    expanded = 0

    while frontier:
        _, _, dist, state = heappop(frontier)
        if dist > nodes[state].distance:
            continue  # stale
        expanded += 1

        if is_goal is not None and is_goal(state):
            logger.debug("Goal %s reached at distance %s after %d expansions", state, dist, expanded)
            return SearchResult(start, nodes, state, ties, expanded)

        for nxt, cost in expand(state):
            if cost < 0:
                raise ValueError(f"negative edge cost {cost} from {state} to {nxt}")
            tentative = dist + cost
            known = nodes.get(nxt)
            if known is None or tentative < known.distance:
                node = SearchNode(nxt, tentative, state)
                nodes[nxt] = node
                if track_ties:
                    ties[nxt] = []
                if on_relax is not None:
                    on_relax(node)
                heappush(frontier, (tentative + h(nxt), next(counter), tentative, nxt))
            elif track_ties and tentative == known.distance and nxt != start and known.predecessor != state:
                ties.setdefault(nxt, []).append(state)

    logger.debug("Frontier exhausted after %d expansions (%d states)", expanded, len(nodes))
    return SearchResult(start, nodes, None, ties, expanded)


def _grid_expand(grid: Grid, connectivity: Connectivity) -> Expand:
    def expand(coord: Coord) -> Iterable[Tuple[Coord, int]]:
        for n in neighbors(grid, coord, connectivity):
            yield n, grid.cells[n[0]][n[1]]

    return expand


def _check_start(grid: Grid, start: Coord) -> None:
    if not grid.is_passable(start):
        raise ValueError(f"start {start} is outside the grid or blocked")


def dijkstra(
    grid: Grid,
    start: Coord,
    goal: Optional[Coord] = None,
    connectivity: Connectivity = Connectivity.FOUR,
) -> SearchResult[Coord]:
    """Shortest paths on ``grid`` where entering a cell costs its value.

    Without ``goal`` every reachable cell gets its final distance.
    """

    _check_start(grid, start)
    if goal is not None and not grid.is_passable(goal):
        logger.debug("Goal %s is outside the grid or blocked", goal)
        return SearchResult(start, {start: SearchNode(start, 0)})
    is_goal = None if goal is None else (lambda state: state == goal)
    return best_first(start, _grid_expand(grid, connectivity), is_goal=is_goal)


def a_star(
    grid: Grid,
    start: Coord,
    goal: Coord,
    connectivity: Connectivity = Connectivity.FOUR,
    heuristic: Optional[Callable[[Coord, Coord], int]] = None,
) -> SearchResult[Coord]:
    """A* search from ``start`` to ``goal``.

    The default heuristic is Manhattan distance for 4-connected grids and
    Chebyshev distance for 8-connected ones, multiplied by the cheapest
    passable cell cost so that it stays admissible.
    """

    _check_start(grid, start)
    if not grid.is_passable(goal):
        logger.debug("Goal %s is outside the grid or blocked", goal)
        return SearchResult(start, {start: SearchNode(start, 0)})

    if heuristic is None:
        base = manhattan if connectivity is Connectivity.FOUR else chebyshev
        scale = grid.min_cost()
        h = lambda state: scale * base(state, goal)  # noqa: E731
    else:
        h = lambda state: heuristic(state, goal)  # noqa: E731

    return best_first(
        start,
        _grid_expand(grid, connectivity),
        is_goal=lambda state: state == goal,
        heuristic=h,
    )


__all__ = ["SearchNode", "SearchResult", "a_star", "best_first", "dijkstra"]
