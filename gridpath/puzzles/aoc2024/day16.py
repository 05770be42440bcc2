"""2024 day 16: cheapest reindeer route where turning is expensive."""

from __future__ import annotations

from typing import Callable, Iterator, Tuple

from ...core.grid import Coord, Maze, parse_maze
from ...core.neighbors import Direction, offset
from ...search.engine import SearchResult, best_first
from ...search.paths import best_path_states
from ..registry import PuzzleInputError

TITLE = "Reindeer Maze"

STEP_COST = 1
TURN_COST = 1000

State = Tuple[Coord, Direction]


def _expander(maze: Maze) -> Callable[[State], Iterator[Tuple[State, int]]]:
    grid = maze.grid

    def expand(state: State) -> Iterator[Tuple[State, int]]:
        pos, facing = state
        ahead = offset(pos, facing.delta)
        if grid.is_passable(ahead):
            yield (ahead, facing), STEP_COST
        yield (pos, facing.rotate_cw()), TURN_COST
        yield (pos, facing.rotate_ccw()), TURN_COST

    return expand


def _start(maze: Maze) -> State:
    return maze.marker("S"), Direction.EAST


def lowest_score(maze: Maze) -> int:
    end = maze.marker("E")
    result = best_first(_start(maze), _expander(maze), is_goal=lambda state: state[0] == end)
    if result.distance is None:
        raise PuzzleInputError("the end tile cannot be reached")
    return result.distance


def best_path_tiles(maze: Maze) -> int:
    """Count tiles that are part of at least one lowest-score route."""

    end = maze.marker("E")
    result: SearchResult[State] = best_first(_start(maze), _expander(maze), track_ties=True)
    ends = [state for state in result.nodes if state[0] == end]
    if not ends:
        raise PuzzleInputError("the end tile cannot be reached")
    best = min(result.nodes[state].distance for state in ends)
    goals = [state for state in ends if result.nodes[state].distance == best]
    states = best_path_states(result.nodes, result.ties, goals)
    return len({pos for pos, _ in states})


def part1(text: str) -> int:
    return lowest_score(parse_maze(text))


def part2(text: str) -> int:
    return best_path_tiles(parse_maze(text))
