"""2024 day 20: shortcuts through the walls of a race track."""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Tuple

from ...core.grid import Coord, parse_maze
from ...search.flood import flood_fill
from ..registry import PuzzleInputError

TITLE = "Race Condition"

SHORT_CHEAT = 2
LONG_CHEAT = 20
MIN_SAVING = 100


def track_times(text: str) -> Dict[Coord, int]:
    """Picoseconds needed to reach every track cell from the start."""

    maze = parse_maze(text)
    end = maze.marker("E")
    times, _ = flood_fill(maze.grid, maze.marker("S"))
    if end not in times:
        raise PuzzleInputError("the track does not connect start and end")
    return times


def _jumps(max_length: int) -> List[Tuple[int, int, int]]:
    out = []
    for dr in range(-max_length, max_length + 1):
        reach = max_length - abs(dr)
        for dc in range(-reach, reach + 1):
            length = abs(dr) + abs(dc)
            if length >= 2:
                out.append((dr, dc, length))
    return out


def cheat_savings(times: Dict[Coord, int], max_length: int) -> Counter:
    """Count cheats by the number of picoseconds they save.

    A cheat goes from one track cell straight to another at most
    ``max_length`` steps away (Manhattan), ignoring walls in between.
    """

    savings: Counter = Counter()
    jumps = _jumps(max_length)
    for (r, c), t in times.items():
        for dr, dc, length in jumps:
            other = times.get((r + dr, c + dc))
            if other is None:
                continue
            saved = other - t - length
            if saved > 0:
                savings[saved] += 1
    return savings


def count_good_cheats(text: str, max_length: int, min_saving: int) -> int:
    savings = cheat_savings(track_times(text), max_length)
    return sum(n for saved, n in savings.items() if saved >= min_saving)


def part1(text: str, min_saving: int = MIN_SAVING) -> int:
    return count_good_cheats(text, SHORT_CHEAT, min_saving)


def part2(text: str, min_saving: int = MIN_SAVING) -> int:
    return count_good_cheats(text, LONG_CHEAT, min_saving)
