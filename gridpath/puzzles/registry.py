"""Lookup table of available puzzle solvers."""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple, Union

logger = logging.getLogger(__name__)

Answer = Union[int, str]


class PuzzleInputError(ValueError):
    """Raised when puzzle input does not have the expected shape."""


class UnknownPuzzleError(LookupError):
    """Raised when no solver exists for a year/day pair."""


PUZZLE_MODULES: Dict[Tuple[int, int], str] = {
    (2021, 9): "gridpath.puzzles.aoc2021.day09",
    (2021, 11): "gridpath.puzzles.aoc2021.day11",
    (2021, 12): "gridpath.puzzles.aoc2021.day12",
    (2021, 15): "gridpath.puzzles.aoc2021.day15",
    (2021, 25): "gridpath.puzzles.aoc2021.day25",
    (2024, 10): "gridpath.puzzles.aoc2024.day10",
    (2024, 12): "gridpath.puzzles.aoc2024.day12",
    (2024, 16): "gridpath.puzzles.aoc2024.day16",
    (2024, 18): "gridpath.puzzles.aoc2024.day18",
    (2024, 20): "gridpath.puzzles.aoc2024.day20",
}


@dataclass(frozen=True)
class Puzzle:
    """One day's solver: a title and one or two part functions."""

    year: int
    day: int
    title: str
    parts: Tuple[Callable[[str], Answer], ...]

    def solve(self, text: str) -> List[Answer]:
        answers: List[Answer] = []
        for number, part in enumerate(self.parts, start=1):
            logger.info("Solving %d day %d part %d", self.year, self.day, number)
            answers.append(part(text))
        return answers


def available() -> List[Tuple[int, int]]:
    """Return every ``(year, day)`` with a solver, sorted."""
    return sorted(PUZZLE_MODULES)


def get_puzzle(year: int, day: int) -> Puzzle:
    module_name = PUZZLE_MODULES.get((year, day))
    if module_name is None:
        raise UnknownPuzzleError(f"no solver for {year} day {day}")
    module = importlib.import_module(module_name)
    parts = tuple(
        getattr(module, name) for name in ("part1", "part2") if hasattr(module, name)
    )
    return Puzzle(year, day, getattr(module, "TITLE", module_name), parts)


def solve(year: int, day: int, text: str) -> List[Answer]:
    return get_puzzle(year, day).solve(text)


__all__ = [
    "Answer",
    "PUZZLE_MODULES",
    "Puzzle",
    "PuzzleInputError",
    "UnknownPuzzleError",
    "available",
    "get_puzzle",
    "solve",
]
