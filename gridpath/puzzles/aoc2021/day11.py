"""2021 day 11: flashing octopus energy grid."""

from __future__ import annotations

from ...core.grid import Grid
from ...simulation import count_flashes, first_synchronized_step
from ..registry import PuzzleInputError

TITLE = "Dumbo Octopus"


def part1(text: str, steps: int = 100) -> int:
    return count_flashes(Grid.from_digits(text), steps)


def part2(text: str) -> int:
    step = first_synchronized_step(Grid.from_digits(text))
    if step is None:
        raise PuzzleInputError("octopuses never flash in sync")
    return step
