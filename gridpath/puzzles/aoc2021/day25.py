"""2021 day 25: sea cucumber herds on a wrapping sea floor."""

from __future__ import annotations

from ...simulation import parse_herds, steps_until_stable
from ..registry import PuzzleInputError

TITLE = "Sea Cucumber"


def part1(text: str) -> int:
    step = steps_until_stable(parse_herds(text))
    if step is None:
        raise PuzzleInputError("herds never stop moving")
    return step
