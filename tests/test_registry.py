import pytest

from gridpath.puzzles import registry
from gridpath.puzzles.registry import UnknownPuzzleError, available, get_puzzle, solve


def test_available_is_sorted_and_complete():
    days = available()
    assert days == sorted(days)
    assert (2021, 15) in days
    assert (2024, 20) in days
    assert len(days) == len(registry.PUZZLE_MODULES)


@pytest.mark.parametrize("year, day", available())
def test_every_puzzle_loads(year, day):
    puzzle = get_puzzle(year, day)
    assert puzzle.title
    assert 1 <= len(puzzle.parts) <= 2


def test_single_part_puzzle():
    assert len(get_puzzle(2021, 25).parts) == 1


def test_unknown_puzzle():
    with pytest.raises(UnknownPuzzleError):
        get_puzzle(2019, 1)


def test_solve_returns_every_part():
    assert solve(2021, 12, "start-A\nstart-b\nA-c\nA-b\nb-d\nA-end\nb-end") == [10, 36]
