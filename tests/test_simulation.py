import pytest

from gridpath.core.grid import Grid, GridParseError
from gridpath.simulation import (
    HERD_SYMBOLS,
    count_flashes,
    first_synchronized_step,
    herd_step,
    octopus_step,
    parse_herds,
    steps_until_stable,
)

OCTOPUSES = """5483143223
2745854711
5264556173
6141336146
6357385478
4167524645
2176841721
6882881134
4846848554
5283751526"""

HERDS = """v...>>.vv>
.vv>>.vv..
>>.>v>...v
>>v>>.>.v.
v>v.vv.v..
>.>>..v...
.vv..>.>v.
v.v..>>v.v
....v..v.>"""

HERDS_AFTER_ONE = """....>.>v.>
v.v>.>v.v.
>v>>..>v..
>>v>v>.>.v
.>v.v...v.
v>>.>vvv..
..v...>>..
vv...>>vv.
>.v.v..v.v"""


def test_small_octopus_cascade():
    grid = Grid.from_digits("11111\n19991\n19191\n19991\n11111")
    after, flashes = octopus_step(grid)
    assert flashes == 9
    assert after.render() == "34543\n40004\n50005\n40004\n34543"


def test_octopus_step_leaves_input_untouched():
    grid = Grid.from_digits(OCTOPUSES)
    octopus_step(grid)
    assert grid == Grid.from_digits(OCTOPUSES)


@pytest.mark.parametrize("steps, flashes", [(10, 204), (100, 1656)])
def test_count_flashes(steps, flashes):
    assert count_flashes(Grid.from_digits(OCTOPUSES), steps) == flashes


def test_first_synchronized_step():
    assert first_synchronized_step(Grid.from_digits(OCTOPUSES)) == 195


def test_first_synchronized_step_limit():
    assert first_synchronized_step(Grid.from_digits(OCTOPUSES), limit=10) is None


def test_herd_step_matches_example():
    after = herd_step(parse_herds(HERDS))
    assert after == parse_herds(HERDS_AFTER_ONE)


def test_herds_wrap_around_edges():
    grid = parse_herds("...>")
    assert herd_step(grid).render(HERD_SYMBOLS) == ">..."


def test_steps_until_stable():
    assert steps_until_stable(parse_herds(HERDS)) == 58


def test_unknown_herd_symbol():
    with pytest.raises(GridParseError):
        parse_herds("..x")
