import pytest

from gridpath.core.grid import Grid, GridError, GridParseError, parse_maze


def test_from_digits_dimensions_and_get():
    grid = Grid.from_digits("0123\n1234\n8765\n9876")
    assert grid.dimensions() == (4, 4)
    assert grid.get((0, 0)) == 0
    assert grid.get((0, 3)) == 3
    assert grid.get((1, 0)) == 1
    assert grid.get((3, 1)) == 8
    assert grid.get((3, 3)) == 6


@pytest.mark.parametrize("coord", [(0, 4), (4, 0), (4, 4), (-1, 0), (0, -1)])
def test_get_out_of_bounds_is_none(coord):
    grid = Grid.from_digits("0123\n1234\n8765\n9876")
    assert grid.get(coord) is None


def test_negative_coordinate_does_not_wrap():
    grid = Grid.from_digits("12\n34")
    assert not grid.in_bounds((0, -1))
    assert grid.get((-1, 1)) is None
    with pytest.raises(IndexError):
        grid[(-1, 0)]


def test_width_and_height_differ():
    grid = Grid.uniform(width=5, height=2)
    assert grid.dimensions() == (5, 2)
    assert grid.width == 5 and grid.height == 2


def test_ragged_rows_rejected():
    with pytest.raises(GridParseError):
        Grid.from_digits("123\n12")
    with pytest.raises(GridError):
        Grid([(1, 2), (3,)])


def test_non_digit_rejected():
    with pytest.raises(GridParseError):
        Grid.from_digits("12a\n123")


def test_empty_text_rejected():
    with pytest.raises(GridParseError):
        Grid.from_digits("   \n")


def test_negative_cost_rejected():
    with pytest.raises(GridError):
        Grid([(1, -1)])


def test_blocked_outside_grid_rejected():
    with pytest.raises(GridError):
        Grid.uniform(2, 2, blocked=[(2, 0)])


def test_blocked_value_from_digits():
    grid = Grid.from_digits("191\n999", blocked_value=9)
    assert grid.is_blocked((0, 1))
    assert not grid.is_passable((1, 2))
    assert grid.is_passable((0, 0))


def test_grid_is_immutable():
    grid = Grid.uniform(2, 2)
    with pytest.raises(AttributeError):
        grid.cells = ((0,),)  # type: ignore[misc]


def test_with_blocked_returns_new_grid():
    grid = Grid.uniform(3, 3)
    walled = grid.with_blocked([(1, 1)])
    assert walled.is_blocked((1, 1))
    assert not grid.is_blocked((1, 1))


def test_find_row_major():
    grid = Grid.from_digits("010\n101")
    assert grid.find(0) == [(0, 0), (0, 2), (1, 1)]


def test_min_cost_ignores_blocked():
    grid = Grid.from_rows([(1, 5), (7, 3)], blocked=[(0, 0)])
    assert grid.min_cost() == 3


def test_wrap_is_explicit():
    grid = Grid.uniform(4, 3)
    assert grid.wrap((3, 4)) == (0, 0)
    assert grid.wrap((-1, -1)) == (2, 3)


def test_tiled_increments_and_wraps():
    grid = Grid.from_digits("8")
    tiled = grid.tiled(3)
    assert tiled.dimensions() == (3, 3)
    assert tiled.cells == ((8, 9, 1), (9, 1, 2), (1, 2, 3))


def test_tiled_keeps_first_tile():
    grid = Grid.from_rows([(0, 1), (9, 4)])
    assert grid.tiled(1) == grid
    assert grid.tiled(2).cells == ((0, 1, 1, 2), (9, 4, 1, 5), (1, 2, 2, 3), (1, 5, 2, 6))


def test_render_marks_blocked():
    grid = Grid.from_rows([(1, 2), (3, 4)], blocked=[(1, 0)])
    assert grid.render() == "12\n#4"


def test_parse_maze_markers():
    maze = parse_maze("#####\n#S.E#\n#####")
    assert maze.marker("S") == (1, 1)
    assert maze.marker("E") == (1, 3)
    assert maze.grid.is_blocked((0, 0))
    assert maze.grid.is_passable((1, 2))


def test_parse_maze_missing_marker():
    maze = parse_maze("#S.#")
    with pytest.raises(GridParseError):
        maze.marker("E")
