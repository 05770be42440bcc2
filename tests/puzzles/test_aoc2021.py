"""Worked examples for the 2021 solvers."""

import pytest

from gridpath.puzzles.aoc2021 import day09, day11, day12, day15, day25
from gridpath.puzzles.registry import PuzzleInputError

HEIGHTS = "2199943210\n3987894921\n9856789892\n8767896789\n9899965678"

CHITONS = """1163751742
1381373672
2136511328
3694931569
7463417111
1319128137
1359912421
3125421639
1293138521
2311944581"""


def test_day09_low_points_and_basins():
    assert day09.part1(HEIGHTS) == 15
    assert day09.part2(HEIGHTS) == 1134


def test_day09_basin_sizes():
    assert day09.basin_sizes(day09.parse(HEIGHTS)) == [14, 9, 9, 3]


def test_day09_needs_three_basins():
    with pytest.raises(PuzzleInputError):
        day09.part2("090")


def test_day11_example():
    text = (
        "5483143223\n2745854711\n5264556173\n6141336146\n6357385478\n"
        "4167524645\n2176841721\n6882881134\n4846848554\n5283751526"
    )
    assert day11.part1(text) == 1656
    assert day11.part2(text) == 195


def test_day12_example():
    text = "start-A\nstart-b\nA-c\nA-b\nb-d\nA-end\nb-end"
    assert day12.part1(text) == 10
    assert day12.part2(text) == 36


def test_day15_example():
    assert day15.part1(CHITONS) == 40
    assert day15.part2(CHITONS) == 315


def test_day25_example():
    text = (
        "v...>>.vv>\n.vv>>.vv..\n>>.>v>...v\n>>v>>.>.v.\nv>v.vv.v..\n"
        ">.>>..v...\n.vv..>.>v.\nv.v..>>v.v\n....v..v.>"
    )
    assert day25.part1(text) == 58
