"""core package."""

from .grid import Coord, Grid, GridError, GridParseError, Maze, parse_maze
from .neighbors import Connectivity, Direction, manhattan, neighbors

__all__ = [
    "Connectivity",
    "Coord",
    "Direction",
    "Grid",
    "GridError",
    "GridParseError",
    "Maze",
    "manhattan",
    "neighbors",
    "parse_maze",
]
