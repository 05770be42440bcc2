"""search package."""

from .engine import SearchNode, SearchResult, a_star, best_first, dijkstra
from .flood import connected_regions, flood_fill
from .paths import best_path_states, reconstruct_path

__all__ = [
    "SearchNode",
    "SearchResult",
    "a_star",
    "best_first",
    "best_path_states",
    "connected_regions",
    "dijkstra",
    "flood_fill",
    "reconstruct_path",
]
