from gridpath.core.grid import Grid
from gridpath.search.engine import SearchNode, best_first, dijkstra
from gridpath.search.paths import best_path_states, path_cost, reconstruct_path


def test_reconstruct_runs_start_to_goal():
    nodes = {
        "a": SearchNode("a", 0),
        "b": SearchNode("b", 1, "a"),
        "c": SearchNode("c", 2, "b"),
    }
    assert reconstruct_path(nodes, "c") == ["a", "b", "c"]
    assert reconstruct_path(nodes, "a") == ["a"]


def test_reconstruct_unknown_goal_is_empty():
    nodes = {"a": SearchNode("a", 0)}
    assert reconstruct_path(nodes, "z") == []


def test_path_cost_counts_entered_cells():
    grid = Grid.from_digits("19\n11")
    result = dijkstra(grid, (0, 0), (1, 1))
    path = result.path()
    assert path == [(0, 0), (1, 0), (1, 1)]
    assert path_cost(grid, path) == result.distance == 2


def test_best_path_states_collects_every_optimal_route():
    # Diamond: two equally short routes s->a->t and s->b->t, plus a longer one.
    edges = {
        "s": [("a", 1), ("b", 1), ("c", 2)],
        "a": [("t", 1)],
        "b": [("t", 1)],
        "c": [("t", 5)],
        "t": [],
    }
    result = best_first("s", lambda s: edges[s], track_ties=True)
    assert best_path_states(result.nodes, result.ties, ["t"]) == {"s", "a", "b", "t"}


def test_best_path_states_ignores_unknown_goals():
    result = best_first("s", lambda s: [], track_ties=True)
    assert best_path_states(result.nodes, result.ties, ["x"]) == set()
