# tests/conftest.py
import os

import pytest

from gridpath.core.grid import Grid


HEIGHTS = "2199943210\n3987894921\n9856789892\n8767896789\n9899965678"


@pytest.fixture
def barrier_grid() -> Grid:
    """5x5 uniform grid; row 2 is a wall except for a gap at column 3."""
    return Grid.uniform(5, 5, blocked=[(2, c) for c in range(5) if c != 3])


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run from an empty directory with no gridpath overrides set."""
    # load_dotenv writes straight into os.environ; give each test its own copy.
    monkeypatch.setattr(os, "environ", os.environ.copy())
    for name in ("GRIDPATH_CONFIG", "GRIDPATH_INPUTS", "GRIDPATH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def inputs_dir(clean_env, monkeypatch):
    """Input tree holding the 2021 day 9 example, wired up via the environment."""
    root = clean_env / "inputs"
    (root / "2021").mkdir(parents=True)
    (root / "2021" / "9.txt").write_text(HEIGHTS + "\n")
    monkeypatch.setenv("GRIDPATH_INPUTS", str(root))
    return root
