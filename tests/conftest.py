"""Pytest configuration to make the project root importable.

This ensures ``import algorithms``, ``import engine`` and friends work when
tests are run from the repository root or other locations.
"""

import os
import sys

import pytest

# Project root = parent directory of this tests/ folder
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


from structures import Graph  # noqa: E402


@pytest.fixture
def path_graph():
    """Nodes {0, 1, 2}, edges (0,1) and (1,2)."""
    return Graph.from_edges([0, 1, 2], [(0, 1), (1, 2)])


@pytest.fixture
def branching_graph():
    """
        0
       / \\
      1   2
      |   |
      3   4
    """
    return Graph.from_edges(range(5), [(0, 1), (0, 2), (1, 3), (2, 4)])
