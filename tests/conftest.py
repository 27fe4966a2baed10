from __future__ import annotations

from pathlib import Path

import pytest

from graph import build_unweighted_graph, build_weighted_graph


REPO_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def friends_graph():
    """Undirected chain Alicia-Britney-Claire-Diana-{Edward,Harry}-Gloria-Fred."""
    nodes = ["Alicia", "Britney", "Claire", "Diana", "Edward", "Harry", "Gloria", "Fred"]
    edges = [
        ("Alicia", "Britney"),
        ("Britney", "Claire"),
        ("Claire", "Diana"),
        ("Diana", "Edward"),
        ("Diana", "Harry"),
        ("Edward", "Harry"),
        ("Edward", "Gloria"),
        ("Harry", "Gloria"),
        ("Harry", "Fred"),
        ("Gloria", "Fred"),
    ]
    return build_unweighted_graph(nodes, edges)


@pytest.fixture
def routes_graph():
    nodes = ["A", "B", "C", "D", "E", "F"]
    edges = [
        ("A", "B", 1),
        ("A", "C", 1),
        ("B", "D", 3),
        ("B", "E", 1),
        ("C", "D", 4),
        ("C", "E", 2),
        ("D", "F", 2),
        ("E", "D", 2),
        ("E", "F", 3),
    ]
    return build_weighted_graph(nodes, edges)


@pytest.fixture
def sample_config_path() -> Path:
    return REPO_ROOT / "social_network.yaml"
