from __future__ import annotations

import sys
from typing import Dict, Iterable, List, Mapping, Tuple, Union


UNWEIGHTED = "unweighted"
WEIGHTED = "weighted"
GRAPH_KINDS = (UNWEIGHTED, WEIGHTED)

# Distance reported for a target that cannot be reached.
INFINITY = sys.maxsize

UnweightedGraph = Dict[str, List[str]]
WeightedGraph = Dict[str, List[Tuple[str, int]]]
AnyGraph = Union[UnweightedGraph, WeightedGraph]


class UnknownNodeError(KeyError):
    """Raised when a node id is not a key of the graph."""

    def __init__(self, node: str) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"Unknown node: {self.node!r}"


def require_node(graph: Mapping[str, object], node: str) -> None:
    if node not in graph:
        raise UnknownNodeError(node)


def check_kind(kind: str) -> str:
    if kind not in GRAPH_KINDS:
        raise ValueError(
            f"Unknown graph kind {kind!r}, expected one of {', '.join(GRAPH_KINDS)}."
        )
    return kind


def build_unweighted_graph(
    nodes: Iterable[str],
    edges: Iterable[Tuple[str, str]],
    directed: bool = False,
) -> UnweightedGraph:
    """Build an adjacency mapping where every edge has implicit length 1.

    Nodes keep their given order, and so do the neighbors of each node.
    """
    graph: UnweightedGraph = {node: [] for node in nodes}

    for origin, target in edges:
        require_node(graph, origin)
        require_node(graph, target)
        graph[origin].append(target)
        if not directed:
            graph[target].append(origin)

    return graph


def edge_weight(origin: str, target: str, weight: object) -> int:
    """Convert a configured weight to an int without losing precision."""
    if isinstance(weight, bool):
        raise ValueError(f"Edge {origin}-{target} has non-numeric weight {weight!r}.")
    if isinstance(weight, float):
        if not weight.is_integer():
            raise ValueError(f"Edge {origin}-{target} has fractional weight {weight}.")
        cost = int(weight)
    else:
        try:
            cost = int(weight)
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"Edge {origin}-{target} has non-integer weight {weight!r}."
            ) from exc
    if cost < 0:
        raise ValueError(f"Edge {origin}-{target} has negative weight {cost}.")
    if cost >= INFINITY:
        raise ValueError(f"Edge {origin}-{target} has weight {cost}, too large to represent.")
    return cost


def build_weighted_graph(
    nodes: Iterable[str],
    edges: Iterable[Tuple[str, str, int]],
    directed: bool = True,
) -> WeightedGraph:
    """Build an adjacency mapping of (neighbor, weight) pairs.

    Parallel edges are kept as separate entries. Weights must be whole,
    non-negative numbers below INFINITY; anything else raises ValueError.
    """
    graph: WeightedGraph = {node: [] for node in nodes}

    for origin, target, weight in edges:
        require_node(graph, origin)
        require_node(graph, target)
        cost = edge_weight(origin, target, weight)
        graph[origin].append((target, cost))
        if not directed:
            graph[target].append((origin, cost))

    return graph


def graph_from_config(section: Mapping) -> Tuple[str, AnyGraph]:
    """Build a graph from one entry of the YAML ``graphs`` mapping."""
    if not isinstance(section, Mapping):
        raise ValueError("Graph section must be a mapping with 'nodes' and 'edges'.")
    kind = check_kind(section.get("kind", UNWEIGHTED))
    try:
        nodes = section["nodes"]
        edges = section["edges"]
    except KeyError as exc:
        raise ValueError(f"Graph section is missing {exc.args[0]!r}.") from exc

    if kind == WEIGHTED:
        directed = bool(section.get("directed", True))
        return kind, build_weighted_graph(nodes, [tuple(edge) for edge in edges], directed)

    directed = bool(section.get("directed", False))
    return kind, build_unweighted_graph(nodes, [tuple(edge) for edge in edges], directed)
