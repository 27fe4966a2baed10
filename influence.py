from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional

from graph import (
    INFINITY,
    UNWEIGHTED,
    AnyGraph,
    UnweightedGraph,
    WeightedGraph,
    check_kind,
    require_node,
)
from shortest_path import bfs_distance, dijkstra_distance


logger = logging.getLogger(__name__)

DistanceFn = Callable[[AnyGraph, str, str], int]

# Distances are measured from every other node to the scored one.
INCOMING = "incoming"
# Distances are measured from the scored node to every other one.
OUTGOING = "outgoing"
DIRECTIONS = (INCOMING, OUTGOING)


@dataclass(frozen=True)
class InfluenceResult:
    node: str
    score: float
    reachable: int
    total_distance: int


def check_direction(direction: str) -> str:
    if direction not in DIRECTIONS:
        raise ValueError(
            f"Unknown direction {direction!r}, expected one of {', '.join(DIRECTIONS)}."
        )
    return direction


def _closeness(
    graph: Mapping[str, object],
    node: str,
    distance_fn: DistanceFn,
    direction: str = INCOMING,
) -> InfluenceResult:
    """Aggregate the distances between node and every other node into a score.

    With INCOMING the scored node is the fixed target and each other node is
    a source; OUTGOING swaps the roles. On undirected graphs both agree.
    Unreachable nodes add nothing to the total, while the numerator stays
    n - 1 for the whole graph.
    """
    check_direction(direction)
    require_node(graph, node)

    total = 0
    reachable = 0
    for other in graph:
        if other == node:
            continue
        if direction == INCOMING:
            dist = distance_fn(graph, other, node)
        else:
            dist = distance_fn(graph, node, other)
        if dist == INFINITY:
            continue
        total += dist
        reachable += 1

    score = (len(graph) - 1) / total if total > 0 else 0.0
    logger.debug(
        "Influence of %s (%s): %d/%d reachable, total distance %d, score %.6f",
        node,
        direction,
        reachable,
        len(graph) - 1,
        total,
        score,
    )
    return InfluenceResult(node=node, score=score, reachable=reachable, total_distance=total)


def _distance_fn(kind: str) -> DistanceFn:
    return bfs_distance if check_kind(kind) == UNWEIGHTED else dijkstra_distance


def unweighted_influence_score(
    graph: UnweightedGraph, node: str, direction: str = INCOMING
) -> float:
    return _closeness(graph, node, bfs_distance, direction).score


def weighted_influence_score(
    graph: WeightedGraph, node: str, direction: str = INCOMING
) -> float:
    return _closeness(graph, node, dijkstra_distance, direction).score


def influence_report(
    kind: str, graph: AnyGraph, node: str, direction: str = INCOMING
) -> InfluenceResult:
    return _closeness(graph, node, _distance_fn(kind), direction)


def influence_score(
    kind: str, graph: AnyGraph, node: str, direction: str = INCOMING
) -> float:
    """Closeness score of node in a graph of the given kind.

    Raises UnknownNodeError when node is not in the graph and ValueError
    for an unknown kind or direction.
    """
    return influence_report(kind, graph, node, direction).score


def rank_influence(
    kind: str,
    graph: AnyGraph,
    top_n: Optional[int] = None,
    workers: int = 1,
    direction: str = INCOMING,
) -> List[InfluenceResult]:
    """Score every node, highest first; ties are ordered by node id.

    With workers > 1 the nodes are scored on a thread pool. Each search owns
    its queue and distance map, and the graph is only read.
    """
    distance_fn = _distance_fn(kind)
    check_direction(direction)
    nodes = list(graph)

    if workers > 1 and len(nodes) > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(
                executor.map(
                    lambda node: _closeness(graph, node, distance_fn, direction), nodes
                )
            )
    else:
        results = [_closeness(graph, node, distance_fn, direction) for node in nodes]

    results.sort(key=lambda result: (-result.score, result.node))
    if top_n is not None:
        results = results[: max(0, top_n)]
    return results
