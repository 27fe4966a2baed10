from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, Set

from graph import (
    INFINITY,
    UNWEIGHTED,
    AnyGraph,
    UnknownNodeError,
    UnweightedGraph,
    WeightedGraph,
    check_kind,
    require_node,
)
from priority_queue import PriorityQueue


logger = logging.getLogger(__name__)


def bfs_distance(graph: UnweightedGraph, start: str, end: str) -> int:
    """Number of edges on the shortest path from start to end.

    Returns INFINITY when end cannot be reached. Every node is assigned a
    distance at most once, the first time it is discovered; FIFO order makes
    that first distance the shortest one.
    """
    require_node(graph, start)
    require_node(graph, end)
    if start == end:
        return 0

    distances: Dict[str, int] = {start: 0}
    queue: Deque[str] = deque([start])

    while queue:
        current = queue.popleft()
        for neighbor in graph[current]:
            if neighbor in distances:
                continue
            if neighbor not in graph:
                raise UnknownNodeError(neighbor)
            distances[neighbor] = distances[current] + 1
            if neighbor == end:
                logger.debug("BFS %s -> %s: %d", start, end, distances[neighbor])
                return distances[neighbor]
            queue.append(neighbor)

    logger.debug("BFS %s -> %s: unreachable after %d nodes", start, end, len(distances))
    return INFINITY


def dijkstra_distance(graph: WeightedGraph, start: str, end: str) -> int:
    """Sum of edge weights along the cheapest path from start to end.

    Stale queue entries are handled by lazy deletion: instead of lowering
    a queued priority, an improved distance is pushed again and any later
    extraction of an already finalized node is skipped. The first time a
    node leaves the queue its priority is optimal, provided no weight is
    negative.
    """
    require_node(graph, start)
    require_node(graph, end)

    tentative: Dict[str, int] = {start: 0}
    finalized: Set[str] = set()
    queue: PriorityQueue[str] = PriorityQueue()
    queue.push(start, 0)

    while queue:
        current, current_distance = queue.pop()
        if current in finalized:
            continue
        finalized.add(current)

        if current == end:
            logger.debug(
                "Dijkstra %s -> %s: %d (%d finalized)",
                start,
                end,
                current_distance,
                len(finalized),
            )
            return current_distance

        for neighbor, weight in graph[current]:
            if neighbor not in graph:
                raise UnknownNodeError(neighbor)
            candidate = current_distance + weight
            if neighbor not in tentative or candidate < tentative[neighbor]:
                tentative[neighbor] = candidate
                queue.push(neighbor, candidate)

    logger.debug("Dijkstra %s -> %s: unreachable", start, end)
    return INFINITY


def distance(kind: str, graph: AnyGraph, start: str, end: str) -> int:
    if check_kind(kind) == UNWEIGHTED:
        return bfs_distance(graph, start, end)
    return dijkstra_distance(graph, start, end)
