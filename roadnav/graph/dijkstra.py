"""Shortest-path computation using Dijkstra's algorithm.

This module computes the shortest path between two nodes of a road
graph and reports how much work the search did (settled nodes and
elapsed time).
"""

from __future__ import annotations

import heapq
import time
from typing import Dict, List, Set, Tuple

from ..domain.models import PathResult
from .store import Graph


def shortest_path(graph: Graph, start: int, end: int) -> PathResult:
    """Compute the shortest path between two nodes using Dijkstra.

    Parameters
    ----------
    graph:
        Road graph with non-negative edge weights.
    start:
        Identifier of the departure node.
    end:
        Identifier of the arrival node.

    Returns
    -------
    PathResult
        The node identifiers from ``start`` to ``end`` (inclusive), the
        total cost, the elapsed time in milliseconds and the number of
        settled nodes. If either node is missing or no path exists, the
        path is empty and the cost is ``inf``.
    """
    if start not in graph or end not in graph:
        return PathResult(path=(), cost=float("inf"))

    started_at = time.perf_counter()

    distances: Dict[int, float] = {start: 0.0}
    previous: Dict[int, int] = {}
    heap: List[Tuple[float, int]] = [(0.0, start)]
    settled: Set[int] = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        if u in settled:
            continue

        settled.add(u)

        if u == end:
            break

        for v, edge in graph.neighbors(u).items():
            if v in settled:
                continue
            new_distance = current_distance + edge.weight
            if new_distance < distances.get(v, float("inf")):
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    elapsed_ms = (time.perf_counter() - started_at) * 1000.0

    if end not in settled:
        return PathResult(
            path=(),
            cost=float("inf"),
            elapsed_ms=elapsed_ms,
            nodes_explored=len(settled),
        )

    path: List[int] = [end]
    current = end
    while current != start:
        current = previous[current]
        path.append(current)

    path.reverse()
    return PathResult(
        path=tuple(path),
        cost=distances[end],
        elapsed_ms=elapsed_ms,
        nodes_explored=len(settled),
    )
