"""Dijkstra path finder adapter.

This adapter wraps graph/dijkstra.py and adds:
- Logging of every query
- A raising variant for callers that prefer exceptions over empty results
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NodeNotFoundError, NoRouteFoundError
from ...domain.models import PathResult
from ...graph.dijkstra import shortest_path
from ...graph.store import Graph


@dataclass
class DijkstraPathFinder:
    """Path finder using Dijkstra's shortest path algorithm.

    This adapter implements PathFinderPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph, start: int, end: int) -> PathResult:
        """Find the shortest path, returning an empty result on failure.

        Args:
            graph: The road graph.
            start: Start node identifier.
            end: End node identifier.

        Returns:
            PathResult with path and cost, or an empty path with ``inf`` cost.
        """
        self._logger.debug("Solving route", extra={"start": start, "end": end})

        result = shortest_path(graph, start, end)

        if result.is_empty:
            self._logger.info(
                "No route found",
                extra={
                    "start": start,
                    "end": end,
                    "nodes_explored": result.nodes_explored,
                },
            )
        else:
            self._logger.info(
                "Route found",
                extra={
                    "start": start,
                    "end": end,
                    "stops": result.num_stops,
                    "cost": result.cost,
                    "nodes_explored": result.nodes_explored,
                    "elapsed_ms": result.elapsed_ms,
                },
            )
        return result

    def solve_or_raise(self, graph: Graph, start: int, end: int) -> PathResult:
        """Find the shortest path between two nodes.

        Like solve(), but raises instead of returning an empty result.

        Raises:
            NodeNotFoundError: If start or end is not in the graph.
            NoRouteFoundError: If no path exists.
        """
        for node_id in (start, end):
            if node_id not in graph:
                raise NodeNotFoundError(
                    f"Node not in graph: {node_id}", node_id=node_id
                )

        result = self.solve(graph, start, end)
        if result.is_empty:
            raise NoRouteFoundError(
                f"No path from {start} to {end}", start=start, end=end
            )
        return result
