"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for loading road networks from
files and computing shortest paths on them.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Union

if TYPE_CHECKING:
    from ..domain.models import PathResult
    from ..graph.store import Graph


class GraphLoaderPort(Protocol):
    """Port for loading a graph from one file format.

    Implementations: adapters/graph/poly_loader.py, adapters/graph/osm_loader.py
    """

    suffixes: tuple[str, ...]

    def load(self, path: Union[str, Path]) -> Graph:
        """Load a road graph.

        Args:
            path: File to read.

        Returns:
            The filtered, normalized graph.
        """
        ...


class PathFinderPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, graph: Graph, start: int, end: int) -> PathResult:
        """Find the shortest path between two nodes.

        Args:
            graph: The road graph.
            start: Start node identifier.
            end: End node identifier.

        Returns:
            PathResult, empty with infinite cost when no path exists.
        """
        ...
