"""Navigation service - Main orchestrator.

This service owns the current graph: it imports files through the
loader matching their extension, answers route queries and hands out an
editor bound to the graph.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Sequence, Union

from ..config import GeometryConfig, get_config
from ..domain.errors import UnsupportedFormatError
from ..domain.models import PathResult
from ..graph.store import Graph
from ..ports.graph import GraphLoaderPort, PathFinderPort
from .editing_service import GraphEditor


@dataclass
class NavigationService:
    """Main service for importing road networks and querying routes.

    The graph is replaced only when an import succeeds, so a failed
    import leaves the previous graph untouched.

    Attributes:
        loaders: Graph loaders, dispatched on their ``suffixes``
        path_finder: Computes shortest paths
        graph: The current graph
        geometry: Settings handed to the editor, matching the loaders'
    """

    loaders: Sequence[GraphLoaderPort]
    path_finder: PathFinderPort
    graph: Graph = field(default_factory=Graph)
    geometry: GeometryConfig = field(default_factory=lambda: get_config().geometry)

    _logger: logging.Logger = field(init=False, repr=False)
    _by_suffix: Dict[str, GraphLoaderPort] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._by_suffix = {
            suffix.lower(): loader
            for loader in self.loaders
            for suffix in loader.suffixes
        }

    @property
    def supported_suffixes(self) -> tuple[str, ...]:
        return tuple(sorted(self._by_suffix))

    def import_file(self, path: Union[str, Path]) -> Graph:
        """Load ``path`` and make it the current graph.

        Raises:
            UnsupportedFormatError: If no loader handles the file suffix.
            GraphIOError: If the file cannot be read.
            GraphFormatError: If the file is malformed.
        """
        path = Path(path)
        suffix = path.suffix.lower()
        loader = self._by_suffix.get(suffix)
        if loader is None:
            raise UnsupportedFormatError(
                f"No loader for {path.name}", suffix=suffix
            )

        self.graph = loader.load(path)
        self._logger.info(
            "Graph imported",
            extra={
                "path": str(path),
                "vertices": self.graph.num_vertices,
                "edges": self.graph.num_edges,
            },
        )
        return self.graph

    def route(self, start: int, end: int) -> PathResult:
        """Shortest path on the current graph."""
        return self.path_finder.solve(self.graph, start, end)

    @property
    def editor(self) -> GraphEditor:
        """Editor bound to the current graph."""
        return GraphEditor(self.graph, self.geometry)
