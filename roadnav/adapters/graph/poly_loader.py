"""Poly file graph loader adapter.

This adapter reads the vertex/edge text format and adds:
- Configuration injection (degree threshold, geometry constants)
- Logging of the import outcome
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from ...config import GeometryConfig, PolyConfig, get_config
from ...domain.errors import RoadnavError
from ...graph.assembly import assemble_graph
from ...graph.store import Graph
from ...io.poly_format import read_poly


@dataclass
class PolyGraphLoader:
    """Graph loader for ``.poly`` files.

    This adapter implements GraphLoaderPort.

    Attributes:
        config: Poly ingestion settings
        geometry: Normalization and weighting settings
    """

    config: PolyConfig = field(default_factory=lambda: get_config().poly)
    geometry: GeometryConfig = field(default_factory=lambda: get_config().geometry)
    suffixes: tuple[str, ...] = (".poly",)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self, path: Union[str, Path]) -> Graph:
        """Load a road graph from a poly file.

        Args:
            path: File to read.

        Returns:
            The graph, restricted to well-connected nodes when a degree
            threshold is configured.

        Raises:
            GraphIOError: If the file cannot be read.
            GraphFormatError: If the file is malformed.
        """
        self._logger.debug("Loading poly graph", extra={"path": str(path)})

        try:
            raw = read_poly(path)
        except RoadnavError as e:
            self._logger.error(
                "Poly import failed", extra={"path": str(path), "error": str(e)}
            )
            raise

        graph = assemble_graph(
            raw,
            degree_threshold=self.config.degree_threshold,
            reduction_factor=self.geometry.reduction_factor,
            epsilon=self.geometry.zero_weight_epsilon,
            fallback_divisor=self.geometry.fallback_divisor,
        )
        self._logger.info(
            "Poly graph loaded",
            extra={
                "path": str(path),
                "vertices": graph.num_vertices,
                "edges": graph.num_edges,
            },
        )
        return graph
