"""OSM XML graph loader adapter.

This adapter reads highway ways from OSM XML and adds:
- Configuration injection (degree threshold, node cap, geometry constants)
- Logging of the import outcome
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from ...config import GeometryConfig, OsmConfig, get_config
from ...domain.errors import RoadnavError
from ...graph.assembly import assemble_graph
from ...graph.store import Graph
from ...io.osm_format import read_osm


@dataclass
class OsmGraphLoader:
    """Graph loader for ``.osm`` files.

    This adapter implements GraphLoaderPort. Raw OSM extracts are mostly
    shape points, so the degree filter is on by default.

    Attributes:
        config: OSM ingestion settings
        geometry: Normalization and weighting settings
    """

    config: OsmConfig = field(default_factory=lambda: get_config().osm)
    geometry: GeometryConfig = field(default_factory=lambda: get_config().geometry)
    suffixes: tuple[str, ...] = (".osm", ".xml")
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self, path: Union[str, Path]) -> Graph:
        """Load a road graph from an OSM file.

        Args:
            path: File to read.

        Returns:
            The graph of the nodes passing the degree filter.

        Raises:
            GraphIOError: If the file cannot be read.
            GraphFormatError: If the file is malformed.
        """
        self._logger.debug("Loading OSM graph", extra={"path": str(path)})

        try:
            raw = read_osm(path, max_nodes=self.config.max_nodes)
        except RoadnavError as e:
            self._logger.error(
                "OSM import failed", extra={"path": str(path), "error": str(e)}
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
            "OSM graph loaded",
            extra={
                "path": str(path),
                "raw_nodes": len(raw.nodes),
                "raw_edges": len(raw.edges),
                "vertices": graph.num_vertices,
                "edges": graph.num_edges,
            },
        )
        return graph
