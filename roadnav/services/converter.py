"""OSM to poly conversion.

The converter keeps every node and highway edge of the OSM file, with
the raw (lon, lat) coordinates, so the poly file can be filtered and
normalized later by the poly loader.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from ..config import get_config
from ..io.osm_format import read_osm
from ..io.poly_format import write_poly

logger = logging.getLogger(__name__)


def convert_osm_to_poly(
    osm_path: Union[str, Path],
    poly_path: Optional[Union[str, Path]] = None,
    max_nodes: Optional[int] = None,
) -> Path:
    """Convert an OSM file to the poly format.

    Args:
        osm_path: Source OSM XML file.
        poly_path: Target file, defaults to ``osm_path`` with a ``.poly`` suffix.
        max_nodes: Node cap, defaults to the configured OSM limit.

    Returns:
        The path of the written poly file.

    Raises:
        GraphIOError: If a file cannot be read or written.
        GraphFormatError: If the OSM file is malformed.
    """
    osm_path = Path(osm_path)
    target = Path(poly_path) if poly_path is not None else osm_path.with_suffix(".poly")
    if max_nodes is None:
        max_nodes = get_config().osm.max_nodes

    logger.info(
        "Converting OSM file", extra={"source": str(osm_path), "target": str(target)}
    )
    network = read_osm(osm_path, max_nodes=max_nodes)
    return write_poly(network, target)
