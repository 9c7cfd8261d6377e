"""Reading road networks from OSM XML.

Only a small subset of the format is used: ``node`` elements with
``id``/``lat``/``lon`` and ``way`` elements with ordered ``nd`` references
and ``tag`` children, of which only ``highway`` and ``oneway`` matter.

The document is parsed in two passes so that ways may reference nodes
declared anywhere in the file.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..domain.errors import GraphFormatError, GraphIOError
from ..domain.models import Node, RawEdge, RawNetwork

logger = logging.getLogger(__name__)

ONEWAY_VALUES = frozenset({"yes", "true", "1"})


def _local_name(tag: str) -> str:
    # Strip a "{namespace}" prefix if present.
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> List[ET.Element]:
    return [child for child in element if _local_name(child.tag) == name]


def _collect_nodes(
    root: ET.Element,
    network: RawNetwork,
    max_nodes: Optional[int],
    source: Optional[str],
) -> Dict[int, int]:
    internal_ids: Dict[int, int] = {}
    found = 0
    ignored = 0
    for element in _children(root, "node"):
        found += 1
        if max_nodes is not None and len(network.nodes) >= max_nodes:
            ignored += 1
            continue
        try:
            osm_id = int(element.attrib["id"])
            lat = float(element.attrib["lat"])
            lon = float(element.attrib["lon"])
        except (KeyError, ValueError) as e:
            raise GraphFormatError(
                f"Invalid node element {element.attrib!r}", cause=e, file_path=source
            )

        if osm_id in internal_ids:
            logger.warning(
                "Skipping duplicate node id", extra={"source": source, "osm_id": osm_id}
            )
            continue

        node_id = len(network.nodes)
        internal_ids[osm_id] = node_id
        network.nodes.append(Node(node_id, lon, lat, external_id=osm_id))

    if ignored:
        logger.warning(
            "Node limit reached, remaining nodes ignored",
            extra={"source": source, "max_nodes": max_nodes, "ignored": ignored},
        )
    logger.debug(
        "Node pass finished",
        extra={"source": source, "found": found, "kept": len(network.nodes)},
    )
    return internal_ids


def _collect_edges(
    root: ET.Element,
    network: RawNetwork,
    internal_ids: Dict[int, int],
    source: Optional[str],
) -> None:
    ways = 0
    for way in _children(root, "way"):
        tags = {
            tag.attrib.get("k"): tag.attrib.get("v")
            for tag in _children(way, "tag")
        }
        if "highway" not in tags:
            continue
        ways += 1

        way_id = way.attrib.get("id")
        try:
            refs = [int(nd.attrib["ref"]) for nd in _children(way, "nd")]
        except (KeyError, ValueError) as e:
            raise GraphFormatError(
                f"Invalid node reference in way {way_id}", cause=e, file_path=source
            )
        if len(refs) < 2:
            logger.warning(
                "Skipping way with fewer than two nodes",
                extra={"source": source, "way_id": way_id},
            )
            continue

        directed = (tags.get("oneway") or "").lower() in ONEWAY_VALUES
        unresolved: List[int] = []
        for u_ref, v_ref in zip(refs, refs[1:]):
            u = internal_ids.get(u_ref)
            v = internal_ids.get(v_ref)
            if u is None or v is None:
                unresolved.append(u_ref if u is None else v_ref)
                continue
            network.edges.append(RawEdge(u, v, directed))

        if unresolved:
            logger.warning(
                "Skipping edges with unknown node references",
                extra={
                    "source": source,
                    "way_id": way_id,
                    "skipped": len(unresolved),
                    "osm_id": unresolved[0],
                },
            )

    logger.debug(
        "Way pass finished",
        extra={"source": source, "highways": ways, "edges": len(network.edges)},
    )


def parse_osm(
    text: Union[str, bytes],
    source: Optional[str] = None,
    max_nodes: Optional[int] = None,
) -> RawNetwork:
    """Parse OSM XML content into a raw network.

    Coordinates are stored as ``x = lon`` and ``y = lat``; the OSM id of
    every node is kept as ``external_id``.

    Args:
        text: The whole document.
        source: Name used in log records and error messages.
        max_nodes: Stop registering nodes past this count, None for no limit.

    Raises:
        GraphFormatError: On malformed XML or a node without valid
            ``id``/``lat``/``lon`` attributes.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise GraphFormatError(
            "Malformed XML document",
            cause=e,
            file_path=source,
            line_number=e.position[0] if e.position else None,
        )

    network = RawNetwork(source=source)
    internal_ids = _collect_nodes(root, network, max_nodes, source)
    _collect_edges(root, network, internal_ids, source)
    return network


def read_osm(path: Union[str, Path], max_nodes: Optional[int] = None) -> RawNetwork:
    """Read and parse an OSM XML file.

    Raises:
        GraphIOError: If the file cannot be read.
        GraphFormatError: If its content is malformed.
    """
    path = Path(path)
    try:
        content = path.read_bytes()
    except OSError as e:
        raise GraphIOError(f"Cannot read {path}", cause=e, file_path=str(path))
    return parse_osm(content, source=str(path), max_nodes=max_nodes)
