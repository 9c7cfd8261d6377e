"""Degree-based pruning of raw networks.

Raw road networks carry many shape points that only continue a road
(degree 1 or 2). The connectivity filter keeps the nodes whose degree
reaches a threshold, so the resulting graph is made of junctions.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from ..domain.models import Node, RawEdge
from .store import Graph

logger = logging.getLogger(__name__)


def node_degrees(graph: Graph) -> Dict[int, int]:
    """Map every node to the size of its adjacency map."""
    return {node_id: graph.degree(node_id) for node_id in graph}


def topology_graph(nodes: Sequence[Node], edges: Sequence[RawEdge]) -> Graph:
    """Build a unit-weight graph holding only the raw topology."""
    graph = Graph()
    for node in nodes:
        graph.add_node(node)
    for raw in edges:
        graph.add_edge(raw.u, raw.v, 1.0, raw.directed)
    return graph


def select_connected_nodes(
    nodes: Sequence[Node],
    edges: Sequence[RawEdge],
    threshold: int,
    fallback_divisor: int = 10,
) -> List[Node]:
    """Keep the raw nodes whose degree is at least ``threshold``.

    When no node qualifies, the best connected ``ceil(n / fallback_divisor)``
    nodes are kept instead (at least one), so a non-empty input never
    yields an empty selection. Ties are broken by node identifier. The
    returned list preserves the order of ``nodes``.
    """
    if not nodes:
        return []

    degrees = node_degrees(topology_graph(nodes, edges))
    selected = {node_id for node_id, degree in degrees.items() if degree >= threshold}

    logger.debug(
        "Degree filter applied",
        extra={"threshold": threshold, "kept": len(selected), "total": len(degrees)},
    )

    if not selected:
        count = max(1, -(-len(degrees) // fallback_divisor))
        ranked = sorted(degrees.items(), key=lambda item: (-item[1], item[0]))
        selected = {node_id for node_id, _ in ranked[:count]}
        logger.debug(
            "No node reached the degree threshold, keeping the best connected",
            extra={"threshold": threshold, "kept": len(selected)},
        )

    return [node for node in nodes if node.id in selected]
