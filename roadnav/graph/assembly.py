"""Turn a raw network into a query-ready graph.

Both file formats share this stage: optional degree filtering, coordinate
normalization of the surviving nodes, then registration of those nodes
and of every raw edge whose two endpoints survived.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..domain.models import RawNetwork
from .connectivity import select_connected_nodes
from .normalize import DEFAULT_REDUCTION_FACTOR, bounding_box, normalize_coordinates
from .store import DEFAULT_EPSILON, Graph

logger = logging.getLogger(__name__)


def assemble_graph(
    raw: RawNetwork,
    *,
    degree_threshold: Optional[int] = None,
    reduction_factor: float = DEFAULT_REDUCTION_FACTOR,
    epsilon: float = DEFAULT_EPSILON,
    fallback_divisor: int = 10,
) -> Graph:
    """Build the final graph from ``raw``.

    Args:
        raw: Reader output. Its selected nodes are normalized in place.
        degree_threshold: Minimum degree to keep a node, None keeps all.
        reduction_factor: Divisor applied to the shifted coordinates.
        epsilon: Weight used instead of zero for coincident endpoints.
        fallback_divisor: Keep ceil(n / divisor) nodes when none reaches the threshold.

    Returns:
        The populated graph, empty if ``raw`` has no nodes.
    """
    if degree_threshold is None:
        nodes = list(raw.nodes)
    else:
        nodes = select_connected_nodes(
            raw.nodes, raw.edges, degree_threshold, fallback_divisor
        )

    graph = Graph()
    if not nodes:
        logger.debug("No nodes to assemble", extra={"source": raw.source})
        return graph

    box = bounding_box(nodes)
    logger.debug(
        "Raw bounding box",
        extra={
            "source": raw.source,
            "min_x": box.min_x,
            "max_x": box.max_x,
            "min_y": box.min_y,
            "max_y": box.max_y,
        },
    )
    normalize_coordinates(nodes, reduction_factor)

    for node in nodes:
        graph.add_node(node)

    for edge in raw.edges:
        graph.connect(edge.u, edge.v, edge.directed, epsilon)

    logger.debug(
        "Graph assembled",
        extra={
            "source": raw.source,
            "raw_nodes": len(raw.nodes),
            "raw_edges": len(raw.edges),
            "vertices": graph.num_vertices,
            "edges": graph.num_edges,
        },
    )
    return graph
