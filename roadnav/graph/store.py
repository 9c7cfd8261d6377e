"""In-memory weighted graph.

The graph keeps a node registry and one edge map per node. Vertex and
edge counts are running totals updated by every mutation: an undirected
edge is stored as two mirrored records but counts once.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from ..domain.models import Edge, Node

DEFAULT_EPSILON = 0.001


def euclidean_weight(a: Node, b: Node, epsilon: float = DEFAULT_EPSILON) -> float:
    """Distance between two nodes, with ``epsilon`` standing in for zero."""
    weight = math.hypot(a.x - b.x, a.y - b.y)
    if weight == 0:
        return epsilon
    return weight


class Graph:
    """Weighted graph with directed and undirected edges.

    Mutations never raise on invalid input; they return False instead so
    callers can react. Adding an edge whose forward record already
    exists is a no-op (the first insertion wins). An undirected edge is
    also refused while the reverse record exists.
    """

    def __init__(self) -> None:
        self._nodes: Dict[int, Node] = {}
        self._adj: Dict[int, Dict[int, Edge]] = {}
        self._num_vertices = 0
        self._num_edges = 0

    # Accessors

    @property
    def nodes(self) -> Mapping[int, Node]:
        return MappingProxyType(self._nodes)

    @property
    def adjacency(self) -> Mapping[int, Mapping[int, Edge]]:
        return MappingProxyType(
            {u: MappingProxyType(edges) for u, edges in self._adj.items()}
        )

    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    @property
    def num_edges(self) -> int:
        return self._num_edges

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return self._num_vertices

    def __iter__(self) -> Iterator[int]:
        return iter(self._nodes)

    def node(self, node_id: int) -> Optional[Node]:
        return self._nodes.get(node_id)

    def neighbors(self, node_id: int) -> Mapping[int, Edge]:
        """Outgoing edges of ``node_id`` keyed by neighbor (empty if unknown)."""
        return MappingProxyType(self._adj.get(node_id, {}))

    def edge(self, u: int, v: int) -> Optional[Edge]:
        return self._adj.get(u, {}).get(v)

    def has_edge(self, u: int, v: int) -> bool:
        return v in self._adj.get(u, {})

    def degree(self, node_id: int) -> int:
        """Size of the node's adjacency map."""
        return len(self._adj.get(node_id, {}))

    def next_node_id(self) -> int:
        """Smallest identifier greater than every registered one."""
        if not self._nodes:
            return 0
        return max(self._nodes) + 1

    # Mutations

    def add_node(self, node: Node) -> bool:
        if node.id in self._nodes:
            return False
        self._nodes[node.id] = node
        self._adj[node.id] = {}
        self._num_vertices += 1
        return True

    def add_edge(self, u: int, v: int, weight: float, directed: bool = False) -> bool:
        if u not in self._nodes or v not in self._nodes:
            return False
        if v in self._adj[u]:
            return False
        # An undirected edge needs both records free.
        if not directed and u in self._adj[v]:
            return False

        self._adj[u][v] = Edge(u, v, weight, directed)
        if not directed:
            self._adj[v][u] = Edge(v, u, weight, False)
        self._num_edges += 1
        return True

    def connect(
        self, u: int, v: int, directed: bool = False, epsilon: float = DEFAULT_EPSILON
    ) -> bool:
        """Add an edge weighted by the endpoints' current Euclidean distance."""
        a = self._nodes.get(u)
        b = self._nodes.get(v)
        if a is None or b is None:
            return False
        return self.add_edge(u, v, euclidean_weight(a, b, epsilon), directed)

    def remove_edge(self, u: int, v: int) -> bool:
        edge = self._adj.get(u, {}).pop(v, None)
        if edge is None:
            return False

        if not edge.directed:
            mirror = self._adj.get(v, {}).get(u)
            if mirror is not None and not mirror.directed:
                del self._adj[v][u]
        self._num_edges -= 1
        return True

    def remove_node(self, node_id: int) -> bool:
        if node_id not in self._nodes:
            return False

        # Incoming records first; removing an undirected one also clears
        # its mirror in this node's own map.
        incoming = [
            u for u, edges in self._adj.items() if u != node_id and node_id in edges
        ]
        for u in incoming:
            self.remove_edge(u, node_id)

        for v in list(self._adj[node_id]):
            self.remove_edge(node_id, v)

        del self._adj[node_id]
        del self._nodes[node_id]
        self._num_vertices -= 1
        return True

    def __repr__(self) -> str:
        return f"Graph(vertices={self._num_vertices}, edges={self._num_edges})"
