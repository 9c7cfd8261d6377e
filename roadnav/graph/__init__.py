"""Graph-related code for representing road networks.

This subpackage contains the in-memory graph, the connectivity filter,
the coordinate normalizer, the assembly stage shared by every file
format, and the Dijkstra path finder.
"""

from .assembly import assemble_graph
from .connectivity import node_degrees, select_connected_nodes
from .dijkstra import shortest_path
from .normalize import bounding_box, normalize_coordinates
from .store import Graph, euclidean_weight

__all__ = [
    "Graph",
    "euclidean_weight",
    "node_degrees",
    "select_connected_nodes",
    "bounding_box",
    "normalize_coordinates",
    "assemble_graph",
    "shortest_path",
]
