"""Top-level package for roadnav.

roadnav reads road networks (vertex/edge text files or OSM XML), keeps
their well-connected core in an in-memory weighted graph and answers
shortest-path queries on it.
"""

from .domain.models import Edge, Node, PathResult
from .graph.dijkstra import shortest_path
from .graph.store import Graph

__all__ = ["Graph", "Node", "Edge", "PathResult", "shortest_path"]
