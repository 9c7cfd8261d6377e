"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- PolyGraphLoader: Loads graphs from vertex/edge text files
- OsmGraphLoader: Loads graphs from OSM XML files
- DijkstraPathFinder: Finds shortest paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraPathFinder
from .osm_loader import OsmGraphLoader
from .poly_loader import PolyGraphLoader

__all__ = ["PolyGraphLoader", "OsmGraphLoader", "DijkstraPathFinder"]
