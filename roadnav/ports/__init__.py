"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the services and the adapters that
read files and run path searches, so either side can be swapped in tests.
"""

from .graph import GraphLoaderPort, PathFinderPort

__all__ = [
    "GraphLoaderPort",
    "PathFinderPort",
]
