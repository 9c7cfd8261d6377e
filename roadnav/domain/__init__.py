"""Domain layer - Core models and errors.

This module contains the data types and typed errors used throughout
the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphFormatError,
    GraphIOError,
    NodeNotFoundError,
    NoRouteFoundError,
    RoadnavError,
    UnsupportedFormatError,
)
from .models import BoundingBox, Edge, Node, PathResult, RawEdge, RawNetwork

__all__ = [
    # Models
    "Node",
    "Edge",
    "RawEdge",
    "RawNetwork",
    "BoundingBox",
    "PathResult",
    # Errors
    "RoadnavError",
    "GraphFormatError",
    "GraphIOError",
    "UnsupportedFormatError",
    "NodeNotFoundError",
    "NoRouteFoundError",
    "ConfigurationError",
]
