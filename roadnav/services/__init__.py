"""Services layer - Application orchestration.

Available services:
- NavigationService: Imports graphs and answers route queries
- GraphEditor: Command interface for graph mutations
- convert_osm_to_poly: OSM to poly file conversion
"""

from .converter import convert_osm_to_poly
from .editing_service import (
    AddEdge,
    AddNode,
    EditCommand,
    EditOutcome,
    GraphEditor,
    RemoveElement,
)
from .navigation_service import NavigationService

__all__ = [
    "NavigationService",
    "GraphEditor",
    "AddNode",
    "AddEdge",
    "RemoveElement",
    "EditCommand",
    "EditOutcome",
    "convert_osm_to_poly",
]
