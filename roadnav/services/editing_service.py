"""Graph editing service.

Editing requests from a front-end (click on canvas, menu entry, script)
are expressed as command objects and executed against the current
graph. Invalid requests never raise: the outcome says whether anything
changed and carries a message the front-end can show.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from ..config import GeometryConfig, get_config
from ..domain.models import Node
from ..graph.store import Graph


@dataclass(frozen=True, slots=True)
class AddNode:
    """Create a node at the given graph coordinates."""

    x: float
    y: float
    label: Optional[str] = None


@dataclass(frozen=True, slots=True)
class AddEdge:
    """Connect two existing nodes, weighted by their distance."""

    u: int
    v: int
    directed: bool = False


@dataclass(frozen=True, slots=True)
class RemoveElement:
    """Remove a node (with its edges) or a single edge.

    Exactly one of ``node_id`` and ``edge`` must be set.
    """

    node_id: Optional[int] = None
    edge: Optional[Tuple[int, int]] = None


EditCommand = Union[AddNode, AddEdge, RemoveElement]


@dataclass(frozen=True, slots=True)
class EditOutcome:
    """Result of an editing command.

    Attributes:
        success: Whether the graph changed
        message: Human-readable description of what happened
        node: The created node, for AddNode
    """

    success: bool
    message: str
    node: Optional[Node] = None


@dataclass
class GraphEditor:
    """Mutation front door for a graph.

    Attributes:
        graph: The graph being edited
        geometry: Provides the epsilon used for zero-length edges
    """

    graph: Graph
    geometry: GeometryConfig = field(default_factory=lambda: get_config().geometry)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_node(self, x: float, y: float, label: Optional[str] = None) -> Node:
        """Register a new node with the next free identifier."""
        node_id = self.graph.next_node_id()
        node = Node(node_id, x, y, label=label or "")
        self.graph.add_node(node)
        self._logger.debug("Node added", extra={"node_id": node_id, "x": x, "y": y})
        return node

    def add_edge(self, u: int, v: int, directed: bool = False) -> bool:
        """Connect ``u`` and ``v``; False for self-loops, unknown nodes or duplicates."""
        if u == v:
            return False
        added = self.graph.connect(u, v, directed, self.geometry.zero_weight_epsilon)
        if added:
            self._logger.debug(
                "Edge added", extra={"u": u, "v": v, "directed": directed}
            )
        return added

    def remove_node(self, node_id: int) -> bool:
        removed = self.graph.remove_node(node_id)
        if removed:
            self._logger.debug("Node removed", extra={"node_id": node_id})
        return removed

    def remove_edge(self, u: int, v: int) -> bool:
        removed = self.graph.remove_edge(u, v)
        if removed:
            self._logger.debug("Edge removed", extra={"u": u, "v": v})
        return removed

    def execute(self, command: EditCommand) -> EditOutcome:
        """Run an editing command and describe its outcome."""
        if isinstance(command, AddNode):
            node = self.add_node(command.x, command.y, command.label)
            return EditOutcome(True, f"Node {node.id} added.", node=node)

        if isinstance(command, AddEdge):
            if self.add_edge(command.u, command.v, command.directed):
                return EditOutcome(
                    True, f"Edge added between {command.u} and {command.v}."
                )
            return EditOutcome(
                False, f"Cannot add an edge between {command.u} and {command.v}."
            )

        if isinstance(command, RemoveElement):
            if (command.node_id is None) == (command.edge is None):
                return EditOutcome(False, "Specify either a node or an edge to remove.")
            if command.node_id is not None:
                if self.remove_node(command.node_id):
                    return EditOutcome(
                        True, f"Node {command.node_id} and its edges removed."
                    )
                return EditOutcome(False, f"Node {command.node_id} not found.")
            u, v = command.edge
            if self.remove_edge(u, v):
                return EditOutcome(True, f"Edge between {u} and {v} removed.")
            return EditOutcome(False, f"Edge between {u} and {v} not found.")

        raise TypeError(f"Unsupported editing command: {command!r}")
