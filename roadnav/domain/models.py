"""Domain models for road networks.

Edges and path results are frozen dataclasses with slots. Nodes stay
mutable because coordinate normalization rewrites them in place before
they are registered into a graph.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(slots=True)
class Node:
    """A network vertex.

    Attributes:
        id: Dense zero-based identifier assigned at ingestion time
        x: Horizontal coordinate (raw longitude or file x before normalization)
        y: Vertical coordinate (raw latitude or file y before normalization)
        label: Display label, defaults to the identifier
        external_id: Identifier used by the source file, if any
    """

    id: int
    x: float
    y: float
    label: str = ""
    external_id: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.label:
            self.label = str(self.id)


@dataclass(frozen=True, slots=True)
class Edge:
    """One adjacency record from ``u`` to ``v``.

    An undirected connection is stored as two records sharing the same
    weight, both with ``directed=False``.
    """

    u: int
    v: int
    weight: float
    directed: bool = False

    @property
    def label(self) -> str:
        """Weight formatted for display."""
        return f"{self.weight:.1f}"


@dataclass(frozen=True, slots=True)
class RawEdge:
    """An edge as parsed from a source file, before weighting."""

    u: int
    v: int
    directed: bool = False


@dataclass(slots=True)
class RawNetwork:
    """Reader output: raw nodes and raw edges in discovery order.

    Attributes:
        nodes: Nodes with their source coordinates
        edges: Edges between internal node identifiers
        source: Where the network was read from, for diagnostics
    """

    nodes: List[Node] = field(default_factory=list)
    edges: List[RawEdge] = field(default_factory=list)
    source: Optional[str] = None


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned extent of a set of nodes."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query.

    Attributes:
        path: Ordered node identifiers from start to end, empty if unreachable
        cost: Total path weight, ``inf`` when no path exists
        elapsed_ms: Wall-clock time spent searching, in milliseconds
        nodes_explored: Number of nodes settled during the search
    """

    path: tuple[int, ...]
    cost: float
    elapsed_ms: float = 0.0
    nodes_explored: int = 0

    @property
    def is_empty(self) -> bool:
        """Check if no path was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of nodes on the path."""
        return len(self.path)
