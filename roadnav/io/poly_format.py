"""Reading and writing the vertex/edge text ("poly") format.

Layout, whitespace separated::

    <vertex_count> <dimension> <attribute_count> <boundary_flag>
    <id> <x> <y> [ignored columns]          (vertex_count lines)
    <edge_count> <boundary_flag>
    <edge_id> <from_id> <to_id> <directed>  (edge_count lines)
    0

Vertex ids in the file may be sparse; they are mapped to dense internal
ids in file order and kept as ``external_id``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Optional, Tuple, TypeVar, Union

from ..domain.errors import GraphFormatError, GraphIOError
from ..domain.models import Node, RawEdge, RawNetwork

logger = logging.getLogger(__name__)

T = TypeVar("T")
_Line = Tuple[int, List[str]]


def _numbered_lines(text: str) -> Iterator[_Line]:
    for line_number, line in enumerate(text.splitlines(), start=1):
        parts = line.split()
        if parts:
            yield line_number, parts


def _next_line(lines: Iterator[_Line], what: str, source: Optional[str]) -> _Line:
    try:
        return next(lines)
    except StopIteration:
        raise GraphFormatError(
            f"Unexpected end of file while reading {what}", file_path=source
        ) from None


def _number(
    convert: Callable[[str], T],
    value: str,
    what: str,
    line_number: int,
    source: Optional[str],
) -> T:
    try:
        return convert(value)
    except ValueError as e:
        raise GraphFormatError(
            f"Invalid {what} {value!r}",
            cause=e,
            file_path=source,
            line_number=line_number,
        )


def parse_poly(text: str, source: Optional[str] = None) -> RawNetwork:
    """Parse poly content into a raw network.

    Args:
        text: The whole file content.
        source: Name used in log records and error messages.

    Returns:
        The raw nodes and edges, coordinates untouched.

    Raises:
        GraphFormatError: On a missing or malformed header, a truncated
            section or a non-numeric field in a required column.
    """
    lines = _numbered_lines(text)
    network = RawNetwork(source=source)
    internal_ids: Dict[int, int] = {}

    line_number, header = _next_line(lines, "the vertex header", source)
    if len(header) < 4:
        raise GraphFormatError(
            "Malformed vertex header", file_path=source, line_number=line_number
        )
    vertex_count = _number(int, header[0], "vertex count", line_number, source)
    if vertex_count < 0:
        raise GraphFormatError(
            "Negative vertex count", file_path=source, line_number=line_number
        )

    for read in range(vertex_count):
        line_number, parts = _next_line(
            lines, f"vertex {read + 1} of {vertex_count}", source
        )
        if len(parts) < 3:
            logger.warning(
                "Skipping malformed vertex line",
                extra={"source": source, "line": line_number},
            )
            continue
        file_id = _number(int, parts[0], "vertex id", line_number, source)
        x = _number(float, parts[1], "x coordinate", line_number, source)
        y = _number(float, parts[2], "y coordinate", line_number, source)
        if file_id in internal_ids:
            logger.warning(
                "Skipping duplicate vertex id",
                extra={"source": source, "line": line_number, "vertex_id": file_id},
            )
            continue
        node_id = len(network.nodes)
        internal_ids[file_id] = node_id
        network.nodes.append(Node(node_id, x, y, external_id=file_id))

    line_number, header = _next_line(lines, "the edge header", source)
    if len(header) < 2:
        raise GraphFormatError(
            "Malformed edge header", file_path=source, line_number=line_number
        )
    edge_count = _number(int, header[0], "edge count", line_number, source)
    if edge_count < 0:
        raise GraphFormatError(
            "Negative edge count", file_path=source, line_number=line_number
        )

    for read in range(edge_count):
        line_number, parts = _next_line(
            lines, f"edge {read + 1} of {edge_count}", source
        )
        if len(parts) < 4:
            logger.warning(
                "Skipping malformed edge line",
                extra={"source": source, "line": line_number},
            )
            continue
        from_id = _number(int, parts[1], "edge origin", line_number, source)
        to_id = _number(int, parts[2], "edge target", line_number, source)
        directed = _number(int, parts[3], "direction flag", line_number, source) != 0
        if from_id not in internal_ids or to_id not in internal_ids:
            logger.warning(
                "Skipping edge with unknown endpoint",
                extra={"source": source, "line": line_number, "from": from_id, "to": to_id},
            )
            continue
        network.edges.append(RawEdge(internal_ids[from_id], internal_ids[to_id], directed))

    trailer = next(lines, None)
    if trailer is None or trailer[1] != ["0"]:
        logger.warning("Missing terminal 0 line", extra={"source": source})

    logger.debug(
        "Poly file parsed",
        extra={"source": source, "nodes": len(network.nodes), "edges": len(network.edges)},
    )
    return network


def read_poly(path: Union[str, Path]) -> RawNetwork:
    """Read and parse a poly file.

    Raises:
        GraphIOError: If the file cannot be read.
        GraphFormatError: If its content is malformed.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise GraphFormatError("File is not valid UTF-8 text", cause=e, file_path=str(path))
    except OSError as e:
        raise GraphIOError(f"Cannot read {path}", cause=e, file_path=str(path))
    return parse_poly(text, source=str(path))


def format_poly(network: RawNetwork) -> str:
    """Render ``network`` in the poly layout, tab separated."""
    out = [f"{len(network.nodes)}\t2\t0\t1"]
    out.extend(f"{node.id:d}\t{node.x:.6f}\t{node.y:.6f}" for node in network.nodes)
    out.append(f"{len(network.edges):d}\t1")
    out.extend(
        f"{index:d}\t{edge.u:d}\t{edge.v:d}\t{int(edge.directed):d}"
        for index, edge in enumerate(network.edges)
    )
    out.append("0")
    return "\n".join(out) + "\n"


def write_poly(network: RawNetwork, path: Union[str, Path]) -> Path:
    """Write ``network`` to ``path`` in the poly layout.

    Raises:
        GraphIOError: If the file cannot be written.
    """
    path = Path(path)
    try:
        path.write_text(format_poly(network), encoding="utf-8")
    except OSError as e:
        raise GraphIOError(f"Cannot write {path}", cause=e, file_path=str(path))
    logger.info(
        "Poly file written",
        extra={"path": str(path), "nodes": len(network.nodes), "edges": len(network.edges)},
    )
    return path
