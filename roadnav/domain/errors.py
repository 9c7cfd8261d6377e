"""Typed domain errors for roadnav.

Ingestion failures are split between format problems (the file was read
but its content is unusable) and I/O problems (the file could not be read
at all), so callers can report them differently.

All errors inherit from RoadnavError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoadnavError(Exception):
    """Base error for the roadnav domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphFormatError(RoadnavError):
    """The input is readable but does not follow the expected format.

    Raised for missing headers, truncated sections and unparsable numeric
    fields in required positions.

    Attributes:
        file_path: Path of the offending file, if known
        line_number: 1-based line number of the offending line, if known
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None

    def __str__(self) -> str:
        location = ""
        if self.file_path:
            location = f" ({self.file_path}"
            if self.line_number is not None:
                location += f", line {self.line_number}"
            location += ")"
        elif self.line_number is not None:
            location = f" (line {self.line_number})"
        text = f"{self.message}{location}"
        if self.cause:
            return f"{text}: {self.cause}"
        return text


@dataclass
class GraphIOError(RoadnavError):
    """A graph file could not be read or written.

    Attributes:
        file_path: Path to the file that failed
    """

    file_path: Optional[str] = None


@dataclass
class UnsupportedFormatError(RoadnavError):
    """No loader is registered for the file's extension.

    Attributes:
        suffix: The unrecognised file suffix
    """

    suffix: str = ""


@dataclass
class NodeNotFoundError(RoadnavError):
    """Node identifier not present in the graph.

    Attributes:
        node_id: The identifier that was not found
    """

    node_id: Optional[int] = None


@dataclass
class NoRouteFoundError(RoadnavError):
    """No path exists between the requested nodes.

    Attributes:
        start: Start node identifier
        end: End node identifier
    """

    start: Optional[int] = None
    end: Optional[int] = None


@dataclass
class ConfigurationError(RoadnavError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
