"""File formats understood by roadnav.

Readers return a RawNetwork: nodes with their source coordinates and
edges between internal ids, before any filtering or normalization.
"""

from .osm_format import parse_osm, read_osm
from .poly_format import format_poly, parse_poly, read_poly, write_poly

__all__ = [
    "parse_poly",
    "read_poly",
    "format_poly",
    "write_poly",
    "parse_osm",
    "read_osm",
]
