"""Rescaling of node coordinates into the rendering space.

Coordinates are shifted to the origin, divided by a reduction factor and
flipped vertically so that larger raw ``y`` values end up at the top of
a top-left-origin canvas. This is not a geographic projection.
"""

from __future__ import annotations

from typing import Sequence

from ..domain.models import BoundingBox, Node

DEFAULT_REDUCTION_FACTOR = 2.0


def bounding_box(nodes: Sequence[Node]) -> BoundingBox:
    """Extent of ``nodes``; raises ValueError on an empty sequence."""
    if not nodes:
        raise ValueError("bounding box of an empty node set")
    xs = [node.x for node in nodes]
    ys = [node.y for node in nodes]
    return BoundingBox(min(xs), min(ys), max(xs), max(ys))


def normalize_coordinates(
    nodes: Sequence[Node], reduction_factor: float = DEFAULT_REDUCTION_FACTOR
) -> None:
    """Rescale and flip the coordinates of ``nodes`` in place."""
    if not nodes:
        return

    box = bounding_box(nodes)
    for node in nodes:
        node.x = (node.x - box.min_x) / reduction_factor
        node.y = (node.y - box.min_y) / reduction_factor

    new_max_y = max(node.y for node in nodes)
    for node in nodes:
        node.y = new_max_y - node.y
