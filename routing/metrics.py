#Purpose: Route measurements for downstream use.
#Consumers draw one line between each pair of consecutive stops, so the
#segments come out in route order. The length is the open path (no return leg).

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from vendors.models import Locatable

XY = Tuple[float, float]
Segment = Tuple[XY, XY]


def route_segments(route: Sequence[Locatable]) -> List[Segment]:
    """
    ((x1, y1), (x2, y2)) for every consecutive pair of stops.
    Empty for routes with fewer than 2 stops.
    """
    return [
        ((start.x, start.y), (end.x, end.y))
        for start, end in zip(route[:-1], route[1:])
    ]


def route_length(route: Sequence[Locatable]) -> float:
    """Total length of the route in map units (pixels)."""
    return sum(
        math.hypot(x2 - x1, y2 - y1)
        for (x1, y1), (x2, y2) in route_segments(route)
    )
