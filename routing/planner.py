"""
Purpose: Order a set of points into a visitable route.
What it does:

Builds the route "middle out" in a single pass:

1) take the point nearest the bounding-box centre of the set
2) append the point nearest to it (route now has a head and a tail)
3) repeatedly take the unused point nearest to EITHER end and attach it
   to that end, until every point is placed

This is a greedy heuristic, not a shortest-route solver: no backtracking,
and only the two current ends are ever considered.

Contract:
- the result is a new list containing every input point exactly once
- the caller's collection is never modified
- 0 points -> [], 1 point -> [that point]
- ties are deterministic: nearest() keeps the FIRST point in iteration
  order, and an equal head/tail distance extends the tail
- preconditions (not checked): unique ids, finite coordinates

Rule: No I/O. Pure function of its input.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from typing import Deque, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from vendors.models import Locatable
from .policy import RoutePolicy, default_route_policy

logger = logging.getLogger(__name__)

XY = Tuple[float, float]
NearestResult = Tuple[Hashable, float]


def compute_midpoint(points: Iterable[Locatable]) -> XY:
    """
    Centre of the axis-aligned bounding box of the points.
    Not the centroid of the points.
    """
    points = list(points)
    if not points:
        raise ValueError("compute_midpoint needs at least one point")

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return ((min(xs) + max(xs)) / 2, (min(ys) + max(ys)) / 2)


def nearest(
        points: Sequence[Locatable],
        target: XY,
        *,
        vectorize_threshold: Optional[int] = None,
) -> Optional[NearestResult]:
    """
    Find the point closest (Euclidean) to target.

    Returns (id, distance), or None for an empty sequence.
    On exact ties the point appearing first in `points` wins.

    vectorize_threshold: if given and len(points) >= it, the search runs as
    one numpy pass. Both paths return identical results.
    """
    if not points:
        return None

    if vectorize_threshold is not None and len(points) >= vectorize_threshold:
        return _nearest_vectorized(points, target)
    return _nearest_scan(points, target)


def _nearest_scan(points: Sequence[Locatable], target: XY) -> NearestResult:
    x, y = target
    best_id = None
    best_distance = None

    for point in points:
        dx = x - point.x
        dy = y - point.y
        distance = math.sqrt((dx * dx) + (dy * dy))
        #strict < keeps the earlier point on a tie
        if best_distance is None or distance < best_distance:
            best_id, best_distance = point.id, distance

    return best_id, best_distance


def _nearest_vectorized(points: Sequence[Locatable], target: XY) -> NearestResult:
    x, y = target
    count = len(points)
    xs = np.fromiter((p.x for p in points), dtype=float, count=count)
    ys = np.fromiter((p.y for p in points), dtype=float, count=count)

    dx = x - xs
    dy = y - ys
    distances = np.sqrt((dx * dx) + (dy * dy))

    #argmin returns the first index among equal minima
    index = int(np.argmin(distances))
    return points[index].id, float(distances[index])


class _RoutePool:
    """
    Points not yet placed on the route, keyed by id.

    Owns a private copy of the caller's points; dict insertion order keeps
    the caller's iteration order for tie-breaking.
    """
    def __init__(self, points: Iterable[Locatable], policy: RoutePolicy):
        self._points: Dict[Hashable, Locatable] = {}
        for point in points:
            self._points[point.id] = point
        self._policy = policy

    def __len__(self) -> int:
        return len(self._points)

    def remaining(self) -> List[Locatable]:
        return list(self._points.values())

    def nearest_to(self, target: XY, candidates: Optional[List[Locatable]] = None) -> NearestResult:
        return nearest(
            candidates if candidates is not None else self.remaining(),
            target,
            vectorize_threshold=self._policy.vectorize_threshold,
        )

    def extract(self, point_id: Hashable) -> Locatable:
        """Remove and return the point with this id."""
        return self._points.pop(point_id)


def plan_route(points: Iterable[Locatable], policy: Optional[RoutePolicy] = None) -> List[Locatable]:
    """
    Return the points reordered into a (probably) better route.

    Args:
        points: any iterable of objects with .id, .x, .y (Point, Vendor, ...)
        policy: RoutePolicy, defaults to default_route_policy()

    Returns:
        a new list holding every input point exactly once
    """
    policy = policy or default_route_policy()
    pool = _RoutePool(points, policy)

    #nowhere to go
    if len(pool) < 2:
        return pool.remaining()

    total = len(pool)

    #find middle point and start the route with it
    middle_id, _ = pool.nearest_to(compute_midpoint(pool.remaining()))
    middle = pool.extract(middle_id)
    route: Deque[Locatable] = deque([middle])

    #next point closest to the middle one gives the route a head and a tail
    second_id, _ = pool.nearest_to((middle.x, middle.y))
    route.append(pool.extract(second_id))

    #grow at whichever end is closer to an unused point until the pool is empty
    while len(pool):
        _extend_route(pool, route, policy)

    logger.info(f"Planned route through {total} points")
    return list(route)


def _extend_route(pool: _RoutePool, route: Deque[Locatable], policy: RoutePolicy) -> None:
    """
    Attach one pool point to the head or tail of the route, whichever end
    it is closer to. Equal distances extend the tail.
    """
    head, tail = route[0], route[-1]
    candidates = pool.remaining()

    head_id, head_distance = pool.nearest_to((head.x, head.y), candidates)
    tail_id, tail_distance = pool.nearest_to((tail.x, tail.y), candidates)

    if head_distance < tail_distance:
        route.appendleft(pool.extract(head_id))
        if policy.log_steps:
            logger.debug(f"head <- {head_id} ({head_distance:.1f})")
    else:
        route.append(pool.extract(tail_id))
        if policy.log_steps:
            logger.debug(f"tail <- {tail_id} ({tail_distance:.1f})")
