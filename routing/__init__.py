#Marks routing as a package.
#Re-exports the public route-planning API (plan_route, nearest, compute_midpoint,
#RoutePolicy, route metrics) so other modules import from routing without knowing internal file names.
#No business logic.

from .planner import compute_midpoint, nearest, plan_route
from .policy import RoutePolicy, default_route_policy, scalar_route_policy
from .metrics import route_length, route_segments

__all__ = [
           "compute_midpoint",
           "nearest",
             "plan_route",
             "RoutePolicy",
             "default_route_policy",
             "scalar_route_policy",
             "route_length",
             "route_segments",
             ]
