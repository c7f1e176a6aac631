"""
Purpose: Central configuration for the route planner.
What it does:

Stores the tunables for route construction:

VECTORIZE_THRESHOLD = 64 (pool size at which nearest-point search switches to numpy)

LOG_STEPS = False (per-step debug logging)

Rule: No logic here, just parameters so you can tune without rewriting code.
Changing these never changes the route produced, only how fast it is found
and how much gets logged.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RoutePolicy:
    """
    Central configuration for route planning.
    """

    # --- Nearest-point search strategy ---
    # Pools smaller than this are scanned with a plain Python loop,
    # larger ones with a single vectorised numpy pass.
    vectorize_threshold: int = 64

    # --- Diagnostics ---
    # Log every head/tail decision at DEBUG level.
    log_steps: bool = False

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.vectorize_threshold < 1:
            raise ValueError("vectorize_threshold must be >= 1")


def default_route_policy() -> RoutePolicy:
    """
    Convenience factory for the default policy.
    """
    p = RoutePolicy()
    p.validate()
    return p


def scalar_route_policy() -> RoutePolicy:
    """
    Never vectorise. Useful for tiny inputs and for comparing strategies.
    """
    p = RoutePolicy(vectorize_threshold=2 ** 31)
    p.validate()
    return p
