"""
Purpose: Core data models for the vendors domain.
What it does:
Defines the planar Point the route planner works with and the Vendor record
built from the downloaded vendor list.

Rule: No HTTP calls, no projection math, no route logic. Models only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Protocol


class Locatable(Protocol):
    """
    Anything the route planner can order: a stable id plus planar x/y.
    Point and Vendor both satisfy it.
    """
    id: Hashable
    x: float
    y: float


@dataclass(frozen=True)
class Point:
    """
    A labelled point on the map plane (pixel coordinates).
    """
    id: Hashable
    x: float
    y: float


@dataclass(frozen=True)
class Vendor:
    """
    A single vendor (food truck / cart) placed on the map.

    id is assigned once when the vendor list is loaded (1-based position in
    the downloaded list) and never changes afterwards.
    """
    id: int
    x: float
    y: float

    name: str = ""
    menu: str = ""
    location: str = ""

    # source geographic coordinates, kept for display/export
    latitude: float = 0.0
    longitude: float = 0.0

    def search_text(self) -> str:
        """Text the search filter matches tokens against."""
        return f"{self.name} {self.menu} {self.location} food trucks carts".lower()

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "menu": self.menu,
            "location": self.location,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "x": self.x,
            "y": self.y,
        }
