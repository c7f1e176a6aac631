"""
Purpose: Geographic -> map pixel conversion for the vendor map.
What it does:

Stores the calibration of the map image the vendors are drawn on:

MAP_WIDTH = 7195, MAP_HEIGHT = 5519 (pixels)

TOP_LAT = 37.81027, LEFT_LNG = -122.45673 (top-left corner)

HORIZONTAL_SCALE = 102500, VERTICAL_SCALE = 120000 (pixels per degree)

Approximate edge of map coordinates:
  left:   -122.45673
  right:  -122.38478
  top:      37.81027
  bottom:   37.76555
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

XY = Tuple[float, float]


@dataclass(frozen=True)
class MapProjection:
    """
    Linear lat/lng -> pixel projection anchored at the map's top-left corner.
    y grows downwards (screen convention).
    """

    map_width: float = 7195
    map_height: float = 5519

    top_lat: float = 37.81027
    left_lng: float = -122.45673

    # pixels per degree
    horizontal_scale: float = 102500
    vertical_scale: float = 120000

    def to_pixels(self, latitude: float, longitude: float) -> XY:
        x = (longitude - self.left_lng) * self.horizontal_scale
        y = (self.top_lat - latitude) * self.vertical_scale
        return (x, y)

    def contains(self, x: float, y: float) -> bool:
        """Inclusive bounds check against the map image."""
        return 0 <= x <= self.map_width and 0 <= y <= self.map_height

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.map_width <= 0 or self.map_height <= 0:
            raise ValueError("map_width and map_height must be > 0")

        if self.horizontal_scale <= 0 or self.vertical_scale <= 0:
            raise ValueError("projection scales must be > 0")


def default_projection() -> MapProjection:
    """
    Convenience factory for the San Francisco map calibration.
    """
    p = MapProjection()
    p.validate()
    return p
