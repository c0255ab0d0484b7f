# projection.py
import math
from dataclasses import dataclass, replace
from typing import Callable, Tuple

from .geo import GeoPoint

# (lat, lon) -> screen (x, y) for one view state
PixelLookup = Callable[[float, float], Tuple[float, float]]

MAX_LATITUDE = 85.05112877980659
MIN_LATITUDE = -MAX_LATITUDE


def _to_long_pixel(value: float):
    # non-finite input passes through so degenerate footprints never raise
    return round(value) if math.isfinite(value) else value


@dataclass(frozen=True)
class MapView:
    """
    Web-Mercator view at a fixed zoom, scrolled by (offset_x, offset_y)
    pixels. Pixel coordinates are not wrapped around the antimeridian.
    """
    zoom: float
    offset_x: int = 0
    offset_y: int = 0
    tile_size: int = 256

    @property
    def map_size(self) -> float:
        return self.tile_size * 2 ** self.zoom

    def long_pixel_x(self, longitude: float) -> int:
        x = (longitude + 180) / 360 * self.map_size
        return _to_long_pixel(x) - self.offset_x

    def long_pixel_y(self, latitude: float) -> int:
        lat = min(max(latitude, MIN_LATITUDE), MAX_LATITUDE)
        sin_lat = math.sin(math.radians(lat))
        y = (0.5 - math.log((1 + sin_lat) / (1 - sin_lat)) / (4 * math.pi)) * self.map_size
        return _to_long_pixel(y) - self.offset_y

    def pixel_lookup(self, latitude: float, longitude: float) -> Tuple[int, int]:
        return self.long_pixel_x(longitude), self.long_pixel_y(latitude)

    def center_on(self, point: GeoPoint, width: int, height: int) -> "MapView":
        """
        Return a view of the same zoom with `point` in the middle of a
        width x height screen.
        """
        scrolled = replace(self, offset_x=0, offset_y=0)
        x, y = scrolled.pixel_lookup(point.latitude, point.longitude)
        return replace(self, offset_x=x - width // 2, offset_y=y - height // 2)
