# geo.py
from dataclasses import dataclass
from typing import Iterable, Tuple, Union


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def shifted(self, d_lat: float, d_lon: float) -> "GeoPoint":
        return GeoPoint(self.latitude + d_lat, self.longitude + d_lon)


@dataclass(frozen=True)
class BoundingBox:
    north: float
    east: float
    south: float
    west: float

    @classmethod
    def enclosing(cls, points: Iterable[GeoPoint]) -> "BoundingBox":
        """
        Smallest lat/lon box containing every point.
        """
        pts = list(points)
        if not pts:
            raise ValueError("Need at least one point to build a bounding box")
        lats = [p.latitude for p in pts]
        lons = [p.longitude for p in pts]
        return cls(max(lats), max(lons), min(lats), min(lons))

    def center(self) -> GeoPoint:
        return GeoPoint((self.north + self.south) / 2,
                        (self.east + self.west) / 2)


@dataclass(frozen=True)
class TwoCornerFootprint:
    """
    Axis-aligned placement: only the top-left and bottom-right corners
    are known.
    """
    top_left: GeoPoint
    bottom_right: GeoPoint

    def corners(self) -> Tuple[GeoPoint, GeoPoint]:
        return (self.top_left, self.bottom_right)

    def bounding_box(self) -> BoundingBox:
        return BoundingBox(self.top_left.latitude, self.bottom_right.longitude,
                           self.bottom_right.latitude, self.top_left.longitude)


@dataclass(frozen=True)
class FourCornerFootprint:
    """
    General quadrilateral placement, corners clockwise from top-left.
    """
    top_left: GeoPoint
    top_right: GeoPoint
    bottom_right: GeoPoint
    bottom_left: GeoPoint

    def corners(self) -> Tuple[GeoPoint, GeoPoint, GeoPoint, GeoPoint]:
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)

    def bounding_box(self) -> BoundingBox:
        # same edges the overlay always reported, not the true envelope
        return BoundingBox(self.top_left.latitude, self.top_right.longitude,
                           self.bottom_right.latitude, self.top_left.longitude)


Footprint = Union[TwoCornerFootprint, FourCornerFootprint]
