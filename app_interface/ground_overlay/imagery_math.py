# imagery_math.py
import math
from typing import Tuple

import numpy as np

from .geo import GeoPoint
from .logging_config import get_logger

logger = get_logger(__name__)

EQUATORIAL_RADIUS_M = 6378137.0
POLAR_RADIUS_M = 6356752.314


def ground_resolution(alt_m: float,
                      sensor_mm: float,
                      focal_mm: float,
                      img_px: int) -> float:
    """
    Ground resolution (pixels per meter) of a nadir camera shot.
    """
    # GSD in m/pix, inverted
    return (focal_mm * img_px) / (alt_m * sensor_mm)


def earth_radius_at(lat_deg: float,
                    equatorial_radius: float = EQUATORIAL_RADIUS_M,
                    polar_radius: float = POLAR_RADIUS_M) -> float:
    """
    Radius of the ellipsoid at the given latitude, in meters.
    """
    lat = math.radians(lat_deg)
    return math.sqrt(equatorial_radius ** 2 * math.cos(lat) ** 2 +
                     polar_radius ** 2 * math.sin(lat) ** 2)


def meters_to_degrees(dx_m: float, dy_m: float,
                      lat_deg: float, radius_m: float) -> Tuple[float, float]:
    """
    Convert an east/north offset in meters into a (d_lat, d_lon) offset,
    treating the earth as flat around `lat_deg`.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        circumference = 2 * np.pi * np.float64(radius_m)
        d_lon = 360 * np.float64(dx_m) / (circumference * np.cos(np.radians(lat_deg)))
        d_lat = 360 * np.float64(dy_m) / circumference
    return float(d_lat), float(d_lon)


def derive_corners(anchor: GeoPoint,
                   width_px: int,
                   height_px: int,
                   resolution: float,
                   azimuth_rad: float,
                   equatorial_radius: float = EQUATORIAL_RADIUS_M,
                   polar_radius: float = POLAR_RADIUS_M
                   ) -> Tuple[GeoPoint, GeoPoint, GeoPoint]:
    """
    Locate the remaining corners of an image whose bottom-left corner sits
    on `anchor`, given its ground resolution (px/m) and its clockwise
    rotation from north.

    Returns (top_left, bottom_right, top_right). Both edge offsets are
    converted with the radius at the anchor latitude, which is only good
    for footprints of modest size.
    """
    radius = earth_radius_at(anchor.latitude, equatorial_radius, polar_radius)

    with np.errstate(divide="ignore", invalid="ignore"):
        height_m = np.float64(height_px) / resolution
        width_m = np.float64(width_px) / resolution

        # bottom-left -> top-left
        d_lat_h, d_lon_h = meters_to_degrees(np.sin(azimuth_rad) * height_m,
                                             np.cos(azimuth_rad) * height_m,
                                             anchor.latitude, radius)
        # bottom-left -> bottom-right
        d_lat_w, d_lon_w = meters_to_degrees(np.cos(azimuth_rad) * width_m,
                                             -np.sin(azimuth_rad) * width_m,
                                             anchor.latitude, radius)

    top_left = anchor.shifted(d_lat_h, d_lon_h)
    bottom_right = anchor.shifted(d_lat_w, d_lon_w)
    top_right = bottom_right.shifted(d_lat_h, d_lon_h)
    logger.debug("Derived corners from %s: %.1fm x %.1fm at %.4f rad",
                 anchor, float(width_m), float(height_m), azimuth_rad)
    return top_left, bottom_right, top_right
