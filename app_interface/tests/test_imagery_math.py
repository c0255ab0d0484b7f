# tests/test_imagery_math.py

import math
import pytest
from ground_overlay.geo import GeoPoint
from ground_overlay.imagery_math import (
    derive_corners,
    earth_radius_at,
    ground_resolution,
    EQUATORIAL_RADIUS_M,
    POLAR_RADIUS_M,
)


def deg_per_meter(radius):
    return 360 / (2 * math.pi * radius)


def test_earth_radius_at_equator_and_pole():
    assert earth_radius_at(0.0) == pytest.approx(EQUATORIAL_RADIUS_M)
    assert earth_radius_at(90.0) == pytest.approx(POLAR_RADIUS_M)
    assert POLAR_RADIUS_M < earth_radius_at(45.0) < EQUATORIAL_RADIUS_M


def test_ground_resolution_simple():
    # altitude=100m, sensor=10mm, focal=5mm, width=1000px => 20 cm/pix => 5 px/m
    assert ground_resolution(100.0, 10.0, 5.0, 1000) == pytest.approx(5.0)


def test_derive_corners_equator_example():
    # 1000x500 px at 10 px/m => 100m wide, 50m high
    anchor = GeoPoint(0.0, 0.0)
    top_left, bottom_right, top_right = derive_corners(anchor, 1000, 500, 10.0, 0.0)

    step = deg_per_meter(EQUATORIAL_RADIUS_M)
    assert top_left.latitude == pytest.approx(50 * step)
    assert top_left.longitude == 0.0
    assert bottom_right.latitude == 0.0
    assert bottom_right.longitude == pytest.approx(100 * step)
    assert top_right.latitude == pytest.approx(50 * step)
    assert top_right.longitude == pytest.approx(100 * step)


@pytest.mark.parametrize("lat,lon", [(0.0, 0.0), (45.5, 9.2), (-33.9, 151.2), (64.1, -21.9)])
def test_zero_azimuth_is_axis_aligned(lat, lon):
    anchor = GeoPoint(lat, lon)
    top_left, bottom_right, top_right = derive_corners(anchor, 640, 480, 2.5, 0.0)

    assert top_left.longitude == anchor.longitude
    assert bottom_right.latitude == anchor.latitude
    assert top_right.latitude == top_left.latitude
    assert top_right.longitude - top_left.longitude == pytest.approx(
        bottom_right.longitude - anchor.longitude)


def test_longitude_span_grows_with_latitude():
    _, br_equator, _ = derive_corners(GeoPoint(0.0, 0.0), 1000, 1000, 1.0, 0.0)
    _, br_north, _ = derive_corners(GeoPoint(60.0, 0.0), 1000, 1000, 1.0, 0.0)
    radius = earth_radius_at(60.0)
    expected = 1000 * 360 / (2 * math.pi * radius * math.cos(math.radians(60.0)))
    assert br_north.longitude == pytest.approx(expected)
    assert br_north.longitude > br_equator.longitude


def test_doubling_resolution_halves_footprint():
    anchor = GeoPoint(47.0, 8.0)
    azimuth = math.radians(30)
    tl1, br1, tr1 = derive_corners(anchor, 800, 600, 4.0, azimuth)
    tl2, br2, tr2 = derive_corners(anchor, 800, 600, 8.0, azimuth)

    for c1, c2 in [(tl1, tl2), (br1, br2), (tr1, tr2)]:
        assert (c2.latitude - anchor.latitude) == pytest.approx((c1.latitude - anchor.latitude) / 2)
        assert (c2.longitude - anchor.longitude) == pytest.approx((c1.longitude - anchor.longitude) / 2)


def test_quarter_turn_swaps_axes():
    # rotated 90 deg clockwise, the image "up" points east
    anchor = GeoPoint(0.0, 0.0)
    top_left, bottom_right, _ = derive_corners(anchor, 100, 50, 1.0, math.pi / 2)
    step = deg_per_meter(EQUATORIAL_RADIUS_M)
    assert top_left.longitude == pytest.approx(50 * step)
    assert top_left.latitude == pytest.approx(0.0, abs=1e-12)
    assert bottom_right.latitude == pytest.approx(-100 * step)
    assert bottom_right.longitude == pytest.approx(0.0, abs=1e-12)


def test_zero_resolution_is_degenerate_not_an_error():
    top_left, bottom_right, top_right = derive_corners(GeoPoint(10.0, 10.0), 100, 100, 0.0, 0.0)
    for corner in (top_left, bottom_right, top_right):
        assert not (math.isfinite(corner.latitude) and math.isfinite(corner.longitude))
