# overlay.py
import math
from typing import Optional, Tuple, Union

import numpy as np
from PIL import Image

from .canvas import transparency_to_alpha
from .config import DEFAULT_CONFIG, OverlayConfig
from .geo import BoundingBox, FourCornerFootprint, Footprint, GeoPoint, TwoCornerFootprint
from .imagery_io import fit_image
from .imagery_math import derive_corners
from .logging_config import get_logger
from .projection import PixelLookup
from .transform import ScreenTransform, build_transform, source_quad_for

logger = get_logger(__name__)

PointLike = Union[GeoPoint, Tuple[float, float]]


def _as_geo_point(point: PointLike) -> GeoPoint:
    if isinstance(point, GeoPoint):
        return point
    lat, lon = point
    return GeoPoint(float(lat), float(lon))


class GroundOverlay:
    """
    An image placed on the map by its corners, either top-left and
    bottom-right only or all four, and drawn warped onto a canvas for the
    current view.
    """
    def __init__(self, config: Optional[OverlayConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self._image: Optional[Image.Image] = None
        self._downscale_factor: float = 1.0
        self._footprint: Optional[Footprint] = None
        self._bounds: Optional[BoundingBox] = None
        self._bearing: float = 0.0
        self._transparency: float = 0.0
        self._alpha: int = 255
        self._source_quad: Optional[np.ndarray] = None
        self._source_quad_key: Optional[tuple] = None
        self.set_transparency(0.0)

    # image
    def set_image(self, image: Image.Image) -> None:
        self._image, self._downscale_factor = fit_image(image, self.config.max_dimension)
        self._invalidate_source_quad()

    @property
    def image(self) -> Optional[Image.Image]:
        return self._image

    @property
    def downscale_factor(self) -> float:
        return self._downscale_factor

    # paint
    def set_bearing(self, bearing: float) -> None:
        self._bearing = bearing

    @property
    def bearing(self) -> float:
        return self._bearing

    def set_transparency(self, transparency: float) -> None:
        self._transparency = transparency
        self._alpha = transparency_to_alpha(transparency)

    @property
    def transparency(self) -> float:
        return self._transparency

    @property
    def alpha(self) -> int:
        return self._alpha

    # position
    def set_position(self, *corners: PointLike) -> None:
        """
        set_position(top_left, bottom_right) or
        set_position(top_left, top_right, bottom_right, bottom_left)
        """
        points = [_as_geo_point(c) for c in corners]
        if len(points) == 2:
            self._set_footprint(TwoCornerFootprint(*points))
        elif len(points) == 4:
            self._set_footprint(FourCornerFootprint(*points))
        else:
            raise TypeError(f"set_position takes 2 or 4 corners, got {len(points)}")

    def set_position_anchor(self, bottom_left: PointLike,
                            resolution: float,
                            azimuth_deg: float) -> None:
        """
        Place the image with its bottom-left corner on `bottom_left`, at
        `resolution` pixels per meter, rotated clockwise from north.
        """
        if self._image is None:
            logger.warning("Cannot place overlay from an anchor before an image is set")
            return
        anchor = _as_geo_point(bottom_left)
        # the stored image may be smaller than the one the resolution refers to
        effective_resolution = resolution / self._downscale_factor
        top_left, bottom_right, top_right = derive_corners(
            anchor,
            self._image.width,
            self._image.height,
            effective_resolution,
            math.radians(azimuth_deg),
            self.config.equatorial_radius_m,
            self.config.polar_radius_m,
        )
        self._set_footprint(FourCornerFootprint(top_left, top_right, bottom_right, anchor))

    def _set_footprint(self, footprint: Footprint) -> None:
        self._footprint = footprint
        self._bounds = footprint.bounding_box()
        self._invalidate_source_quad()

    @property
    def footprint(self) -> Optional[Footprint]:
        return self._footprint

    @property
    def bounds(self) -> Optional[BoundingBox]:
        return self._bounds

    @property
    def top_left(self) -> Optional[GeoPoint]:
        return self._footprint.top_left if self._footprint else None

    @property
    def bottom_right(self) -> Optional[GeoPoint]:
        return self._footprint.bottom_right if self._footprint else None

    @property
    def top_right(self) -> Optional[GeoPoint]:
        if isinstance(self._footprint, FourCornerFootprint):
            return self._footprint.top_right
        return None

    @property
    def bottom_left(self) -> Optional[GeoPoint]:
        if isinstance(self._footprint, FourCornerFootprint):
            return self._footprint.bottom_left
        return None

    # drawing
    def _invalidate_source_quad(self) -> None:
        self._source_quad = None
        self._source_quad_key = None

    def source_quad(self) -> np.ndarray:
        key = (id(self._image), self._image.size)
        if self._source_quad is None or self._source_quad_key != key:
            self._source_quad = source_quad_for(self._image.size)
            self._source_quad_key = key
        return self._source_quad

    def compute_transform(self, pixel_lookup: PixelLookup) -> ScreenTransform:
        if self._image is None or self._footprint is None:
            raise ValueError("Overlay needs an image and a position to compute a transform")
        quad = None
        if isinstance(self._footprint, FourCornerFootprint):
            quad = self.source_quad()
        return build_transform(self._footprint, self._image.size, pixel_lookup, quad)

    def draw(self, canvas, pixel_lookup: PixelLookup) -> bool:
        """
        Draw onto anything with a draw_image(image, transform, alpha) method.
        Returns False when there is nothing to draw yet.
        """
        if self._image is None or self._footprint is None:
            return False
        canvas.draw_image(self._image, self.compute_transform(pixel_lookup), self._alpha)
        return True
