# validation.py
#
# Opt-in checks around the transform builder. The builder itself never
# rejects input; callers that prefer an error over a degenerate drawing
# go through validated_transform() instead.
import math
from typing import Optional, Tuple

import numpy as np
from shapely.geometry import Polygon

from .geo import FourCornerFootprint, Footprint
from .projection import PixelLookup
from .transform import ScreenTransform, build_transform


class OverlayValidationError(ValueError):
    pass


def validate_footprint(footprint: Footprint) -> None:
    corners = footprint.corners()
    for point in corners:
        if not (math.isfinite(point.latitude) and math.isfinite(point.longitude)):
            raise OverlayValidationError(f"Non-finite corner {point}")
        if not -90.0 <= point.latitude <= 90.0:
            raise OverlayValidationError(f"Latitude out of range in {point}")

    if isinstance(footprint, FourCornerFootprint):
        quad = Polygon([(p.longitude, p.latitude) for p in corners])
        if not quad.is_valid:
            raise OverlayValidationError("Corners do not form a simple quadrilateral")
        if quad.area == 0:
            raise OverlayValidationError("Corners enclose no area")


def validated_transform(footprint: Footprint,
                        image_size: Tuple[int, int],
                        pixel_lookup: PixelLookup,
                        source_quad: Optional[np.ndarray] = None) -> ScreenTransform:
    if image_size[0] <= 0 or image_size[1] <= 0:
        raise OverlayValidationError(f"Image size must be positive, got {image_size}")
    validate_footprint(footprint)
    transform = build_transform(footprint, image_size, pixel_lookup, source_quad)
    if not np.all(np.isfinite(transform.matrix)):
        raise OverlayValidationError("Screen transform is not finite")
    return transform
