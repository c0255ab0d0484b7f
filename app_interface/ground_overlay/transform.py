# transform.py
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import cv2
import numpy as np

from .geo import FourCornerFootprint, Footprint, TwoCornerFootprint
from .logging_config import get_logger
from .projection import PixelLookup

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class ScreenTransform:
    """
    Image-to-screen mapping as a 3x3 homogeneous matrix.
    """
    matrix: np.ndarray

    @property
    def is_affine(self) -> bool:
        return bool(np.array_equal(self.matrix[2], [0.0, 0.0, 1.0]))

    def as_affine(self) -> Tuple[float, float, float, float, float, float]:
        """
        (a, b, c, d, e, f) such that x' = a*x + b*y + c and y' = d*x + e*y + f.
        """
        if not self.is_affine:
            raise ValueError("Perspective transform has no affine form")
        (a, b, c), (d, e, f) = self.matrix[:2]
        return float(a), float(b), float(c), float(d), float(e), float(f)

    def map_points(self, points: Sequence[Tuple[float, float]]) -> np.ndarray:
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        homogeneous = np.hstack([pts, np.ones((len(pts), 1))]) @ self.matrix.T
        with np.errstate(divide="ignore", invalid="ignore"):
            return homogeneous[:, :2] / homogeneous[:, 2:]

    def map_point(self, x: float, y: float) -> Tuple[float, float]:
        mx, my = self.map_points([(x, y)])[0]
        return float(mx), float(my)


def source_quad_for(size: Tuple[int, int]) -> np.ndarray:
    """
    Image corners in its own pixel space, clockwise from top-left.
    """
    width, height = size
    return np.float32([[0, 0], [width, 0], [width, height], [0, height]])


def _scale_translate(size: Tuple[int, int],
                     footprint: TwoCornerFootprint,
                     pixel_lookup: PixelLookup) -> ScreenTransform:
    x0, y0 = pixel_lookup(footprint.top_left.latitude, footprint.top_left.longitude)
    x1, y1 = pixel_lookup(footprint.bottom_right.latitude, footprint.bottom_right.longitude)
    width, height = size
    with np.errstate(divide="ignore", invalid="ignore"):
        scale_x = np.float64(x1 - x0) / width
        scale_y = np.float64(y1 - y0) / height
    return ScreenTransform(np.array([[scale_x, 0.0, x0],
                                     [0.0, scale_y, y0],
                                     [0.0, 0.0, 1.0]], dtype=np.float64))


def _quad_to_quad(footprint: FourCornerFootprint,
                  pixel_lookup: PixelLookup,
                  source_quad: np.ndarray) -> ScreenTransform:
    dst = np.array([pixel_lookup(p.latitude, p.longitude) for p in footprint.corners()],
                   dtype=np.float64)
    # getPerspectiveTransform works in float32, long pixels at high zoom
    # need the destination moved next to the origin first
    origin = dst[0].copy()
    relative = cv2.getPerspectiveTransform(np.float32(source_quad),
                                           np.float32(dst - origin))
    shift = np.array([[1.0, 0.0, origin[0]],
                      [0.0, 1.0, origin[1]],
                      [0.0, 0.0, 1.0]])
    return ScreenTransform(shift @ relative)


def build_transform(footprint: Footprint,
                    image_size: Tuple[int, int],
                    pixel_lookup: PixelLookup,
                    source_quad: Optional[np.ndarray] = None) -> ScreenTransform:
    """
    Transform that draws an image of `image_size` pixels onto `footprint`
    for the view behind `pixel_lookup`.

    A two-corner footprint gives an axis-aligned scale and translation; a
    four-corner one gives the projective mapping of the image corners onto
    the screen quadrilateral. Valid for one view state only.
    """
    if isinstance(footprint, TwoCornerFootprint):
        logger.debug("Two-corner transform for image %sx%s", *image_size)
        return _scale_translate(image_size, footprint, pixel_lookup)
    if isinstance(footprint, FourCornerFootprint):
        logger.debug("Four-corner transform for image %sx%s", *image_size)
        if source_quad is None:
            source_quad = source_quad_for(image_size)
        return _quad_to_quad(footprint, pixel_lookup, source_quad)
    raise TypeError(f"Unsupported footprint type {type(footprint).__name__}")
