# canvas.py
import math
from typing import Tuple

import cv2
import numpy as np
from PIL import Image

from .logging_config import get_logger
from .transform import ScreenTransform

logger = get_logger(__name__)


def transparency_to_alpha(transparency: float) -> int:
    """
    Paint alpha for a transparency fraction (0 = fully opaque).
    """
    alpha = math.floor(255 * (1 - transparency))
    return min(max(alpha, 0), 255)


class Canvas:
    """
    RGBA pixel buffer that images are composited onto, source-over.
    """
    def __init__(self, width: int, height: int,
                 background: Tuple[int, int, int, int] = (0, 0, 0, 0)):
        self.width = width
        self.height = height
        self.pixels = np.empty((height, width, 4), dtype=np.uint8)
        self.pixels[:] = background

    def draw_image(self, image: Image.Image, transform: ScreenTransform, alpha: int) -> None:
        if image.width == 0 or image.height == 0:
            return
        if not np.all(np.isfinite(transform.matrix)):
            logger.debug("Skipping draw, transform is not finite")
            return

        src = np.asarray(image.convert("RGBA"))
        warped = cv2.warpPerspective(src, transform.matrix, (self.width, self.height),
                                     flags=cv2.INTER_LINEAR,
                                     borderMode=cv2.BORDER_CONSTANT,
                                     borderValue=(0, 0, 0, 0))
        self._composite(warped, alpha / 255.0)

    def _composite(self, layer: np.ndarray, opacity: float) -> None:
        src = layer.astype(np.float32) / 255.0
        dst = self.pixels.astype(np.float32) / 255.0
        src_a = src[..., 3:4] * opacity
        dst_a = dst[..., 3:4]

        out_a = src_a + dst_a * (1.0 - src_a)
        out_rgb = src[..., :3] * src_a + dst[..., :3] * dst_a * (1.0 - src_a)
        with np.errstate(divide="ignore", invalid="ignore"):
            out_rgb = np.where(out_a > 0, out_rgb / out_a, 0.0)

        out = np.concatenate([out_rgb, out_a], axis=-1)
        self.pixels = np.clip(np.rint(out * 255.0), 0, 255).astype(np.uint8)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)

    def save(self, path: str) -> None:
        self.to_image().save(path)
