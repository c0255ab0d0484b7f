# imagery_io.py
from typing import Tuple

import folium
from PIL import Image

from .geo import Footprint
from .logging_config import get_logger

logger = get_logger(__name__)


def load_image(path: str) -> Image.Image:
    return Image.open(path)


def fit_image(image: Image.Image, max_dimension: int) -> Tuple[Image.Image, float]:
    """
    Downscale `image` uniformly so that neither side exceeds `max_dimension`.

    Returns the resized image and the scale it was divided by (1.0 when it
    already fits).
    """
    width, height = image.size
    scale = 1.0
    if width > max_dimension:
        scale = width / max_dimension
    # checked against the width-derived scale, not on its own
    if height / scale > max_dimension:
        scale = height / scale / max_dimension

    if scale == 1.0:
        return image.copy(), scale

    size = (int(width / scale), int(height / scale))
    logger.debug("Downscaling image %sx%s by %.3f to %sx%s",
                 width, height, scale, size[0], size[1])
    return image.resize(size, Image.LANCZOS), scale


def add_footprint_to_map(m: folium.Map,
                         footprint: Footprint,
                         color: str = "blue") -> None:
    """
    Draw the footprint outline on a folium map.
    """
    corners = footprint.corners()
    if len(corners) == 2:
        bbox = footprint.bounding_box()
        folium.Rectangle(bounds=[(bbox.south, bbox.west), (bbox.north, bbox.east)],
                         color=color,
                         fill=True,
                         fill_opacity=0.5).add_to(m)
        return
    folium.Polygon(locations=[(p.latitude, p.longitude) for p in corners],
                   color=color,
                   fill=True,
                   fill_opacity=0.5).add_to(m)
