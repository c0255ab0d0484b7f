#!/usr/bin/env python3
# __main__.py
import argparse
import sys
from typing import List, Optional

import folium

from .canvas import Canvas
from .config import load_config
from .geo import BoundingBox
from .imagery_io import add_footprint_to_map, load_image
from .logging_config import configure_logging, get_logger
from .overlay import GroundOverlay
from .projection import MapView
from .validation import OverlayValidationError, validate_footprint

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ground_overlay",
        description="Drape a georeferenced image over a Web-Mercator view."
    )
    parser.add_argument("image", type=str, help="Path to the image to place.")

    place = parser.add_mutually_exclusive_group(required=True)
    place.add_argument("--corners", type=float, nargs="+", metavar="DEG",
                       help="lat lon pairs: top-left bottom-right, or all four "
                            "corners clockwise from top-left.")
    place.add_argument("--anchor", type=float, nargs=2, metavar=("LAT", "LON"),
                       help="Bottom-left corner of the image.")

    parser.add_argument("--resolution", type=float, default=1.0,
                        help="Ground resolution in pixels per meter (anchor mode).")
    parser.add_argument("--azimuth", type=float, default=0.0,
                        help="Clockwise rotation from north in degrees (anchor mode).")
    parser.add_argument("--transparency", type=float, default=0.0,
                        help="0 = opaque, 1 = invisible.")
    parser.add_argument("--zoom", type=float, default=17)
    parser.add_argument("--size", type=int, nargs=2, default=(1024, 768),
                        metavar=("WIDTH", "HEIGHT"))
    parser.add_argument("--out", type=str, default="overlay.png",
                        help="Where to save the rendered view.")
    parser.add_argument("--map", type=str, default=None,
                        help="Optionally save a folium preview of the footprint.")
    return parser


def _place(overlay: GroundOverlay, args: argparse.Namespace) -> None:
    if args.anchor is not None:
        overlay.set_position_anchor(tuple(args.anchor), args.resolution, args.azimuth)
        return
    if len(args.corners) not in (4, 8):
        raise OverlayValidationError("--corners needs 2 or 4 lat lon pairs")
    pairs = list(zip(args.corners[0::2], args.corners[1::2]))
    overlay.set_position(*pairs)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()
    configure_logging(config.log_level)

    overlay = GroundOverlay(config)
    overlay.set_bearing(args.azimuth)
    overlay.set_transparency(args.transparency)
    try:
        overlay.set_image(load_image(args.image))
        _place(overlay, args)
        validate_footprint(overlay.footprint)
    except (OverlayValidationError, OSError) as e:
        logger.warning("Cannot place %s: %s", args.image, e)
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    footprint = overlay.footprint
    center = BoundingBox.enclosing(footprint.corners()).center()
    width, height = args.size
    view = MapView(args.zoom, tile_size=config.tile_size).center_on(center, width, height)

    canvas = Canvas(width, height)
    overlay.draw(canvas, view.pixel_lookup)
    canvas.save(args.out)
    print(f"Saved view to {args.out}")
    for name in ("top_left", "top_right", "bottom_right", "bottom_left"):
        corner = getattr(overlay, name)
        if corner is not None:
            print(f"{name}: Latitude: {corner.latitude:.6f}, Longitude: {corner.longitude:.6f}")

    if args.map:
        m = folium.Map(location=[center.latitude, center.longitude], zoom_start=int(args.zoom))
        add_footprint_to_map(m, footprint)
        m.save(args.map)
        print(f"Saved footprint preview to {args.map}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
