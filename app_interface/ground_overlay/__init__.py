from .canvas import Canvas, transparency_to_alpha
from .config import DEFAULT_CONFIG, OverlayConfig, load_config
from .geo import BoundingBox, FourCornerFootprint, GeoPoint, TwoCornerFootprint
from .imagery_io import fit_image, load_image
from .imagery_math import derive_corners, earth_radius_at, ground_resolution
from .overlay import GroundOverlay
from .projection import MapView
from .transform import ScreenTransform, build_transform
from .validation import OverlayValidationError, validated_transform
