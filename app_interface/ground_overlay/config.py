# config.py
import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "GROUND_OVERLAY_"


@dataclass(frozen=True)
class OverlayConfig:
    # biggest allowed image side, larger images get downscaled
    max_dimension: int = 5000
    equatorial_radius_m: float = 6378137.0
    polar_radius_m: float = 6356752.314
    tile_size: int = 256
    log_level: str = "WARNING"


DEFAULT_CONFIG = OverlayConfig()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX + name} must be an integer, got {raw!r}")


def load_config(dotenv_path: Optional[str] = None) -> OverlayConfig:
    """
    Build the config from DEFAULT_CONFIG, a .env file and the environment.
    """
    load_dotenv(dotenv_path)
    return replace(
        DEFAULT_CONFIG,
        max_dimension=_env_int("MAX_DIMENSION", DEFAULT_CONFIG.max_dimension),
        tile_size=_env_int("TILE_SIZE", DEFAULT_CONFIG.tile_size),
        log_level=os.getenv(ENV_PREFIX + "LOG_LEVEL", DEFAULT_CONFIG.log_level).upper(),
    )
