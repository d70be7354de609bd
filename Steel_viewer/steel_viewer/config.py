import os
from typing import Optional


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


LOG_LEVEL: str = os.getenv("STEEL_VIEWER_LOG_LEVEL", "INFO").upper()

# Unset -> a fresh grain field on every rerun
GRAIN_SEED: Optional[int] = _int_env("STEEL_VIEWER_GRAIN_SEED", None)

# Frames pre-computed for one deformation period (2*pi seconds)
ANIMATION_FRAMES: int = _int_env("STEEL_VIEWER_ANIMATION_FRAMES", 60)

# Chart canvases (pixels)
SCATTER_WIDTH = 500
SCATTER_HEIGHT = 300
SCATTER_PADDING = 40
RADAR_WIDTH = 500
RADAR_HEIGHT = 350
RADAR_MARGIN = 30
