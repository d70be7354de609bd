import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from steel_viewer.models.material import MaterialRecord, require_finite

logger = logging.getLogger(__name__)

# Normalisation references for the colour channels
SU_COLOR_REF = 1200.0
SY_COLOR_REF = 800.0
BHN_COLOR_REF = 500.0

COLOR_VARIATION = 0.1  # +-5% per channel
VERTICES_PER_GRAIN = 36  # 6 faces x 2 triangles x 3 vertices

# Unit cube triangles, two per face, corners as (+-1, +-1, +-1)
_CUBE_TRIANGLES = np.array([
    # front (+z)
    [-1, -1, 1], [1, -1, 1], [1, 1, 1],
    [1, 1, 1], [-1, 1, 1], [-1, -1, 1],
    # back (-z)
    [-1, -1, -1], [-1, 1, -1], [1, 1, -1],
    [1, 1, -1], [1, -1, -1], [-1, -1, -1],
    # top (+y)
    [-1, 1, -1], [-1, 1, 1], [1, 1, 1],
    [1, 1, 1], [1, 1, -1], [-1, 1, -1],
    # bottom (-y)
    [-1, -1, -1], [1, -1, -1], [1, -1, 1],
    [1, -1, 1], [-1, -1, 1], [-1, -1, -1],
    # right (+x)
    [1, -1, -1], [1, 1, -1], [1, 1, 1],
    [1, 1, 1], [1, -1, 1], [1, -1, -1],
    # left (-x)
    [-1, -1, -1], [-1, -1, 1], [-1, 1, 1],
    [-1, 1, 1], [-1, 1, -1], [-1, -1, -1],
], dtype=float)


@dataclass
class GrainField:
    """Triangle soup for the microstructure mesh.

    ``vertices`` and ``colors`` are (n_grains * 36, 3) arrays; every three
    consecutive vertices form one triangle.
    """
    centers: np.ndarray
    size: float
    vertices: np.ndarray
    colors: np.ndarray

    @property
    def grain_count(self) -> int:
        return len(self.centers)

    def triangle_indices(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """i/j/k index arrays in the layout Plotly's Mesh3d expects."""
        idx = np.arange(len(self.vertices))
        return idx[0::3], idx[1::3], idx[2::3]


def color_of(material: MaterialRecord) -> Tuple[float, float, float]:
    """Maps Su, Sy and Bhn to an RGB triple, each channel clamped at 1."""
    r = min(1.0, require_finite(material.ultimate_tensile_strength, material, "Su") / SU_COLOR_REF)
    g = min(1.0, require_finite(material.yield_strength, material, "Sy") / SY_COLOR_REF)
    b = min(1.0, require_finite(material.hardness, material, "Bhn") / BHN_COLOR_REF)
    return r, g, b


def swatch_color(material: MaterialRecord) -> str:
    """CSS colour for the small marker in the material list."""
    r = min(255.0, material.ultimate_tensile_strength / 5)
    g = min(255.0, material.yield_strength / 4)
    b = min(255.0, material.hardness * 1.2)
    return f"rgb({r:.0f}, {g:.0f}, {b:.0f})"


def grain_count(material: MaterialRecord) -> int:
    """More grains for harder materials."""
    return int(np.floor(require_finite(material.hardness, material, "Bhn") / 5)) + 20


def grain_size(material: MaterialRecord) -> float:
    """Half-edge of each grain cube, growing with tensile strength."""
    return 0.05 + require_finite(material.ultimate_tensile_strength, material, "Su") / 10000


def grain_geometry(material: MaterialRecord, rng: Optional[np.random.Generator] = None) -> GrainField:
    """
    Builds an illustrative grain field: randomly placed cubes in [-1, 1]^3.

    Args:
        material: Source record. Bhn drives the grain count, Su the grain size.
        rng: Random source. Pass a seeded generator for reproducible output.

    Returns:
        GrainField: Cube centers, size and per-vertex positions/colours.
    """
    if rng is None:
        rng = np.random.default_rng()

    count = grain_count(material)
    size = grain_size(material)
    base = np.array(color_of(material))

    centers = rng.uniform(-1.0, 1.0, size=(count, 3))
    # Per grain, per channel jitter around the base colour
    jitter = 1 + (rng.random((count, 3)) - 0.5) * COLOR_VARIATION
    grain_colors = base * jitter

    vertices = (centers[:, None, :] + _CUBE_TRIANGLES[None, :, :] * size).reshape(-1, 3)
    colors = np.repeat(grain_colors, VERTICES_PER_GRAIN, axis=0)

    logger.debug("Grain field for %s: %d grains, size %.3f", material.id, count, size)
    return GrainField(centers=centers, size=size, vertices=vertices, colors=colors)
