import math
from dataclasses import dataclass, replace
from typing import List, Tuple

import numpy as np

from steel_viewer.models.material import DataError, MaterialRecord, require_finite

REFERENCE_MODULUS = 207000.0  # MPa, typical carbon steel
MAX_AMPLITUDE = 0.2

# Microstructure spin per 1/60 s frame (rad)
SPIN_X_PER_FRAME = 0.001
SPIN_Y_PER_FRAME = 0.002
FRAME_RATE = 60.0


def deformation(material: MaterialRecord, elapsed: float) -> Tuple[float, float, float]:
    """
    Illustrative squash-and-stretch scale for the stress block.

    Stiffer materials oscillate less. Not a physical model.

    Args:
        material: Source record, only E is used.
        elapsed: Animation time in seconds.

    Returns:
        Tuple[float, float, float]: (1 + d, 1 - d, 1) with |d| <= 0.2.
    """
    modulus = require_finite(material.elastic_modulus, material, "E")
    if modulus <= 0:
        raise DataError(f"elastic modulus must be positive, got {modulus}", material.id, "E")
    elasticity = modulus / REFERENCE_MODULUS
    # Keeps |d| <= 0.2 for moduli above twice the reference
    amplitude = max(-1.0, min(1.0, 1 - elasticity))
    d = math.sin(elapsed) * amplitude * MAX_AMPLITUDE
    return 1 + d, 1 - d, 1.0


@dataclass(frozen=True)
class AnimationState:
    """Per-viewer animation phase, owned by the render surface."""
    elapsed: float = 0.0
    rotation_x: float = 0.0
    rotation_y: float = 0.0


def advance(state: AnimationState, dt: float) -> AnimationState:
    """Steps the animation by ``dt`` seconds."""
    frames = dt * FRAME_RATE
    return replace(
        state,
        elapsed=state.elapsed + dt,
        rotation_x=state.rotation_x + SPIN_X_PER_FRAME * frames,
        rotation_y=state.rotation_y + SPIN_Y_PER_FRAME * frames,
    )


def animation_states(n_frames: int, dt: float, start: AnimationState = None) -> List[AnimationState]:
    """A finite run of ``n_frames`` states, starting at ``start``."""
    state = start or AnimationState()
    states = []
    for _ in range(max(0, n_frames)):
        states.append(state)
        state = advance(state, dt)
    return states


def rotation_matrix(state: AnimationState) -> np.ndarray:
    """3x3 rotation about x, then y, for the microstructure vertices."""
    cx, sx = np.cos(state.rotation_x), np.sin(state.rotation_x)
    cy, sy = np.cos(state.rotation_y), np.sin(state.rotation_y)
    rot_x = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]])
    rot_y = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]])
    return rot_y @ rot_x
