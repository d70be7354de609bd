import logging
import math
from typing import Optional

import numpy as np
import plotly.graph_objects as go

from steel_viewer import config
from steel_viewer.analysis.deformation import (
    FRAME_RATE,
    AnimationState,
    animation_states,
    deformation,
    rotation_matrix,
)
from steel_viewer.analysis.microstructure import GrainField, color_of, grain_geometry
from steel_viewer.models.material import MaterialRecord

logger = logging.getLogger(__name__)

STRESS_BLOCK_CENTER = (0.0, 0.0, -3.0)

# 8 corners of a unit cube centred at the origin, and its 12 triangles
_BOX_CORNERS = np.array([
    [-0.5, -0.5, -0.5], [-0.5, 0.5, -0.5], [0.5, 0.5, -0.5], [0.5, -0.5, -0.5],
    [-0.5, -0.5, 0.5], [-0.5, 0.5, 0.5], [0.5, 0.5, 0.5], [0.5, -0.5, 0.5],
])
_BOX_I = [0, 0, 4, 4, 0, 0, 3, 3, 0, 0, 1, 1]
_BOX_J = [1, 2, 5, 6, 1, 5, 2, 6, 3, 7, 2, 6]
_BOX_K = [2, 3, 6, 7, 5, 4, 6, 7, 7, 4, 6, 5]


def _rgb(color) -> str:
    r, g, b = (int(round(255 * min(1.0, max(0.0, c)))) for c in color)
    return f"rgb({r}, {g}, {b})"


def microstructure_trace(field: GrainField, state: AnimationState, name: str) -> go.Mesh3d:
    """Grain field as one Mesh3d, rotated by the animation state."""
    verts = field.vertices @ rotation_matrix(state).T
    i, j, k = field.triangle_indices()
    return go.Mesh3d(
        x=verts[:, 0], y=verts[:, 1], z=verts[:, 2],
        i=i, j=j, k=k,
        vertexcolor=[_rgb(c) for c in field.colors],
        flatshading=True,
        lighting=dict(ambient=0.5, diffuse=0.8, roughness=0.4, specular=0.8),
        name=name,
        hoverinfo="name",
    )


def stress_block_trace(material: MaterialRecord, state: AnimationState) -> go.Mesh3d:
    """Unit cube scaled by the deformation at the state's elapsed time."""
    sx, sy, sz = deformation(material, state.elapsed)
    corners = _BOX_CORNERS * np.array([sx, sy, sz]) + np.array(STRESS_BLOCK_CENTER)
    return go.Mesh3d(
        x=corners[:, 0], y=corners[:, 1], z=corners[:, 2],
        i=_BOX_I, j=_BOX_J, k=_BOX_K,
        color=_rgb(color_of(material)),
        flatshading=True,
        lighting=dict(ambient=0.5, diffuse=0.8, roughness=0.4, specular=0.8),
        name="Stress Simulation",
        hoverinfo="name",
    )


def _caption(x, y, z, text, size) -> go.Scatter3d:
    return go.Scatter3d(
        x=[x], y=[y], z=[z],
        mode="text",
        text=[text],
        textfont=dict(size=size, color="white"),
        showlegend=False,
        hoverinfo="skip",
    )


def plot_material_3d(material: MaterialRecord, rng: Optional[np.random.Generator] = None,
                     n_frames: int = None) -> go.Figure:
    """
    Builds the 3D viewer: rotating microstructure plus a pulsing stress block.

    The animation is a finite set of Plotly frames covering one deformation
    period; Plotly's player replays it on the client.
    """
    if rng is None:
        rng = np.random.default_rng(config.GRAIN_SEED)
    if n_frames is None:
        n_frames = config.ANIMATION_FRAMES

    field = grain_geometry(material, rng)
    label = f"{material.name} - {material.heat_treatment}"
    dt = 2 * math.pi / n_frames if n_frames else 0.0
    states = animation_states(n_frames, dt) or [AnimationState()]
    # Playback clock matches the state clock: one frame shown per dt seconds
    frame_ms = dt * 1000 if dt else 1000 / FRAME_RATE

    def traces(state):
        return [
            microstructure_trace(field, state, material.name),
            stress_block_trace(material, state),
        ]

    fig = go.Figure(data=traces(states[0]) + [
        _caption(0, -2.5, 0, label, 14),
        _caption(STRESS_BLOCK_CENTER[0], -1, STRESS_BLOCK_CENTER[2], "Stress Simulation", 11),
    ])
    # Frames only replace the two animated traces
    fig.frames = [go.Frame(data=traces(s), traces=[0, 1], name=str(n)) for n, s in enumerate(states)]

    fig.update_layout(
        scene=dict(
            xaxis=dict(visible=False),
            yaxis=dict(visible=False),
            zaxis=dict(visible=False),
            aspectmode="data",
            camera=dict(eye=dict(x=0, y=0, z=5 / 3), up=dict(x=0, y=1, z=0), center=dict(x=0, y=0, z=0)),
            bgcolor="#1e1e1e",
        ),
        margin=dict(l=0, r=0, b=0, t=30),
        showlegend=False,
        height=500,
        updatemenus=[dict(
            type="buttons",
            showactive=False,
            x=0.02, y=0.98,
            buttons=[
                dict(label="Play", method="animate",
                     args=[None, dict(frame=dict(duration=frame_ms, redraw=True), fromcurrent=True,
                                      transition=dict(duration=0), mode="immediate")]),
                dict(label="Pause", method="animate",
                     args=[[None], dict(frame=dict(duration=0, redraw=False), mode="immediate")]),
            ],
        )],
    )

    logger.debug("Built 3D view for %s with %d frames", material.id, len(fig.frames))
    return fig
