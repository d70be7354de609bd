import logging
from typing import Sequence

import plotly.graph_objects as go
import streamlit as st

from steel_viewer import config
from steel_viewer.analysis.charts import RadarLayout, ScatterLayout, legend_color, radar_layout, scatter_layout
from steel_viewer.models.material import PROPERTIES, MaterialRecord, get_property

logger = logging.getLogger(__name__)

AXIS_COLOR = "#666"
GRID_COLOR = "#ddd"
TEXT_COLOR = "#333"


def _canvas(fig: go.Figure, width: float, height: float) -> go.Figure:
    """Fixes the axes to a pixel frame: origin top-left, y pointing down."""
    fig.update_xaxes(range=[0, width], visible=False, fixedrange=True)
    fig.update_yaxes(range=[height, 0], visible=False, fixedrange=True, scaleanchor="x", scaleratio=1)
    fig.update_layout(
        width=None,
        height=height + 20,
        margin=dict(l=0, r=0, b=0, t=0),
        showlegend=False,
        plot_bgcolor="white",
    )
    return fig


def plot_scatter(layout: ScatterLayout) -> go.Figure:
    """Draws axes, axis labels and one labelled point per material."""
    w, h, pad = layout.width, layout.height, layout.padding
    fig = go.Figure()

    # X and Y axis lines
    fig.add_shape(type="line", x0=pad, y0=h - pad, x1=w - pad, y1=h - pad, line=dict(color=AXIS_COLOR, width=1))
    fig.add_shape(type="line", x0=pad, y0=h - pad, x1=pad, y1=pad, line=dict(color=AXIS_COLOR, width=1))

    fig.add_annotation(x=w / 2, y=h - 10, text=layout.x_property.label, showarrow=False,
                       font=dict(size=12, color=AXIS_COLOR))
    fig.add_annotation(x=15, y=h / 2, text=layout.y_property.label, showarrow=False, textangle=-90,
                       font=dict(size=12, color=AXIS_COLOR))

    if layout.points:
        fig.add_trace(go.Scatter(
            x=[p.x for p in layout.points],
            y=[p.y for p in layout.points],
            mode="markers+text",
            marker=dict(size=12, color=[p.color for p in layout.points]),
            text=[p.label for p in layout.points],
            textposition="top center",
            textfont=dict(size=10, color=TEXT_COLOR),
            customdata=[
                [p.material.label, layout.x_property.value(p.material), layout.y_property.value(p.material)]
                for p in layout.points
            ],
            hovertemplate=(
                "%{customdata[0]}<br>"
                f"{layout.x_property.key}: " + "%{customdata[1]}<br>"
                f"{layout.y_property.key}: " + "%{customdata[2]}<extra></extra>"
            ),
        ))

    return _canvas(fig, w, h)


def plot_radar(layout: RadarLayout) -> go.Figure:
    """Draws grid rings, axes, labels, one closed polygon per material and a legend."""
    cx, cy = layout.center
    fig = go.Figure()

    for r in layout.rings:
        fig.add_shape(type="circle", x0=cx - r, y0=cy - r, x1=cx + r, y1=cy + r,
                      line=dict(color=GRID_COLOR, width=1))

    for axis in layout.axes:
        fig.add_shape(type="line", x0=cx, y0=cy, x1=axis.end[0], y1=axis.end[1],
                      line=dict(color=GRID_COLOR, width=1))
        fig.add_annotation(x=axis.label_position[0], y=axis.label_position[1], text=axis.prop.label,
                           showarrow=False, font=dict(size=12, color=TEXT_COLOR))

    for polygon in layout.polygons:
        fig.add_trace(go.Scatter(
            x=[p[0] for p in polygon.points],
            y=[p[1] for p in polygon.points],
            mode="lines+markers",
            fill="toself",
            fillcolor=polygon.color,
            line=dict(color=polygon.color, width=2),
            marker=dict(size=8, color=polygon.color),
            name=polygon.material.label,
            hoverinfo="name",
        ))

    # Legend row along the bottom edge
    legend_y = layout.height - 14
    for index, polygon in enumerate(layout.polygons):
        x = 60 + index * 150
        fig.add_shape(type="rect", x0=x, y0=legend_y, x1=x + 12, y1=legend_y + 12,
                      fillcolor=legend_color(index), line=dict(width=0))
        fig.add_annotation(x=x + 18, y=legend_y + 6, text=polygon.material.label, showarrow=False,
                           xanchor="left", font=dict(size=12, color=TEXT_COLOR))

    return _canvas(fig, layout.width, layout.height)


def render_comparison(materials: Sequence[MaterialRecord]):
    """Comparison panel with scatter and radar tabs."""
    st.subheader("Material Comparison")

    tab_scatter, tab_radar = st.tabs(["Scatter Plot", "Radar Chart"])
    keys = [p.key for p in PROPERTIES]

    with tab_scatter:
        c1, c2 = st.columns(2)
        x_key = c1.selectbox("X-Axis Property", keys, index=0, key="scatter_x",
                             format_func=lambda k: get_property(k).label)
        y_key = c2.selectbox("Y-Axis Property", keys, index=1, key="scatter_y",
                             format_func=lambda k: get_property(k).label)

        layout = scatter_layout(materials, get_property(x_key), get_property(y_key),
                                config.SCATTER_WIDTH, config.SCATTER_HEIGHT, config.SCATTER_PADDING)
        st.plotly_chart(plot_scatter(layout), use_container_width=True)

    with tab_radar:
        layout = radar_layout(materials, config.RADAR_WIDTH, config.RADAR_HEIGHT, config.RADAR_MARGIN)
        st.plotly_chart(plot_radar(layout), use_container_width=True)
