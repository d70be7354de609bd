"""Pixel-space layout for the scatter and radar comparison charts.

Both charts use a canvas frame with the origin at the top-left corner and
y growing downwards. The functions here only compute coordinates; drawing
is done in :mod:`steel_viewer.ui.charts`.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from steel_viewer.models.material import RADAR_PROPERTIES, MaterialRecord, PropertySpec

logger = logging.getLogger(__name__)

FOCUS_COLOR = "#ff4500"
COMPARE_COLOR = "#3498db"
MIN_OPACITY = 0.1


@dataclass
class ScatterPoint:
    material: MaterialRecord
    x: float
    y: float
    color: str
    label: str


@dataclass
class ScatterLayout:
    width: float
    height: float
    padding: float
    x_property: PropertySpec
    y_property: PropertySpec
    x_bounds: Tuple[float, float]
    y_bounds: Tuple[float, float]
    points: List[ScatterPoint] = field(default_factory=list)


@dataclass
class RadarAxis:
    prop: PropertySpec
    angle: float
    end: Tuple[float, float]
    label_position: Tuple[float, float]
    scale: float  # max over the compared materials * 1.1


@dataclass
class RadarPolygon:
    material: MaterialRecord
    points: List[Tuple[float, float]]  # closed: first point repeated at the end
    radii: List[float]
    color: str


@dataclass
class RadarLayout:
    width: float
    height: float
    center: Tuple[float, float]
    radius: float
    axes: List[RadarAxis]
    rings: List[float]
    polygons: List[RadarPolygon] = field(default_factory=list)


def padded_bounds(values: Sequence[float]) -> Tuple[float, float]:
    """Axis bounds with 10% headroom: (min * 0.9, max * 1.1)."""
    return min(values) * 0.9, max(values) * 1.1


def _normalize(value: float, bounds: Tuple[float, float]) -> float:
    lo, hi = bounds
    if hi == lo:
        # Degenerate range (e.g. every value is 0): centre of the axis
        return 0.5
    return (value - lo) / (hi - lo)


def scatter_layout(materials: Sequence[MaterialRecord], x_property: PropertySpec, y_property: PropertySpec,
                   width: float, height: float, padding: float) -> ScatterLayout:
    """
    Maps each material's (x_property, y_property) pair into the plot rectangle.

    The rectangle is the canvas inset by ``padding`` on every side, with data
    y increasing upwards. The first material is the focused one.
    """
    if not materials:
        return ScatterLayout(width, height, padding, x_property, y_property, (0.0, 0.0), (0.0, 0.0))

    xs = [x_property.value(m) for m in materials]
    ys = [y_property.value(m) for m in materials]
    x_bounds = padded_bounds(xs)
    y_bounds = padded_bounds(ys)

    inner_w = width - 2 * padding
    inner_h = height - 2 * padding

    points = []
    for index, (material, xv, yv) in enumerate(zip(materials, xs, ys)):
        px = padding + _normalize(xv, x_bounds) * inner_w
        py = height - padding - _normalize(yv, y_bounds) * inner_h
        points.append(ScatterPoint(
            material=material,
            x=px,
            y=py,
            color=FOCUS_COLOR if index == 0 else COMPARE_COLOR,
            label=material.short_name,
        ))

    logger.debug("Scatter %s vs %s: %d points", x_property.key, y_property.key, len(points))
    return ScatterLayout(width, height, padding, x_property, y_property, x_bounds, y_bounds, points)


def radar_color(index: int) -> str:
    """Focused material in orange, the rest in blue with fading opacity."""
    if index == 0:
        return "rgba(255, 69, 0, 0.7)"
    opacity = max(MIN_OPACITY, round(0.7 - index * 0.1, 2))
    return f"rgba(52, 152, 219, {opacity})"


def legend_color(index: int) -> str:
    return FOCUS_COLOR if index == 0 else COMPARE_COLOR


def radar_layout(materials: Sequence[MaterialRecord], width: float, height: float, margin: float,
                 properties: Sequence[PropertySpec] = RADAR_PROPERTIES, rings: int = 5) -> RadarLayout:
    """
    Places one polygon per material on equally spaced axes.

    Each property is normalised by 1.1 times its maximum over ``materials``,
    so the largest value sits at ``radius / 1.1``.
    """
    cx, cy = width / 2, height / 2
    radius = min(cx, cy) - margin
    n = len(properties)
    angles = [i * (2 * math.pi / n) for i in range(n)]

    scales = []
    for prop in properties:
        values = [prop.value(m) for m in materials]
        scales.append(max(values) * 1.1 if values else 0.0)

    axes = []
    for prop, angle, scale in zip(properties, angles, scales):
        axes.append(RadarAxis(
            prop=prop,
            angle=angle,
            end=(cx + radius * math.cos(angle), cy + radius * math.sin(angle)),
            label_position=(cx + (radius + 15) * math.cos(angle), cy + (radius + 15) * math.sin(angle)),
            scale=scale,
        ))

    polygons = []
    for index, material in enumerate(materials):
        radii = []
        points = []
        for axis in axes:
            # Zero scale means every value is 0: plot at the centre
            norm = axis.prop.value(material) / axis.scale if axis.scale else 0.0
            r = radius * norm
            radii.append(r)
            points.append((cx + r * math.cos(axis.angle), cy + r * math.sin(axis.angle)))
        points.append(points[0])
        polygons.append(RadarPolygon(material=material, points=points, radii=radii, color=radar_color(index)))

    ring_radii = [radius * (i / rings) for i in range(1, rings + 1)]
    return RadarLayout(width, height, (cx, cy), radius, axes, ring_radii, polygons)
