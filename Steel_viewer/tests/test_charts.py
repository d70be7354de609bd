import math

import pytest

from steel_viewer.analysis.charts import (
    COMPARE_COLOR,
    FOCUS_COLOR,
    padded_bounds,
    radar_color,
    radar_layout,
    scatter_layout,
)
from steel_viewer.models.material import A5, RADAR_PROPERTIES, SU, SY


@pytest.fixture
def pair(make_material):
    return [
        make_material(id="a", name="Steel SAE 1015", ultimate_tensile_strength=500.0, yield_strength=300.0),
        make_material(id="b", name="Steel SAE 1040", ultimate_tensile_strength=1000.0, yield_strength=600.0),
    ]


def test_padded_bounds():
    assert padded_bounds([500.0, 1000.0]) == pytest.approx((450.0, 1100.0))


def test_scatter_coordinates(pair):
    layout = scatter_layout(pair, SU, SY, width=500, height=300, padding=40)
    a, b = layout.points

    assert a.x == pytest.approx(40 + (500 - 450) / (1100 - 450) * 420)
    assert b.x == pytest.approx(40 + (1000 - 450) / (1100 - 450) * 420)
    assert a.y == pytest.approx(260 - (300 - 270) / (660 - 270) * 220)
    assert b.y == pytest.approx(260 - (600 - 270) / (660 - 270) * 220)

    # Inside the padded rectangle, larger values to the right and higher up
    for p in layout.points:
        assert 40 < p.x < 460
        assert 40 < p.y < 260
    assert a.x < b.x
    assert a.y > b.y


def test_scatter_styles_and_labels(pair):
    layout = scatter_layout(pair, SU, SY, 500, 300, 40)
    assert [p.color for p in layout.points] == [FOCUS_COLOR, COMPARE_COLOR]
    assert [p.label for p in layout.points] == ["1015", "1040"]


def test_scatter_degenerate_range_maps_to_center(make_material):
    materials = [make_material(id="a", elongation=0.0), make_material(id="b", elongation=0.0)]
    layout = scatter_layout(materials, A5, A5, 500, 300, 40)
    for p in layout.points:
        assert p.x == pytest.approx(250.0)
        assert p.y == pytest.approx(150.0)


def test_scatter_single_material_is_inside(make_material):
    layout = scatter_layout([make_material()], SU, SY, 500, 300, 40)
    (p,) = layout.points
    assert all(math.isfinite(v) for v in (p.x, p.y))
    assert 40 <= p.x <= 460


def test_scatter_empty():
    layout = scatter_layout([], SU, SY, 500, 300, 40)
    assert layout.points == []


def test_radar_self_comparison_sits_at_inner_radius(make_material):
    m = make_material()
    layout = radar_layout([m, m], 500, 350, 30)
    assert layout.radius == pytest.approx(145.0)
    for polygon in layout.polygons:
        assert len(polygon.radii) == 6
        for r in polygon.radii:
            assert r == pytest.approx(layout.radius / 1.1)


def test_radar_axes_are_evenly_spaced(make_material):
    layout = radar_layout([make_material()], 500, 350, 30)
    assert [a.prop for a in layout.axes] == list(RADAR_PROPERTIES)
    step = 2 * math.pi / 6
    for n, axis in enumerate(layout.axes):
        assert axis.angle == pytest.approx(n * step)
    assert layout.axes[0].end == pytest.approx((250 + 145, 175))
    assert layout.rings == pytest.approx([29.0, 58.0, 87.0, 116.0, 145.0])


def test_radar_polygon_is_closed(pair):
    layout = radar_layout(pair, 500, 350, 30)
    for polygon in layout.polygons:
        assert len(polygon.points) == 7
        assert polygon.points[0] == polygon.points[-1]


def test_radar_normalises_per_property(pair):
    layout = radar_layout(pair, 500, 350, 30)
    weak, strong = layout.polygons
    # Su axis: max is 1000, so 500 lands at half the inner radius
    assert strong.radii[0] == pytest.approx(145 / 1.1)
    assert weak.radii[0] == pytest.approx(145 / 1.1 / 2)


def test_radar_zero_values_at_center(make_material):
    m = make_material(elongation=0.0)
    layout = radar_layout([m], 500, 350, 30)
    assert layout.polygons[0].radii[2] == 0.0
    assert layout.polygons[0].points[2] == pytest.approx((250.0, 175.0))


def test_radar_colors_fade_with_index():
    assert radar_color(0) == "rgba(255, 69, 0, 0.7)"
    assert radar_color(1) == "rgba(52, 152, 219, 0.6)"
    assert radar_color(3) == "rgba(52, 152, 219, 0.4)"
    assert radar_color(10) == "rgba(52, 152, 219, 0.1)"


def test_radar_empty():
    layout = radar_layout([], 500, 350, 30)
    assert layout.polygons == []
    assert len(layout.axes) == 6
