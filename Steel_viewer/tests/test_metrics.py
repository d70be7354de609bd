import pytest

from steel_viewer.analysis.metrics import (
    ductility,
    performance_rows,
    stiffness_to_weight,
    strength_to_weight,
    toughness_estimate,
)
from steel_viewer.models.material import DataError


def test_strength_to_weight(make_material):
    m = make_material(ultimate_tensile_strength=1200.0, density=7850.0)
    assert strength_to_weight(m) == pytest.approx((1200 / 7850) * 1000)


def test_stiffness_to_weight(make_material):
    m = make_material(elastic_modulus=207000.0, density=7850.0)
    assert stiffness_to_weight(m) == pytest.approx((207000 / 7850) * 1000)


def test_toughness_estimate(make_material):
    m = make_material(ultimate_tensile_strength=600.0, elongation=25.0)
    assert toughness_estimate(m) == pytest.approx(150.0)


@pytest.mark.parametrize("a5, bucket", [(35, "High"), (30.01, "High"), (30, "Medium"), (20, "Medium"),
                                        (15.01, "Medium"), (15, "Low"), (10, "Low"), (0, "Low")])
def test_ductility_buckets(a5, bucket):
    assert ductility(a5) == bucket


def test_zero_density_raises(make_material):
    with pytest.raises(DataError):
        strength_to_weight(make_material(density=0.0))


def test_nan_strength_raises(make_material):
    with pytest.raises(DataError):
        toughness_estimate(make_material(ultimate_tensile_strength=float("nan")))


def test_performance_rows_are_formatted(make_material):
    rows = dict(performance_rows(make_material(ultimate_tensile_strength=1200.0, density=7850.0, elongation=35.0)))
    assert rows["Strength-to-Weight Ratio"] == "152.87 Nm/kg"
    assert rows["Toughness (Estimated)"] == "420.00 MPa"
    assert rows["Ductility"] == "High"
