from dataclasses import replace

import pytest

from steel_viewer.database.materials import MATERIALS, load_catalog
from steel_viewer.models.material import MaterialRecord


@pytest.fixture
def catalog():
    return load_catalog(MATERIALS)


@pytest.fixture
def make_material():
    """Factory for records with a sensible default steel, overriding any field."""
    base = MaterialRecord(
        standard="ANSI",
        id="TEST",
        name="Steel SAE 1045",
        heat_treatment="normalized",
        ultimate_tensile_strength=565.0,
        yield_strength=310.0,
        elongation=16.0,
        hardness=163.0,
        elastic_modulus=207000.0,
        shear_modulus=79000.0,
        poisson_ratio=0.3,
        density=7850.0,
    )

    def _make(**overrides):
        return replace(base, **overrides)

    return _make
