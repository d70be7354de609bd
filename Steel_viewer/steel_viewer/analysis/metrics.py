from typing import List, Tuple

from steel_viewer.models.material import DataError, MaterialRecord, require_finite


def _density(material: MaterialRecord) -> float:
    ro = require_finite(material.density, material, "Ro")
    if ro <= 0:
        raise DataError(f"density must be positive, got {ro}", material.id, "Ro")
    return ro


def strength_to_weight(material: MaterialRecord) -> float:
    """Su / Ro scaled by 1000 (Nm/kg)."""
    return require_finite(material.ultimate_tensile_strength, material, "Su") / _density(material) * 1000


def stiffness_to_weight(material: MaterialRecord) -> float:
    """E / Ro scaled by 1000 (Nm/kg)."""
    return require_finite(material.elastic_modulus, material, "E") / _density(material) * 1000


def toughness_estimate(material: MaterialRecord) -> float:
    """Rough toughness indicator Su * A5 / 100 (MPa)."""
    su = require_finite(material.ultimate_tensile_strength, material, "Su")
    a5 = require_finite(material.elongation, material, "A5")
    return su * a5 / 100


def ductility(elongation: float) -> str:
    if elongation > 30:
        return "High"
    if elongation > 15:
        return "Medium"
    return "Low"


def performance_rows(material: MaterialRecord) -> List[Tuple[str, str]]:
    """Label/value pairs for the performance table."""
    return [
        ("Strength-to-Weight Ratio", f"{strength_to_weight(material):.2f} Nm/kg"),
        ("Stiffness-to-Weight Ratio", f"{stiffness_to_weight(material):.2f} Nm/kg"),
        ("Toughness (Estimated)", f"{toughness_estimate(material):.2f} MPa"),
        ("Ductility", ductility(material.elongation)),
    ]
