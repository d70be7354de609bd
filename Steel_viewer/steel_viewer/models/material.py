import math
from dataclasses import dataclass
from typing import Callable, Optional, Tuple


class DataError(ValueError):
    """Raised when a material record cannot feed the property pipeline."""

    def __init__(self, message: str, record_id: Optional[str] = None, field: Optional[str] = None):
        self.record_id = record_id
        self.field = field
        prefix = f"[{record_id}] " if record_id else ""
        super().__init__(f"{prefix}{message}")


@dataclass(frozen=True)
class MaterialRecord:
    """One steel grade with its mechanical and physical properties.

    Strengths and moduli are in MPa, elongation in %, density in kg/m^3.
    """
    standard: str
    id: str
    name: str
    heat_treatment: str
    ultimate_tensile_strength: float  # Su
    yield_strength: float  # Sy
    elongation: float  # A5
    hardness: float  # Bhn
    elastic_modulus: float  # E
    shear_modulus: float  # G
    poisson_ratio: float  # mu
    density: float  # Ro
    ph: Optional[float] = None
    description: Optional[str] = None

    @property
    def label(self) -> str:
        return f"{self.name} ({self.heat_treatment})"

    @property
    def short_name(self) -> str:
        """Last whitespace token of the name, e.g. the grade number."""
        parts = self.name.split()
        return parts[-1] if parts else ""


@dataclass(frozen=True)
class PropertySpec:
    """A chartable property: short key, accessor, display label and unit."""
    key: str
    accessor: Callable[[MaterialRecord], float]
    label: str
    unit: str
    description: str

    def value(self, material: MaterialRecord) -> float:
        return require_finite(self.accessor(material), material, self.key)


def require_finite(value, material: MaterialRecord, field: str) -> float:
    """Returns ``value`` as float or raises DataError if it is not a finite number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DataError(f"field '{field}' is not numeric: {value!r}", material.id, field)
    if not math.isfinite(value):
        raise DataError(f"field '{field}' is not finite: {value!r}", material.id, field)
    return float(value)


SU = PropertySpec(
    "Su", lambda m: m.ultimate_tensile_strength, "Ultimate Tensile Strength", "MPa",
    "Maximum stress that a material can withstand while being stretched before breaking",
)
SY = PropertySpec(
    "Sy", lambda m: m.yield_strength, "Yield Strength", "MPa",
    "Stress at which a material begins to deform plastically",
)
A5 = PropertySpec(
    "A5", lambda m: m.elongation, "Elongation", "%",
    "Increase in length that occurs before a material breaks under tension",
)
BHN = PropertySpec(
    "Bhn", lambda m: m.hardness, "Hardness", "",
    "Brinell Hardness Number - Measure of material hardness",
)
E = PropertySpec(
    "E", lambda m: m.elastic_modulus, "Elastic Modulus", "MPa",
    "Measure of material stiffness",
)
G = PropertySpec(
    "G", lambda m: m.shear_modulus, "Shear Modulus", "MPa",
    "Measure of material's resistance to shear deformation",
)
MU = PropertySpec(
    "mu", lambda m: m.poisson_ratio, "Poisson's Ratio", "",
    "Ratio of transverse contraction strain to longitudinal extension strain",
)
RO = PropertySpec(
    "Ro", lambda m: m.density, "Density", "kg/m³",
    "Mass per unit volume",
)

# Order matters: scatter pickers list them in this order
PROPERTIES: Tuple[PropertySpec, ...] = (SU, SY, A5, BHN, E, G, MU, RO)
RADAR_PROPERTIES: Tuple[PropertySpec, ...] = (SU, SY, A5, BHN, E, G)


def get_property(key: str) -> PropertySpec:
    """Resolves a property key ("Su", "Sy", ...) to its PropertySpec."""
    for prop in PROPERTIES:
        if prop.key == key:
            return prop
    raise KeyError(f"Unknown property key: {key}")
