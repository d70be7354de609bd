import logging
import math
from typing import Dict, Iterable, List, Mapping, Tuple

from steel_viewer.models.material import DataError, MaterialRecord

logger = logging.getLogger(__name__)

# Bundled steel catalog (strengths and moduli in MPa, density in kg/m^3)
MATERIALS: List[Dict] = [
    {"Std": "ANSI", "ID": "SAE1015-AR", "Material": "Steel SAE 1015", "Heat treatment": "as-rolled",
     "Su": 421, "Sy": 314, "A5": 39, "Bhn": 126, "E": 207000, "G": 79000, "mu": 0.3, "Ro": 7860,
     "Desc": "Low carbon steel for carburized parts"},
    {"Std": "ANSI", "ID": "SAE1015-N", "Material": "Steel SAE 1015", "Heat treatment": "normalized",
     "Su": 424, "Sy": 324, "A5": 37, "Bhn": 121, "E": 207000, "G": 79000, "mu": 0.3, "Ro": 7860},
    {"Std": "ANSI", "ID": "SAE1015-A", "Material": "Steel SAE 1015", "Heat treatment": "annealed",
     "Su": 386, "Sy": 284, "A5": 37, "Bhn": 111, "E": 207000, "G": 79000, "mu": 0.3, "Ro": 7860},
    {"Std": "ANSI", "ID": "SAE1020-AR", "Material": "Steel SAE 1020", "Heat treatment": "as-rolled",
     "Su": 448, "Sy": 331, "A5": 36, "Bhn": 143, "E": 207000, "G": 79000, "mu": 0.3, "Ro": 7860,
     "Desc": "General purpose low carbon steel"},
    {"Std": "ANSI", "ID": "SAE1020-N", "Material": "Steel SAE 1020", "Heat treatment": "normalized",
     "Su": 441, "Sy": 346, "A5": 35.8, "Bhn": 131, "E": 207000, "G": 79000, "mu": 0.3, "Ro": 7860},
    {"Std": "ANSI", "ID": "SAE1020-A", "Material": "Steel SAE 1020", "Heat treatment": "annealed",
     "Su": 395, "Sy": 295, "A5": 36.5, "Bhn": 111, "E": 207000, "G": 79000, "mu": 0.3, "Ro": 7860},
    {"Std": "ANSI", "ID": "SAE1022-AR", "Material": "Steel SAE 1022", "Heat treatment": "as-rolled",
     "Su": 503, "Sy": 359, "A5": 35, "Bhn": 149, "E": 207000, "G": 79000, "mu": 0.3, "Ro": 7860},
    {"Std": "ANSI", "ID": "SAE1022-N", "Material": "Steel SAE 1022", "Heat treatment": "normalized",
     "Su": 483, "Sy": 359, "A5": 34, "Bhn": 143, "E": 207000, "G": 79000, "mu": 0.3, "Ro": 7860},
    {"Std": "ANSI", "ID": "SAE1022-A", "Material": "Steel SAE 1022", "Heat treatment": "annealed",
     "Su": 450, "Sy": 317, "A5": 35, "Bhn": 137, "E": 207000, "G": 79000, "mu": 0.3, "Ro": 7860},
    {"Std": "ANSI", "ID": "SAE1030-AR", "Material": "Steel SAE 1030", "Heat treatment": "as-rolled",
     "Su": 552, "Sy": 345, "A5": 32, "Bhn": 179, "E": 207000, "G": 79000, "mu": 0.3, "Ro": 7860},
    {"Std": "ANSI", "ID": "SAE1030-N", "Material": "Steel SAE 1030", "Heat treatment": "normalized",
     "Su": 517, "Sy": 345, "A5": 32, "Bhn": 149, "E": 207000, "G": 79000, "mu": 0.3, "Ro": 7860},
    {"Std": "ANSI", "ID": "SAE1030-A", "Material": "Steel SAE 1030", "Heat treatment": "annealed",
     "Su": 464, "Sy": 341, "A5": 31, "Bhn": 126, "E": 207000, "G": 79000, "mu": 0.3, "Ro": 7860},
    {"Std": "ANSI", "ID": "SAE1040-AR", "Material": "Steel SAE 1040", "Heat treatment": "as-rolled",
     "Su": 621, "Sy": 414, "A5": 25, "Bhn": 201, "E": 207000, "G": 79000, "mu": 0.3, "Ro": 7860,
     "Desc": "Medium carbon steel for forged shafts and gears"},
    {"Std": "ANSI", "ID": "SAE1040-N", "Material": "Steel SAE 1040", "Heat treatment": "normalized",
     "Su": 590, "Sy": 374, "A5": 28, "Bhn": 170, "E": 207000, "G": 79000, "mu": 0.3, "Ro": 7860},
]

# Row column -> record field
NUMERIC_COLUMNS: Tuple[Tuple[str, str], ...] = (
    ("Su", "ultimate_tensile_strength"),
    ("Sy", "yield_strength"),
    ("A5", "elongation"),
    ("Bhn", "hardness"),
    ("E", "elastic_modulus"),
    ("G", "shear_modulus"),
    ("mu", "poisson_ratio"),
    ("Ro", "density"),
)
TEXT_COLUMNS: Tuple[Tuple[str, str], ...] = (
    ("Std", "standard"),
    ("ID", "id"),
    ("Material", "name"),
    ("Heat treatment", "heat_treatment"),
)
# Must be > 0, they are divided by downstream
POSITIVE_COLUMNS = ("E", "Ro")


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def parse_record(row: Mapping) -> MaterialRecord:
    """Converts one catalog row into a MaterialRecord, raising DataError if malformed."""
    record_id = row.get("ID")
    fields = {}

    for column, attr in TEXT_COLUMNS:
        value = row.get(column)
        if not isinstance(value, str) or not value.strip():
            raise DataError(f"missing text column '{column}'", record_id, column)
        fields[attr] = value

    for column, attr in NUMERIC_COLUMNS:
        if column not in row or row[column] is None:
            raise DataError(f"missing numeric column '{column}'", record_id, column)
        value = row[column]
        if not _is_number(value):
            raise DataError(f"column '{column}' is not a finite number: {value!r}", record_id, column)
        if column in POSITIVE_COLUMNS and value <= 0:
            raise DataError(f"column '{column}' must be positive, got {value!r}", record_id, column)
        fields[attr] = float(value)

    ph = row.get("pH")
    if ph is not None and not _is_number(ph):
        raise DataError(f"column 'pH' is not a finite number: {ph!r}", record_id, "pH")
    fields["ph"] = float(ph) if ph is not None else None
    fields["description"] = row.get("Desc")

    return MaterialRecord(**fields)


def load_catalog(rows: Iterable[Mapping], strict: bool = True) -> Tuple[MaterialRecord, ...]:
    """
    Builds the immutable catalog from raw rows, keeping row order.

    Args:
        rows: Mappings using the catalog column names (Std, ID, Material, ...).
        strict: Raise on the first malformed row. When False, malformed
            rows are skipped and logged.

    Returns:
        Tuple[MaterialRecord, ...]: The validated catalog.
    """
    catalog: List[MaterialRecord] = []
    seen = set()

    for index, row in enumerate(rows):
        try:
            record = parse_record(row)
            if record.id in seen:
                raise DataError("duplicate material id", record.id, "ID")
        except DataError as exc:
            if strict:
                raise
            logger.warning("Skipping catalog row %d: %s", index, exc)
            continue
        seen.add(record.id)
        catalog.append(record)

    if not catalog:
        raise DataError("catalog is empty")

    logger.debug("Loaded %d materials", len(catalog))
    return tuple(catalog)


def get_catalog() -> Tuple[MaterialRecord, ...]:
    """Returns the bundled catalog."""
    return load_catalog(MATERIALS)
