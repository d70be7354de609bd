import logging
import re
from typing import List, Optional, Sequence

from steel_viewer.models.material import MaterialRecord

logger = logging.getLogger(__name__)

# "Steel SAE 1015" -> "Steel SAE"; shortest prefix before a space + digits
_FAMILY_PATTERN = re.compile(r"(.*?)\s\d+")


def family_of(name: str) -> str:
    """Extracts the family part of a material name, or the full name if there is no grade number."""
    match = _FAMILY_PATTERN.match(name)
    return match.group(1) if match else name


def material_families(catalog: Sequence[MaterialRecord]) -> List[str]:
    """Distinct families in first-seen order, used as filter facets."""
    families: List[str] = []
    for material in catalog:
        family = family_of(material.name)
        if family not in families:
            families.append(family)
    return families


def filter_materials(catalog: Sequence[MaterialRecord], search_term: str = "",
                     category: Optional[str] = None) -> List[MaterialRecord]:
    """
    Filters the catalog by free text and an optional family facet.

    The search is a case-insensitive substring match on the name or heat
    treatment. The facet keeps only names containing it. Catalog order is kept.
    """
    term = (search_term or "").lower()
    result = [
        m for m in catalog
        if (term in m.name.lower() or term in m.heat_treatment.lower())
        and (not category or category in m.name)
    ]
    logger.debug("Filter %r / %r -> %d materials", search_term, category, len(result))
    return result
