import logging
from typing import Dict, List, Sequence

from steel_viewer.models.material import MaterialRecord

logger = logging.getLogger(__name__)


class SelectionState:
    """Holds the focused material and the comparison set for one session.

    Records are references into the catalog; nothing here copies or edits them.
    """

    def __init__(self, catalog: Sequence[MaterialRecord], focused: MaterialRecord):
        self.catalog = catalog
        self._ids = {m.id for m in catalog}
        if focused.id not in self._ids:
            raise ValueError(f"Initial focus '{focused.id}' is not in the catalog")
        self.focused: MaterialRecord = focused
        # Keyed by id; dict keeps insertion order for stable chart colouring
        self._comparison: Dict[str, MaterialRecord] = {}

    def contains(self, material: MaterialRecord) -> bool:
        return material.id in self._ids

    def select(self, material: MaterialRecord) -> bool:
        """Focuses ``material``. Returns False (no-op) if it is not a catalog member."""
        if not self.contains(material):
            logger.debug("Ignoring selection of unknown material %s", material.id)
            return False
        self.focused = material
        logger.debug("Focused material %s", material.id)
        return True

    def toggle_comparison(self, material: MaterialRecord) -> bool:
        """Adds or removes ``material`` from the comparison set.

        Returns True if the material is in the set afterwards.
        """
        if not self.contains(material):
            logger.debug("Ignoring comparison toggle of unknown material %s", material.id)
            return False
        if material.id in self._comparison:
            del self._comparison[material.id]
            return False
        self._comparison[material.id] = material
        return True

    def is_compared(self, material: MaterialRecord) -> bool:
        return material.id in self._comparison

    @property
    def comparison(self) -> List[MaterialRecord]:
        return list(self._comparison.values())

    def chart_materials(self) -> List[MaterialRecord]:
        """Focused material first, then the comparison set without repeating it."""
        return [self.focused] + [m for m in self._comparison.values() if m.id != self.focused.id]
