# -*- coding: utf-8 -*-
"""
Unit list editor.

Ordered list of unit drafts edited inside the unit builder step. Units are
validated before they enter the list; a complete-mode container holds a
single unit that represents the whole property.
"""

from dataclasses import dataclass
from typing import List, Optional

from models.property_draft import RentalMode
from models.unit import UnitDraft
from services.translation_manager import tr
from services.wizard.step_validator import StepValidationResult, StepValidator
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class RentSummary:
    count: int
    average: int
    minimum: int
    maximum: int


class UnitListEditor:
    """Add, replace and remove units by position."""

    def __init__(self, units: Optional[List[UnitDraft]] = None,
                 rental_mode: RentalMode = RentalMode.BY_UNIT):
        self._units: List[UnitDraft] = [u.copy() for u in units or []]
        self.rental_mode = rental_mode

    @property
    def units(self) -> List[UnitDraft]:
        """Copy of the current list."""
        return [u.copy() for u in self._units]

    def __len__(self) -> int:
        return len(self._units)

    def get(self, index: int) -> UnitDraft:
        return self._units[index].copy()

    def can_add(self) -> bool:
        return not (self.rental_mode == RentalMode.COMPLETE and self._units)

    def add(self, unit: UnitDraft) -> StepValidationResult:
        """Validate and append. Invalid units are not appended."""
        result = StepValidator.validate_unit(unit)
        if not self.can_add():
            result.add_error(tr("validation.units.complete_single"), "units")
        if result.is_valid:
            self._units.append(unit.copy())
            logger.debug(f"Unit added: {unit.title} ({len(self._units)} total)")
        return result

    def replace(self, index: int, unit: UnitDraft) -> StepValidationResult:
        """Validate and overwrite the unit at `index`."""
        self._check_index(index)
        result = StepValidator.validate_unit(unit)
        if result.is_valid:
            replacement = unit.copy()
            if replacement.unit_id is None:
                replacement.unit_id = self._units[index].unit_id
            self._units[index] = replacement
            logger.debug(f"Unit {index} replaced: {unit.title}")
        return result

    def remove(self, index: int) -> UnitDraft:
        """Delete the unit at `index` (its images and amenities go with it)."""
        self._check_index(index)
        removed = self._units.pop(index)
        logger.debug(f"Unit {index} removed: {removed.title}")
        return removed

    def validate(self) -> StepValidationResult:
        return StepValidator.validate_unit_list(self._units, self.rental_mode)

    def summary(self) -> Optional[RentSummary]:
        rents = [u.monthly_rent for u in self._units if u.monthly_rent is not None]
        if not rents:
            return None
        return RentSummary(
            count=len(self._units),
            average=round(sum(rents) / len(rents)),
            minimum=min(rents),
            maximum=max(rents),
        )

    def _check_index(self, index: int):
        if not 0 <= index < len(self._units):
            raise IndexError(f"Unit index out of range: {index}")
