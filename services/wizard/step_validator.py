# -*- coding: utf-8 -*-
"""
Step validation service for the Property Submission Wizard.

Validates step fragments and unit drafts without UI coupling. Client
validation is advisory: the backend checks everything again.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from app.config import Config
from models.property_draft import (
    CONTAINER_PROPERTY_TYPES, HouseRule, LocationInfo, RentalMode, ServiceOffering
)
from models.unit import RoomType, UnitDraft
from services.translation_manager import tr

TITLE_MIN, TITLE_MAX = 10, 100
DESCRIPTION_MIN, DESCRIPTION_MAX = 50, 500
CONTRACT_MIN_MONTHS, CONTRACT_MAX_MONTHS = 1, 24

UNIT_TITLE_MIN, UNIT_TITLE_MAX = 5, 100
UNIT_BEDS_MIN, UNIT_BEDS_MAX = 1, 10
SHARED_ROOM_MIN_BEDS = 2


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    field_errors: Dict[str, str] = field(default_factory=dict)

    def add_error(self, message: str, field_name: Optional[str] = None):
        """Add an error message, optionally attached to a form field."""
        self.errors.append(message)
        if field_name and field_name not in self.field_errors:
            self.field_errors[field_name] = message
        self.is_valid = False


class StepValidator:
    """Validates wizard step data."""

    @staticmethod
    def validate_property_type(property_type: Optional[str]) -> StepValidationResult:
        result = StepValidationResult()
        valid = {t.value for t in CONTAINER_PROPERTY_TYPES}
        if property_type not in valid:
            result.add_error(tr("validation.type.required"), "property_type")
        return result

    @staticmethod
    def validate_basic_info(
        title: Optional[str],
        description: Optional[str],
        rental_mode: Optional[RentalMode],
        minimum_contract_months: Optional[int],
    ) -> StepValidationResult:
        result = StepValidationResult()

        title = (title or "").strip()
        if len(title) < TITLE_MIN:
            result.add_error(tr("validation.title.min", min=TITLE_MIN), "title")
        elif len(title) > TITLE_MAX:
            result.add_error(tr("validation.title.max", max=TITLE_MAX), "title")

        description = (description or "").strip()
        if len(description) < DESCRIPTION_MIN:
            result.add_error(tr("validation.description.min", min=DESCRIPTION_MIN), "description")
        elif len(description) > DESCRIPTION_MAX:
            result.add_error(tr("validation.description.max", max=DESCRIPTION_MAX), "description")

        if rental_mode is None:
            result.add_error(tr("validation.rental_mode.required"), "rental_mode")

        if minimum_contract_months is not None and not (
            CONTRACT_MIN_MONTHS <= minimum_contract_months <= CONTRACT_MAX_MONTHS
        ):
            result.add_error(
                tr("validation.contract.range", min=CONTRACT_MIN_MONTHS, max=CONTRACT_MAX_MONTHS),
                "minimum_contract_months"
            )

        return result

    @staticmethod
    def validate_location(location: LocationInfo) -> StepValidationResult:
        result = StepValidationResult()

        if not location.city_id:
            result.add_error(tr("validation.location.city"), "city_id")
        if not (location.street or "").strip():
            result.add_error(tr("validation.location.street"), "street")
        if not (location.neighborhood or "").strip():
            result.add_error(tr("validation.location.neighborhood"), "neighborhood")
        if not location.has_coordinates:
            result.add_error(tr("validation.location.coordinates"), "coordinates")

        for institution in location.nearby_institutions:
            if institution.distance is not None and institution.distance <= 0:
                result.add_error(tr("validation.location.distance"), "nearby_institutions")
                break

        return result

    @staticmethod
    def validate_services(services: List[ServiceOffering]) -> StepValidationResult:
        result = StepValidationResult()
        for service in services:
            if service.additional_cost is not None and service.additional_cost < 0:
                result.add_error(
                    tr("validation.service.cost", service=tr(f"service.{service.service_type.value}")),
                    service.service_type.value
                )
        return result

    @staticmethod
    def validate_rules(rules: List[HouseRule]) -> StepValidationResult:
        result = StepValidationResult()
        for rule in rules:
            if rule.rule_type.takes_value and not (rule.value or "").strip():
                result.add_error(
                    tr("validation.rule.value", rule=tr(f"rule.{rule.rule_type.value}")),
                    rule.rule_type.value
                )
        return result

    @staticmethod
    def validate_common_areas(common_area_ids: List[int]) -> StepValidationResult:
        result = StepValidationResult()
        if not common_area_ids:
            result.add_error(tr("validation.common_areas.required"), "common_area_ids")
        return result

    @staticmethod
    def validate_unit(unit: UnitDraft) -> StepValidationResult:
        """Field-level checks for one unit; errors are keyed by field name."""
        result = StepValidationResult()

        title = (unit.title or "").strip()
        if len(title) < UNIT_TITLE_MIN:
            result.add_error(tr("validation.unit.title.min", min=UNIT_TITLE_MIN), "title")
        elif len(title) > UNIT_TITLE_MAX:
            result.add_error(tr("validation.unit.title.max", max=UNIT_TITLE_MAX), "title")

        rent = unit.monthly_rent
        if rent is None:
            result.add_error(tr("validation.unit.rent.required"), "monthly_rent")
        elif not isinstance(rent, int) or isinstance(rent, bool):
            result.add_error(tr("validation.unit.rent.integer"), "monthly_rent")
        elif rent < Config.MIN_MONTHLY_RENT:
            result.add_error(
                tr("validation.unit.rent.min", min=f"{Config.MIN_MONTHLY_RENT:,}"), "monthly_rent"
            )

        if unit.deposit is not None and unit.deposit < 0:
            result.add_error(tr("validation.unit.deposit.negative"), "deposit")

        if unit.area is not None and unit.area < 0:
            result.add_error(tr("validation.unit.area.negative"), "area")

        if unit.room_type is None:
            result.add_error(tr("validation.unit.room_type.required"), "room_type")

        beds = unit.beds_in_room
        if beds is None or not (UNIT_BEDS_MIN <= beds <= UNIT_BEDS_MAX):
            result.add_error(
                tr("validation.unit.beds.range", min=UNIT_BEDS_MIN, max=UNIT_BEDS_MAX), "beds_in_room"
            )
        elif unit.room_type == RoomType.SHARED and beds < SHARED_ROOM_MIN_BEDS:
            result.add_error(
                tr("validation.unit.beds.shared", min=SHARED_ROOM_MIN_BEDS), "beds_in_room"
            )

        if len(unit.images) > Config.MAX_UNIT_IMAGES:
            result.add_error(tr("validation.unit.images.max", max=Config.MAX_UNIT_IMAGES), "images")

        return result

    @staticmethod
    def validate_unit_list(units: List[UnitDraft], rental_mode: RentalMode) -> StepValidationResult:
        """Exit check of the unit builder step."""
        result = StepValidationResult()
        if rental_mode == RentalMode.COMPLETE:
            if len(units) != 1:
                result.add_error(tr("validation.units.complete_exactly_one"), "units")
        elif not units:
            result.add_error(tr("validation.units.required"), "units")
        return result

    @staticmethod
    def validate_gallery(images: List[str]) -> StepValidationResult:
        result = StepValidationResult()
        if not images:
            result.add_error(tr("validation.gallery.required"), "images")
        elif len(images) > Config.MAX_GALLERY_IMAGES:
            result.add_error(tr("validation.gallery.max", max=Config.MAX_GALLERY_IMAGES), "images")
        return result
