# -*- coding: utf-8 -*-
"""
Submission payload assembly.

Pure transformation from a ContainerDraft to the camelCase body accepted by
the container endpoints. Optional values that are missing are left out of
the payload instead of being defaulted; only `currency` and `status` are
always present.
"""

from typing import Any, Dict, Optional

from app.config import Config
from models.property_draft import (
    ContainerDraft, HouseRule, LocationInfo, NearbyInstitution, RentalMode, ServiceOffering
)
from models.unit import UnitDraft

SUBMISSION_STATUS = "pending"


def _compact(values: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None."""
    return {key: value for key, value in values.items() if value is not None}


def _location(location: LocationInfo) -> Dict[str, Any]:
    return _compact({
        "street": location.street,
        "neighborhood": location.neighborhood,
        "cityId": location.city_id,
        "departmentId": location.department_id,
        "latitude": location.latitude,
        "longitude": location.longitude,
    })


def _institution(institution: NearbyInstitution) -> Dict[str, Any]:
    # distance is nullable on the wire
    return {"institutionId": institution.institution_id, "distance": institution.distance}


def _service(service: ServiceOffering) -> Dict[str, Any]:
    return _compact({
        "serviceType": service.service_type.value,
        "isIncluded": service.is_included,
        "additionalCost": service.additional_cost,
        "description": service.description,
    })


def _rule(rule: HouseRule) -> Dict[str, Any]:
    return _compact({
        "ruleType": rule.rule_type.value,
        "isAllowed": rule.is_allowed,
        "value": rule.value,
        "description": rule.description,
    })


def _unit(unit: UnitDraft, latitude: Optional[float], longitude: Optional[float]) -> Dict[str, Any]:
    # Units always take the container's coordinates; their own are ignored
    return _compact({
        "id": unit.unit_id,
        "title": unit.title,
        "description": unit.description or None,
        "monthlyRent": unit.monthly_rent,
        "deposit": unit.deposit,
        "area": unit.area,
        "roomType": unit.room_type.value if unit.room_type else None,
        "bedsInRoom": unit.beds_in_room,
        "amenityIds": list(unit.amenities),
        "images": list(unit.images),
        "latitude": latitude,
        "longitude": longitude,
    })


def assemble_payload(draft: ContainerDraft) -> Dict[str, Any]:
    """
    Build the submission body for a draft.

    - complete mode: no services, rules or commonAreaIds keys at all
    - every unit carries the container's latitude/longitude
    - unit `amenities` are sent as `amenityIds`
    """
    location = draft.location
    latitude = location.latitude if location is not None else None
    longitude = location.longitude if location is not None else None

    payload = _compact({
        "title": draft.title,
        "description": draft.description,
        "typeId": draft.type_id,
        "currency": Config.DEFAULT_CURRENCY,
        "status": SUBMISSION_STATUS,
        "rentalMode": draft.rental_mode.value if draft.rental_mode else None,
        "requiresDeposit": draft.requires_deposit,
        "minimumContractMonths": draft.minimum_contract_months,
        "location": _location(location) if location is not None else None,
    })

    if location is not None:
        payload["nearbyInstitutions"] = [_institution(n) for n in location.nearby_institutions]

    if draft.rental_mode != RentalMode.COMPLETE:
        payload["services"] = [_service(s) for s in draft.services]
        payload["rules"] = [_rule(r) for r in draft.rules]
        payload["commonAreaIds"] = list(draft.common_area_ids)

    payload["units"] = [_unit(u, latitude, longitude) for u in draft.units]
    payload["images"] = list(draft.images)

    return payload
