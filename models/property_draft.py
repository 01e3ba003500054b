# -*- coding: utf-8 -*-
"""
Container draft model.

The draft is the in-progress aggregate collected across the submission
wizard steps. It is created empty (or seeded from an existing container in
edit mode), changed only by merging one step fragment at a time, and
discarded after a successful submission.
"""

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, List, Optional

from models.unit import UnitDraft, parse_int


class RentalMode(str, Enum):
    """How a container is rented."""
    BY_UNIT = "by_unit"
    COMPLETE = "complete"

    @classmethod
    def parse(cls, value) -> "RentalMode":
        if isinstance(value, cls):
            return value
        return cls(value or cls.BY_UNIT.value)


class PropertyType(str, Enum):
    """Property classification selected on the first step."""
    HABITACION = "habitacion"
    PENSION = "pension"
    APARTAMENTO = "apartamento"
    APARTA_ESTUDIO = "aparta-estudio"


# Backend classification ids
PROPERTY_TYPE_IDS = {
    PropertyType.HABITACION.value: 1,
    PropertyType.PENSION.value: 2,
    PropertyType.APARTAMENTO.value: 3,
    PropertyType.APARTA_ESTUDIO.value: 4,
}
DEFAULT_TYPE_ID = PROPERTY_TYPE_IDS[PropertyType.PENSION.value]

# Classifications offered by the type selection step
CONTAINER_PROPERTY_TYPES = (
    PropertyType.PENSION,
    PropertyType.APARTAMENTO,
    PropertyType.APARTA_ESTUDIO,
)


def type_id_for(property_type: Optional[str]) -> int:
    """Classification id for a selector value; unknown values fall back to pension."""
    if isinstance(property_type, PropertyType):
        property_type = property_type.value
    return PROPERTY_TYPE_IDS.get(property_type or "", DEFAULT_TYPE_ID)


def property_type_for(type_id: Optional[int]) -> Optional[str]:
    for name, value in PROPERTY_TYPE_IDS.items():
        if value == type_id:
            return name
    return None


class ServiceKind(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    HOUSEKEEPING = "housekeeping"
    LAUNDRY = "laundry"
    WIFI = "wifi"
    UTILITIES = "utilities"


class RuleKind(str, Enum):
    SMOKING = "smoking"
    PETS = "pets"
    VISITS = "visits"
    NOISE = "noise"
    CURFEW = "curfew"

    @property
    def takes_value(self) -> bool:
        """Rules described by free text instead of an allowed flag."""
        return self in (RuleKind.VISITS, RuleKind.NOISE, RuleKind.CURFEW)


@dataclass
class ServiceOffering:
    service_type: ServiceKind
    is_included: bool = True
    additional_cost: Optional[int] = None
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "service_type": self.service_type.value,
            "is_included": self.is_included,
            "additional_cost": self.additional_cost,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServiceOffering":
        return cls(
            service_type=ServiceKind(data.get("service_type") or data.get("serviceType")),
            is_included=bool(data.get("is_included", data.get("isIncluded", True))),
            additional_cost=parse_int(data.get("additional_cost", data.get("additionalCost"))),
            description=data.get("description"),
        )


@dataclass
class HouseRule:
    rule_type: RuleKind
    is_allowed: Optional[bool] = None
    value: Optional[str] = None
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rule_type": self.rule_type.value,
            "is_allowed": self.is_allowed,
            "value": self.value,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HouseRule":
        return cls(
            rule_type=RuleKind(data.get("rule_type") or data.get("ruleType")),
            is_allowed=data.get("is_allowed", data.get("isAllowed")),
            value=data.get("value"),
            description=data.get("description"),
        )


@dataclass
class NearbyInstitution:
    institution_id: int
    distance: Optional[int] = None  # meters

    def to_dict(self) -> Dict[str, Any]:
        return {"institution_id": self.institution_id, "distance": self.distance}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NearbyInstitution":
        return cls(
            institution_id=data.get("institution_id", data.get("institutionId")),
            distance=data.get("distance"),
        )


@dataclass
class LocationInfo:
    street: Optional[str] = None
    neighborhood: Optional[str] = None
    city_id: Optional[int] = None
    department_id: Optional[int] = None
    latitude: float = 0.0
    longitude: float = 0.0
    nearby_institutions: List[NearbyInstitution] = field(default_factory=list)

    @property
    def has_coordinates(self) -> bool:
        return bool(self.latitude) and bool(self.longitude)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "street": self.street,
            "neighborhood": self.neighborhood,
            "city_id": self.city_id,
            "department_id": self.department_id,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "nearby_institutions": [n.to_dict() for n in self.nearby_institutions],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LocationInfo":
        return cls(
            street=data.get("street"),
            neighborhood=data.get("neighborhood"),
            city_id=data.get("city_id"),
            department_id=data.get("department_id"),
            latitude=float(data.get("latitude") or 0.0),
            longitude=float(data.get("longitude") or 0.0),
            nearby_institutions=[
                NearbyInstitution.from_dict(n) for n in data.get("nearby_institutions") or []
            ],
        )


@dataclass
class ContainerDraft:
    """In-progress container collected by the submission wizard."""

    title: Optional[str] = None
    description: Optional[str] = None
    type_id: int = DEFAULT_TYPE_ID
    type_name: Optional[str] = None
    rental_mode: RentalMode = RentalMode.BY_UNIT
    requires_deposit: bool = True
    minimum_contract_months: Optional[int] = 6
    location: LocationInfo = field(default_factory=LocationInfo)
    services: List[ServiceOffering] = field(default_factory=list)
    rules: List[HouseRule] = field(default_factory=list)
    common_area_ids: List[int] = field(default_factory=list)
    units: List[UnitDraft] = field(default_factory=list)
    images: List[str] = field(default_factory=list)

    # Present only in edit mode
    property_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to plain JSON-compatible data (snake_case)."""
        return {
            "title": self.title,
            "description": self.description,
            "type_id": self.type_id,
            "type_name": self.type_name,
            "rental_mode": self.rental_mode.value,
            "requires_deposit": self.requires_deposit,
            "minimum_contract_months": self.minimum_contract_months,
            "location": self.location.to_dict(),
            "services": [s.to_dict() for s in self.services],
            "rules": [r.to_dict() for r in self.rules],
            "common_area_ids": list(self.common_area_ids),
            "units": [u.to_dict() for u in self.units],
            "images": list(self.images),
            "property_id": self.property_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContainerDraft":
        return cls(
            title=data.get("title"),
            description=data.get("description"),
            type_id=data.get("type_id") or DEFAULT_TYPE_ID,
            type_name=data.get("type_name"),
            rental_mode=RentalMode.parse(data.get("rental_mode")),
            requires_deposit=data.get("requires_deposit", True),
            minimum_contract_months=data.get("minimum_contract_months"),
            location=LocationInfo.from_dict(data.get("location") or {}),
            services=[ServiceOffering.from_dict(s) for s in data.get("services") or []],
            rules=[HouseRule.from_dict(r) for r in data.get("rules") or []],
            common_area_ids=list(data.get("common_area_ids") or []),
            units=[UnitDraft.from_dict(u) for u in data.get("units") or []],
            images=list(data.get("images") or []),
            property_id=data.get("property_id"),
        )

    @classmethod
    def from_api(cls, entity: Dict[str, Any]) -> "ContainerDraft":
        """Seed a draft from a container entity returned by GET /containers/{id}."""
        location = entity.get("location") or {}
        city = location.get("city")
        department = location.get("department")

        images = []
        for image in entity.get("images") or []:
            images.append(image.get("url") if isinstance(image, dict) else image)

        common_area_ids = entity.get("commonAreaIds")
        if common_area_ids is None:
            common_area_ids = [a.get("id") for a in entity.get("commonAreas") or []]

        type_info = entity.get("type") or {}

        return cls(
            title=entity.get("title"),
            description=entity.get("description"),
            type_id=entity.get("typeId") or type_info.get("id") or DEFAULT_TYPE_ID,
            type_name=type_info.get("name"),
            rental_mode=RentalMode.parse(entity.get("rentalMode")),
            requires_deposit=entity.get("requiresDeposit", True),
            minimum_contract_months=entity.get("minimumContractMonths"),
            location=LocationInfo(
                street=location.get("street"),
                neighborhood=location.get("neighborhood"),
                city_id=location.get("cityId") or (city.get("id") if isinstance(city, dict) else None),
                department_id=location.get("departmentId") or (
                    department.get("id") if isinstance(department, dict) else None
                ),
                latitude=float(location.get("latitude") or 0.0),
                longitude=float(location.get("longitude") or 0.0),
                nearby_institutions=[
                    NearbyInstitution.from_dict(n) for n in entity.get("nearbyInstitutions") or []
                ],
            ),
            services=[ServiceOffering.from_dict(s) for s in entity.get("services") or []],
            rules=[HouseRule.from_dict(r) for r in entity.get("rules") or []],
            common_area_ids=[a for a in common_area_ids if a is not None],
            units=[UnitDraft.from_api(u) for u in entity.get("units") or []],
            images=[i for i in images if i],
            property_id=str(entity["id"]) if entity.get("id") is not None else None,
        )


_DRAFT_FIELDS = frozenset(f.name for f in fields(ContainerDraft))


def merge_fragment(draft: ContainerDraft, fragment: Dict[str, Any]) -> ContainerDraft:
    """
    Shallow top-level merge of a step fragment into the draft.

    Returns a new draft; keys in the fragment overwrite the draft's values.
    Unknown keys are a programming error in the step that produced them.
    """
    if not fragment:
        return draft

    unknown = set(fragment) - _DRAFT_FIELDS
    if unknown:
        raise ValueError(f"Unknown draft fields: {sorted(unknown)}")

    changes = dict(fragment)
    if "rental_mode" in changes:
        changes["rental_mode"] = RentalMode.parse(changes["rental_mode"])
    return replace(draft, **changes)
