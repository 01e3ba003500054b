# -*- coding: utf-8 -*-
"""Reference data shown as options by the wizard steps."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass
class Amenity:
    id: int
    name: str
    icon: Optional[str] = None
    category: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Amenity":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            icon=data.get("icon"),
            category=data.get("category"),
        )


@dataclass
class CommonArea:
    id: int
    name: str
    icon: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CommonArea":
        return cls(id=data["id"], name=data.get("name", ""), icon=data.get("icon"))


@dataclass
class City:
    id: int
    name: str
    department_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "City":
        department = data.get("department")
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            department_id=data.get("departmentId") or (
                department.get("id") if isinstance(department, dict) else None
            ),
        )


# Used until the backend list arrives, or when it cannot be fetched
DEFAULT_COMMON_AREAS: List[CommonArea] = [
    CommonArea(1, "Cocina compartida", "🍳"),
    CommonArea(2, "Sala de estar", "🛋️"),
    CommonArea(3, "Comedor", "🍽️"),
    CommonArea(4, "Lavandería", "🧺"),
    CommonArea(5, "Estacionamiento", "🚗"),
    CommonArea(6, "Terraza", "🌿"),
    CommonArea(7, "Zona de estudio", "📚"),
]


@dataclass
class ReferenceData:
    """Option lists fetched once per wizard instance."""
    amenities: List[Amenity]
    common_areas: List[CommonArea]
    cities: List[City]

    @classmethod
    def defaults(cls) -> "ReferenceData":
        return cls(amenities=[], common_areas=list(DEFAULT_COMMON_AREAS), cities=[])
