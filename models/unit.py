# -*- coding: utf-8 -*-
"""
Unit draft model.

A unit is one independently rentable sub-entity of a container (usually a
room). Units are addressed by their position in the container's unit list.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class RoomType(str, Enum):
    """Room occupancy type."""
    INDIVIDUAL = "individual"
    SHARED = "shared"

    @classmethod
    def parse(cls, value) -> Optional["RoomType"]:
        if value is None or value == "":
            return None
        if isinstance(value, cls):
            return value
        return cls(value)


@dataclass
class UnitDraft:
    """A rentable unit being built inside the unit builder step."""

    title: str = ""
    description: str = ""
    monthly_rent: Optional[int] = None
    deposit: Optional[int] = None
    area: Optional[int] = None  # m²
    room_type: Optional[RoomType] = RoomType.INDIVIDUAL
    beds_in_room: int = 1
    amenities: List[int] = field(default_factory=list)
    images: List[str] = field(default_factory=list)

    # Raw coordinates; assembly always replaces them with the container's
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    # Set only for units loaded from the backend (edit mode)
    unit_id: Optional[int] = None

    @property
    def display_title(self) -> str:
        return self.title or "-"

    def copy(self) -> "UnitDraft":
        """Return an independent copy (lists included)."""
        return UnitDraft.from_dict(self.to_dict())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "monthly_rent": self.monthly_rent,
            "deposit": self.deposit,
            "area": self.area,
            "room_type": self.room_type.value if self.room_type else None,
            "beds_in_room": self.beds_in_room,
            "amenities": list(self.amenities),
            "images": list(self.images),
            "latitude": self.latitude,
            "longitude": self.longitude,
            "unit_id": self.unit_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UnitDraft":
        return cls(
            title=data.get("title") or "",
            description=data.get("description") or "",
            monthly_rent=data.get("monthly_rent"),
            deposit=data.get("deposit"),
            area=data.get("area"),
            room_type=RoomType.parse(data.get("room_type")),
            beds_in_room=data.get("beds_in_room") or 1,
            amenities=list(data.get("amenities") or []),
            images=list(data.get("images") or []),
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            unit_id=data.get("unit_id"),
        )

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "UnitDraft":
        """Build from a backend unit entity (camelCase, nested images/amenities)."""
        images = []
        for image in data.get("images") or []:
            images.append(image.get("url") if isinstance(image, dict) else image)
        amenities = []
        for amenity in data.get("amenities") or []:
            amenities.append(amenity.get("id") if isinstance(amenity, dict) else amenity)

        return cls(
            title=data.get("title") or "",
            description=data.get("description") or "",
            monthly_rent=parse_int(data.get("monthlyRent")),
            deposit=parse_int(data.get("deposit")),
            area=parse_int(data.get("area")),
            room_type=RoomType.parse(data.get("roomType")),
            beds_in_room=data.get("bedsInRoom") or 1,
            amenities=[a for a in amenities if a is not None],
            images=[i for i in images if i],
            unit_id=data.get("id"),
        )


def parse_int(value) -> Optional[int]:
    # Decimal columns come back as strings ("850000.00")
    if value is None or value == "":
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None
