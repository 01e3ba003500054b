# -*- coding: utf-8 -*-
"""
Listing Data Models
"""

from .property_draft import (
    ContainerDraft,
    HouseRule,
    LocationInfo,
    NearbyInstitution,
    PropertyType,
    RentalMode,
    RuleKind,
    ServiceKind,
    ServiceOffering,
    merge_fragment,
)
from .reference_data import Amenity, City, CommonArea, ReferenceData
from .unit import RoomType, UnitDraft

__all__ = [
    "ContainerDraft",
    "HouseRule",
    "LocationInfo",
    "NearbyInstitution",
    "PropertyType",
    "RentalMode",
    "RuleKind",
    "ServiceKind",
    "ServiceOffering",
    "merge_fragment",
    "Amenity",
    "City",
    "CommonArea",
    "ReferenceData",
    "RoomType",
    "UnitDraft",
]
