# -*- coding: utf-8 -*-
"""Shared fixtures."""

import os

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from models.property_draft import (
    ContainerDraft, HouseRule, LocationInfo, NearbyInstitution, RentalMode,
    RuleKind, ServiceKind, ServiceOffering
)
from models.unit import RoomType, UnitDraft
from services.api_client import reset_api_client
from services.draft_persistence import DraftPersistence, SessionStorage
from services.exceptions import NetworkException
from services.translation_manager import set_language


class FakeApiClient:
    """Records calls instead of talking HTTP; responses are configurable."""

    def __init__(self):
        self.calls = []
        self.create_response = {"id": 101}
        self.update_response = {"id": 42}
        self.container = None
        self.amenities = [{"id": 1, "name": "WiFi", "icon": "📶"}]
        self.common_areas = []
        self.cities = [{"id": 5, "name": "Bogotá", "departmentId": 11}]
        self.error = None
        # Reference lists ("amenities", "common_areas", "cities") that fail to load
        self.failing_lists = set()

    def _call(self, name, *args):
        self.calls.append((name,) + args)
        if self.error is not None:
            raise self.error

    def create_container(self, payload):
        self._call("create_container", payload)
        return self.create_response

    def update_container(self, property_id, payload):
        self._call("update_container", property_id, payload)
        return self.update_response

    def admin_create_container(self, payload, target_owner_id):
        self._call("admin_create_container", payload, target_owner_id)
        return self.create_response

    def get_container(self, property_id):
        self._call("get_container", property_id)
        return self.container

    def _reference(self, name):
        if name in self.failing_lists:
            raise NetworkException(f"{name}: connection refused")
        return getattr(self, name)

    def list_amenities(self):
        return self._reference("amenities")

    def list_common_areas(self):
        return self._reference("common_areas")

    def list_cities(self):
        return self._reference("cities")

    @property
    def write_calls(self):
        writes = ("create_container", "update_container", "admin_create_container")
        return [call for call in self.calls if call[0] in writes]


@pytest.fixture(autouse=True)
def spanish_and_fresh_client():
    """Every test runs in Spanish without a shared API client."""
    set_language("es")
    reset_api_client()
    yield
    reset_api_client()


@pytest.fixture
def fake_api():
    return FakeApiClient()


@pytest.fixture
def storage():
    return SessionStorage()


@pytest.fixture
def persistence(storage):
    return DraftPersistence(storage=storage)


def make_unit(title="Room 1", rent=400000, room_type=RoomType.INDIVIDUAL, **kwargs):
    return UnitDraft(title=title, monthly_rent=rent, room_type=room_type, **kwargs)


def make_draft(rental_mode=RentalMode.BY_UNIT, units=None, **kwargs):
    """A draft that passes every step's validation."""
    values = dict(
        title="Pensión Universitaria Central",
        description="Casa amplia a dos cuadras de la universidad, con habitaciones iluminadas.",
        type_id=2,
        type_name="pension",
        rental_mode=rental_mode,
        location=LocationInfo(
            street="Calle 10 # 20-30",
            neighborhood="Chapinero",
            city_id=5,
            department_id=11,
            latitude=4.6486,
            longitude=-74.0628,
            nearby_institutions=[NearbyInstitution(7, 350), NearbyInstitution(9)],
        ),
        services=[
            ServiceOffering(ServiceKind.WIFI),
            ServiceOffering(ServiceKind.LAUNDRY, is_included=False, additional_cost=20000),
        ],
        rules=[
            HouseRule(RuleKind.PETS, is_allowed=False),
            HouseRule(RuleKind.CURFEW, value="11:00 p.m."),
        ],
        common_area_ids=[1, 3],
        units=[make_unit()] if units is None else units,
        images=["https://cdn.example.com/front.jpg"],
    )
    values.update(kwargs)
    return ContainerDraft(**values)


@pytest.fixture
def unit_factory():
    return make_unit


@pytest.fixture
def draft_factory():
    return make_draft
