# -*- coding: utf-8 -*-
"""
Tests for submission payload assembly.

Tests cover:
- Conditional inclusion of services/rules/common areas
- Coordinate propagation from the container to every unit
- Field renames to the wire format
"""

from models.property_draft import LocationInfo, RentalMode
from services.payload_assembler import assemble_payload


class TestContainerFields:

    def test_top_level_keys(self, draft_factory):
        payload = assemble_payload(draft_factory())

        assert payload["title"] == "Pensión Universitaria Central"
        assert payload["typeId"] == 2
        assert payload["currency"] == "COP"
        assert payload["status"] == "pending"
        assert payload["rentalMode"] == "by_unit"
        assert payload["requiresDeposit"] is True
        assert payload["minimumContractMonths"] == 6
        assert payload["images"] == ["https://cdn.example.com/front.jpg"]

    def test_location_is_camel_case(self, draft_factory):
        payload = assemble_payload(draft_factory())

        assert payload["location"] == {
            "street": "Calle 10 # 20-30",
            "neighborhood": "Chapinero",
            "cityId": 5,
            "departmentId": 11,
            "latitude": 4.6486,
            "longitude": -74.0628,
        }
        assert payload["nearbyInstitutions"] == [
            {"institutionId": 7, "distance": 350},
            {"institutionId": 9, "distance": None},
        ]

    def test_missing_optional_fields_are_absent(self, draft_factory):
        draft = draft_factory(description=None, minimum_contract_months=None,
                              location=LocationInfo(latitude=1.0, longitude=2.0))
        payload = assemble_payload(draft)

        assert "description" not in payload
        assert "minimumContractMonths" not in payload
        assert "street" not in payload["location"]
        assert "cityId" not in payload["location"]


class TestRentalModeInclusion:

    def test_by_unit_includes_container_config(self, draft_factory):
        payload = assemble_payload(draft_factory())

        assert payload["services"] == [
            {"serviceType": "wifi", "isIncluded": True},
            {"serviceType": "laundry", "isIncluded": False, "additionalCost": 20000},
        ]
        assert payload["rules"] == [
            {"ruleType": "pets", "isAllowed": False},
            {"ruleType": "curfew", "value": "11:00 p.m."},
        ]
        assert payload["commonAreaIds"] == [1, 3]

    def test_complete_omits_container_config(self, draft_factory):
        """Leftover services/rules from an earlier by-unit answer are not sent."""
        payload = assemble_payload(draft_factory(rental_mode=RentalMode.COMPLETE))

        assert payload["rentalMode"] == "complete"
        assert "services" not in payload
        assert "rules" not in payload
        assert "commonAreaIds" not in payload


class TestUnits:

    def test_units_inherit_container_coordinates(self, draft_factory, unit_factory):
        units = [
            unit_factory("Room 1", latitude=10.0, longitude=20.0),
            unit_factory("Room 2"),
            unit_factory("Room 3", latitude=-1.5),
        ]
        payload = assemble_payload(draft_factory(units=units))

        assert len(payload["units"]) == 3
        for unit in payload["units"]:
            assert unit["latitude"] == 4.6486
            assert unit["longitude"] == -74.0628

    def test_amenities_renamed(self, draft_factory, unit_factory):
        unit = unit_factory(amenities=[1, 4], images=["a.jpg"])
        assembled = assemble_payload(draft_factory(units=[unit]))["units"][0]

        assert assembled["amenityIds"] == [1, 4]
        assert "amenities" not in assembled
        assert assembled["images"] == ["a.jpg"]
        assert assembled["roomType"] == "individual"
        assert assembled["monthlyRent"] == 400000
        assert assembled["bedsInRoom"] == 1

    def test_new_units_carry_no_id(self, draft_factory, unit_factory):
        payload = assemble_payload(draft_factory(units=[unit_factory(), unit_factory(unit_id=8)]))

        assert "id" not in payload["units"][0]
        assert payload["units"][1]["id"] == 8

    def test_assembly_does_not_mutate_draft(self, draft_factory, unit_factory):
        draft = draft_factory(units=[unit_factory(latitude=1.0, longitude=1.0)])
        assemble_payload(draft)
        assert draft.units[0].latitude == 1.0
