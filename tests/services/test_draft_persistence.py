# -*- coding: utf-8 -*-
"""
Tests for draft persistence.

Tests cover:
- save/load round-trip with nested lists of various lengths
- Edit mode and in-flight submissions never write
- Unreadable snapshots are discarded
"""

import json

import pytest

from models.property_draft import HouseRule, RentalMode, RuleKind, ServiceKind, ServiceOffering
from services.draft_persistence import DraftPersistence, get_session_storage, reset_session_storage
from services.wizard.step_transitions import WizardStep


class TestRoundTrip:

    @pytest.mark.parametrize("count", [0, 1, 3])
    def test_round_trip_reproduces_snapshot(self, persistence, draft_factory, unit_factory, count):
        draft = draft_factory(
            units=[unit_factory(f"Room {i + 1}", amenities=[i], images=[f"{i}.jpg"])
                   for i in range(count)],
            services=[ServiceOffering(ServiceKind.BREAKFAST, description=f"#{i}") for i in range(count)],
            rules=[HouseRule(RuleKind.SMOKING, is_allowed=bool(i % 2)) for i in range(count)],
        )

        assert persistence.save(WizardStep.UNIT_BUILDER, draft, "pension") is True
        snapshot = persistence.load()

        assert snapshot.step == WizardStep.UNIT_BUILDER
        assert snapshot.selected_property_type == "pension"
        assert snapshot.draft == draft

    def test_complete_mode_round_trip(self, persistence, draft_factory):
        draft = draft_factory(rental_mode=RentalMode.COMPLETE, minimum_contract_months=None)
        persistence.save(WizardStep.LOCATION, draft, "apartamento")

        snapshot = persistence.load()
        assert snapshot.draft.rental_mode == RentalMode.COMPLETE
        assert snapshot.draft.minimum_contract_months is None

    def test_snapshot_format(self, persistence, storage, draft_factory):
        persistence.save(WizardStep.RULES, draft_factory(), "pension")

        raw = json.loads(storage.get_item("containerFlowDraft"))
        assert raw["step"] == 4
        assert raw["selectedPropertyType"] == "pension"
        assert raw["data"]["rental_mode"] == "by_unit"

    def test_clear(self, persistence, draft_factory):
        persistence.save(WizardStep.BASIC_INFO, draft_factory(), "pension")
        persistence.clear()
        assert persistence.load() is None


class TestSuspendedWrites:

    def test_edit_mode_never_writes(self, storage, draft_factory):
        persistence = DraftPersistence(storage=storage, edit_mode=True)

        assert persistence.save(WizardStep.BASIC_INFO, draft_factory(), "pension") is False
        assert "containerFlowDraft" not in storage
        assert persistence.load() is None

    def test_edit_mode_ignores_existing_snapshot(self, storage, draft_factory):
        DraftPersistence(storage=storage).save(WizardStep.LOCATION, draft_factory(), "pension")
        assert DraftPersistence(storage=storage, edit_mode=True).load() is None

    def test_in_flight_suspends_writes(self, persistence, storage, draft_factory):
        persistence.in_flight = True
        assert persistence.save(WizardStep.MEDIA_GALLERY, draft_factory(), "pension") is False
        assert "containerFlowDraft" not in storage


class TestUnreadable:

    @pytest.mark.parametrize("raw", ["not json", "{}", '{"step": 99, "data": {}}', "[1, 2]"])
    def test_unreadable_snapshot_is_ignored(self, persistence, storage, raw):
        storage.set_item("containerFlowDraft", raw)
        assert persistence.load() is None


def test_default_storage_is_session_wide(draft_factory):
    reset_session_storage()
    try:
        DraftPersistence().save(WizardStep.LOCATION, draft_factory(), "pension")
        assert "containerFlowDraft" in get_session_storage()
        assert DraftPersistence().load().step == WizardStep.LOCATION
    finally:
        reset_session_storage()
