# -*- coding: utf-8 -*-
"""
Tests for the Property Submission Wizard.

Tests cover:
- Entry step, resumption and edit mode
- Conditional step path for both rental modes
- Unit builder exit check
- Submission success/failure handling
"""

import pytest

from models.property_draft import RentalMode
from models.unit import RoomType, UnitDraft
from services.draft_persistence import DraftPersistence
from services.exceptions import ApiException
from services.wizard.step_transitions import WizardStep
from ui.wizards.property_submission import PropertySubmissionWizard, SubmissionContext
from ui.wizards.property_submission.dialogs import UnitDialog

DESCRIPTION = "Casa amplia a dos cuadras de la universidad, con habitaciones iluminadas."


@pytest.fixture
def make_wizard(qtbot, fake_api, persistence):
    """Wizard factory wired to the fake API and a private session store."""
    created = []

    def _make(**kwargs):
        kwargs.setdefault("api_client", fake_api)
        kwargs.setdefault("draft_persistence", persistence)
        kwargs.setdefault("fetch_reference_data", False)
        wizard = PropertySubmissionWizard(**kwargs)
        qtbot.addWidget(wizard)
        wizard.apply_reference_data(wizard.controller.fetch_reference_data())
        created.append(wizard)
        return wizard

    yield _make
    for wizard in created:
        wizard.dispose()


def _current(wizard) -> WizardStep:
    return WizardStep(wizard.navigator.current_index)


def _fill_basic_info(wizard, mode=RentalMode.BY_UNIT):
    step = wizard.basic_info_step
    step.title_input.setText("Pensión Universitaria Central")
    step.description_input.setPlainText(DESCRIPTION)
    if mode == RentalMode.COMPLETE:
        step.complete_radio.setChecked(True)
    else:
        step.by_unit_radio.setChecked(True)


def _fill_address(wizard):
    step = wizard.location_step
    step.street_input.setText("Calle 10 # 20-30")
    step.neighborhood_input.setText("Chapinero")
    step.latitude_spin.setValue(4.6486)
    step.longitude_spin.setValue(-74.0628)


def _fill_location(wizard):
    step = wizard.location_step
    step.city_combo.setCurrentIndex(step.city_combo.findData(5))
    _fill_address(wizard)


def _room(title="Room 1"):
    return UnitDraft(title=title, monthly_rent=400000, room_type=RoomType.INDIVIDUAL)


def _walk_to_unit_builder(wizard, mode):
    wizard.type_step.select_type("pension" if mode == RentalMode.BY_UNIT else "apartamento")
    _fill_basic_info(wizard, mode)
    wizard.btn_next.click()
    _fill_location(wizard)
    wizard.btn_next.click()
    if mode == RentalMode.BY_UNIT:
        wizard.btn_next.click()  # services
        wizard.btn_next.click()  # rules
        wizard.common_areas_step.set_selected([1])
        wizard.btn_next.click()
    assert _current(wizard) == WizardStep.UNIT_BUILDER


def _walk_to_gallery(wizard, mode=RentalMode.BY_UNIT):
    _walk_to_unit_builder(wizard, mode)
    assert wizard.unit_builder_step.add_unit(_room()).is_valid
    wizard.btn_next.click()
    assert _current(wizard) == WizardStep.MEDIA_GALLERY
    wizard.media_step.add_image("https://cdn.example.com/front.jpg")


class TestWizardInitialization:

    def test_wizard_creation(self, make_wizard):
        wizard = make_wizard()
        assert isinstance(wizard.context, SubmissionContext)
        assert len(wizard.steps) == 8

    def test_starts_at_type_selection(self, make_wizard):
        wizard = make_wizard()
        assert _current(wizard) == WizardStep.TYPE_SELECTION
        assert wizard.progress_widget.isHidden()

    def test_preselected_type_starts_at_basic_info(self, make_wizard):
        wizard = make_wizard(initial_property_type="apartamento")

        assert _current(wizard) == WizardStep.BASIC_INFO
        assert wizard.context.draft.type_id == 3
        assert wizard.progress_label.text() == "Paso 1 de 7"

    def test_type_selection_advances(self, make_wizard):
        wizard = make_wizard()
        wizard.type_step.select_type("aparta-estudio")

        assert _current(wizard) == WizardStep.BASIC_INFO
        assert wizard.context.selected_property_type == "aparta-estudio"
        assert wizard.context.draft.type_id == 4


class TestNavigation:

    def test_scenario_a_unit_builder_blocks_without_units(self, make_wizard):
        """Pension rented by unit: zero units blocks, one unit lets the user leave."""
        wizard = make_wizard()
        _walk_to_unit_builder(wizard, RentalMode.BY_UNIT)

        wizard.btn_next.click()
        assert _current(wizard) == WizardStep.UNIT_BUILDER
        assert not wizard.unit_builder_step.error_label.isHidden()
        assert "unidad" in wizard.unit_builder_step.error_label.text()

        assert wizard.unit_builder_step.add_unit(_room()).is_valid
        wizard.btn_next.click()
        assert _current(wizard) == WizardStep.MEDIA_GALLERY
        assert [u.title for u in wizard.context.draft.units] == ["Room 1"]

    def test_scenario_b_complete_skips_container_config(self, make_wizard, qtbot):
        """Apartment rented complete: location goes straight to the unit builder."""
        wizard = make_wizard()
        visited = []
        wizard.navigator.step_changed.connect(lambda old, new: visited.append(WizardStep(new)))

        _walk_to_gallery(wizard, RentalMode.COMPLETE)

        assert visited == [
            WizardStep.BASIC_INFO,
            WizardStep.LOCATION,
            WizardStep.UNIT_BUILDER,
            WizardStep.MEDIA_GALLERY,
        ]
        from services.payload_assembler import assemble_payload
        assert "services" not in assemble_payload(wizard.context.draft)

    @pytest.mark.parametrize("mode, expected", [
        (RentalMode.BY_UNIT, WizardStep.COMMON_AREAS),
        (RentalMode.COMPLETE, WizardStep.LOCATION),
    ])
    def test_back_from_unit_builder_mirrors_skip(self, make_wizard, mode, expected):
        wizard = make_wizard()
        _walk_to_unit_builder(wizard, mode)

        wizard.btn_previous.click()
        assert _current(wizard) == expected

    def test_invalid_step_blocks_forward_only(self, make_wizard):
        wizard = make_wizard(initial_property_type="pension")

        wizard.btn_next.click()
        assert _current(wizard) == WizardStep.BASIC_INFO
        assert not wizard.basic_info_step.error_label.isHidden()

        wizard.btn_previous.click()
        assert _current(wizard) == WizardStep.TYPE_SELECTION

    def test_back_navigation_does_not_merge(self, make_wizard):
        wizard = make_wizard(initial_property_type="pension")
        _fill_basic_info(wizard)
        wizard.btn_next.click()

        wizard.location_step.street_input.setText("Calle sin guardar")
        wizard.btn_previous.click()

        assert wizard.context.draft.location.street is None

    def test_scroll_resets_on_step_change(self, make_wizard):
        wizard = make_wizard(initial_property_type="pension")
        wizard.resize(400, 200)
        bar = wizard.scroll_area.verticalScrollBar()
        bar.setMaximum(500)
        bar.setValue(300)

        _fill_basic_info(wizard)
        wizard.btn_next.click()

        assert bar.value() == 0


class TestPersistence:

    def test_snapshot_follows_every_step(self, make_wizard, persistence):
        wizard = make_wizard(initial_property_type="pension")
        _fill_basic_info(wizard)
        wizard.btn_next.click()

        snapshot = persistence.load()
        assert snapshot.step == WizardStep.LOCATION
        assert snapshot.draft.title == "Pensión Universitaria Central"
        assert snapshot.selected_property_type == "pension"

    def test_scenario_d_resumes_snapshot(self, make_wizard, persistence, draft_factory):
        """A stored snapshot wins over the caller's preselected type."""
        persistence.save(WizardStep.SERVICES, draft_factory(), "pension")

        wizard = make_wizard(initial_property_type="apartamento")

        assert _current(wizard) == WizardStep.SERVICES
        assert wizard.context.selected_property_type == "pension"
        assert wizard.context.draft.type_id == 2
        assert wizard.context.draft.title == "Pensión Universitaria Central"

    def test_edit_mode_loads_container_without_snapshot(self, make_wizard, fake_api, storage, qtbot):
        fake_api.container = {
            "id": 42, "title": "Apartamento en Laureles", "description": DESCRIPTION,
            "typeId": 3, "rentalMode": "complete",
            "units": [{"id": 9, "title": "Apartamento", "monthlyRent": 1500000,
                       "roomType": "individual"}],
        }
        persistence = DraftPersistence(storage=storage)

        wizard = make_wizard(property_id="42", draft_persistence=persistence)
        assert not wizard.btn_next.isEnabled()
        with qtbot.waitSignal(wizard.container_loaded, timeout=5000) as blocker:
            pass

        assert blocker.args == [True]
        assert wizard.btn_next.isEnabled()
        assert _current(wizard) == WizardStep.BASIC_INFO
        assert wizard.basic_info_step.title_input.text() == "Apartamento en Laureles"
        assert wizard.context.selected_property_type == "apartamento"
        assert "containerFlowDraft" not in storage

    def test_edit_mode_load_failure_is_shown(self, make_wizard, fake_api, storage, qtbot):
        fake_api.error = ApiException("Not Found", status_code=404)

        wizard = make_wizard(property_id="404", draft_persistence=DraftPersistence(storage=storage))
        with qtbot.waitSignal(wizard.container_loaded, timeout=5000) as blocker:
            pass

        assert blocker.args == [False]

        label = wizard.basic_info_step.error_label
        assert not label.isHidden()
        assert "La propiedad no existe." in label.text()


class TestSubmission:

    def test_submit_disabled_without_images(self, make_wizard):
        wizard = make_wizard()
        _walk_to_unit_builder(wizard, RentalMode.BY_UNIT)
        wizard.unit_builder_step.add_unit(_room())
        wizard.btn_next.click()

        assert not wizard.btn_next.isEnabled()
        wizard.media_step.add_image("a.jpg")
        assert wizard.btn_next.isEnabled()
        assert wizard.btn_next.text() == "Publicar"

    def test_successful_submit(self, make_wizard, fake_api, persistence, qtbot):
        wizard = make_wizard()
        routes = []
        wizard.navigate_requested.connect(routes.append)
        _walk_to_gallery(wizard)

        with qtbot.waitSignal(wizard.submission_finished, timeout=5000) as blocker:
            wizard.btn_next.click()

        assert blocker.args == [True]
        assert len(fake_api.write_calls) == 1
        name, payload = fake_api.write_calls[0]
        assert name == "create_container"
        assert payload["units"][0]["latitude"] == pytest.approx(4.6486)
        assert payload["images"] == ["https://cdn.example.com/front.jpg"]
        assert routes == ["dashboard"]
        assert persistence.load() is None
        assert wizard.context.status == "completed"

    def test_admin_submit_calls_completion_callback(self, make_wizard, fake_api, qtbot):
        completed = []
        wizard = make_wizard(admin_mode=True, target_owner_id=77, on_admin_complete=completed.append)
        routes = []
        wizard.navigate_requested.connect(routes.append)
        _walk_to_gallery(wizard)

        with qtbot.waitSignal(wizard.submission_finished, timeout=5000):
            wizard.btn_next.click()

        assert fake_api.write_calls[0][0] == "admin_create_container"
        assert fake_api.write_calls[0][2] == 77
        assert completed == [101]
        assert routes == []

    def test_scenario_c_admin_without_owner(self, make_wizard, fake_api, qtbot):
        wizard = make_wizard(admin_mode=True)
        _walk_to_gallery(wizard)

        with qtbot.waitSignal(wizard.submission_finished, timeout=5000) as blocker:
            wizard.btn_next.click()

        assert blocker.args == [False]
        assert fake_api.write_calls == []
        assert "propietario" in wizard.media_step.submit_error_label.text()

    def test_failed_submit_keeps_snapshot_and_retries_same_payload(
            self, make_wizard, fake_api, storage, qtbot):
        wizard = make_wizard()
        _walk_to_gallery(wizard)
        before = storage.get_item("containerFlowDraft")
        fake_api.error = ApiException(
            "Request failed", status_code=400,
            response_data={"success": False, "error": "Título duplicado"},
        )

        with qtbot.waitSignal(wizard.submission_finished, timeout=5000) as blocker:
            wizard.btn_next.click()

        assert blocker.args == [False]
        assert _current(wizard) == WizardStep.MEDIA_GALLERY
        assert wizard.media_step.submit_error_label.text() == "Título duplicado"
        assert storage.get_item("containerFlowDraft") == before
        assert wizard.btn_next.isEnabled()

        fake_api.error = None
        with qtbot.waitSignal(wizard.submission_finished, timeout=5000) as blocker:
            wizard.btn_next.click()

        assert blocker.args == [True]
        first, second = fake_api.write_calls
        assert first[1] == second[1]

    def test_gallery_is_frozen_while_submitting(self, make_wizard, persistence, qtbot):
        wizard = make_wizard()
        _walk_to_gallery(wizard)

        wizard.btn_next.click()
        wizard._submission_worker.wait()

        # Worker done and snapshot cleared; completion not yet delivered
        assert persistence.load() is None
        assert not wizard.media_step.url_input.isEnabled()
        assert not wizard.media_step.add_btn.isEnabled()
        assert not wizard.media_step.add_image("https://cdn.example.com/late.jpg")
        wizard._persist()
        assert persistence.load() is None

        with qtbot.waitSignal(wizard.submission_finished, timeout=5000) as blocker:
            pass

        assert blocker.args == [True]
        assert persistence.load() is None
        assert "late.jpg" not in " ".join(wizard.context.draft.images)

    def test_failed_submit_unfreezes_gallery(self, make_wizard, fake_api, qtbot):
        wizard = make_wizard()
        _walk_to_gallery(wizard)
        fake_api.error = ApiException("Server Error", status_code=500)

        with qtbot.waitSignal(wizard.submission_finished, timeout=5000):
            wizard.btn_next.click()

        assert wizard.media_step.url_input.isEnabled()
        assert wizard.media_step.add_image("https://cdn.example.com/back.jpg")
        assert not wizard.draft_persistence.in_flight


class TestReferenceDataUnavailable:

    def test_city_entered_by_id_without_directory(self, make_wizard, fake_api):
        fake_api.failing_lists = {"cities"}
        wizard = make_wizard(initial_property_type="pension")
        _fill_basic_info(wizard)
        wizard.btn_next.click()

        step = wizard.location_step
        assert step.city_combo.isHidden()
        assert not step.manual_city_spin.isHidden()

        step.manual_city_spin.setValue(5)
        _fill_address(wizard)
        wizard.btn_next.click()

        assert _current(wizard) == WizardStep.SERVICES
        assert wizard.context.draft.location.city_id == 5

    def test_city_id_required_without_directory(self, make_wizard, fake_api):
        fake_api.failing_lists = {"cities"}
        wizard = make_wizard(initial_property_type="pension")
        _fill_basic_info(wizard)
        wizard.btn_next.click()
        _fill_address(wizard)

        wizard.btn_next.click()

        assert _current(wizard) == WizardStep.LOCATION
        assert "ciudad" in wizard.location_step.error_label.text()

    def test_directory_arriving_late_keeps_typed_city(self, make_wizard, fake_api):
        fake_api.failing_lists = {"cities"}
        wizard = make_wizard(initial_property_type="pension")
        _fill_basic_info(wizard)
        wizard.btn_next.click()
        wizard.location_step.manual_city_spin.setValue(5)

        fake_api.failing_lists = set()
        wizard.apply_reference_data(wizard.controller.fetch_reference_data())

        step = wizard.location_step
        assert step.manual_city_spin.isHidden()
        assert step.city_combo.currentData() == 5

    def test_by_unit_path_with_every_list_failing(self, make_wizard, fake_api, persistence, qtbot):
        fake_api.failing_lists = {"amenities", "common_areas", "cities"}
        wizard = make_wizard()

        wizard.type_step.select_type("pension")
        _fill_basic_info(wizard)
        wizard.btn_next.click()
        wizard.location_step.manual_city_spin.setValue(5)
        _fill_address(wizard)
        wizard.btn_next.click()
        wizard.btn_next.click()  # services
        wizard.btn_next.click()  # rules
        assert _current(wizard) == WizardStep.COMMON_AREAS
        # Built-in common areas stand in for the missing list
        assert wizard.common_areas_step.checkboxes
        wizard.common_areas_step.set_selected([1])
        wizard.btn_next.click()
        assert _current(wizard) == WizardStep.UNIT_BUILDER

        dialog = UnitDialog(wizard.context.reference_data.amenities, parent=wizard)
        qtbot.addWidget(dialog)
        assert dialog.amenity_checks == {}
        dialog.title_input.setText("Habitación 1")
        dialog.rent_spin.setValue(450000)
        assert wizard.unit_builder_step.add_unit(dialog.unit()).is_valid
        wizard.btn_next.click()
        assert _current(wizard) == WizardStep.MEDIA_GALLERY

        wizard.media_step.add_image("https://cdn.example.com/front.jpg")
        with qtbot.waitSignal(wizard.submission_finished, timeout=5000) as blocker:
            wizard.btn_next.click()

        assert blocker.args == [True]
        payload = fake_api.write_calls[0][1]
        assert payload["location"]["cityId"] == 5
        assert "departmentId" not in payload["location"]
        assert payload["commonAreaIds"] == [1]
        assert payload["units"][0]["amenityIds"] == []
