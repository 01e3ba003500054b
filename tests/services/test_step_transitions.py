# -*- coding: utf-8 -*-
"""
Tests for the step transition table.

Tests cover:
- Forward skip of services/rules/common areas in complete mode
- Backward navigation mirroring the forward skip
- Entry step and progress indicator
"""

import pytest

from models.property_draft import RentalMode
from services.wizard.step_transitions import StepTransitionTable, WizardStep

BY_UNIT_ONLY_STEPS = {WizardStep.SERVICES, WizardStep.RULES, WizardStep.COMMON_AREAS}


def _forward_path(mode):
    path = [WizardStep.TYPE_SELECTION]
    while True:
        following = StepTransitionTable.next_step(path[-1], mode)
        if following is None:
            return path
        path.append(following)


class TestForward:
    """Forward transitions."""

    def test_by_unit_visits_every_step(self):
        assert _forward_path(RentalMode.BY_UNIT) == list(WizardStep)

    def test_complete_skips_container_config(self):
        path = _forward_path(RentalMode.COMPLETE)
        assert path == [
            WizardStep.TYPE_SELECTION,
            WizardStep.BASIC_INFO,
            WizardStep.LOCATION,
            WizardStep.UNIT_BUILDER,
            WizardStep.MEDIA_GALLERY,
        ]
        assert not BY_UNIT_ONLY_STEPS.intersection(path)

    def test_terminal_has_no_next(self):
        for mode in RentalMode:
            assert StepTransitionTable.next_step(WizardStep.MEDIA_GALLERY, mode) is None

    def test_common_areas_always_goes_to_unit_builder(self):
        result = StepTransitionTable.next_step(WizardStep.COMMON_AREAS, RentalMode.BY_UNIT)
        assert result == WizardStep.UNIT_BUILDER


class TestBackward:
    """Backward transitions mirror the forward skip."""

    @pytest.mark.parametrize("mode", list(RentalMode))
    def test_location_to_unit_builder_and_back(self, mode):
        """Forward from Location then back from UnitBuilder lands where forward left."""
        forward = StepTransitionTable.next_step(WizardStep.LOCATION, mode)
        skipped = forward == WizardStep.UNIT_BUILDER

        back = StepTransitionTable.previous_step(WizardStep.UNIT_BUILDER, mode)

        if skipped:
            assert back == WizardStep.LOCATION
        else:
            assert back == WizardStep.COMMON_AREAS

    @pytest.mark.parametrize("mode", list(RentalMode))
    def test_backward_path_is_reverse_of_forward(self, mode):
        forward = _forward_path(mode)
        backward = [forward[-1]]
        while True:
            previous = StepTransitionTable.previous_step(backward[-1], mode)
            if previous is None:
                break
            backward.append(previous)
        assert backward == list(reversed(forward))

    def test_first_step_has_no_previous(self):
        for mode in RentalMode:
            assert StepTransitionTable.previous_step(WizardStep.TYPE_SELECTION, mode) is None


class TestEntryAndProgress:

    def test_entry_step(self):
        assert StepTransitionTable.entry_step(False) == WizardStep.TYPE_SELECTION
        assert StepTransitionTable.entry_step(True) == WizardStep.BASIC_INFO
        assert StepTransitionTable.entry_step(False, edit_mode=True) == WizardStep.BASIC_INFO

    def test_progress_uses_step_index_of_seven(self):
        assert StepTransitionTable.progress(WizardStep.BASIC_INFO) == (1, 7)
        assert StepTransitionTable.progress(WizardStep.UNIT_BUILDER) == (6, 7)
        assert StepTransitionTable.progress(WizardStep.MEDIA_GALLERY) == (7, 7)
