# -*- coding: utf-8 -*-
"""
Step transition table for the Property Submission Wizard.

The step graph is fixed: services, rules and common areas only exist when
the container is rented by unit. Both directions are pure functions of
(step, rental_mode).
"""

from enum import IntEnum
from typing import Optional, Tuple

from models.property_draft import RentalMode


class WizardStep(IntEnum):
    TYPE_SELECTION = 0
    BASIC_INFO = 1
    LOCATION = 2
    SERVICES = 3
    RULES = 4
    COMMON_AREAS = 5
    UNIT_BUILDER = 6
    MEDIA_GALLERY = 7


FIRST_STEP = WizardStep.TYPE_SELECTION
TERMINAL_STEP = WizardStep.MEDIA_GALLERY


class StepTransitionTable:
    """(step, rental_mode) -> step, forward and backward."""

    @staticmethod
    def next_step(step: WizardStep, rental_mode: RentalMode) -> Optional[WizardStep]:
        """Step that follows `step`, or None on the terminal step."""
        if step == TERMINAL_STEP:
            return None
        if step == WizardStep.LOCATION:
            if rental_mode == RentalMode.BY_UNIT:
                return WizardStep.SERVICES
            return WizardStep.UNIT_BUILDER
        return WizardStep(step + 1)

    @staticmethod
    def previous_step(step: WizardStep, rental_mode: RentalMode) -> Optional[WizardStep]:
        """Step that precedes `step`, or None on the first step."""
        if step == FIRST_STEP:
            return None
        if step == WizardStep.UNIT_BUILDER:
            if rental_mode == RentalMode.BY_UNIT:
                return WizardStep.COMMON_AREAS
            return WizardStep.LOCATION
        return WizardStep(step - 1)

    @staticmethod
    def entry_step(has_preselected_type: bool, edit_mode: bool = False) -> WizardStep:
        if has_preselected_type or edit_mode:
            return WizardStep.BASIC_INFO
        return WizardStep.TYPE_SELECTION

    @staticmethod
    def progress(step: WizardStep) -> Tuple[int, int]:
        """(current, total) for the progress indicator; type selection shows none."""
        return int(step), int(TERMINAL_STEP)
