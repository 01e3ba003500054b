# -*- coding: utf-8 -*-
"""Wizard services: step graph, step validation and the unit list editor."""

from .step_transitions import StepTransitionTable, WizardStep
from .step_validator import StepValidationResult, StepValidator
from .unit_list_editor import UnitListEditor

__all__ = [
    "StepTransitionTable",
    "WizardStep",
    "StepValidationResult",
    "StepValidator",
    "UnitListEditor",
]
